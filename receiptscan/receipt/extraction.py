"""Turn raw OCR text into a structured ReceiptRecord."""

import logging

from receiptscan.domain.receipt import MerchantMatchers, ReceiptRecord, receipt_name_from_filename

from .text_parser import (
    extract_items_and_summary,
    extract_merchant_info,
    extract_receipt_date,
    normalize_lines,
)

logger = logging.getLogger(__name__)


def extract_receipt(
    text: str,
    filename: str,
    matchers: MerchantMatchers | None = None,
) -> ReceiptRecord:
    """
    Extract a structured receipt from recognized text.

    This is a best-effort heuristic parser: anything it cannot find is left
    empty or zero rather than reported as an error.

    Args:
        text: Raw OCR text
        filename: Source image filename, used for the receipt name
        matchers: Optional merchant matchers loaded by runtime components.

    Returns:
        ReceiptRecord with parsed data
    """
    lines = normalize_lines(text)
    logger.debug("Parsing %d lines from %s", len(lines), filename)

    merchant_info = extract_merchant_info(lines, matchers)
    products, summary = extract_items_and_summary(lines)
    receipt_date = extract_receipt_date(lines)

    record = ReceiptRecord(
        receipt_name=receipt_name_from_filename(filename),
        products=tuple(products),
        summary=summary,
        merchant_info=merchant_info,
        receipt_date=receipt_date,
    )
    logger.debug(
        "Extracted %d products, total %s, merchant %r, date %r",
        len(record.products),
        record.summary.total,
        record.merchant_info.name,
        record.receipt_date,
    )
    return record
