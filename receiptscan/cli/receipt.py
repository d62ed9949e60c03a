"""Receipt command handlers used by the unified CLI."""

import argparse
import json
from pathlib import Path

from receiptscan.application.receipts.scan import (
    ReceiptScanRequest,
    ReceiptScanResult,
    ReceiptTextRequest,
    run_receipt_scan,
    run_text_extraction,
)
from receiptscan.runtime import get_logger

logger = get_logger(__name__)


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


def _report(result: ReceiptScanResult) -> int:
    """Print the outcome of a receipt workflow and return the exit code."""
    if result.status == "file_not_found":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        return 1

    if result.status == "ocr_unavailable":
        logger.error("%s", result.error)
        print(f"OCR service unavailable: {result.error}")
        print("Make sure the OCR service is running before scanning receipts.")
        return 1

    record = result.record
    if record is None:
        print("Extraction failed: missing receipt output.")
        return 1

    print(json.dumps(record.to_dict(), indent=2))
    if result.status == "csv_written":
        print(f"\nSaved CSV to: {result.csv_path}")
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """OCR a receipt image and print the extracted record."""
    result = run_receipt_scan(
        ReceiptScanRequest(
            image_path=Path(args.image),
            ocr_url=args.ocr_url,
            csv_path=_optional_path(args.csv),
            rules_path=_optional_path(args.rules),
        )
    )
    return _report(result)


def cmd_parse(args: argparse.Namespace) -> int:
    """Extract a receipt from a text file and print the record."""
    result = run_text_extraction(
        ReceiptTextRequest(
            text_path=Path(args.text_file),
            filename=args.filename,
            csv_path=_optional_path(args.csv),
            rules_path=_optional_path(args.rules),
        )
    )
    return _report(result)
