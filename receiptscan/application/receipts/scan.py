"""Receipt scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from receiptscan.receipt.csv_export import write_csv
from receiptscan.receipt.extraction import extract_receipt
from receiptscan.runtime import get_logger, load_merchant_matchers
from receiptscan.runtime.receipt_pipeline import OCRServiceUnavailable, call_ocr_service, save_ocr_json

if TYPE_CHECKING:
    from receiptscan.domain.receipt import ReceiptRecord

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "ocr_unavailable",
    "extracted",
    "csv_written",
]


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running the image scan workflow."""

    image_path: Path
    ocr_url: str
    csv_path: Path | None = None
    rules_path: Path | None = None


@dataclass(frozen=True)
class ReceiptTextRequest:
    """Inputs for extracting a receipt from already-recognized text."""

    text_path: Path
    filename: str | None = None
    csv_path: Path | None = None
    rules_path: Path | None = None


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from a receipt workflow."""

    status: ScanStatus
    record: ReceiptRecord | None = None
    csv_path: Path | None = None
    error: str | None = None


def _extract_and_export(
    text: str,
    filename: str,
    csv_path: Path | None,
    rules_path: Path | None,
) -> ReceiptScanResult:
    matchers = load_merchant_matchers(str(rules_path) if rules_path is not None else None)
    record = extract_receipt(text, filename, matchers)
    logger.info("Extracted %d products from %s", len(record.products), filename)

    if csv_path is None:
        return ReceiptScanResult(status="extracted", record=record)

    written = write_csv(record, csv_path)
    logger.info("CSV written to %s", written)
    return ReceiptScanResult(status="csv_written", record=record, csv_path=written)


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow: OCR -> save OCR JSON -> extract -> optional CSV."""
    if not request.image_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.image_path}",
        )

    try:
        raw_ocr_result, text = call_ocr_service(request.image_path, request.ocr_url)
    except OCRServiceUnavailable as exc:
        return ReceiptScanResult(
            status="ocr_unavailable",
            error=str(exc),
        )

    save_ocr_json(raw_ocr_result, request.image_path)
    return _extract_and_export(text, request.image_path.name, request.csv_path, request.rules_path)


def run_text_extraction(request: ReceiptTextRequest) -> ReceiptScanResult:
    """Extract a receipt from a text file produced by an earlier OCR run."""
    if not request.text_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Text file not found: {request.text_path}",
        )

    text = request.text_path.read_text(encoding="utf-8")
    filename = request.filename or request.text_path.name
    return _extract_and_export(text, filename, request.csv_path, request.rules_path)
