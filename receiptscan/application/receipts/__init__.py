"""Receipt workflows."""

from receiptscan.application.receipts.scan import (
    ReceiptScanRequest,
    ReceiptScanResult,
    ReceiptTextRequest,
    run_receipt_scan,
    run_text_extraction,
)

__all__ = [
    "ReceiptScanRequest",
    "ReceiptScanResult",
    "ReceiptTextRequest",
    "run_receipt_scan",
    "run_text_extraction",
]
