"""Tests for receipt scan/extraction workflows."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from receiptscan.application.receipts import scan as scan_module
from receiptscan.application.receipts.scan import (
    ReceiptScanRequest,
    ReceiptTextRequest,
    run_receipt_scan,
    run_text_extraction,
)
from receiptscan.runtime import get_paths
from receiptscan.runtime.receipt_pipeline import OCRServiceUnavailable

RECEIPT_TEXT = "FAST FOOD\n1 | PIZZA | $ 50.00\nTotal $50.00\n"


def _image(tmp_path: Path) -> Path:
    path = tmp_path / "lunch.jpg"
    path.write_bytes(b"fake")
    return path


def test_scan_missing_image(tmp_path: Path) -> None:
    result = run_receipt_scan(ReceiptScanRequest(image_path=tmp_path / "nope.jpg", ocr_url="http://ocr"))

    assert result.status == "file_not_found"
    assert result.record is None
    assert "nope.jpg" in (result.error or "")


def test_scan_ocr_unavailable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_call(image_path: Path, ocr_url: str) -> tuple[dict[str, Any], str]:
        raise OCRServiceUnavailable("Failed to connect to OCR service: refused")

    monkeypatch.setattr(scan_module, "call_ocr_service", fake_call)

    result = run_receipt_scan(ReceiptScanRequest(image_path=_image(tmp_path), ocr_url="http://ocr"))

    assert result.status == "ocr_unavailable"
    assert result.error == "Failed to connect to OCR service: refused"


def test_scan_extracts_record_and_keeps_ocr_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        scan_module,
        "call_ocr_service",
        lambda image_path, ocr_url: ({"full_text": RECEIPT_TEXT}, RECEIPT_TEXT),
    )

    result = run_receipt_scan(ReceiptScanRequest(image_path=_image(tmp_path), ocr_url="http://ocr"))

    assert result.status == "extracted"
    assert result.record is not None
    assert result.record.receipt_name == "lunch"
    assert result.record.merchant_info.name == "FAST FOOD"
    assert result.record.summary.total == Decimal("50.00")
    assert (get_paths().receipts_ocr_json / "lunch.json").exists()


def test_scan_writes_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        scan_module,
        "call_ocr_service",
        lambda image_path, ocr_url: ({"full_text": RECEIPT_TEXT}, RECEIPT_TEXT),
    )
    csv_path = tmp_path / "exports" / "lunch.csv"

    result = run_receipt_scan(
        ReceiptScanRequest(image_path=_image(tmp_path), ocr_url="http://ocr", csv_path=csv_path),
    )

    assert result.status == "csv_written"
    assert result.csv_path == csv_path
    assert "PIZZA" in csv_path.read_text(encoding="utf-8")


def test_text_extraction_uses_rules_override(tmp_path: Path) -> None:
    text_path = tmp_path / "scan.txt"
    text_path.write_text("12 Harbour Rd\nTea $2.00\nTotal $2.00\n", encoding="utf-8")
    rules_path = tmp_path / "rules.toml"
    rules_path.write_text('[address]\npatterns = ["Harbour"]\n', encoding="utf-8")

    result = run_text_extraction(
        ReceiptTextRequest(text_path=text_path, filename="harbour.png", rules_path=rules_path),
    )

    assert result.status == "extracted"
    assert result.record is not None
    assert result.record.receipt_name == "harbour"
    assert result.record.merchant_info.address == "12 Harbour Rd"


def test_text_extraction_missing_file(tmp_path: Path) -> None:
    result = run_text_extraction(ReceiptTextRequest(text_path=tmp_path / "missing.txt"))

    assert result.status == "file_not_found"
