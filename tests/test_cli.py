"""Tests for the receiptscan command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from receiptscan.application.receipts import scan as scan_module
from receiptscan.cli.main import main
from receiptscan.runtime.receipt_pipeline import OCRServiceUnavailable


def _text_file(tmp_path: Path) -> Path:
    path = tmp_path / "receipt.txt"
    path.write_text("BIG MART\nBurger $12.99\nTotal $12.99\n", encoding="utf-8")
    return path


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "scan" in capsys.readouterr().out


def test_parse_prints_record_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["parse", str(_text_file(tmp_path)), "--filename", "burger.jpg"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["receiptName"] == "burger"
    assert data["merchantInfo"]["name"] == "BIG MART"
    assert data["products"] == [{"productName": "Burger", "quantity": 1.0, "unitPrice": 12.99, "total": 12.99}]


def test_parse_with_csv_reports_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv_path = tmp_path / "burger.csv"

    exit_code = main(["parse", str(_text_file(tmp_path)), "--csv", str(csv_path)])

    assert exit_code == 0
    assert csv_path.exists()
    assert f"Saved CSV to: {csv_path}" in capsys.readouterr().out


def test_parse_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(tmp_path / "missing.txt")]) == 1
    assert "Error:" in capsys.readouterr().out


def test_scan_reports_unavailable_ocr(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"fake")

    def fake_call(image_path: Path, ocr_url: str) -> tuple[dict, str]:
        assert ocr_url == "http://ocr.test"
        raise OCRServiceUnavailable("OCR service error: 500")

    monkeypatch.setattr(scan_module, "call_ocr_service", fake_call)

    assert main(["scan", str(image), "--ocr-url", "http://ocr.test"]) == 1
    assert "OCR service unavailable" in capsys.readouterr().out
