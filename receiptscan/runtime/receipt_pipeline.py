"""Runtime helpers for the receipt OCR pipeline."""

import json
import mimetypes
import time
from pathlib import Path
from typing import Any

import httpx

from receiptscan.receipt.ocr_helpers import ocr_result_to_text
from receiptscan.runtime.logging import get_logger
from receiptscan.runtime.paths import get_paths

logger = get_logger(__name__)

OCR_TIMEOUT_SECONDS = 60.0


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def call_ocr_service(receipt_path: Path, ocr_url: str) -> tuple[dict[str, Any], str]:
    """
    Call the OCR service and return the raw result and its recognized text.

    Returns:
        Tuple of (raw_result, text).
    """
    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending receipt to OCR service at %s...", ocr_url)
    content_type = mimetypes.guess_type(receipt_path.name)[0] or "application/octet-stream"

    try:
        image_bytes = receipt_path.read_bytes()

        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (receipt_path.name, image_bytes, content_type)},
            timeout=OCR_TIMEOUT_SECONDS,
        )
        elapsed_time = time.time() - start_time
        logger.info("OCR service returned in %.2f seconds", elapsed_time)

        if response.status_code != 200:
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        raw_result = response.json()
        return raw_result, ocr_result_to_text(raw_result)

    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e


def save_ocr_json(ocr_result: dict[str, Any], receipt_path: Path) -> Path:
    """Save OCR result JSON for debugging."""
    ocr_json_dir = get_paths().receipts_ocr_json
    ocr_json_dir.mkdir(parents=True, exist_ok=True)
    ocr_json_path = ocr_json_dir / f"{receipt_path.stem}.json"
    ocr_json_path.write_text(json.dumps(ocr_result, indent=2))
    logger.debug("OCR JSON saved to: %s", ocr_json_path)
    return ocr_json_path
