"""Receipt text extraction, OCR response handling and CSV export."""
