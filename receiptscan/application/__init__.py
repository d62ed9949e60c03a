"""Application workflows orchestrating OCR, extraction and export."""
