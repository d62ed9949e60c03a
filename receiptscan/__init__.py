"""Receipt OCR text to structured record extraction."""

__version__ = "0.1.0"
