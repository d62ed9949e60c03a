"""Shared constants and helpers for receipt text parsing."""

import re
from decimal import Decimal

# Optional "$", digit groups with optional thousands separators, exactly two decimals
PRICE_PATTERN = re.compile(r"\$?\d[\d,]*\.\d{2}")

# Leading multiplier like "2x" or "1.5×"
QUANTITY_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)[x×]")

# Lowercase substrings that mark a line as part of the summary block
SUMMARY_KEYWORDS = (
    "total",
    "subtotal",
    "tax",
    "vat",
    "gst",
    "service",
    "delivery",
    "discount",
    "tip",
    "amount",
    "balance",
    "change",
    "due",
)

# Column headers / delimiters that open an item table
SECTION_HEADER_TOKENS = ("QTY", "ITEM", "PRICE", "|")

# Alternative parsing ignores prices below this (page numbers, codes)
MIN_FALLBACK_PRICE = Decimal("0.50")


def normalize_lines(text: str) -> list[str]:
    """Split raw OCR text into stripped, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_amount(token: str) -> Decimal:
    """Convert a price-shaped token like "$1,234.50" to Decimal."""
    return Decimal(re.sub(r"[$,\s]", "", token))


def find_price(line: str) -> re.Match[str] | None:
    """Return the first price-shaped substring in the line, if any."""
    return PRICE_PATTERN.search(line)


def _looks_like_summary_line(line: str) -> bool:
    """Return True if the line carries a summary keyword."""
    lower = line.lower()
    return any(keyword in lower for keyword in SUMMARY_KEYWORDS)


def _has_section_header(line: str) -> bool:
    return any(token in line for token in SECTION_HEADER_TOKENS)


def _remove_first(line: str, token: str) -> str:
    """Remove the first occurrence of token and strip the remainder."""
    return line.replace(token, "", 1).strip()
