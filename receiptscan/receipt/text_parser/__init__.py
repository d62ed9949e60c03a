"""Composable receipt text parser components."""

from .common import normalize_lines
from .date_parser import extract_receipt_date
from .fallback_parser import extract_single_price_items
from .items_parser import extract_items_and_summary, parse_product_line, parse_summary_line
from .merchant_parser import extract_merchant_info

__all__ = [
    "extract_items_and_summary",
    "extract_merchant_info",
    "extract_receipt_date",
    "extract_single_price_items",
    "normalize_lines",
    "parse_product_line",
    "parse_summary_line",
]
