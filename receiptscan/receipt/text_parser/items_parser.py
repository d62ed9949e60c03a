"""Line classification and product/summary extraction."""

import logging
import re
from dataclasses import replace
from decimal import Decimal

from receiptscan.domain.receipt import UNKNOWN_ITEM_NAME, FinancialSummary, LineItem, ScanState

from .common import (
    QUANTITY_PATTERN,
    _has_section_header,
    _looks_like_summary_line,
    _remove_first,
    find_price,
    parse_amount,
)
from .fallback_parser import extract_single_price_items

logger = logging.getLogger(__name__)

# "2 | Cola | $3.00"
DELIMITED_ITEM_PATTERN = re.compile(r"(\d+)\s*\|\s*([^|]+?)\s*\|\s*\$?\s*(\d[\d,]*\.\d{2})")


def parse_summary_line(line: str, summary: FinancialSummary) -> FinancialSummary:
    """
    Apply one summary line to the running summary.

    The first price on the line is assigned to a single field chosen by
    keyword. A later line for the same field overwrites the earlier value.
    Lines without a price leave the summary unchanged.
    """
    match = find_price(line)
    if not match:
        return summary

    amount = parse_amount(match.group(0))
    lower = line.lower()

    if "=total" in lower or ("total" in lower and "subtotal" not in lower):
        field_name = "total"
    elif "subtotal" in lower:
        field_name = "subtotal"
    elif "tax" in lower:
        field_name = "vat"
    elif "delivery" in lower or "service" in lower:
        field_name = "delivery_charge"
    elif "discount" in lower:
        field_name = "discount"
    else:
        return summary

    logger.debug("Set %s: %s", field_name, amount)
    return replace(summary, **{field_name: amount})


def _parse_delimited_item(match: re.Match[str]) -> LineItem:
    quantity = Decimal(int(match.group(1)))
    if quantity < 1:
        quantity = Decimal("1")
    name = match.group(2).strip() or UNKNOWN_ITEM_NAME
    unit_price = parse_amount(match.group(3))
    return LineItem(
        product_name=name,
        quantity=quantity,
        unit_price=unit_price,
        total=unit_price * quantity,
    )


def parse_product_line(line: str) -> LineItem | None:
    """
    Parse a product line in delimited or free-form layout.

    Delimited lines ("qty | name | price") carry a unit price. On free-form
    lines the price is the line total, split across a leading "2x" multiplier
    when present.

    Returns:
        LineItem, or None when the line has no price
    """
    delimited = DELIMITED_ITEM_PATTERN.search(line)
    if delimited:
        return _parse_delimited_item(delimited)

    match = find_price(line)
    if not match:
        return None

    price = parse_amount(match.group(0))
    name = _remove_first(line, match.group(0)) or UNKNOWN_ITEM_NAME

    quantity = Decimal("1")
    quantity_match = QUANTITY_PATTERN.match(line)
    if quantity_match and Decimal(quantity_match.group(1)) > 0:
        quantity = Decimal(quantity_match.group(1))

    if quantity > 1:
        return LineItem(product_name=name, quantity=quantity, unit_price=price / quantity, total=price)
    return LineItem(product_name=name, quantity=quantity, unit_price=price, total=price)


class _ItemScan:
    """Single pass over receipt lines collecting products and summary fields."""

    def __init__(self) -> None:
        self.state = ScanState.SCANNING
        # Informational only; no classification depends on it.
        self.in_product_section = False
        self.products: list[LineItem] = []
        self.summary = FinancialSummary()

    def feed(self, line: str) -> None:
        if _has_section_header(line):
            self.in_product_section = True
            logger.debug("Found product section header: %r", line)

        if _looks_like_summary_line(line):
            self.state = ScanState.SUMMARY_REACHED
            self.in_product_section = False
            self.summary = parse_summary_line(line, self.summary)
            return

        # Nothing after the summary block is a product
        if self.state is ScanState.SUMMARY_REACHED or not find_price(line):
            return

        item = parse_product_line(line)
        if item is not None and item.product_name.strip():
            self.products.append(item)
            logger.debug("Added product: %s", item)


def extract_items_and_summary(lines: list[str]) -> tuple[list[LineItem], FinancialSummary]:
    """
    Extract products and summary amounts from receipt lines.

    Products are collected until the first summary line. If none are found,
    the single-price heuristic replaces the (empty) product list.

    Args:
        lines: Normalized receipt lines

    Returns:
        Tuple of (products, summary)
    """
    scan = _ItemScan()
    for line in lines:
        if not line.strip():
            continue
        scan.feed(line)

    if not scan.products:
        logger.debug("No products found, trying single-price parsing")
        return extract_single_price_items(lines), scan.summary
    return scan.products, scan.summary
