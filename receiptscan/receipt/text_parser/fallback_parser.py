"""Single-price-per-line item extraction for receipts the primary scan misses."""

import logging

from receiptscan.domain.receipt import UNKNOWN_ITEM_NAME, LineItem

from .common import MIN_FALLBACK_PRICE, PRICE_PATTERN, _looks_like_summary_line, _remove_first, parse_amount

logger = logging.getLogger(__name__)


def extract_single_price_items(lines: list[str]) -> list[LineItem]:
    """
    Treat every non-summary line with exactly one price as a product.

    Unlike the primary scan there is no summary cutoff: each line is judged
    on its own. Prices below MIN_FALLBACK_PRICE are treated as noise.
    """
    items: list[LineItem] = []
    for line in lines:
        prices = PRICE_PATTERN.findall(line)
        if len(prices) != 1:
            continue
        if _looks_like_summary_line(line):
            continue

        price = parse_amount(prices[0])
        if price < MIN_FALLBACK_PRICE:
            continue

        name = _remove_first(line, prices[0]) or UNKNOWN_ITEM_NAME
        items.append(LineItem(product_name=name, unit_price=price, total=price))
        logger.debug("Added single-price product: %r %s", name, price)
    return items
