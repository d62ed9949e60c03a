"""Merchant name/address/phone extraction helpers."""

import logging
import re

from receiptscan.domain.receipt import MerchantInfo, MerchantMatchers

logger = logging.getLogger(__name__)

# Merchant names are expected near the top of the receipt
MERCHANT_NAME_WINDOW = 10

_CURRENCY_PATTERN = re.compile(r"\$[\d,]+\.?\d*")
_SLASH_DATE_PATTERN = re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}")
_DIGIT_PATTERN = re.compile(r"\d")


def _looks_like_merchant_name(line: str, name_keywords: tuple[str, ...]) -> bool:
    if any(keyword in line for keyword in name_keywords):
        return True
    return 3 < len(line) < 50 and not _DIGIT_PATTERN.search(line)


def _extract_merchant_name(lines: list[str], name_keywords: tuple[str, ...]) -> str:
    """Return the first name-like line among the leading lines, or ""."""
    for line in lines[:MERCHANT_NAME_WINDOW]:
        # Prices and dates are never the merchant name
        if _CURRENCY_PATTERN.search(line) or _SLASH_DATE_PATTERN.search(line):
            continue
        if _looks_like_merchant_name(line, name_keywords):
            logger.debug("Found merchant name: %r", line)
            return line
    return ""


def _last_matching_line(lines: list[str], patterns: tuple[re.Pattern[str], ...]) -> str:
    found = ""
    for line in lines:
        if any(pattern.search(line) for pattern in patterns):
            found = line
    return found


def extract_merchant_info(lines: list[str], matchers: MerchantMatchers | None = None) -> MerchantInfo:
    """
    Extract merchant identity on a best-effort basis.

    The name comes from a bounded window of leading lines; address and phone
    are the last lines anywhere on the receipt matching the injected patterns.
    """
    matchers = matchers or MerchantMatchers()

    name = _extract_merchant_name(lines, matchers.name_keywords)
    address = _last_matching_line(lines, matchers.address_patterns)
    phone = _last_matching_line(lines, matchers.phone_patterns)
    if address:
        logger.debug("Found address: %r", address)
    if phone:
        logger.debug("Found phone: %r", phone)

    return MerchantInfo(name=name, address=address, phone=phone)
