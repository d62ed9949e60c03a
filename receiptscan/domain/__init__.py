"""Core domain models for receipt extraction.

This module provides the data models used throughout the project:
- ReceiptRecord: the structured result of one extraction
- LineItem, FinancialSummary, MerchantInfo: its parts
- MerchantMatchers: caller-injected merchant identity matchers
- ScanState: line scan position relative to the summary block

Usage:
    from receiptscan.domain import ReceiptRecord, LineItem
"""

from receiptscan.domain.receipt import (
    UNKNOWN_ITEM_NAME,
    FinancialSummary,
    LineItem,
    MerchantInfo,
    MerchantMatchers,
    ReceiptRecord,
    ScanState,
)

__all__ = [
    "UNKNOWN_ITEM_NAME",
    "FinancialSummary",
    "LineItem",
    "MerchantInfo",
    "MerchantMatchers",
    "ReceiptRecord",
    "ScanState",
]
