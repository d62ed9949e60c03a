"""Data models for receipt extraction."""

import re
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

UNKNOWN_ITEM_NAME = "Unknown Item"


@dataclass(frozen=True)
class LineItem:
    """A single product line on a receipt."""

    product_name: str
    unit_price: Decimal
    total: Decimal
    quantity: Decimal = Decimal("1")


@dataclass(frozen=True)
class FinancialSummary:
    """Summary amounts as printed on the receipt.

    The receipt's own numbers are kept verbatim; no relationship between
    subtotal, tax, charges and total is enforced.
    """

    subtotal: Decimal = Decimal("0")
    vat: Decimal = Decimal("0")
    delivery_charge: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


@dataclass(frozen=True)
class MerchantInfo:
    """Merchant identity lines; empty strings when nothing matched."""

    name: str = ""
    address: str = ""
    phone: str = ""


@dataclass(frozen=True)
class MerchantMatchers:
    """Caller-supplied matchers for merchant identity lines.

    The empty default only recognizes merchant names by shape.
    """

    name_keywords: tuple[str, ...] = ()
    address_patterns: tuple[re.Pattern[str], ...] = ()
    phone_patterns: tuple[re.Pattern[str], ...] = ()


class ScanState(Enum):
    """Position of the line scan relative to the receipt summary block."""

    SCANNING = "scanning"
    SUMMARY_REACHED = "summary_reached"


def new_receipt_id() -> str:
    return str(uuid.uuid4())


def receipt_name_from_filename(filename: str) -> str:
    """Strip the last extension from a source filename."""
    return re.sub(r"\.[^/.]+$", "", filename)


def _amount(value: Decimal) -> float:
    return float(value)


@dataclass(frozen=True)
class ReceiptRecord:
    """Structured receipt extracted from OCR text."""

    receipt_name: str
    products: tuple[LineItem, ...] = ()
    summary: FinancialSummary = field(default_factory=FinancialSummary)
    merchant_info: MerchantInfo = field(default_factory=MerchantInfo)
    receipt_date: str = ""
    receipt_id: str = field(default_factory=new_receipt_id)

    def to_dict(self) -> dict[str, Any]:
        """Render the record in its JSON wire shape (camelCase keys)."""
        return {
            "products": [
                {
                    "productName": item.product_name,
                    "quantity": _amount(item.quantity),
                    "unitPrice": _amount(item.unit_price),
                    "total": _amount(item.total),
                }
                for item in self.products
            ],
            "summary": {
                "subtotal": _amount(self.summary.subtotal),
                "vat": _amount(self.summary.vat),
                "deliveryCharge": _amount(self.summary.delivery_charge),
                "discount": _amount(self.summary.discount),
                "total": _amount(self.summary.total),
            },
            "merchantInfo": {
                "name": self.merchant_info.name,
                "address": self.merchant_info.address,
                "phone": self.merchant_info.phone,
            },
            "receiptDate": self.receipt_date,
            "receiptId": self.receipt_id,
            "receiptName": self.receipt_name,
        }
