"""Flatten a ReceiptRecord into CSV rows."""

import csv
import io
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from receiptscan.domain.receipt import ReceiptRecord

CSV_COLUMNS = (
    ("receipt_id", "Receipt ID"),
    ("receipt_name", "Receipt Name"),
    ("product_name", "Product Name"),
    ("quantity", "Quantity"),
    ("unit_price", "Unit Price"),
    ("total", "Total"),
    ("vat", "VAT"),
    ("delivery_charge", "Delivery Charge"),
    ("discount", "Discount"),
    ("subtotal", "Subtotal"),
    ("grand_total", "Grand Total"),
)

SUMMARY_ROW_LABEL = "SUMMARY"

CENT = Decimal("0.01")


def _format_amount(value: Decimal) -> str:
    # Half-up, so a 0.125 share prints as "0.13"
    return f"{value.quantize(CENT, rounding=ROUND_HALF_UP):f}"


def _format_quantity(value: Decimal) -> str:
    # 2 -> "2", 1.50 -> "1.5"
    normalized = value.normalize()
    return f"{normalized:f}"


def build_csv_rows(record: ReceiptRecord) -> list[dict[str, str]]:
    """
    Build one row per product plus a trailing summary row.

    VAT, delivery charge and discount are spread evenly over the product
    rows; subtotal and grand total are repeated on each row. The summary row
    carries the unallocated amounts.
    """
    summary = record.summary
    receipt_id = record.receipt_id or "N/A"
    receipt_name = record.receipt_name or "N/A"

    rows: list[dict[str, str]] = []
    count = len(record.products)
    for item in record.products:
        rows.append(
            {
                "receipt_id": receipt_id,
                "receipt_name": receipt_name,
                "product_name": item.product_name or "N/A",
                "quantity": _format_quantity(item.quantity),
                "unit_price": _format_amount(item.unit_price),
                "total": _format_amount(item.total),
                "vat": _format_amount(summary.vat / count),
                "delivery_charge": _format_amount(summary.delivery_charge / count),
                "discount": _format_amount(summary.discount / count),
                "subtotal": _format_amount(summary.subtotal),
                "grand_total": _format_amount(summary.total),
            }
        )

    rows.append(
        {
            "receipt_id": receipt_id,
            "receipt_name": receipt_name,
            "product_name": SUMMARY_ROW_LABEL,
            "quantity": "",
            "unit_price": _format_amount(Decimal("0")),
            "total": _format_amount(Decimal("0")),
            "vat": _format_amount(summary.vat),
            "delivery_charge": _format_amount(summary.delivery_charge),
            "discount": _format_amount(summary.discount),
            "subtotal": _format_amount(summary.subtotal),
            "grand_total": _format_amount(summary.total),
        }
    )
    return rows


def render_csv(record: ReceiptRecord) -> str:
    """Render the record as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([title for _, title in CSV_COLUMNS])
    for row in build_csv_rows(record):
        writer.writerow([row[key] for key, _ in CSV_COLUMNS])
    return buffer.getvalue()


def write_csv(record: ReceiptRecord, output_path: Path) -> Path:
    """Write the record's CSV to output_path, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_csv(record), encoding="utf-8")
    return output_path
