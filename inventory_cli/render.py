# inventory_cli/render.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from inventory_cli.models import Product

RULE = "-" * 62


def _price(value: Optional[Decimal]) -> str:
    # NULL columns render blank
    return "" if value is None else f"{value:.2f}"


def _text(value: object) -> str:
    return "" if value is None else str(value)


def product_table(products: Sequence[Product], empty_message: str) -> str:
    if not products:
        return empty_message

    out = [f"{'ID':<6} {'Name':<30} {'Quantity':<10} {'Price':<10}", RULE]
    for p in products:
        out.append(f"{p.id:<6d} {_text(p.name):<30} {_text(p.quantity):<10} {_price(p.price):<10}")
    return "\n".join(out)


def product_detail(p: Product) -> str:
    return "\n".join([
        f"ID: {p.id}",
        f"Name: {_text(p.name)}",
        f"Quantity: {_text(p.quantity)}",
        f"Price: {_price(p.price)}",
    ])


def rows_affected(rows: int) -> str:
    if rows == 0:
        return "No rows affected (ID may not exist)."
    return f"Success! Rows affected: {rows}"
