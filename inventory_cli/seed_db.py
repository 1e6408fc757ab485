# inventory_cli/seed_db.py
from __future__ import annotations

import argparse
from decimal import Decimal

from sqlalchemy import select

from inventory_cli.config import get_settings
from inventory_cli.db import connect, init_db, metadata, product_table
from inventory_cli.logging import configure_logging, get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    (101, "USB-C Cable (1m)", 25, Decimal("8.99")),
    (102, "Wireless Mouse", 12, Decimal("19.99")),
    (103, "Mechanical Keyboard", 6, Decimal("74.99")),
    (104, "Laptop Stand", 10, Decimal("29.99")),
    (105, "Noise-Cancelling Earbuds", 4, Decimal("129.99")),
    (106, "HDMI Adapter", 18, Decimal("15.99")),
    (107, "Desk Lamp", 3, Decimal("34.99")),
    (108, "Bluetooth Speaker", 5, Decimal("59.99")),
]


def seed(reset: bool = False, sample: bool = False) -> int:
    """Create the product table (optionally from scratch) and return how many sample rows were added."""
    added = 0
    with connect() as conn:
        if reset:
            metadata.drop_all(conn)
        init_db(conn)

        if sample:
            existing = set(conn.execute(select(product_table.c.id)).scalars())
            rows = [
                {"id": pid, "name": name, "quantity": qty, "price": price}
                for pid, name, qty, price in SAMPLE_PRODUCTS
                if pid not in existing
            ]
            if rows:
                conn.execute(product_table.insert(), rows)
            added = len(rows)

    logger.info("schema ready (reset=%s), sample rows added: %s", reset, added)
    return added


def main():
    p = argparse.ArgumentParser(description="Create the product table.")
    p.add_argument("--reset", action="store_true", help="drop the table first")
    p.add_argument("--sample", action="store_true", help="insert a small demo dataset")
    args = p.parse_args()

    configure_logging(get_settings().log_level)
    added = seed(reset=args.reset, sample=args.sample)
    print(f"✅ product table ready. Sample rows added: {added}")
