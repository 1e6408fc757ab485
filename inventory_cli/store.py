# inventory_cli/store.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError

from inventory_cli.db import exec_all, exec_one, exec_write, product_table as product
from inventory_cli.logging import get_logger
from inventory_cli.models import Product, ProductChanges

logger = get_logger(__name__)


class DuplicateProductError(Exception):
    """Raised when an insert collides with an existing product id."""

    def __init__(self, product_id: int):
        super().__init__(f"Product ID already exists: {product_id}")
        self.product_id = product_id


# -------------------------
# Helpers (internal)
# -------------------------

def _row_to_product(row: Dict[str, Any]) -> Product:
    return Product(
        id=row["id"],
        name=row["name"],
        quantity=row["quantity"],
        price=row["price"],
    )

def _select_products():
    return select(product.c.id, product.c.name, product.c.quantity, product.c.price)


# -------------------------
# Insert
# -------------------------
def insert_product(conn: Connection, item: Product) -> int:
    stmt = insert(product).values(
        id=item.id,
        name=item.name,
        quantity=item.quantity,
        price=item.price,
    )
    try:
        rows = exec_write(conn, stmt)
    except IntegrityError as e:
        logger.warning("insert rejected for id=%s: %s", item.id, e.orig)
        raise DuplicateProductError(item.id) from e

    logger.info("inserted product id=%s", item.id)
    return rows


# -------------------------
# Reads
# -------------------------
def list_products(conn: Connection) -> List[Product]:
    rows = exec_all(conn, _select_products().order_by(product.c.id.asc()))
    return [_row_to_product(r) for r in rows]


def get_product(conn: Connection, product_id: int) -> Optional[Product]:
    row = exec_one(conn, _select_products().where(product.c.id == product_id))
    if row is None:
        return None
    return _row_to_product(row)


def list_low_stock(conn: Connection, threshold: int) -> List[Product]:
    stmt = (
        _select_products()
        .where(product.c.quantity <= threshold)
        .order_by(product.c.quantity.asc(), product.c.id.asc())
    )
    return [_row_to_product(r) for r in exec_all(conn, stmt)]


# -------------------------
# Mutations (return rows affected; 0 means the id does not exist)
# -------------------------
def update_product(conn: Connection, product_id: int, changes: ProductChanges) -> int:
    values = changes.as_values()
    if not values:
        raise ValueError("nothing to update")

    rows = exec_write(conn, update(product).where(product.c.id == product_id).values(**values))
    logger.info("updated %s on product id=%s, rows=%s", sorted(values), product_id, rows)
    return rows


def delete_product(conn: Connection, product_id: int) -> int:
    rows = exec_write(conn, delete(product).where(product.c.id == product_id))
    logger.info("deleted product id=%s, rows=%s", product_id, rows)
    return rows


def adjust_stock(conn: Connection, product_id: int, delta: int) -> int:
    # Applied by the database in one statement; no read-modify-write here.
    stmt = (
        update(product)
        .where(product.c.id == product_id)
        .values(quantity=product.c.quantity + delta)
    )
    rows = exec_write(conn, stmt)
    logger.info("adjusted stock of product id=%s by %+d, rows=%s", product_id, delta, rows)
    return rows
