# inventory_cli/cli.py
from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, DBAPIError, SQLAlchemyError

import inventory_cli.store as inventory
from inventory_cli import render
from inventory_cli.config import get_settings
from inventory_cli.db import connect, get_engine
from inventory_cli.logging import configure_logging, get_logger
from inventory_cli.models import Product, ProductChanges
from inventory_cli.prompts import read_int, read_price, read_text

logger = get_logger(__name__)

MENU = """
====== MENU ======
1. Add Product
2. Display All Products
3. Find Product by ID
4. Update Product (name/quantity/price)
5. Delete Product
6. List Low-Stock Products (<= threshold)
7. Adjust Stock (+/- quantity)
8. Exit
"""


class MenuChoice(IntEnum):
    ADD = 1
    LIST = 2
    FIND = 3
    UPDATE = 4
    DELETE = 5
    LOW_STOCK = 6
    ADJUST = 7
    EXIT = 8


class UpdateField(IntEnum):
    NAME = 1
    QUANTITY = 2
    PRICE = 3
    ALL = 4


# -------------------------
# Operation handlers
# Each one reads its own inputs, then runs a single statement on a fresh connection.
# -------------------------

def add_product() -> None:
    product_id = read_int("Enter Product ID (int): ")
    name = read_text("Enter Product Name: ")
    quantity = read_int("Enter Quantity (int): ")
    price = read_price("Enter Price (decimal): ")
    item = Product(id=product_id, name=name, quantity=quantity, price=price)

    with connect() as conn:
        try:
            rows = inventory.insert_product(conn, item)
        except inventory.DuplicateProductError:
            print("Insert failed: ID already exists.")
            return
    print(f"{rows} record(s) inserted.")


def list_products() -> None:
    with connect() as conn:
        products = inventory.list_products(conn)
    print(render.product_table(products, "(no products found)"))


def find_product() -> None:
    product_id = read_int("Enter Product ID to find: ")
    with connect() as conn:
        found = inventory.get_product(conn, product_id)
    if found is None:
        print(f"No product found with ID {product_id}")
    else:
        print(render.product_detail(found))


def _read_changes(field: UpdateField) -> ProductChanges:
    changes = ProductChanges()
    if field in (UpdateField.NAME, UpdateField.ALL):
        changes.name = read_text("New Name: ")
    if field in (UpdateField.QUANTITY, UpdateField.ALL):
        changes.quantity = read_int("New Quantity: ")
    if field in (UpdateField.PRICE, UpdateField.ALL):
        changes.price = read_price("New Price: ")
    return changes


def update_product() -> None:
    product_id = read_int("Enter Product ID to update: ")
    print("What would you like to update?")
    print("1) Name  2) Quantity  3) Price  4) Name+Quantity+Price")
    option = read_int("Choose option: ")
    try:
        field = UpdateField(option)
    except ValueError:
        print("Invalid option.")
        return

    changes = _read_changes(field)
    with connect() as conn:
        rows = inventory.update_product(conn, product_id, changes)
    print(render.rows_affected(rows))


def delete_product() -> None:
    product_id = read_int("Enter Product ID to delete: ")
    with connect() as conn:
        rows = inventory.delete_product(conn, product_id)
    print(render.rows_affected(rows))


def list_low_stock() -> None:
    threshold = read_int("Show products with quantity <= threshold. Enter threshold: ")
    with connect() as conn:
        products = inventory.list_low_stock(conn, threshold)
    print(render.product_table(products, "(no products meet the threshold)"))


def adjust_stock() -> None:
    product_id = read_int("Enter Product ID to adjust: ")
    delta = read_int("Enter quantity change (+ to add, - to remove): ")
    with connect() as conn:
        rows = inventory.adjust_stock(conn, product_id, delta)
    print(render.rows_affected(rows))


HANDLERS: Dict[MenuChoice, Callable[[], None]] = {
    MenuChoice.ADD: add_product,
    MenuChoice.LIST: list_products,
    MenuChoice.FIND: find_product,
    MenuChoice.UPDATE: update_product,
    MenuChoice.DELETE: delete_product,
    MenuChoice.LOW_STOCK: list_low_stock,
    MenuChoice.ADJUST: adjust_stock,
}


def _diagnostic(e: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its text is what the user needs.
    if isinstance(e, DBAPIError) and e.orig is not None:
        return str(e.orig)
    return str(e)


def run_menu() -> None:
    while True:
        print(MENU)
        choice = read_int("Enter your choice: ")

        if choice == MenuChoice.EXIT:
            print("Goodbye!")
            return  # <-- normal exit

        try:
            operation = MenuChoice(choice)
        except ValueError:
            print("Invalid choice. Try again.")
            continue

        logger.info("dispatching %s", operation.name)
        try:
            HANDLERS[operation]()
        except SQLAlchemyError as e:
            logger.warning("%s failed: %s", operation.name, e)
            print(f"Database error: {_diagnostic(e)}")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    print("=== Product Inventory System ===")
    try:
        get_engine()
    except ImportError as e:
        dialect = make_url(settings.database_url_resolved).drivername
        print(f"Database driver not found. Install the driver for {dialect}. ({e})")
        return
    except ArgumentError as e:
        print(f"Invalid database configuration: {e}")
        return

    try:
        run_menu()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
