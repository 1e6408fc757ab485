from decimal import Decimal

from inventory_cli import render
from inventory_cli.models import Product


def test_empty_table_prints_only_the_message():
    assert render.product_table([], "(no products found)") == "(no products found)"


def test_table_has_header_rule_and_one_line_per_product():
    products = [
        Product(id=1, name="Widget", quantity=10, price=Decimal("2.5")),
        Product(id=22, name="Gadget", quantity=-3, price=Decimal("100")),
    ]

    lines = render.product_table(products, "unused").splitlines()

    assert lines[0].split() == ["ID", "Name", "Quantity", "Price"]
    assert lines[1] == "-" * 62
    assert lines[2].split() == ["1", "Widget", "10", "2.50"]
    assert lines[3].split() == ["22", "Gadget", "-3", "100.00"]
    # fixed-width columns
    assert lines[2].index("Widget") == 7
    assert lines[2].index("10") == 38


def test_detail_prints_one_field_per_line():
    p = Product(id=1, name="Widget", quantity=10, price=Decimal("2.5"))
    assert render.product_detail(p) == "ID: 1\nName: Widget\nQuantity: 10\nPrice: 2.50"


def test_rows_affected_distinguishes_not_found():
    assert render.rows_affected(0) == "No rows affected (ID may not exist)."
    assert render.rows_affected(1) == "Success! Rows affected: 1"


def test_null_columns_render_blank():
    p = Product(id=5)

    lines = render.product_table([p], "unused").splitlines()

    assert lines[2].split() == ["5"]
    assert render.product_detail(p) == "ID: 5\nName: \nQuantity: \nPrice: "
