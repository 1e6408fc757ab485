import os
from decimal import Decimal

import pytest

from inventory_cli.config import get_settings
from inventory_cli.db import connect, get_engine, init_db
from inventory_cli.models import Product

# keep a developer's .env from leaking into the suite
for _name in ("DATABASE_URL", "DB_DIALECT", "DB_HOST", "DB_PORT", "DB_NAME", "DB_USER", "DB_PASSWORD"):
    os.environ.pop(_name, None)


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with the product table created."""
    url = f"sqlite:///{tmp_path / 'inventory.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    _clear_caches()
    with connect() as conn:
        init_db(conn)
    yield url
    _clear_caches()


@pytest.fixture
def conn(database_url):
    with connect() as c:
        yield c


@pytest.fixture
def widget() -> Product:
    return Product(id=1, name="Widget", quantity=10, price=Decimal("2.50"))


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed answers to input() in order; running out behaves like end of stdin."""

    def feed(*answers: str):
        remaining = iter(answers)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


@pytest.fixture
def use_database_url(monkeypatch):
    """Switch DATABASE_URL mid-test without creating any schema."""

    def switch(url: str) -> None:
        monkeypatch.setenv("DATABASE_URL", url)
        _clear_caches()

    yield switch
    _clear_caches()
