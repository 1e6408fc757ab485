# inventory_cli/db.py
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from sqlalchemy import Column, Integer, MetaData, Numeric, String, Table, create_engine
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.pool import NullPool
from sqlalchemy.sql.expression import Executable

from inventory_cli.config import get_settings
from inventory_cli.logging import get_logger

logger = get_logger(__name__)

metadata = MetaData()

product_table = Table(
    "product",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(50)),
    Column("quantity", Integer),
    Column("price", Numeric(10, 2)),
)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    # NullPool: every connect() opens a real connection and close() really closes it.
    # AUTOCOMMIT: each statement is committed on its own.
    url = get_settings().database_url_resolved
    logger.info("using database %s", make_url(url).render_as_string(hide_password=True))
    return create_engine(url, poolclass=NullPool, isolation_level="AUTOCOMMIT")


def connect() -> Connection:
    """Open a connection for one operation. Use it as a context manager so it is always closed."""
    return get_engine().connect()


def init_db(conn: Connection) -> None:
    metadata.create_all(conn)


def exec_one(conn: Connection, stmt: Executable) -> Optional[Dict[str, Any]]:
    row = conn.execute(stmt).mappings().first()
    return dict(row) if row else None


def exec_all(conn: Connection, stmt: Executable) -> list[Dict[str, Any]]:
    return [dict(r) for r in conn.execute(stmt).mappings().all()]


def exec_write(conn: Connection, stmt: Executable) -> int:
    """Run one INSERT/UPDATE/DELETE and return the number of rows it touched."""
    return conn.execute(stmt).rowcount
