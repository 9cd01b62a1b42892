"""Relational schema shared by the SQL repositories (SQLAlchemy Core).

Tables are created on startup with ``metadata.create_all``; there is no
migration tooling.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Engine,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    create_engine,
)

from orderhub.infrastructure.logger import get_logger

logger = get_logger(__name__)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=True),
    Column("email", String(255), nullable=False),
    Column("phone", String(64), nullable=True),
)

# No foreign key on user_id: an order may reference a user that was
# never stored.
orders = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False, index=True),
    Column("total", Numeric(12, 2), nullable=False),
    Column("status", String(20), nullable=False),
)

order_items = Table(
    "order_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("order_id", Integer, ForeignKey("orders.id"), nullable=False, index=True),
    Column("product_id", Integer, nullable=False),
    Column("qty", Integer, nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine and make sure every table exists."""
    engine = create_engine(database_url, echo=echo)
    metadata.create_all(engine)
    logger.info("database.ready", dialect=engine.dialect.name)
    return engine
