"""SQL implementation of OrderItemRepository (SQLAlchemy Core)."""

from __future__ import annotations

from sqlalchemy import Engine, insert, select

from orderhub.domain.model.order import OrderItem
from orderhub.domain.repository.order_item_repository import OrderItemRepository
from orderhub.infrastructure.persistence.sql_schema import order_items


class SqlOrderItemRepository(OrderItemRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add_item(self, item: OrderItem) -> None:
        stmt = insert(order_items).values(
            order_id=item.order_id,
            product_id=item.product_id,
            qty=item.qty,
            price=item.price,
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def get_items(self, order_id: int) -> list[OrderItem]:
        stmt = (
            select(order_items)
            .where(order_items.c.order_id == order_id)
            .order_by(order_items.c.id)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).all()
        return [
            OrderItem(
                id=row.id,
                order_id=row.order_id,
                product_id=row.product_id,
                qty=row.qty,
                price=row.price,
            )
            for row in rows
        ]
