"""SQL implementation of OrderRepository (SQLAlchemy Core)."""

from __future__ import annotations

from sqlalchemy import Engine, insert, select, update

from orderhub.domain.model.order import Order, OrderHeader, OrderStatus
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.infrastructure.persistence.sql_schema import orders, users


class SqlOrderRepository(OrderRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, order: Order) -> int:
        stmt = insert(orders).values(
            user_id=order.user_id, total=order.total, status=order.status.value
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
            return result.inserted_primary_key[0]

    def get_by_id(self, order_id: int) -> Order | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(orders).where(orders.c.id == order_id)).first()
        return self._to_domain(row) if row is not None else None

    def get_by_user(self, user_id: int) -> list[Order]:
        stmt = select(orders).where(orders.c.user_id == user_id).order_by(orders.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).all()
        return [self._to_domain(row) for row in rows]

    def get_order_details(self, order_id: int) -> OrderHeader | None:
        stmt = (
            select(
                orders.c.id,
                orders.c.user_id,
                users.c.name.label("user"),
                orders.c.total,
                orders.c.status,
            )
            .select_from(orders.outerjoin(users, orders.c.user_id == users.c.id))
            .where(orders.c.id == order_id)
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            return None
        return OrderHeader(
            order_id=row.id,
            user_id=row.user_id,
            user=row.user,
            total=row.total,
            status=OrderStatus(row.status),
        )

    def save(self, order: Order) -> None:
        stmt = (
            update(orders)
            .where(orders.c.id == order.id)
            .values(user_id=order.user_id, total=order.total, status=order.status.value)
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    @staticmethod
    def _to_domain(row) -> Order:
        return Order(id=row.id, user_id=row.user_id, total=row.total, status=row.status)
