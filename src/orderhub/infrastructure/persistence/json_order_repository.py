"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from orderhub.domain.model.order import Order, OrderHeader, OrderStatus
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.infrastructure.persistence.json_store import JsonFile


class JsonOrderRepository(OrderRepository):
    """Orders live in their own file; the users file is read for joins."""

    def __init__(self, file_path: Path, users_file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._users = JsonFile(users_file_path)

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> int:
        records = self._file.load()
        order_id = JsonFile.next_id(records)
        records.append(self._to_raw(order, order_id))
        self._file.persist(records)
        return order_id

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._find(order_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_user(self, user_id: int) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load() if raw["user_id"] == user_id]

    def get_order_details(self, order_id: int) -> OrderHeader | None:
        raw = self._find(order_id)
        if raw is None:
            return None

        owner = next((u for u in self._users.load() if u["id"] == raw["user_id"]), None)
        return OrderHeader(
            order_id=raw["id"],
            user_id=raw["user_id"],
            user=owner.get("name") if owner is not None else None,
            total=Decimal(raw["total"]),
            status=OrderStatus(raw["status"]),
        )

    def save(self, order: Order) -> None:
        records = self._file.load()
        JsonFile.replace(records, self._to_raw(order, order.id))  # type: ignore[arg-type]
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    def _find(self, order_id: int) -> dict | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return raw
        return None

    @staticmethod
    def _to_raw(order: Order, order_id: int) -> dict:
        return {
            "id": order_id,
            "user_id": order.user_id,
            "total": str(order.total),
            "status": order.status.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            total=Decimal(raw["total"]),
            status=raw["status"],
        )
