"""JSON-file-backed implementation of OrderItemRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from orderhub.domain.model.order import OrderItem
from orderhub.domain.repository.order_item_repository import OrderItemRepository
from orderhub.infrastructure.persistence.json_store import JsonFile


class JsonOrderItemRepository(OrderItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def add_item(self, item: OrderItem) -> None:
        records = self._file.load()
        records.append(
            {
                "id": JsonFile.next_id(records),
                "order_id": item.order_id,
                "product_id": item.product_id,
                "qty": item.qty,
                "price": str(item.price),
            }
        )
        self._file.persist(records)

    def get_items(self, order_id: int) -> list[OrderItem]:
        return [
            OrderItem(
                id=raw["id"],
                order_id=raw["order_id"],
                product_id=raw["product_id"],
                qty=raw["qty"],
                price=Decimal(raw["price"]),
            )
            for raw in self._file.load()
            if raw["order_id"] == order_id
        ]
