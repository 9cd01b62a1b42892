"""Abstract repository for order line items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderhub.domain.model.order import OrderItem


class OrderItemRepository(ABC):

    @abstractmethod
    def add_item(self, item: OrderItem) -> None:
        """Persist one line item for an existing order."""

    @abstractmethod
    def get_items(self, order_id: int) -> list[OrderItem]:
        """Return the line items of an order, in insertion order."""
