"""Application service: Show Order / List User Orders use cases (queries)."""

from __future__ import annotations

from orderhub.application.dto import OrderDetailsDTO, OrderSummaryDTO
from orderhub.application.mapping import item_to_dto, order_to_summary
from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.repository.order_item_repository import OrderItemRepository
from orderhub.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo

    def handle(self, order_id: int) -> OrderDetailsDTO:
        """Return the order header merged with its owner and items."""
        header = self._order_repo.get_order_details(order_id)
        if header is None:
            raise NotFoundError("Order not found")

        items = self._item_repo.get_items(order_id)

        return OrderDetailsDTO(
            order_id=header.order_id,
            user=header.user,
            total=header.total,
            status=header.status.value,
            items=[item_to_dto(item) for item in items],
        )


class ListUserOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: int) -> list[OrderSummaryDTO]:
        return [order_to_summary(order) for order in self._order_repo.get_by_user(user_id)]
