"""Application service: Create Order use case.

Writes the order header first, then each line item tagged with the new
order ID.  The steps are separate repository calls and are not atomic:
if item 3 of 5 fails, the header and the first two items stay persisted
and the error propagates to the caller.
"""

from __future__ import annotations

import structlog

from orderhub.application.dto import NewOrderSpec
from orderhub.domain.model.order import Order, OrderItem, OrderStatus
from orderhub.domain.repository.order_item_repository import OrderItemRepository
from orderhub.domain.repository.order_repository import OrderRepository

logger = structlog.stdlib.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo

    def handle(self, spec: NewOrderSpec) -> int:
        """Create an order and its line items; return the new order ID."""
        # New orders always start NEW regardless of what the caller sent
        order = Order(user_id=spec.user_id, total=spec.total, status=OrderStatus.NEW)
        order.validate()

        order_id = self._order_repo.create(order)
        order.id = order_id
        logger.info("order.created", order_id=order_id, user_id=spec.user_id)

        for line in spec.items:
            self._item_repo.add_item(
                OrderItem(
                    order_id=order_id,
                    product_id=line.product_id,
                    qty=line.qty,
                    price=line.price,
                )
            )
            logger.debug("order.item_added", order_id=order_id, product_id=line.product_id)

        return order_id
