"""Application service: order status changes (update / cancel / complete).

Rejected transitions are returned as ``Err`` values rather than raised,
so adapters decide how to present them.  A missing order is still an
exception (``NotFoundError``).  The order is only saved on success.
"""

from __future__ import annotations

from typing import Callable

import structlog

from orderhub.application.dto import OrderSummaryDTO
from orderhub.application.mapping import order_to_summary
from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.model.order import Order, OrderStatus
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.domain.result import Err, Ok, Result, attempt

logger = structlog.stdlib.get_logger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def update_status(
        self, order_id: int, new_status: OrderStatus | str
    ) -> Result[OrderSummaryDTO]:
        return self._apply(order_id, lambda order: order.update_status(new_status))

    def cancel(self, order_id: int) -> Result[OrderSummaryDTO]:
        return self._apply(order_id, Order.cancel)

    def complete(self, order_id: int) -> Result[OrderSummaryDTO]:
        return self._apply(order_id, Order.complete)

    def _apply(
        self, order_id: int, transition: Callable[[Order], None]
    ) -> Result[OrderSummaryDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found")

        previous = order.status
        outcome = attempt(transition, order)
        if isinstance(outcome, Err):
            logger.info(
                "order.transition_rejected",
                order_id=order_id,
                status=previous.value,
                reason=outcome.message,
            )
            return outcome

        self._order_repo.save(order)
        logger.info(
            "order.status_changed",
            order_id=order_id,
            from_status=previous.value,
            to_status=order.status.value,
        )
        return Ok(order_to_summary(order))
