"""Integration tests for the ChangeOrderStatus use case."""

import pytest

from orderhub.application.change_order_status import ChangeOrderStatusHandler
from orderhub.domain.exceptions import NotFoundError, ValidationErrorKind
from orderhub.domain.model.order import Order, OrderStatus
from orderhub.domain.result import Err, Ok
from tests.fakes import FakeOrderRepository


def _setup(status: OrderStatus = OrderStatus.NEW):
    order_repo = FakeOrderRepository()
    order_id = order_repo.create(Order(user_id=1, total=50, status=status))
    return ChangeOrderStatusHandler(order_repo), order_repo, order_id


class TestUpdateStatus:

    def test_ok_is_persisted(self):
        handler, order_repo, order_id = _setup()

        outcome = handler.update_status(order_id, "PROCESSING")

        assert isinstance(outcome, Ok)
        assert outcome.value.status == "PROCESSING"
        assert order_repo.get_by_id(order_id).status == OrderStatus.PROCESSING

    def test_invalid_status_is_err(self):
        handler, order_repo, order_id = _setup()

        outcome = handler.update_status(order_id, "SHIPPED")

        assert isinstance(outcome, Err)
        assert outcome.kind == ValidationErrorKind.INVALID_STATUS
        assert order_repo.get_by_id(order_id).status == OrderStatus.NEW

    def test_terminal_rejection_is_not_persisted(self):
        handler, order_repo, order_id = _setup(OrderStatus.COMPLETED)

        outcome = handler.update_status(order_id, OrderStatus.NEW)

        assert outcome == Err(ValidationErrorKind.INVALID_TRANSITION, "Cannot update a completed order")
        assert order_repo.get_by_id(order_id).status == OrderStatus.COMPLETED

    def test_missing_order_raises(self):
        handler, _, _ = _setup()
        with pytest.raises(NotFoundError, match="Order not found"):
            handler.update_status(999, "NEW")


class TestCancelAndComplete:

    def test_cancel(self):
        handler, order_repo, order_id = _setup(OrderStatus.PROCESSING)
        assert handler.cancel(order_id).unwrap().status == "CANCELLED"
        assert order_repo.get_by_id(order_id).is_cancelled()

    def test_cancel_completed_is_err(self):
        handler, _, order_id = _setup(OrderStatus.COMPLETED)
        outcome = handler.cancel(order_id)
        assert isinstance(outcome, Err)
        assert outcome.message == "Cannot cancel a completed order"

    def test_complete_is_idempotent(self):
        handler, _, order_id = _setup()
        assert handler.complete(order_id).is_ok
        assert handler.complete(order_id).is_ok

    def test_complete_cancelled_is_err(self):
        handler, order_repo, order_id = _setup(OrderStatus.CANCELLED)
        outcome = handler.complete(order_id)
        assert not outcome.is_ok
        assert order_repo.get_by_id(order_id).status == OrderStatus.CANCELLED
