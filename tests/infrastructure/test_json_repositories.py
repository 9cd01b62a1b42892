"""Tests for the JSON-file repositories against a temporary directory."""

import json
from decimal import Decimal

import pytest

from orderhub.domain.model.order import Order, OrderItem, OrderStatus
from orderhub.domain.model.user import User
from orderhub.infrastructure.persistence.json_order_item_repository import (
    JsonOrderItemRepository,
)
from orderhub.infrastructure.persistence.json_order_repository import JsonOrderRepository
from orderhub.infrastructure.persistence.json_user_repository import JsonUserRepository


@pytest.fixture
def repos(tmp_path):
    users_file = tmp_path / "users.json"
    return (
        JsonUserRepository(users_file),
        JsonOrderRepository(tmp_path / "orders.json", users_file),
        JsonOrderItemRepository(tmp_path / "order_items.json"),
    )


class TestJsonUserRepository:

    def test_creates_file_on_first_use(self, tmp_path):
        JsonUserRepository(tmp_path / "nested" / "users.json")
        assert json.loads((tmp_path / "nested" / "users.json").read_text()) == []

    def test_create_and_get(self, repos):
        users, _, _ = repos
        user_id = users.create(User(email="a@example.com", name="Ann"))
        assert user_id == 1
        loaded = users.get_by_id(1)
        assert loaded.name == "Ann"
        assert loaded.id == 1

    def test_get_missing(self, repos):
        users, _, _ = repos
        assert users.get_by_id(5) is None

    def test_save_updates_existing(self, repos):
        users, _, _ = repos
        users.create(User(email="a@example.com"))
        user = users.get_by_id(1)
        user.update_email("b@example.com")
        users.save(user)
        assert [u.email for u in users.get_all()] == ["b@example.com"]


class TestJsonOrderRepository:

    def test_amounts_stored_as_decimal_strings(self, repos, tmp_path):
        _, orders, _ = repos
        orders.create(Order(user_id=1, total=Decimal("19.99")))
        raw = json.loads((tmp_path / "orders.json").read_text())
        assert raw == [{"id": 1, "user_id": 1, "total": "19.99", "status": "NEW"}]

    def test_roundtrip_and_save(self, repos):
        _, orders, _ = repos
        order_id = orders.create(Order(user_id=1, total=30))
        order = orders.get_by_id(order_id)
        order.complete()
        orders.save(order)
        assert orders.get_by_id(order_id).status == OrderStatus.COMPLETED

    def test_get_by_user(self, repos):
        _, orders, _ = repos
        orders.create(Order(user_id=1, total=10))
        orders.create(Order(user_id=2, total=10))
        assert [o.id for o in orders.get_by_user(2)] == [2]

    def test_details_joins_user_name(self, repos):
        users, orders, _ = repos
        users.create(User(email="a@example.com", name="Ann"))
        order_id = orders.create(Order(user_id=1, total=30))
        header = orders.get_order_details(order_id)
        assert header.user == "Ann"
        assert header.total == Decimal("30")
        assert header.status == OrderStatus.NEW

    def test_details_without_user_row(self, repos):
        _, orders, _ = repos
        order_id = orders.create(Order(user_id=8, total=30))
        assert orders.get_order_details(order_id).user is None

    def test_details_missing_order(self, repos):
        _, orders, _ = repos
        assert orders.get_order_details(1) is None


class TestJsonOrderItemRepository:

    def test_add_and_get_items(self, repos):
        _, _, items = repos
        items.add_item(OrderItem(order_id=1, product_id=9, qty=2, price=Decimal("15")))
        items.add_item(OrderItem(order_id=2, product_id=4, qty=1, price=Decimal("3.50")))
        loaded = items.get_items(1)
        assert len(loaded) == 1
        assert loaded[0].product_id == 9
        assert loaded[0].price == Decimal("15")
        assert loaded[0].id == 1
