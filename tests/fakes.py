"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON and SQL
repositories but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from orderhub.domain.model.order import Order, OrderHeader, OrderItem
from orderhub.domain.model.user import User
from orderhub.domain.repository.order_item_repository import OrderItemRepository
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.domain.repository.user_repository import UserRepository


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[int, User] = {}
        self._next_id = 1
        for u in users or []:
            self.create(u)

    def create(self, user: User) -> int:
        user_id = self._next_id
        self._next_id += 1
        self._store[user_id] = User(
            id=user_id, name=user.name, email=user.email, phone=user.phone
        )
        return user_id

    def get_by_id(self, user_id: int) -> User | None:
        stored = self._store.get(user_id)
        if stored is None:
            return None
        return User(id=stored.id, name=stored.name, email=stored.email, phone=stored.phone)

    def get_all(self) -> list[User]:
        return [self.get_by_id(user_id) for user_id in self._store]  # type: ignore[misc]

    def save(self, user: User) -> None:
        self._store[user.id] = user  # type: ignore[index]


class FakeOrderRepository(OrderRepository):
    """Stores copies so tests observe only what was explicitly saved."""

    def __init__(self, user_repo: UserRepository | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._user_repo = user_repo

    def create(self, order: Order) -> int:
        order_id = self._next_id
        self._next_id += 1
        self._store[order_id] = self._copy(order, order_id)
        return order_id

    def get_by_id(self, order_id: int) -> Order | None:
        stored = self._store.get(order_id)
        return self._copy(stored, order_id) if stored is not None else None

    def get_by_user(self, user_id: int) -> list[Order]:
        return [
            self._copy(o, order_id)
            for order_id, o in self._store.items()
            if o.user_id == user_id
        ]

    def get_order_details(self, order_id: int) -> OrderHeader | None:
        stored = self._store.get(order_id)
        if stored is None:
            return None
        owner = self._user_repo.get_by_id(stored.user_id) if self._user_repo else None
        return OrderHeader(
            order_id=order_id,
            user_id=stored.user_id,  # type: ignore[arg-type]
            user=owner.name if owner is not None else None,
            total=stored.total,
            status=stored.status,
        )

    def save(self, order: Order) -> None:
        self._store[order.id] = self._copy(order, order.id)  # type: ignore[arg-type]

    @staticmethod
    def _copy(order: Order, order_id: int) -> Order:
        return Order(id=order_id, user_id=order.user_id, total=order.total, status=order.status)


class FakeOrderItemRepository(OrderItemRepository):

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.items: list[OrderItem] = []
        self._calls = 0
        self._fail_on_call = fail_on_call

    def add_item(self, item: OrderItem) -> None:
        self._calls += 1
        if self._fail_on_call == self._calls:
            raise ConnectionError("data store unavailable")
        item.id = len(self.items) + 1
        self.items.append(item)

    def get_items(self, order_id: int) -> list[OrderItem]:
        return [item for item in self.items if item.order_id == order_id]
