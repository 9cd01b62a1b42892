"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderhub.domain.model.order import Order, OrderHeader


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> int:
        """Persist a new order header and return its generated ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_user(self, user_id: int) -> list[Order]:
        """Return every order placed by a user."""

    @abstractmethod
    def get_order_details(self, order_id: int) -> OrderHeader | None:
        """Return the order joined with its owner's name, or None.

        A missing user row does not hide the order; ``user`` is None then.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist changes to an existing order."""
