"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / HTTP adapters and the application
layer without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product, quantity, unit price)."""

    product_id: int
    qty: int
    price: Decimal


@dataclass(frozen=True)
class NewOrderSpec:
    """Input: an order header plus the lines to attach to it."""

    user_id: int
    total: Decimal
    items: list[OrderItemSpec] = field(default_factory=list)


@dataclass(frozen=True)
class UserDTO:
    id: int
    name: str | None
    email: str
    phone: str | None


@dataclass(frozen=True)
class OrderItemDTO:
    id: int | None
    order_id: int
    product_id: int
    qty: int
    price: Decimal


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: an order header without its items."""

    id: int
    user_id: int
    total: Decimal
    status: str


@dataclass(frozen=True)
class OrderDetailsDTO:
    """Output: an order header merged with owner name and line items."""

    order_id: int
    user: str | None
    total: Decimal
    status: str
    items: list[OrderItemDTO]
