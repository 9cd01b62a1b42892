"""Order aggregate and its status lifecycle.

An order moves NEW -> PROCESSING -> COMPLETED, or to CANCELLED from any
non-terminal status.  COMPLETED and CANCELLED are terminal: once there,
the only accepted write is re-asserting the same status, so clients can
retry a completed/cancelled request without getting an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from orderhub.domain.exceptions import ValidationError, ValidationErrorKind


class OrderStatus(Enum):
    NEW = "NEW"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: OrderStatus | str) -> OrderStatus:
        """Coerce a status name to the enum, rejecting unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid status. Must be one of: {allowed}",
                ValidationErrorKind.INVALID_STATUS,
            ) from None


def _to_amount(value) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError("Total must be positive", ValidationErrorKind.INVALID_TOTAL)
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(
            f"Invalid total: {value!r}", ValidationErrorKind.INVALID_TOTAL
        ) from None
    if not amount.is_finite():
        raise ValidationError(f"Invalid total: {value!r}", ValidationErrorKind.INVALID_TOTAL)
    return amount


@dataclass
class OrderItem:
    """A line of an order.  Pure data: only presence is required."""

    order_id: int | None
    product_id: int
    qty: int
    price: Decimal
    id: int | None = None

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "order_id": self.order_id,
            "product_id": self.product_id,
            "qty": self.qty,
            "price": self.price,
        }


@dataclass(frozen=True)
class OrderHeader:
    """An order joined with the name of the user who placed it."""

    order_id: int
    user_id: int
    user: str | None
    total: Decimal
    status: OrderStatus


class Order:
    """Aggregate root for orders.

    ``id`` is assigned by the repository on first persist.  Construction
    rejects a non-positive total; ``validate()`` re-checks every field
    and may be called at any time.
    """

    def __init__(
        self,
        user_id: int | None,
        total,
        status: OrderStatus | str | None = None,
        id: int | None = None,
    ) -> None:
        amount = _to_amount(total)
        if amount <= 0:
            raise ValidationError("Total must be positive", ValidationErrorKind.INVALID_TOTAL)

        self.id = id
        self.user_id = user_id
        self.total = amount
        self.status = OrderStatus.parse(status) if status is not None else OrderStatus.NEW

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id!r}, user_id={self.user_id!r}, "
            f"total={self.total!r}, status={self.status.value})"
        )

    # --- Invariants -----------------------------------------------------------

    def validate(self) -> bool:
        if not self.user_id:
            raise ValidationError("User ID is required", ValidationErrorKind.REQUIRED_FIELD)

        if _to_amount(self.total) <= 0:
            raise ValidationError("Total must be positive", ValidationErrorKind.INVALID_TOTAL)

        if not isinstance(self.status, OrderStatus):
            OrderStatus.parse(self.status)

        return True

    # --- State transitions ----------------------------------------------------

    def update_status(self, new_status: OrderStatus | str) -> None:
        """Move to *new_status*.

        From NEW or PROCESSING any status is accepted.  From a terminal
        status only the same status is accepted.
        """
        target = OrderStatus.parse(new_status)

        if self.status == OrderStatus.CANCELLED and target != OrderStatus.CANCELLED:
            raise ValidationError(
                "Cannot update a cancelled order", ValidationErrorKind.INVALID_TRANSITION
            )
        if self.status == OrderStatus.COMPLETED and target != OrderStatus.COMPLETED:
            raise ValidationError(
                "Cannot update a completed order", ValidationErrorKind.INVALID_TRANSITION
            )

        self.status = target

    def cancel(self) -> None:
        if self.status == OrderStatus.COMPLETED:
            raise ValidationError(
                "Cannot cancel a completed order", ValidationErrorKind.INVALID_TRANSITION
            )
        self.status = OrderStatus.CANCELLED

    def complete(self) -> None:
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError(
                "Cannot complete a cancelled order", ValidationErrorKind.INVALID_TRANSITION
            )
        self.status = OrderStatus.COMPLETED

    # --- Predicates -----------------------------------------------------------

    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    # --- Serialization --------------------------------------------------------

    def serialize(self) -> dict:
        return {
            "userId": self.user_id,
            "total": self.total,
            "status": self.status.value,
        }
