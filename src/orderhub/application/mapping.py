"""Domain -> DTO conversions shared by several handlers."""

from __future__ import annotations

from orderhub.application.dto import OrderItemDTO, OrderSummaryDTO, UserDTO
from orderhub.domain.model.order import Order, OrderItem
from orderhub.domain.model.user import User


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(id=user.id, name=user.name, email=user.email, phone=user.phone)  # type: ignore[arg-type]


def order_to_summary(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,  # type: ignore[arg-type]
        total=order.total,
        status=order.status.value,
    )


def item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        id=item.id,
        order_id=item.order_id,  # type: ignore[arg-type]
        product_id=item.product_id,
        qty=item.qty,
        price=item.price,
    )
