"""Pydantic request/response models for the HTTP API."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from orderhub.application.dto import (
    OrderDetailsDTO,
    OrderItemDTO,
    OrderSummaryDTO,
    UserDTO,
)


class CreateUserRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class UpdateEmailRequest(BaseModel):
    email: str


class UserResponse(BaseModel):
    id: int
    name: str | None
    email: str
    phone: str | None

    @classmethod
    def from_dto(cls, dto: UserDTO) -> UserResponse:
        return cls(id=dto.id, name=dto.name, email=dto.email, phone=dto.phone)


class CreatedResponse(BaseModel):
    id: int
    message: str


class OrderItemRequest(BaseModel):
    product_id: int
    qty: int
    price: Decimal


class CreateOrderRequest(BaseModel):
    user_id: int
    total: Decimal
    items: list[OrderItemRequest] = Field(default_factory=list)


class UpdateStatusRequest(BaseModel):
    status: str


class OrderItemResponse(BaseModel):
    id: int | None
    order_id: int
    product_id: int
    qty: int
    price: float

    @classmethod
    def from_dto(cls, dto: OrderItemDTO) -> OrderItemResponse:
        return cls(
            id=dto.id,
            order_id=dto.order_id,
            product_id=dto.product_id,
            qty=dto.qty,
            price=float(dto.price),
        )


class OrderSummaryResponse(BaseModel):
    id: int
    user_id: int
    total: float
    status: str

    @classmethod
    def from_dto(cls, dto: OrderSummaryDTO) -> OrderSummaryResponse:
        return cls(id=dto.id, user_id=dto.user_id, total=float(dto.total), status=dto.status)


class OrderDetailsResponse(BaseModel):
    """``GET /orders/{id}``: header fields merged with the item list."""

    model_config = ConfigDict(populate_by_name=True)

    order_id: int = Field(serialization_alias="orderId")
    user: str | None
    total: float
    status: str
    items: list[OrderItemResponse]

    @classmethod
    def from_dto(cls, dto: OrderDetailsDTO) -> OrderDetailsResponse:
        return cls(
            order_id=dto.order_id,
            user=dto.user,
            total=float(dto.total),
            status=dto.status,
            items=[OrderItemResponse.from_dto(item) for item in dto.items],
        )


class ErrorResponse(BaseModel):
    error: str
    kind: str | None = None
