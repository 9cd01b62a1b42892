"""Order endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from orderhub.application.dto import NewOrderSpec, OrderItemSpec, OrderSummaryDTO
from orderhub.domain.result import Err, Result
from orderhub.infrastructure.http.dependencies import Context
from orderhub.infrastructure.http.schemas import (
    CreatedResponse,
    CreateOrderRequest,
    ErrorResponse,
    OrderDetailsResponse,
    OrderSummaryResponse,
    UpdateStatusRequest,
)

router = APIRouter(prefix="/orders", tags=["orders"])

_STATUS_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def _status_response(outcome: Result[OrderSummaryDTO]):
    if isinstance(outcome, Err):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": outcome.message, "kind": outcome.kind.value},
        )
    return OrderSummaryResponse.from_dto(outcome.value)


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_order(body: CreateOrderRequest, ctx: Context) -> CreatedResponse:
    spec = NewOrderSpec(
        user_id=body.user_id,
        total=body.total,
        items=[
            OrderItemSpec(product_id=item.product_id, qty=item.qty, price=item.price)
            for item in body.items
        ],
    )
    order_id = ctx.create_order.handle(spec)
    return CreatedResponse(id=order_id, message="Order Created")


@router.get(
    "/{order_id}",
    response_model=OrderDetailsResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_order(order_id: int, ctx: Context) -> OrderDetailsResponse:
    return OrderDetailsResponse.from_dto(ctx.show_order.handle(order_id))


@router.patch("/{order_id}/status", response_model=OrderSummaryResponse, responses=_STATUS_RESPONSES)
def update_order_status(order_id: int, body: UpdateStatusRequest, ctx: Context):
    return _status_response(ctx.order_status.update_status(order_id, body.status))


@router.post("/{order_id}/cancel", response_model=OrderSummaryResponse, responses=_STATUS_RESPONSES)
def cancel_order(order_id: int, ctx: Context):
    return _status_response(ctx.order_status.cancel(order_id))


@router.post("/{order_id}/complete", response_model=OrderSummaryResponse, responses=_STATUS_RESPONSES)
def complete_order(order_id: int, ctx: Context):
    return _status_response(ctx.order_status.complete(order_id))
