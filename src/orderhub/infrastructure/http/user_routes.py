"""User endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from orderhub.infrastructure.http.dependencies import Context
from orderhub.infrastructure.http.schemas import (
    CreatedResponse,
    CreateUserRequest,
    ErrorResponse,
    OrderSummaryResponse,
    UpdateEmailRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_user(body: CreateUserRequest, ctx: Context) -> CreatedResponse:
    dto = ctx.create_user.handle(email=body.email, name=body.name, phone=body.phone)
    return CreatedResponse(id=dto.id, message="User Created")


@router.get("", response_model=list[UserResponse])
def list_users(ctx: Context) -> list[UserResponse]:
    return [UserResponse.from_dto(dto) for dto in ctx.list_users.handle()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_user(user_id: int, ctx: Context) -> UserResponse:
    return UserResponse.from_dto(ctx.show_user.handle(user_id))


@router.patch(
    "/{user_id}/email",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_user_email(user_id: int, body: UpdateEmailRequest, ctx: Context) -> UserResponse:
    return UserResponse.from_dto(ctx.update_user_email.handle(user_id, body.email))


@router.get("/{user_id}/orders", response_model=list[OrderSummaryResponse])
def list_user_orders(user_id: int, ctx: Context) -> list[OrderSummaryResponse]:
    return [OrderSummaryResponse.from_dto(dto) for dto in ctx.list_user_orders.handle(user_id)]
