"""Application service: Create User use case."""

from __future__ import annotations

import structlog

from orderhub.application.dto import UserDTO
from orderhub.application.mapping import user_to_dto
from orderhub.domain.model.user import User
from orderhub.domain.repository.user_repository import UserRepository

logger = structlog.stdlib.get_logger(__name__)


class CreateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        email: str | None,
        name: str | None = None,
        phone: str | None = None,
    ) -> UserDTO:
        """Register a user.

        The email format is checked before anything is written, so a
        malformed address never reaches the store.
        """
        user = User(email=email, name=name, phone=phone)
        user.validate()

        user.id = self._user_repo.create(user)
        logger.info("user.created", user_id=user.id)
        return user_to_dto(user)
