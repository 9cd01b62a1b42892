"""Application service: Update User Email use case."""

from __future__ import annotations

import structlog

from orderhub.application.dto import UserDTO
from orderhub.application.mapping import user_to_dto
from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.repository.user_repository import UserRepository

logger = structlog.stdlib.get_logger(__name__)


class UpdateUserEmailHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: int, new_email: str) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        user.update_email(new_email)
        self._user_repo.save(user)
        logger.info("user.email_updated", user_id=user_id)
        return user_to_dto(user)
