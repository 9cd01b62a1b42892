"""Application service: Show User / List Users use cases (queries)."""

from __future__ import annotations

from orderhub.application.dto import UserDTO
from orderhub.application.mapping import user_to_dto
from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.repository.user_repository import UserRepository


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: int) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user_to_dto(user)


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self) -> list[UserDTO]:
        return [user_to_dto(user) for user in self._user_repo.get_all()]
