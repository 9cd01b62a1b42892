"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from orderhub.domain.model.user import User
from orderhub.domain.repository.user_repository import UserRepository
from orderhub.infrastructure.persistence.json_store import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- UserRepository interface ---------------------------------------------

    def create(self, user: User) -> int:
        records = self._file.load()
        user_id = JsonFile.next_id(records)
        records.append(self._to_raw(user, user_id))
        self._file.persist(records)
        return user_id

    def get_by_id(self, user_id: int) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, user: User) -> None:
        records = self._file.load()
        JsonFile.replace(records, self._to_raw(user, user.id))  # type: ignore[arg-type]
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User, user_id: int) -> dict:
        return {
            "id": user_id,
            "name": user.name,
            "email": user.email,
            "phone": user.phone,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw.get("name"),
            email=raw["email"],
            phone=raw.get("phone"),
        )
