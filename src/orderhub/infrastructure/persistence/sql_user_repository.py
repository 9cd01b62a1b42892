"""SQL implementation of UserRepository (SQLAlchemy Core)."""

from __future__ import annotations

from sqlalchemy import Engine, insert, select, update

from orderhub.domain.model.user import User
from orderhub.domain.repository.user_repository import UserRepository
from orderhub.infrastructure.persistence.sql_schema import users


class SqlUserRepository(UserRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, user: User) -> int:
        stmt = insert(users).values(name=user.name, email=user.email, phone=user.phone)
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
            return result.inserted_primary_key[0]

    def get_by_id(self, user_id: int) -> User | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).first()
        return self._to_domain(row) if row is not None else None

    def get_all(self) -> list[User]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(users).order_by(users.c.id)).all()
        return [self._to_domain(row) for row in rows]

    def save(self, user: User) -> None:
        stmt = (
            update(users)
            .where(users.c.id == user.id)
            .values(name=user.name, email=user.email, phone=user.phone)
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    @staticmethod
    def _to_domain(row) -> User:
        return User(id=row.id, name=row.name, email=row.email, phone=row.phone)
