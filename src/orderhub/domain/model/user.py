"""User aggregate."""

from __future__ import annotations

import re

from orderhub.domain.exceptions import ValidationError, ValidationErrorKind

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class User:
    """A registered user.

    ``email`` is mandatory at construction; its format is checked by
    ``validate()``, which ``update_email()`` always re-runs.
    """

    def __init__(
        self,
        email: str | None,
        name: str | None = None,
        phone: str | None = None,
        id: int | None = None,
    ) -> None:
        if not email:
            raise ValidationError("Email required", ValidationErrorKind.REQUIRED_FIELD)

        self.id = id
        self.name = name
        self.email = email
        self.phone = phone

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"

    def validate(self) -> bool:
        if not self.email:
            raise ValidationError("Email is required", ValidationErrorKind.REQUIRED_FIELD)

        if not EMAIL_PATTERN.match(self.email):
            raise ValidationError("Invalid email format", ValidationErrorKind.INVALID_EMAIL)

        return True

    def update_email(self, new_email: str) -> None:
        """Replace the email, keeping the old one if the new one is rejected."""
        if not new_email:
            raise ValidationError("Email cannot be empty", ValidationErrorKind.REQUIRED_FIELD)

        previous = self.email
        self.email = new_email
        try:
            self.validate()
        except ValidationError:
            self.email = previous
            raise

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }
