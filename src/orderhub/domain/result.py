"""Explicit result types for operations that can be rejected.

``attempt()`` turns a raised ``ValidationError`` into an ``Err`` value so
callers can branch on the outcome instead of catching exceptions.  Only
validation failures are converted; anything else still propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from orderhub.domain.exceptions import ValidationError, ValidationErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ValidationErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise ValidationError(self.message, self.kind)


Result = Union[Ok[T], Err]


def attempt(fn: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Call *fn* and wrap its outcome in ``Ok`` or ``Err``."""
    try:
        return Ok(fn(*args, **kwargs))
    except ValidationError as exc:
        return Err(kind=exc.kind, message=str(exc))
