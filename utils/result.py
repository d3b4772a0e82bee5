"""
Tagged results returned by every service call.

Services return ``Success`` or ``Failure`` instead of raising; the routers
translate a ``Failure`` into an HTTP status code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    AUTH = "auth"
    INTERNAL = "internal"


# Every client error is answered with 400.
STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 400,
    ErrorKind.AUTH: 400,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    details: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


Result = Union[Success[Any], Failure]
