"""Failure values returned by the weather client instead of raising.

Every provider problem is reported as one of four kinds so callers can tell
an unknown place from a dead network or a malformed payload, even when the
UI shows a single generic message.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class TransportFailure:
    """DNS, connect or timeout error before any response arrived."""

    kind: ClassVar[str] = "transport"
    detail: str = ""

    @property
    def message(self) -> str:
        return f"Could not reach the weather provider: {self.detail}" if self.detail else "Could not reach the weather provider."

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message, **asdict(self)}


@dataclass(frozen=True)
class HttpFailure:
    kind: ClassVar[str] = "http"
    status: int

    @property
    def message(self) -> str:
        return f"Weather provider responded with HTTP {self.status}."

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message, **asdict(self)}


@dataclass(frozen=True)
class ParseFailure:
    """Response body did not match the expected shape."""

    kind: ClassVar[str] = "parse"
    detail: str = ""

    @property
    def message(self) -> str:
        return f"Unexpected weather provider payload: {self.detail}" if self.detail else "Unexpected weather provider payload."

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message, **asdict(self)}


@dataclass(frozen=True)
class InvalidLocation:
    kind: ClassVar[str] = "invalid_location"
    code: int | None = None
    detail: str = ""

    @property
    def message(self) -> str:
        return self.detail or "No matching location found."

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message, **asdict(self)}


Failure = Union[TransportFailure, HttpFailure, ParseFailure, InvalidLocation]
FAILURE_TYPES = (TransportFailure, HttpFailure, ParseFailure, InvalidLocation)


def is_failure(value: object) -> bool:
    return isinstance(value, FAILURE_TYPES)
