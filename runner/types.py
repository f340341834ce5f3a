from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Created:
    """A coaster created during the smoke run, with the payload that was sent."""

    coaster_id: str
    payload: dict[str, Any]


@dataclass
class AdminCheck:
    """Status codes observed on /admin with wrong and correct credentials."""

    wrong_status: int
    right_status: int
    right_body: str = ""


@dataclass
class SmokeResult:
    created: list[Created] = field(default_factory=list)
    listed_ids: set[str] = field(default_factory=set)
    mismatched: list[str] = field(default_factory=list)
    random_ids: list[str] = field(default_factory=list)
    admin: AdminCheck | None = None


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., health never ready)."""


class CreateCoasterError(SmokeError):
    """Raised when creating a coaster fails after retries."""


class FetchError(SmokeError):
    """Raised when listing, fetching or redirecting fails repeatedly."""
