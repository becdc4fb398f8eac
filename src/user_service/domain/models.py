"""
Domain models — immutable records for the update-user flow.

Requests travel the railway as plain mappings ({"name": ..., "email": ...})
so every step can hand the same value on to the next one. Once a request
has passed validation, the repository stores it as a UserRecord.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

UserRequest = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class UserRecord:
    """A stored user, keyed by email."""

    email: str
    name: str
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @staticmethod
    def from_request(request: UserRequest) -> UserRecord:
        """Build a record from a validated request. Raises KeyError on missing fields."""
        return UserRecord(email=request["email"].strip(), name=request["name"].strip())

    def to_dict(self) -> dict[str, str]:
        return {
            "email": self.email,
            "name": self.name,
            "updated_at": self.updated_at.isoformat(),
        }
