"""
Credential Store - Result types.

Plain values returned to callers; ORM rows never leave the store.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class AccountSummary:
    """Public view of an account. Carries no secret hashes."""

    id: int
    email: str
    images: list[str] = field(default_factory=list)
    created_at: datetime | None = None


@dataclass(frozen=True)
class SessionInfo:
    """An active admin session."""

    token: str
    admin_id: int
    expires_at: datetime
