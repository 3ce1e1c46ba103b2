"""Repositories package."""

from vault.repositories.account_repository import AccountRepository
from vault.repositories.admin_session_repository import AdminSessionRepository
from vault.repositories.admin_user_repository import AdminUserRepository
from vault.repositories.base import BaseRepository

__all__ = [
    "BaseRepository",
    "AccountRepository",
    "AdminUserRepository",
    "AdminSessionRepository",
]
