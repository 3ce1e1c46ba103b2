"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from vault.models.account import Account
from vault.models.admin_session import AdminSession
from vault.models.admin_user import AdminUser
from vault.models.base import Base

__all__ = [
    "Base",
    "Account",
    "AdminUser",
    "AdminSession",
]
