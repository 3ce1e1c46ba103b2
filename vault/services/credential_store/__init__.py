"""
Credential Store - Main Package.

Durable storage for accounts, admin principals and sessions.

Module Structure:
- crypto.py: bcrypt hashing and constant-time verification
- schemas.py: Values returned to callers (AccountSummary, SessionInfo)
- store.py: CredentialStore class with all persistence operations

Public API:
- CredentialStore: Store handle, constructed by the process entry point
- AccountSummary, SessionInfo: Result types
"""

from .schemas import AccountSummary, SessionInfo
from .store import CredentialStore


__all__ = [
    "CredentialStore",
    "AccountSummary",
    "SessionInfo",
]
