"""
Session Authority - Main Package.

Issues, validates and revokes opaque admin session tokens.

Module Structure:
- crypto.py: Session token generation
- request.py: Token extraction from a request (cookie, then header)
- authority.py: SessionAuthority class

Public API:
- SessionAuthority: Login, validate, logout and request guard
- extract_session_token: Token extraction rule
"""

from .authority import SessionAuthority
from .crypto import generate_session_token
from .request import RequestLike, extract_session_token


__all__ = [
    "SessionAuthority",
    "RequestLike",
    "extract_session_token",
    "generate_session_token",
]
