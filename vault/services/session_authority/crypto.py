"""
Session Authority - Token generation.
"""

import secrets

from vault.config.constants import SESSION_TOKEN_BYTES


def generate_session_token() -> str:
    """
    Generate random session token.

    Returns:
        Hex-encoded token, 64 characters (256 bits)
    """
    return secrets.token_hex(SESSION_TOKEN_BYTES)
