"""
Security helpers for logging.
"""


def mask_token(token: str | None) -> str:
    """
    Shorten a session token for log output.

    Args:
        token: Session token

    Returns:
        First 8 characters followed by an ellipsis
    """
    if not token:
        return "<empty>"
    return f"{token[:8]}..."
