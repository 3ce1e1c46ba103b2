"""
Session cleanup task.

Deletes expired admin sessions. Not needed for correctness, since every
read filters by expiry, it only keeps the sessions table small.
"""

from loguru import logger

from vault.services.session_authority import SessionAuthority


async def cleanup_expired_sessions(authority: SessionAuthority) -> dict:
    """
    Cleanup expired admin sessions.

    Args:
        authority: Session authority bound to the credential store

    Returns:
        Dict with cleaned_up count
    """
    logger.info("Starting admin session cleanup...")

    try:
        cleaned_up = await authority.purge_expired()
    except Exception as e:
        logger.exception(f"Admin session cleanup failed: {e}")
        return {"cleaned_up": 0}

    if cleaned_up > 0:
        logger.info(f"Cleaned up {cleaned_up} expired admin sessions")

    return {"cleaned_up": cleaned_up}
