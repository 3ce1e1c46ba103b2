"""
Credential Store - Cryptographic Utilities.

bcrypt hashing and verification for every stored secret. The async
variants run bcrypt in a worker thread so the event loop stays free.
"""

import asyncio

import bcrypt


def hash_secret(plain: str, rounds: int) -> str:
    """
    Hash secret using bcrypt with a fresh salt.

    Args:
        plain: Plain secret
        rounds: bcrypt cost factor

    Returns:
        Hashed secret
    """
    return bcrypt.hashpw(
        plain.encode("utf-8"), bcrypt.gensalt(rounds=rounds)
    ).decode("utf-8")


def verify_secret(plain: str, hashed: str) -> bool:
    """
    Verify secret against hash in constant time.

    Args:
        plain: Plain secret
        hashed: Stored bcrypt hash

    Returns:
        True if match
    """
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash or secret over bcrypt's 72-byte limit
        return False


async def hash_secret_async(plain: str, rounds: int) -> str:
    """Hash secret off the event loop."""
    return await asyncio.to_thread(hash_secret, plain, rounds)


async def verify_secret_async(plain: str, hashed: str) -> bool:
    """Verify secret off the event loop."""
    return await asyncio.to_thread(verify_secret, plain, hashed)
