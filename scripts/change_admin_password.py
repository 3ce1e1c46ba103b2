#!/usr/bin/env python3
"""
Rotate an admin password.

Usage:
    python scripts/change_admin_password.py [username]

The new password is read from the terminal without echo. All sessions
of that admin are revoked.
"""

import asyncio
import getpass
import sys

from loguru import logger

from vault.config.database import create_engine
from vault.config.settings import Settings
from vault.services.credential_store import CredentialStore
from vault.utils.exceptions import VaultError

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def change_password(username: str, new_password: str) -> int:
    """Update the password, returns a process exit code."""
    settings = Settings()
    engine = create_engine(settings)

    try:
        store = CredentialStore.from_settings(settings, engine=engine)
        await store.initialize()
        changed = await store.change_admin_password(username, new_password)
    except VaultError as e:
        logger.error(f"Password change failed: {e.public_message}")
        return 1
    finally:
        await engine.dispose()

    if not changed:
        logger.error(f"Admin '{username}' not found")
        return 1

    logger.success(f"Password for '{username}' changed")
    return 0


def main() -> int:
    username = sys.argv[1] if len(sys.argv) > 1 else Settings().admin_username
    new_password = getpass.getpass("New password: ")
    if new_password != getpass.getpass("Repeat password: "):
        logger.error("Passwords do not match")
        return 1
    return asyncio.run(change_password(username, new_password))


if __name__ == "__main__":
    sys.exit(main())
