#!/usr/bin/env python3
"""Initialize database tables and the default admin."""

import asyncio
import sys

from loguru import logger

from vault.config.database import create_engine
from vault.config.settings import Settings
from vault.services.credential_store import CredentialStore

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def init_database() -> None:
    """Create all tables and seed the default admin if missing."""
    settings = Settings()
    engine = create_engine(settings)

    try:
        store = CredentialStore.from_settings(settings, engine=engine)
        await store.initialize()
    finally:
        await engine.dispose()

    logger.success("Database initialized successfully!")


if __name__ == "__main__":
    asyncio.run(init_database())
