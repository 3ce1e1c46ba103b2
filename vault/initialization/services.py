"""
Initialization - Services Module.

Builds the store and authority handles the request layer consumes.
"""

from dataclasses import dataclass

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine

from vault.config.database import create_engine
from vault.config.settings import Settings
from vault.services.credential_store import CredentialStore
from vault.services.session_authority import SessionAuthority


@dataclass
class Services:
    """Handles owned by the process entry point."""

    settings: Settings
    engine: AsyncEngine
    store: CredentialStore
    authority: SessionAuthority


async def initialize_services(settings: Settings) -> Services:
    """
    Create engine, credential store and session authority.

    Runs the idempotent store initialization (tables, default admin).

    Args:
        settings: Application settings

    Returns:
        Initialized services
    """
    engine = create_engine(settings)
    store = CredentialStore.from_settings(settings, engine=engine)

    try:
        await store.initialize()
    except Exception:
        await engine.dispose()
        raise

    authority = SessionAuthority(store)
    logger.info("Credential store and session authority ready")

    return Services(
        settings=settings,
        engine=engine,
        store=store,
        authority=authority,
    )
