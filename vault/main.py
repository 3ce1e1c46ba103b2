"""
Process entry point.

Initializes logging, the credential store, the session authority and the
session sweep, then runs until interrupted. The request layer is mounted
by the embedding application using the handles from initialize_services.
"""

import asyncio

from loguru import logger

from jobs.scheduler import create_scheduler
from jobs.tasks.session_cleanup import cleanup_expired_sessions
from vault.config.settings import Settings
from vault.initialization.logging import setup_logging
from vault.initialization.services import initialize_services
from vault.initialization.shutdown import shutdown_handler


async def main(settings: Settings | None = None) -> None:
    """Initialize services and run the scheduler until cancelled."""
    settings = settings or Settings()
    setup_logging(settings)

    services = await initialize_services(settings)

    scheduler = create_scheduler(
        services.authority, settings.session_cleanup_interval_minutes
    )
    scheduler.start()

    try:
        # Sweep once at startup, then on the interval
        await cleanup_expired_sessions(services.authority)
        await asyncio.Event().wait()
    finally:
        await shutdown_handler(scheduler, services.engine)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
