"""
Initialization - Shutdown Module.

Handles graceful shutdown: stops the scheduler and closes database
connections.
"""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine


async def shutdown_handler(
    scheduler: AsyncIOScheduler | None, engine: AsyncEngine
) -> None:
    """Handle graceful shutdown."""
    logger.info("Graceful shutdown initiated...")

    if scheduler is not None and scheduler.running:
        try:
            scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")
        except Exception as e:
            logger.warning(f"Error stopping scheduler: {e}")

    try:
        await engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.warning(f"Error closing database: {e}")

    logger.info("Graceful shutdown complete")
