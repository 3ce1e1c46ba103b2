"""
Job scheduler.

Runs periodic maintenance jobs on the application's event loop.
"""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from jobs.tasks.session_cleanup import cleanup_expired_sessions
from vault.services.session_authority import SessionAuthority

SESSION_CLEANUP_JOB_ID = "admin_session_cleanup"


def create_scheduler(
    authority: SessionAuthority, interval_minutes: int
) -> AsyncIOScheduler:
    """
    Create scheduler with the session sweep registered.

    The scheduler is returned stopped; the caller starts it from inside
    the running event loop and shuts it down on exit.

    Args:
        authority: Session authority used by the sweep
        interval_minutes: Minutes between sweeps

    Returns:
        Configured AsyncIOScheduler
    """
    scheduler = AsyncIOScheduler(timezone="UTC")
    scheduler.add_job(
        cleanup_expired_sessions,
        "interval",
        minutes=interval_minutes,
        args=[authority],
        id=SESSION_CLEANUP_JOB_ID,
        name="Expired admin session cleanup",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    logger.info(
        f"Scheduler configured: session cleanup every {interval_minutes} min"
    )
    return scheduler
