"""Tests for the expired session sweep job and its scheduler."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from jobs.scheduler import SESSION_CLEANUP_JOB_ID, create_scheduler
from jobs.tasks.session_cleanup import cleanup_expired_sessions
from vault.utils.datetime_utils import utc_now
from vault.utils.exceptions import StorageError


@pytest.mark.asyncio
async def test_cleanup_removes_expired(authority, store):
    admin_id = await store.authenticate_admin("admin", "ChangeThisPassword123!")
    await store.create_session("1" * 64, admin_id, utc_now() - timedelta(hours=2))
    await store.create_session("2" * 64, admin_id, utc_now() + timedelta(hours=2))

    result = await cleanup_expired_sessions(authority)

    assert result == {"cleaned_up": 1}
    assert await authority.validate("2" * 64) is True


@pytest.mark.asyncio
async def test_cleanup_nothing_to_do(authority):
    assert await cleanup_expired_sessions(authority) == {"cleaned_up": 0}


@pytest.mark.asyncio
async def test_cleanup_survives_storage_error():
    authority = MagicMock()
    authority.purge_expired = AsyncMock(side_effect=StorageError(transient=True))

    result = await cleanup_expired_sessions(authority)

    assert result == {"cleaned_up": 0}
    authority.purge_expired.assert_awaited_once()


def test_scheduler_registers_cleanup_job():
    authority = MagicMock()

    scheduler = create_scheduler(authority, interval_minutes=15)

    job = scheduler.get_job(SESSION_CLEANUP_JOB_ID)
    assert job is not None
    assert job.func is cleanup_expired_sessions
    assert job.args == (authority,)
    assert job.trigger.interval == timedelta(minutes=15)
    assert job.max_instances == 1
    assert job.coalesce is True
    assert scheduler.running is False
