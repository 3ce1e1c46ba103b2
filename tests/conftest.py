"""Pytest configuration and shared fixtures for all tests."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vault.config.database import create_engine  # noqa: E402
from vault.config.settings import Settings  # noqa: E402
from vault.services.credential_store import CredentialStore  # noqa: E402
from vault.services.session_authority import SessionAuthority  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at an isolated temp-file database."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'vault.db'}",
        admin_username="admin",
        bcrypt_rounds=4,
        storage_timeout_seconds=10,
        max_images_per_account=40,
        log_file=None,
    )


@pytest_asyncio.fixture
async def engine(settings):
    """Async engine, disposed after the test."""
    engine = create_engine(settings)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def store(settings, engine):
    """Initialized credential store."""
    store = CredentialStore.from_settings(settings, engine=engine)
    await store.initialize()
    return store


@pytest.fixture
def authority(store):
    """Session authority over the test store."""
    return SessionAuthority(store)


@pytest.fixture
def account_data():
    """Valid account creation arguments."""
    return {
        "account_id": 7,
        "email": "a@x.com",
        "google_secret": "s1",
        "moonton_secret": "s2",
        "secondary_secret": "s3",
        "image_refs": ["1700000000000-123.png", "1700000000001-456.jpg"],
    }
