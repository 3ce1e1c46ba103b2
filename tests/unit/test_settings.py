"""Unit tests for settings, result types and the entry point."""

import inspect
import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from vault.config.settings import Settings
from vault.main import main, run
from vault.services.results import ServiceResult
from vault.utils.exceptions import (
    ConflictError,
    ErrorCode,
    StorageError,
    ValidationError,
    is_transient,
)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.bcrypt_rounds == 10
        assert settings.max_images_per_account == 40
        assert settings.session_cleanup_interval_minutes == 60

    def test_admin_username_from_env(self, monkeypatch):
        monkeypatch.setenv("ADMIN_USERNAME", "operator")
        assert Settings(_env_file=None).admin_username == "operator"

    def test_blank_admin_username_falls_back(self):
        assert Settings(_env_file=None, admin_username="  ").admin_username == "admin"

    def test_sync_driver_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, database_url="sqlite:///accounts.db")

    def test_bcrypt_rounds_bounds(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, bcrypt_rounds=3)


class TestErrors:
    """Tests for error kinds and ServiceResult."""

    def test_public_messages_are_generic(self):
        assert StorageError().public_message == "Operation failed"
        assert str(StorageError(transient=True)) == "Operation failed"

    def test_validation_message_override(self):
        exc = ValidationError("Email is required")
        assert exc.public_message == "Email is required"
        assert exc.code is ErrorCode.VALIDATION

    def test_fail_result(self):
        result = ServiceResult.fail(ConflictError())
        assert result.success is False
        assert result.data is None
        assert result.error_code is ErrorCode.CONFLICT

    def test_ok_result(self):
        result = ServiceResult.ok(5)
        assert result.success is True
        assert result.data == 5
        assert result.error_code is None

    def test_transient_classification(self):
        assert is_transient(TimeoutError()) is True
        assert is_transient(ValueError()) is False


class TestEntryPoint:
    """The console script must target the synchronous wrapper."""

    def test_console_script_targets_run(self):
        pyproject = Path(__file__).parents[2] / "pyproject.toml"
        with pyproject.open("rb") as f:
            scripts = tomllib.load(f)["project"]["scripts"]

        assert scripts["account-vault"] == "vault.main:run"

    def test_run_wraps_main_coroutine(self):
        assert inspect.iscoroutinefunction(main)
        assert not inspect.iscoroutinefunction(run)
