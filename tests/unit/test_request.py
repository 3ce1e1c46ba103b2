"""Unit tests for session token extraction and the request guard."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from vault.services.session_authority import SessionAuthority, extract_session_token
from vault.utils.exceptions import ErrorCode, StorageError


def make_request(cookies=None, headers=None):
    return SimpleNamespace(cookies=cookies or {}, headers=headers or {})


class TestExtractSessionToken:
    """Tests for extract_session_token."""

    def test_cookie(self):
        assert extract_session_token(make_request(cookies={"sessionId": "abc"})) == "abc"

    def test_header(self):
        request = make_request(headers={"x-session-id": "def"})
        assert extract_session_token(request) == "def"

    def test_header_case_insensitive(self):
        request = make_request(headers={"X-Session-Id": "def"})
        assert extract_session_token(request) == "def"

    def test_cookie_wins_over_header(self):
        request = make_request(
            cookies={"sessionId": "abc"}, headers={"x-session-id": "def"}
        )
        assert extract_session_token(request) == "abc"

    def test_missing(self):
        assert extract_session_token(make_request()) is None
        assert extract_session_token(SimpleNamespace()) is None

    def test_blank_values(self):
        request = make_request(cookies={"sessionId": "  "})
        assert extract_session_token(request) is None


class TestSessionAuthorityShortCircuit:
    """Validation must not touch the store for empty tokens."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_empty_token_skips_store(self, token):
        store = AsyncMock()
        authority = SessionAuthority(store)

        assert await authority.validate(token) is False
        store.get_valid_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_require_authenticated_without_token(self):
        store = AsyncMock()
        authority = SessionAuthority(store)

        assert await authority.require_authenticated(make_request()) is False
        store.get_valid_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_logout_without_token_is_noop(self):
        store = AsyncMock()
        authority = SessionAuthority(store)

        await authority.logout(None)
        store.delete_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_login_creates_no_session(self):
        store = AsyncMock()
        store.authenticate_admin.return_value = None
        authority = SessionAuthority(store)

        assert await authority.login("admin", "wrong") is None
        store.create_session.assert_not_called()


class TestAuthorize:
    """Tests for the structured request authorization result."""

    @pytest.mark.asyncio
    async def test_missing_token_fails_with_authentication_code(self):
        store = AsyncMock()
        authority = SessionAuthority(store)

        result = await authority.authorize(make_request())

        assert result.success is False
        assert result.error_code is ErrorCode.AUTHENTICATION
        assert result.error == "Authentication required"
        store.get_valid_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_token_fails_the_same_way(self):
        store = AsyncMock()
        store.get_valid_session.return_value = None
        authority = SessionAuthority(store)

        result = await authority.authorize(make_request(cookies={"sessionId": "abc"}))

        assert result.error_code is ErrorCode.AUTHENTICATION
        assert result.error == "Authentication required"
        store.get_valid_session.assert_awaited_once_with("abc")

    @pytest.mark.asyncio
    async def test_storage_error_propagates(self):
        store = AsyncMock()
        store.get_valid_session.side_effect = StorageError(transient=True)
        authority = SessionAuthority(store)

        with pytest.raises(StorageError):
            await authority.require_authenticated(
                make_request(headers={"x-session-id": "abc"})
            )
