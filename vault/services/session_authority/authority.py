"""
Session Authority - Main Class.

Issues, validates and revokes admin session tokens. All state lives in
the credential store; the authority holds none of its own.
"""

from datetime import timedelta

from loguru import logger

from vault.config.constants import SESSION_DURATION_HOURS
from vault.services.credential_store import CredentialStore, SessionInfo
from vault.services.results import ServiceResult
from vault.utils.datetime_utils import utc_now
from vault.utils.exceptions import AuthenticationError
from vault.utils.security import mask_token

from .crypto import generate_session_token
from .request import RequestLike, extract_session_token


class SessionAuthority:
    """
    Gate between unauthenticated requests and account operations.

    Session lifecycle: absent -> active (login) -> absent (logout,
    expiry or sweep). Expiry is fixed at creation, never extended.
    """

    session_duration = timedelta(hours=SESSION_DURATION_HOURS)

    def __init__(self, store: CredentialStore) -> None:
        """
        Initialize session authority.

        Args:
            store: Credential store holding sessions and admins
        """
        self.store = store

    async def login(
        self, username: str | None, password: str | None
    ) -> SessionInfo | None:
        """
        Authenticate admin and create session.

        Args:
            username: Admin username
            password: Plain password

        Returns:
            SessionInfo with token and expiry, or None on bad credentials
        """
        admin_id = await self.store.authenticate_admin(username, password)
        if admin_id is None:
            logger.warning("Admin login failed")
            return None

        token = generate_session_token()
        expires_at = utc_now() + self.session_duration
        session = await self.store.create_session(token, admin_id, expires_at)

        logger.info(
            "Admin logged in",
            extra={"admin_id": admin_id, "session": mask_token(token)},
        )
        return session

    async def validate(self, token: str | None) -> bool:
        """
        Check that token belongs to an unexpired session.

        Empty tokens are rejected without a store lookup.
        """
        if not token:
            return False
        return await self.store.get_valid_session(token) is not None

    async def logout(self, token: str | None) -> None:
        """Delete the session if present. Always succeeds."""
        if not token:
            return
        await self.store.delete_session(token)
        logger.info("Admin logged out", extra={"session": mask_token(token)})

    async def authorize(self, request: RequestLike) -> ServiceResult[SessionInfo]:
        """
        Resolve the session of an incoming request.

        Extracts the token from the ``sessionId`` cookie or the
        ``x-session-id`` header and looks it up. A missing, unknown or
        expired token all fail the same way.

        Args:
            request: Incoming request

        Returns:
            ServiceResult with the active SessionInfo, or a failure with
            error_code AUTHENTICATION

        Raises:
            StorageError: On persistence failure
        """
        token = extract_session_token(request)
        session = await self.store.get_valid_session(token) if token else None
        if session is None:
            logger.debug(
                "Unauthorized request", extra={"session": mask_token(token)}
            )
            return ServiceResult.fail(AuthenticationError())
        return ServiceResult.ok(session)

    async def require_authenticated(self, request: RequestLike) -> bool:
        """
        Guard for the request layer.

        Turning False into a 401 or a login redirect is the caller's job.

        Args:
            request: Incoming request

        Returns:
            True if the request is authorized
        """
        return (await self.authorize(request)).success

    async def purge_expired(self) -> int:
        """Sweep expired sessions from the store."""
        return await self.store.purge_expired_sessions()
