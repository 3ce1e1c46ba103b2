"""
Credential Store - Main Store Class.

Durable storage for accounts, admin principals and sessions. Every
secret is kept only as a bcrypt hash. Each operation runs in its own
short transaction under a bounded timeout; hashing happens before the
transaction is opened.
"""

import asyncio
import secrets
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from vault.config.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME
from vault.config.database import create_engine, create_session_maker
from vault.config.settings import Settings
from vault.models import Account, AdminSession, Base
from vault.repositories import (
    AccountRepository,
    AdminSessionRepository,
    AdminUserRepository,
)
from vault.services.results import ServiceResult
from vault.utils.datetime_utils import as_utc, utc_now
from vault.utils.exceptions import (
    ConflictError,
    StorageError,
    ValidationError,
    is_transient,
)
from vault.utils.security import mask_token
from vault.validators import (
    normalize_email,
    validate_account_id,
    validate_image_refs,
    validate_secret,
)

from .crypto import hash_secret_async, verify_secret_async
from .schemas import AccountSummary, SessionInfo


class CredentialStore:
    """
    Credential store for accounts, admin principals and sessions.

    The store is the only writer of the three tables. Uniqueness of
    account id and email is enforced by the database constraints; the
    insert is the single source of truth, never a prior lookup.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        admin_username: str = DEFAULT_ADMIN_USERNAME,
        bcrypt_rounds: int = 10,
        storage_timeout: float = 10.0,
        max_images: int = 40,
    ) -> None:
        """
        Initialize credential store.

        Args:
            engine: Async database engine (owned by the caller)
            admin_username: Username of the seeded default admin
            bcrypt_rounds: bcrypt cost factor
            storage_timeout: Seconds allowed for a single operation
            max_images: Maximum image references per account
        """
        self.engine = engine
        self.session_maker = create_session_maker(engine)
        self.admin_username = admin_username
        self.bcrypt_rounds = bcrypt_rounds
        self.storage_timeout = storage_timeout
        self.max_images = max_images
        self._dummy_hash: str | None = None

    @classmethod
    def from_settings(
        cls, settings: Settings, engine: AsyncEngine | None = None
    ) -> "CredentialStore":
        """
        Build a store from application settings.

        Args:
            settings: Application settings
            engine: Existing engine, created from settings if omitted

        Returns:
            Configured credential store
        """
        return cls(
            engine or create_engine(settings),
            admin_username=settings.admin_username,
            bcrypt_rounds=settings.bcrypt_rounds,
            storage_timeout=settings.storage_timeout_seconds,
            max_images=settings.max_images_per_account,
        )

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        Open a session with a transaction bounded by the storage timeout.

        IntegrityError is re-raised untouched for the caller to classify.
        Other driver errors and timeouts become StorageError; the raw
        detail is logged, never returned.
        """
        try:
            async with asyncio.timeout(self.storage_timeout):
                async with self.session_maker() as session:
                    async with session.begin():
                        yield session
        except IntegrityError:
            raise
        except (SQLAlchemyError, TimeoutError) as e:
            transient = is_transient(e)
            logger.error(
                f"Credential store operation '{operation}' failed: "
                f"{type(e).__name__}: {e}",
                extra={"operation": operation, "transient": transient},
            )
            raise StorageError(transient=transient) from e

    # =========================================================================
    # Schema and seeding
    # =========================================================================

    async def initialize(self) -> None:
        """
        Create tables and seed the default admin if none exists.

        Also builds the throwaway hash checked for unknown usernames, so
        no login attempt pays for a hash.

        Safe to call on every start and concurrently with another
        initializer: a uniqueness violation while seeding means the
        admin already exists.

        Raises:
            StorageError: If the database is unreachable
        """
        try:
            async with asyncio.timeout(self.storage_timeout):
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        except (SQLAlchemyError, TimeoutError) as e:
            logger.error(f"Failed to create tables: {type(e).__name__}: {e}")
            raise StorageError(transient=is_transient(e)) from e

        await self._get_dummy_hash()

        async with self._transaction("initialize") as session:
            admin_count = await AdminUserRepository(session).count()

        if admin_count:
            logger.debug("Admin principal present, skipping seed")
            return

        password_hash = await hash_secret_async(
            DEFAULT_ADMIN_PASSWORD, self.bcrypt_rounds
        )

        try:
            async with self._transaction("initialize") as session:
                await AdminUserRepository(session).create(
                    username=self.admin_username,
                    password_hash=password_hash,
                )
        except IntegrityError:
            logger.info(
                "Default admin was seeded concurrently",
                extra={"username": self.admin_username},
            )
            return

        logger.warning(
            f"Default admin user '{self.admin_username}' created with the "
            f"placeholder password. Change password immediately!"
        )

    # =========================================================================
    # Accounts
    # =========================================================================

    async def account_id_exists(self, account_id: Any) -> bool:
        """
        Check whether an account id is taken.

        Advisory only: a concurrent create can take the id right after
        this returns False. create_account is the authority.

        Raises:
            ValidationError: If account_id is not a positive integer
            StorageError: On persistence failure
        """
        parsed_id = self._parse_account_id(account_id)
        async with self._transaction("account_id_exists") as session:
            return await AccountRepository(session).id_exists(parsed_id)

    async def create_account(
        self,
        account_id: Any,
        email: Any,
        google_secret: Any,
        moonton_secret: Any,
        secondary_secret: Any,
        image_refs: Iterable[str] | None = None,
    ) -> ServiceResult[AccountSummary]:
        """
        Create account with three independently hashed secrets.

        Args:
            account_id: Caller-supplied positive id
            email: Email address, unique across accounts
            google_secret: Plain Google secret
            moonton_secret: Plain Moonton secret
            secondary_secret: Plain secondary secret
            image_refs: Filenames already stored by the blob store

        Returns:
            ServiceResult with the created AccountSummary, or a failure
            with error_code VALIDATION, CONFLICT or STORAGE
        """
        try:
            parsed_id = self._parse_account_id(account_id)
            normalized_email = self._parse_email(email)
            for label, secret in (
                ("Google password", google_secret),
                ("Moonton password", moonton_secret),
                ("Secondary password", secondary_secret),
            ):
                is_valid, error = validate_secret(secret, label)
                if not is_valid:
                    raise ValidationError(error)
            is_valid, images, error = validate_image_refs(
                image_refs, self.max_images
            )
            if not is_valid:
                raise ValidationError(error)
        except ValidationError as exc:
            logger.info(
                f"Account rejected: {exc.public_message}",
                extra={"account_id": account_id},
            )
            return ServiceResult.fail(exc)

        google_hash, moonton_hash, secondary_hash = await asyncio.gather(
            hash_secret_async(google_secret, self.bcrypt_rounds),
            hash_secret_async(moonton_secret, self.bcrypt_rounds),
            hash_secret_async(secondary_secret, self.bcrypt_rounds),
        )

        try:
            async with self._transaction("create_account") as session:
                account = await AccountRepository(session).create_account(
                    account_id=parsed_id,
                    email=normalized_email,
                    google_hash=google_hash,
                    moonton_hash=moonton_hash,
                    secondary_hash=secondary_hash,
                    images=images,
                )
                summary = _to_summary(account)
        except IntegrityError as e:
            logger.warning(
                f"Account insert rejected by constraint: {e.orig}",
                extra={"account_id": parsed_id},
            )
            return ServiceResult.fail(ConflictError())
        except StorageError as exc:
            return ServiceResult.fail(exc)

        logger.info(
            "Account created",
            extra={"account_id": parsed_id, "images": len(images)},
        )
        return ServiceResult.ok(summary)

    async def list_accounts(self) -> list[AccountSummary]:
        """
        List all accounts by ascending id, without secret hashes.

        Raises:
            StorageError: On persistence failure
        """
        async with self._transaction("list_accounts") as session:
            accounts = await AccountRepository(session).list_ordered()
            return [_to_summary(account) for account in accounts]

    async def delete_account(self, account_id: Any) -> bool:
        """
        Delete account if present. Deleting a missing id succeeds.

        Returns:
            True if a row was removed

        Raises:
            ValidationError: If account_id is not a positive integer
            StorageError: On persistence failure
        """
        parsed_id = self._parse_account_id(account_id)
        async with self._transaction("delete_account") as session:
            deleted = await AccountRepository(session).delete(parsed_id)

        logger.info(
            "Account deleted" if deleted else "Account delete was a no-op",
            extra={"account_id": parsed_id},
        )
        return deleted

    # =========================================================================
    # Admin principals
    # =========================================================================

    async def authenticate_admin(
        self, username: str | None, password: str | None
    ) -> int | None:
        """
        Check admin credentials.

        Unknown usernames are verified against a throwaway hash so both
        failure paths cost one bcrypt check.

        Returns:
            Admin id on success, None otherwise

        Raises:
            StorageError: On persistence failure
        """
        if not username or not password:
            return None

        async with self._transaction("authenticate_admin") as session:
            admin = await AdminUserRepository(session).get_by_username(username)
            admin_id = admin.id if admin else None
            password_hash = admin.password_hash if admin else None

        if password_hash is None:
            await verify_secret_async(password, await self._get_dummy_hash())
            return None

        if not await verify_secret_async(password, password_hash):
            return None

        return admin_id

    async def verify_admin_credentials(
        self, username: str | None, password: str | None
    ) -> bool:
        """True if username exists and password matches its hash."""
        return await self.authenticate_admin(username, password) is not None

    async def change_admin_password(
        self, username: str, new_password: str
    ) -> bool:
        """
        Rotate an admin password and revoke that admin's sessions.

        Operator tooling only; no request-facing path calls this.

        Returns:
            True if the admin exists and was updated

        Raises:
            ValidationError: If the new password is empty or too long
            StorageError: On persistence failure
        """
        is_valid, error = validate_secret(new_password, "Password")
        if not is_valid:
            raise ValidationError(error)

        password_hash = await hash_secret_async(new_password, self.bcrypt_rounds)

        async with self._transaction("change_admin_password") as session:
            admin_repo = AdminUserRepository(session)
            admin = await admin_repo.get_by_username(username)
            if admin is None:
                return False
            admin.password_hash = password_hash
            revoked = await AdminSessionRepository(session).delete_for_admin(
                admin.id
            )

        logger.info(
            "Admin password changed",
            extra={"username": username, "revoked_sessions": revoked},
        )
        return True

    async def _get_dummy_hash(self) -> str:
        # Built by initialize(); lazy only for stores never initialized
        if self._dummy_hash is None:
            self._dummy_hash = await hash_secret_async(
                secrets.token_hex(16), self.bcrypt_rounds
            )
        return self._dummy_hash

    # =========================================================================
    # Sessions
    # =========================================================================

    async def create_session(
        self, token: str, admin_id: int, expires_at: datetime
    ) -> SessionInfo:
        """
        Persist a new session.

        Raises:
            ValidationError: If token is empty
            StorageError: On persistence failure or unknown admin_id
        """
        if not token:
            raise ValidationError("Session token is required")

        try:
            async with self._transaction("create_session") as session:
                await AdminSessionRepository(session).create(
                    token=token,
                    admin_id=admin_id,
                    expires_at=expires_at,
                )
        except IntegrityError as e:
            logger.error(
                f"Session insert rejected by constraint: {e.orig}",
                extra={"admin_id": admin_id, "token": mask_token(token)},
            )
            raise StorageError(transient=False) from e

        return SessionInfo(
            token=token, admin_id=admin_id, expires_at=as_utc(expires_at)
        )

    async def get_valid_session(self, token: str | None) -> SessionInfo | None:
        """
        Get session if it exists and has not expired.

        Raises:
            StorageError: On persistence failure
        """
        if not token:
            return None

        async with self._transaction("get_valid_session") as session:
            row = await AdminSessionRepository(session).get_valid(
                token, utc_now()
            )
            if row is None:
                return None
            return _to_session_info(row)

    async def delete_session(self, token: str | None) -> None:
        """
        Delete session if present.

        Raises:
            StorageError: On persistence failure
        """
        if not token:
            return

        async with self._transaction("delete_session") as session:
            await AdminSessionRepository(session).delete_by_token(token)

    async def purge_expired_sessions(self) -> int:
        """
        Delete all sessions whose expiry has passed.

        Returns:
            Number of deleted sessions

        Raises:
            StorageError: On persistence failure
        """
        async with self._transaction("purge_expired_sessions") as session:
            return await AdminSessionRepository(
                session
            ).cleanup_expired_sessions(utc_now())

    # =========================================================================
    # Input parsing
    # =========================================================================

    @staticmethod
    def _parse_account_id(account_id: Any) -> int:
        is_valid, parsed_id, error = validate_account_id(account_id)
        if not is_valid:
            raise ValidationError(error)
        return parsed_id

    @staticmethod
    def _parse_email(email: Any) -> str:
        try:
            return normalize_email(email)
        except ValueError as e:
            raise ValidationError(str(e)) from e


def _to_summary(account: Account) -> AccountSummary:
    return AccountSummary(
        id=account.id,
        email=account.email,
        images=account.images,
        created_at=as_utc(account.created_at) if account.created_at else None,
    )


def _to_session_info(row: AdminSession) -> SessionInfo:
    return SessionInfo(
        token=row.token,
        admin_id=row.admin_id,
        expires_at=as_utc(row.expires_at),
    )
