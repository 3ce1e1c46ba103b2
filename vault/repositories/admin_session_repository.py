"""
Admin session repository.

Data access layer for AdminSession model. Every read path filters
by expiry so an expired row is never returned, swept or not.
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from vault.models.admin_session import AdminSession
from vault.repositories.base import BaseRepository


class AdminSessionRepository(BaseRepository[AdminSession]):
    """Admin session repository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize admin session repository."""
        super().__init__(AdminSession, session)

    async def get_valid(
        self, token: str, now: datetime
    ) -> AdminSession | None:
        """
        Get session by token if not expired.

        Args:
            token: Session token
            now: Current UTC time

        Returns:
            Session or None if missing or expired
        """
        stmt = select(AdminSession).where(
            AdminSession.token == token,
            AdminSession.expires_at > now,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_token(self, token: str) -> bool:
        """Delete session by token, returns True if a row was removed."""
        return await self.delete(token)

    async def delete_for_admin(self, admin_id: int) -> int:
        """Delete all sessions of an admin, returns the count."""
        stmt = delete(AdminSession).where(AdminSession.admin_id == admin_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def cleanup_expired_sessions(self, now: datetime) -> int:
        """
        Delete every session whose expiry has passed.

        Args:
            now: Current UTC time

        Returns:
            Number of deleted sessions
        """
        stmt = delete(AdminSession).where(AdminSession.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
