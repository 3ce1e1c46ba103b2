"""
Admin user repository.

Data access layer for AdminUser model.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from vault.models.admin_user import AdminUser
from vault.repositories.base import BaseRepository


class AdminUserRepository(BaseRepository[AdminUser]):
    """Admin user repository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize admin user repository."""
        super().__init__(AdminUser, session)

    async def get_by_username(self, username: str) -> AdminUser | None:
        """
        Get admin by username.

        Args:
            username: Admin username

        Returns:
            AdminUser or None
        """
        return await self.get_by(username=username)
