"""
Account repository.

Data access layer for Account model. Image list serialization
lives here and in the model, nowhere else.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from vault.models.account import Account, encode_images
from vault.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Account repository with specific queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize account repository."""
        super().__init__(Account, session)

    async def id_exists(self, account_id: int) -> bool:
        """Check whether an account with this id is stored."""
        return await self.exists(id=account_id)

    async def create_account(
        self,
        account_id: int,
        email: str,
        google_hash: str,
        moonton_hash: str,
        secondary_hash: str,
        images: list[str],
    ) -> Account:
        """
        Insert a new account row.

        Args:
            account_id: Caller-supplied account id
            email: Normalized email
            google_hash: bcrypt hash of the Google secret
            moonton_hash: bcrypt hash of the Moonton secret
            secondary_hash: bcrypt hash of the secondary secret
            images: Image references in upload order

        Returns:
            Created account

        Raises:
            IntegrityError: If id or email is already taken
        """
        return await self.create(
            id=account_id,
            email=email,
            google_hash=google_hash,
            moonton_hash=moonton_hash,
            secondary_hash=secondary_hash,
            images_json=encode_images(images),
        )

    async def list_ordered(self) -> list[Account]:
        """All accounts by ascending id."""
        return await self.find_all()
