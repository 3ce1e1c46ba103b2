"""
Account model.

Represents a registered account with hashed credential secrets
and references to its uploaded images.
"""

import json
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from vault.models.base import Base


class Account(Base):
    """Account model - registered accounts."""

    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("id > 0", name="check_account_id_positive"),
    )

    # Caller-supplied identifier
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )

    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False
    )

    # bcrypt hashes, never plaintext
    google_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    moonton_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    secondary_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # JSON array of blob store filenames
    images_json: Mapped[str] = mapped_column(
        Text, nullable=False, default="[]"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    @property
    def images(self) -> list[str]:
        """Image references in upload order."""
        return decode_images(self.images_json)

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email!r})>"


def encode_images(images: list[str]) -> str:
    """Serialize image references for the images_json column."""
    return json.dumps(list(images))


def decode_images(raw: str | None) -> list[str]:
    """Deserialize the images_json column, tolerating empty values."""
    if not raw:
        return []
    value = json.loads(raw)
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]
