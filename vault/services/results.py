"""
Service result container.

Used to return structured outcomes from service methods so callers
handle the failure path explicitly.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from vault.utils.exceptions import ErrorCode, VaultError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Standard service result container.

    Attributes:
        success: Whether the operation succeeded
        data: Result value on success
        error: Message safe to show to an end user
        error_code: Error kind on failure
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, exc: VaultError) -> "ServiceResult[T]":
        return cls(
            success=False,
            error=exc.public_message,
            error_code=exc.code,
        )
