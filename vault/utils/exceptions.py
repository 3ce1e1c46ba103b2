"""
Exception types.

Each error kind carries a public message that is safe to show to an end
user. Internal detail (driver messages, constraint names) goes to the log
only and never into these messages.
"""

from enum import StrEnum

from sqlalchemy.exc import OperationalError


class ErrorCode(StrEnum):
    """Error kinds surfaced to callers of the core."""

    VALIDATION = "validation_error"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication_error"
    STORAGE = "storage_error"


class VaultError(Exception):
    """Base class for all core errors."""

    code: ErrorCode = ErrorCode.STORAGE
    public_message: str = "Operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        if message:
            self.public_message = message


class ValidationError(VaultError):
    """A required field is missing or malformed."""

    code = ErrorCode.VALIDATION
    public_message = "Invalid input"


class ConflictError(VaultError):
    """Account id or email is already taken."""

    code = ErrorCode.CONFLICT
    public_message = "ID already exists"


class AuthenticationError(VaultError):
    """Invalid credentials or session; never says which factor failed."""

    code = ErrorCode.AUTHENTICATION
    public_message = "Authentication required"


class StorageError(VaultError):
    """
    Persistence failure.

    Attributes:
        transient: True when a retry with backoff may succeed
    """

    code = ErrorCode.STORAGE
    public_message = "Operation failed"

    def __init__(self, transient: bool = False) -> None:
        super().__init__()
        self.transient = transient


# Driver failures worth retrying (connection loss, lock timeouts)
TRANSIENT_ERRORS = (
    OperationalError,
    TimeoutError,
)


def is_transient(exc: BaseException) -> bool:
    """
    Check if a storage exception may succeed on retry.

    Args:
        exc: Exception to check

    Returns:
        True if exception is transient
    """
    return isinstance(exc, TRANSIENT_ERRORS)
