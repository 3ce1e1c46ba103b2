"""
Validators for account creation input.

Each validator returns a tuple whose first element is the validity flag
and whose last element is an error message (None when valid).
"""

import re
from pathlib import PurePosixPath
from typing import Any

from vault.config.constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    MAX_EMAIL_LENGTH,
    MAX_IMAGE_REFERENCE_LENGTH,
    MAX_SECRET_BYTES,
)

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_account_id(value: Any) -> tuple[bool, int | None, str | None]:
    """
    Validate account ID.

    Accepts an int or a decimal string, as forms submit it.

    Args:
        value: Value to validate as account ID

    Returns:
        Tuple of (is_valid, parsed_id, error_message)

    Examples:
        >>> validate_account_id("42")
        (True, 42, None)
        >>> validate_account_id(0)
        (False, None, 'Account ID must be a positive integer')
    """
    if value is None or isinstance(value, bool):
        return False, None, "Account ID is required"

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return False, None, "Account ID is required"
        if not (value.isascii() and value.isdigit()):
            return False, None, "Account ID must be a positive integer"
        # SQL INTEGER has at most 10 digits
        if len(value.lstrip("0")) > 10:
            return False, None, "Account ID is too large"
        value = int(value)

    if not isinstance(value, int):
        return False, None, "Account ID must be a positive integer"

    if value <= 0:
        return False, None, "Account ID must be a positive integer"

    # SQL INTEGER
    if value > 2**31 - 1:
        return False, None, "Account ID is too large"

    return True, value, None


def validate_email(email: Any) -> tuple[bool, str | None]:
    """
    Validate email address.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_email("user@example.com")
        (True, None)
        >>> validate_email("invalid")
        (False, "Email must contain '@'")
    """
    if not email or not isinstance(email, str):
        return False, "Email is required"

    email = email.strip()

    if not email:
        return False, "Email is required"

    if len(email) > MAX_EMAIL_LENGTH:
        return False, "Email is too long (maximum 255 characters)"

    if "@" not in email:
        return False, "Email must contain '@'"

    parts = email.split("@")
    if len(parts) != 2:
        return False, "Email must contain exactly one '@'"

    local, domain = parts

    if not local or len(local) > 64:
        return False, "Email local part must be 1-64 characters"

    if "." not in domain:
        return False, "Email domain must contain a dot (.)"

    if any(not part for part in domain.split(".")):
        return False, "Email domain has invalid structure"

    if not _EMAIL_PATTERN.match(email):
        return False, "Invalid email format"

    return True, None


def normalize_email(email: str) -> str:
    """
    Normalize email to stripped lowercase.

    Raises:
        ValueError: If email is invalid
    """
    is_valid, error = validate_email(email)
    if not is_valid:
        raise ValueError(error)

    return email.strip().lower()


def validate_secret(secret: Any, field_name: str) -> tuple[bool, str | None]:
    """
    Validate a credential secret before hashing.

    Args:
        secret: Plaintext secret
        field_name: Field label used in the error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not secret or not isinstance(secret, str):
        return False, f"{field_name} is required"

    if len(secret.encode("utf-8")) > MAX_SECRET_BYTES:
        return False, f"{field_name} is too long (maximum 72 bytes)"

    return True, None


def validate_image_refs(
    images: Any, max_images: int
) -> tuple[bool, list[str] | None, str | None]:
    """
    Validate image references returned by the upload collaborator.

    Args:
        images: Sequence of filenames (None means no images)
        max_images: Maximum number of references per account

    Returns:
        Tuple of (is_valid, references, error_message)
    """
    if images is None:
        return True, [], None

    if isinstance(images, (str, bytes)):
        return False, None, "Images must be a list of filenames"

    refs = list(images)

    if len(refs) > max_images:
        return False, None, f"Too many images (maximum {max_images})"

    for ref in refs:
        if not isinstance(ref, str) or not ref.strip():
            return False, None, "Image reference is empty"
        if len(ref) > MAX_IMAGE_REFERENCE_LENGTH:
            return False, None, "Image reference is too long"
        suffix = PurePosixPath(ref).suffix.lower().lstrip(".")
        if suffix not in ALLOWED_IMAGE_EXTENSIONS:
            return False, None, "Only image files are allowed"

    return True, refs, None
