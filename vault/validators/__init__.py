"""
Validators package.

Provides validation functions for account input.
"""

from vault.validators.account import (
    normalize_email,
    validate_account_id,
    validate_email,
    validate_image_refs,
    validate_secret,
)


__all__ = [
    "validate_account_id",
    "validate_email",
    "normalize_email",
    "validate_secret",
    "validate_image_refs",
]
