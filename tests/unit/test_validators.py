"""Unit tests for account input validators."""

import pytest

from vault.validators import (
    normalize_email,
    validate_account_id,
    validate_email,
    validate_image_refs,
    validate_secret,
)


class TestAccountIdValidation:
    """Tests for account ID validation."""

    @pytest.mark.parametrize("value, expected", [(1, 1), ("42", 42), (" 8 ", 8)])
    def test_valid_ids(self, value, expected):
        """Positive ints and decimal strings should parse."""
        assert validate_account_id(value) == (True, expected, None)

    @pytest.mark.parametrize(
        "value",
        [0, -5, "0", "-1", "abc", "1.5", "", None, True, 2.0, "²", "٣", "9" * 5000],
    )
    def test_invalid_ids(self, value):
        """Non-positive or non-integer values should be rejected."""
        is_valid, parsed, error = validate_account_id(value)
        assert is_valid is False
        assert parsed is None
        assert error

    def test_too_large_id(self):
        """IDs beyond SQL INTEGER range should be rejected."""
        is_valid, _, error = validate_account_id(2**31)
        assert is_valid is False
        assert "too large" in error

    @pytest.mark.parametrize("value", ["2147483648", "9" * 5000, "0" * 20 + "99999999999"])
    def test_too_large_digit_strings(self, value):
        """Oversized digit strings are rejected without converting them."""
        assert validate_account_id(value) == (False, None, "Account ID is too large")

    def test_leading_zeros(self):
        assert validate_account_id("0000000000042") == (True, 42, None)


class TestEmailValidation:
    """Tests for email validation."""

    def test_valid_email(self):
        assert validate_email("user@example.com") == (True, None)

    @pytest.mark.parametrize(
        "email",
        ["", None, "invalid", "a@b@c.com", "@x.com", "user@localhost", "user@x..com"],
    )
    def test_invalid_emails(self, email):
        is_valid, error = validate_email(email)
        assert is_valid is False
        assert error

    def test_too_long_email(self):
        email = "a" * 250 + "@x.com"
        is_valid, error = validate_email(email)
        assert is_valid is False
        assert "too long" in error

    def test_normalize_email_lowercases(self):
        assert normalize_email("  User@Example.COM ") == "user@example.com"

    def test_normalize_invalid_raises(self):
        with pytest.raises(ValueError):
            normalize_email("nope")


class TestSecretValidation:
    """Tests for secret validation."""

    def test_valid_secret(self):
        assert validate_secret("s1", "Google password") == (True, None)

    @pytest.mark.parametrize("secret", ["", None, 123])
    def test_missing_secret(self, secret):
        is_valid, error = validate_secret(secret, "Google password")
        assert is_valid is False
        assert error == "Google password is required"

    def test_secret_over_bcrypt_limit(self):
        is_valid, error = validate_secret("x" * 73, "Google password")
        assert is_valid is False
        assert "72 bytes" in error


class TestImageRefsValidation:
    """Tests for image reference validation."""

    def test_none_means_no_images(self):
        assert validate_image_refs(None, 40) == (True, [], None)

    def test_order_is_preserved(self):
        refs = ["b.png", "a.JPG", "c.webp"]
        assert validate_image_refs(refs, 40) == (True, refs, None)

    def test_too_many_images(self):
        refs = [f"{i}.png" for i in range(41)]
        is_valid, _, error = validate_image_refs(refs, 40)
        assert is_valid is False
        assert "Too many images" in error

    @pytest.mark.parametrize("refs", [["doc.pdf"], ["noext"], [""], ["  "], [None]])
    def test_rejected_references(self, refs):
        is_valid, parsed, error = validate_image_refs(refs, 40)
        assert is_valid is False
        assert parsed is None
        assert error

    def test_plain_string_rejected(self):
        is_valid, _, _ = validate_image_refs("a.png", 40)
        assert is_valid is False
