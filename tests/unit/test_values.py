"""
Unit tests for validated value types.

Tests verify:
- Username/EmailAddress/Password smart constructors and normalization
- PasswordHash creation and matching
- VerificationCode entropy and encoding
- Direct construction cannot bypass validation
"""

import re

import pytest

from src.domain.exceptions import InvalidValue
from src.domain.result import Err, Ok
from src.domain.values import (
    EmailAddress,
    Password,
    PasswordHash,
    Username,
    VerificationCode,
)


class TestUsername:
    """Tests for Username.try_create."""

    @pytest.mark.parametrize("raw", ["a", "bob", "abcdefghijkl", "Mixed_Case", "x y"])
    def test_accepts_lengths_1_to_12(self, raw: str) -> None:
        """Strings of 1-12 characters are accepted, lowercased."""
        result = Username.try_create(raw)
        assert result == Ok(Username(raw.strip().lower()))

    def test_trims_and_lowercases(self) -> None:
        """Surrounding whitespace is removed and case folded to lower."""
        assert Username.try_create("  Alice ").unwrap().value == "alice"

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_fails(self, raw: str | None) -> None:
        """Empty or missing username fails with an 'empty' reason."""
        result = Username.try_create(raw)
        assert result.is_err()
        assert "empty" in result.error

    def test_whitespace_only_fails_as_empty(self) -> None:
        """A username that trims to nothing is empty."""
        result = Username.try_create("   ")
        assert result.is_err()
        assert "empty" in result.error

    def test_thirteen_characters_fails(self) -> None:
        """Length > 12 fails with a 'too long' reason."""
        result = Username.try_create("abcdefghijklm")
        assert result.is_err()
        assert "too long" in result.error

    def test_length_limit_applies_before_trimming(self) -> None:
        """Padding counts toward the limit."""
        result = Username.try_create(" abcdefghijkl ")
        assert isinstance(result, Err)
        assert "too long" in result.error

    def test_twelve_characters_that_grow_when_lowercased(self) -> None:
        """The limit counts raw characters, not the lowercased form."""
        result = Username.try_create("\u0130" * 12)
        assert result == Ok(Username("\u0130".lower() * 12))
        assert len(result.unwrap().value) > 12

    def test_direct_construction_validates(self) -> None:
        """Username cannot be built around invalid content."""
        with pytest.raises(InvalidValue):
            Username("")
        with pytest.raises(InvalidValue):
            Username("NotLower")

    def test_is_immutable(self) -> None:
        """The wrapped value cannot be reassigned."""
        username = Username.try_create("alice").unwrap()
        with pytest.raises(AttributeError):
            username.value = "mallory"  # type: ignore[misc]


class TestEmailAddress:
    """Tests for EmailAddress.try_create."""

    def test_simple_address_accepted(self) -> None:
        """a@b.com is a valid address."""
        assert EmailAddress.try_create("a@b.com") == Ok(EmailAddress("a@b.com"))

    def test_trims_and_lowercases(self) -> None:
        """Email is stored trimmed and lowercased."""
        result = EmailAddress.try_create("  User.Name+tag@Example.COM ")
        assert result.unwrap().value == "user.name+tag@example.com"

    @pytest.mark.parametrize("raw", ["a@localhost", "user@[127.0.0.1]", "ops@intranet"])
    def test_local_and_literal_domains_accepted(self, raw: str) -> None:
        """Dotless hosts and bracketed IP literals are valid addresses."""
        assert EmailAddress.try_create(raw) == Ok(EmailAddress(raw))

    @pytest.mark.parametrize(
        "raw", ["not-an-email", "", "   ", None, "a@", "@b.com", "a b@c.com", "a@@b.com"]
    )
    def test_invalid_format_fails(self, raw: str | None) -> None:
        """Unparseable addresses fail with an 'invalid format' reason."""
        result = EmailAddress.try_create(raw)
        assert result.is_err()
        assert "invalid format" in result.error

    def test_direct_construction_validates(self) -> None:
        """EmailAddress cannot be built around an invalid address."""
        with pytest.raises(InvalidValue):
            EmailAddress("not-an-email")


class TestPassword:
    """Tests for Password.try_create."""

    @pytest.mark.parametrize("raw", ["abcd", "AbC 1", "  sp  ", "12345678"])
    def test_lengths_4_to_8_preserved_exactly(self, raw: str) -> None:
        """Valid passwords are kept byte-for-byte (no trim, no lowercase)."""
        assert Password.try_create(raw).unwrap().value == raw

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_fails(self, raw: str | None) -> None:
        """Empty password fails with an 'empty' reason."""
        result = Password.try_create(raw)
        assert result.is_err()
        assert "empty" in result.error

    @pytest.mark.parametrize("raw", ["a", "abc", "123456789", "x" * 40])
    def test_out_of_range_fails(self, raw: str) -> None:
        """Length outside [4, 8] fails with a 'length out of range' reason."""
        result = Password.try_create(raw)
        assert result.is_err()
        assert "length out of range" in result.error

    def test_repr_hides_plaintext(self) -> None:
        """The plaintext never shows up in repr (and so in logs)."""
        password = Password.try_create("hunter2").unwrap()
        assert "hunter2" not in repr(password)


class TestPasswordHash:
    """Tests for PasswordHash.create and PasswordHash.match."""

    def test_hash_matches_original_password(self) -> None:
        """match(create(p), p.value) is True."""
        password = Password.try_create("s3cret!").unwrap()
        password_hash = PasswordHash.create(password, rounds=4)
        assert PasswordHash.match(password_hash, password.value) is True

    def test_hash_rejects_other_password(self) -> None:
        """match against a different plaintext is False, not an exception."""
        password = Password.try_create("s3cret!").unwrap()
        password_hash = PasswordHash.create(password, rounds=4)
        assert PasswordHash.match(password_hash, "S3cret!") is False

    def test_hash_is_not_plaintext(self) -> None:
        """The hash is a bcrypt string, never the plaintext."""
        password = Password.try_create("s3cret!").unwrap()
        password_hash = PasswordHash.create(password)
        assert password_hash.value != "s3cret!"
        assert re.match(r"^\$2[aby]\$10\$", password_hash.value)

    def test_salt_differs_per_call(self) -> None:
        """Each call embeds a fresh salt."""
        password = Password.try_create("s3cret!").unwrap()
        first = PasswordHash.create(password, rounds=4)
        second = PasswordHash.create(password, rounds=4)
        assert first != second

    def test_candidate_over_72_bytes_does_not_match(self) -> None:
        """Overlong candidates return False instead of raising."""
        password_hash = PasswordHash.create(Password("s3cret!"), rounds=4)
        assert PasswordHash.match(password_hash, "x" * 100) is False

    def test_malformed_stored_hash_raises(self) -> None:
        """A stored value that is not bcrypt output raises ValueError."""
        with pytest.raises(ValueError):
            PasswordHash.match(PasswordHash("not-a-bcrypt-hash"), "s3cret!")


class TestVerificationCode:
    """Tests for VerificationCode.create."""

    def test_codes_are_distinct_and_url_safe(self) -> None:
        """10,000 codes are distinct, base64url, unpadded, same length."""
        codes = [VerificationCode.create().value for _ in range(10_000)]

        assert len(set(codes)) == 10_000
        assert {len(code) for code in codes} == {20}
        for code in codes:
            assert "+" not in code
            assert "/" not in code
            assert "=" not in code
            assert re.fullmatch(r"[A-Za-z0-9_-]{20}", code)

    @pytest.mark.parametrize("raw", ["", "abc+def", "abc/def", "abc=", "abc\n", None])
    def test_malformed_codes_are_rejected(self, raw: str | None) -> None:
        """Only non-empty base64url tokens are well formed."""
        assert VerificationCode.is_well_formed(raw) is False

    def test_direct_construction_validates(self) -> None:
        """VerificationCode cannot wrap an empty string."""
        with pytest.raises(InvalidValue):
            VerificationCode("")
