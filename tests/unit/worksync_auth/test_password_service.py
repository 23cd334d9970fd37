"""Unit tests for PasswordService."""

import pytest

from worksync_auth import PasswordScheme, PasswordService


class TestPlaintextPasswords:
    """Tests for the default verbatim storage scheme."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordService()

    def test_default_scheme_is_plaintext(self):
        assert self.service.scheme == PasswordScheme.PLAINTEXT

    def test_hash_stores_password_verbatim(self):
        assert self.service.hash("p") == "p"

    def test_verify_is_exact_equality(self):
        """Case and whitespace differences are mismatches."""
        assert self.service.verify("password123", "password123") is True
        assert self.service.verify("Password123", "password123") is False
        assert self.service.verify("password123 ", "password123") is False

    def test_bcrypt_shaped_password_is_compared_verbatim(self):
        """A stored value that looks like a bcrypt hash is still plain text."""
        stored = PasswordService(PasswordScheme.BCRYPT, rounds=4).hash("secret")
        assert PasswordService.is_bcrypt_hash(stored)

        assert self.service.verify(stored, stored) is True
        assert self.service.verify("secret", stored) is False


class TestBcryptPasswords:
    """Tests for bcrypt storage."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordService("bcrypt", rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        hashed = self.service.hash("secure_password123")

        assert hashed.startswith("$2")
        assert PasswordService.is_bcrypt_hash(hashed)

    def test_verify_correct_and_incorrect_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True
        assert self.service.verify("wrong_password", hashed) is False

    def test_hash_produces_different_hashes(self):
        """Due to the random salt, hashing twice differs but both verify."""
        hash1 = self.service.hash("same_password")
        hash2 = self.service.hash("same_password")

        assert hash1 != hash2
        assert self.service.verify("same_password", hash1)
        assert self.service.verify("same_password", hash2)

    def test_plaintext_values_still_verify(self):
        """Accounts created before switching to bcrypt can still log in."""
        assert self.service.verify("legacy", "legacy") is True

    def test_unknown_scheme_is_rejected(self):
        with pytest.raises(ValueError):
            PasswordService("md5")
