"""
Unit tests for password hashing utilities.
"""

from notekeeper.security.password import hash_password, needs_update, verify_password


class TestPasswordUtils:
    """Test password hashing and verification."""

    def test_hash_is_salted(self):
        password = "TestPassword123!"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed != hash_password(password)

    def test_verify_password(self):
        hashed = hash_password("TestPassword123!")

        assert verify_password("TestPassword123!", hashed) is True
        assert verify_password("WrongPassword123!", hashed) is False

    def test_long_passwords_are_not_truncated(self):
        # bcrypt alone would ignore everything past 72 bytes
        base = "a" * 80
        hashed = hash_password(base + "1")

        assert verify_password(base + "1", hashed) is True
        assert verify_password(base + "2", hashed) is False

    def test_fresh_hash_needs_no_update(self):
        assert needs_update(hash_password("secret123")) is False
