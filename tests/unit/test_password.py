"""Unit tests for password hashing."""

import pytest

from museum_archive.kernel.identity.password import (
    PasswordHasher,
    hash_password,
    verify_password,
)


class TestPasswordHasher:
    """Tests for PasswordHasher."""
    
    @pytest.fixture
    def hasher(self) -> PasswordHasher:
        return PasswordHasher(rounds=4)
    
    def test_hash_creates_different_hashes(self, hasher):
        """Same password should create different hashes (due to salt)."""
        hash1 = hasher.hash("password123")
        hash2 = hasher.hash("password123")
        
        assert hash1 != hash2
        assert hash1.startswith("$2b$")  # bcrypt prefix
    
    def test_verify_correct_password(self, hasher):
        hashed = hasher.hash("password123")
        assert hasher.verify("password123", hashed) is True
    
    def test_verify_wrong_password(self, hasher):
        hashed = hasher.hash("password123")
        assert hasher.verify("password124", hashed) is False
    
    def test_malformed_hash_is_a_mismatch(self, hasher):
        assert hasher.verify("password123", "not-a-bcrypt-hash") is False
    
    def test_rounds_are_recorded_in_hash(self, hasher):
        assert hasher.hash("password123").startswith("$2b$04$")
    
    def test_convenience_functions(self):
        """Test hash_password and verify_password functions."""
        hashed = hash_password("password123")
        
        assert verify_password("password123", hashed) is True
        assert verify_password("wrong", hashed) is False
