"""Unit tests for the identity registry."""

from museum_archive.kernel.identity.registry import IdentityRegistry
from museum_archive.kernel.models.user import UserRole


class TestIdentityRegistry:

    def test_seeded_staff(self, registry: IdentityRegistry):
        roles = {u.email: u.role for u in registry.users}
        assert roles["admin@museum.gov.bd"] == UserRole.SUPER_ADMIN
        assert roles["archivist@museum.gov.bd"] == UserRole.ARCHIVIST
        assert roles["curator@museum.gov.bd"] == UserRole.CURATOR

    def test_passwords_are_stored_hashed(self, registry: IdentityRegistry, test_password):
        for account in registry._by_email.values():
            assert account.password_hash != test_password
            assert account.password_hash.startswith("$2b$")

    def test_lookup(self, registry: IdentityRegistry):
        assert registry.get_by_email(" ADMIN@museum.gov.bd ").id == "1"
        assert registry.get_by_id("2").email == "archivist@museum.gov.bd"
        assert registry.get_by_email("nobody@museum.gov.bd") is None
        assert registry.get_by_id("99") is None

    def test_verify_credentials(self, registry: IdentityRegistry, test_password):
        assert registry.verify_credentials("admin@museum.gov.bd", test_password).id == "1"
        assert registry.verify_credentials("admin@museum.gov.bd", "nope") is None
        assert registry.verify_credentials("nobody@museum.gov.bd", test_password) is None

    def test_search(self, registry: IdentityRegistry):
        assert [u.id for u in registry.search("khan")] == ["2"]
        assert [u.id for u in registry.search("museum.gov.bd", "curator")] == ["3"]
        assert len(registry.search("", "all")) == len(registry.users)
        assert registry.search("zzz") == []
