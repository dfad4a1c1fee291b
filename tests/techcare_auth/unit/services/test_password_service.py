"""Unit tests for PasswordHashingService and generate_password."""

import pytest

from techcare_auth import PasswordHashingService, generate_password
from techcare_auth.exceptions import WeakPasswordError
from techcare_auth.services.password_service import GENERATED_PASSWORD_ALPHABET


@pytest.fixture
def service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


class TestHashAndVerify:
    def test_hash_then_verify(self, service):
        password_hash = service.hash("correct horse")

        assert password_hash != "correct horse"
        assert service.verify("correct horse", password_hash)
        assert not service.verify("wrong horse!", password_hash)

    def test_same_password_hashes_differently(self, service):
        assert service.hash("correct horse") != service.hash("correct horse")

    def test_verify_without_hash_is_false(self, service):
        assert not service.verify("correct horse", None)
        assert not service.verify("correct horse", "")

    def test_verify_with_malformed_hash_is_false(self, service):
        assert not service.verify("correct horse", "not-a-bcrypt-hash")

    def test_needs_rehash_detects_other_work_factor(self, service):
        password_hash = service.hash("correct horse")

        assert not service.needs_rehash(password_hash)
        assert PasswordHashingService(rounds=5).needs_rehash(password_hash)


class TestStrength:
    @pytest.mark.parametrize("password", ["", "short", "x" * 129])
    def test_weak_passwords_rejected(self, service, password):
        with pytest.raises(WeakPasswordError):
            service.hash(password)

    def test_boundary_lengths_accepted(self, service):
        service.validate_strength("x" * 8)
        service.validate_strength("x" * 128)


class TestGeneratePassword:
    def test_default_length_and_alphabet(self):
        password = generate_password()

        assert len(password) == 12
        assert set(password) <= set(GENERATED_PASSWORD_ALPHABET)

    def test_passwords_are_random(self):
        assert len({generate_password() for _ in range(20)}) == 20

    def test_too_short_length_rejected(self):
        with pytest.raises(ValueError):
            generate_password(4)

    def test_generated_password_is_hashable(self, service):
        password = generate_password()

        assert service.verify(password, service.hash(password))
