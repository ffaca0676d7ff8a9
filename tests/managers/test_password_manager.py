"""Tests for the Argon2 password hasher."""

import pytest
from passlib.hash import pbkdf2_sha256

from bloglist.managers.password_manager import (
    PasswordHasher,
    hash_password,
    verify_and_update_password,
    verify_password,
)


@pytest.fixture(scope="module")
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_hash_is_argon2(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")
        assert hashed.startswith("$argon2id$")
        assert "salainen" not in hashed

    def test_hash_is_salted(self, hasher: PasswordHasher) -> None:
        assert hasher.hash("salainen") != hasher.hash("salainen")

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_verify(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")
        assert hasher.verify("salainen", hashed)
        assert not hasher.verify("wrong", hashed)

    def test_verify_garbage_hash(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("salainen", "not-a-hash")
        assert not hasher.verify("salainen", "")

    def test_verify_and_update_missing_hash(self, hasher: PasswordHasher) -> None:
        assert hasher.verify_and_update("salainen", None) == (False, None)

    def test_verify_and_update_current_hash(self, hasher: PasswordHasher) -> None:
        assert hasher.verify_and_update("salainen", hasher.hash("salainen")) == (True, None)

    def test_deprecated_scheme_upgraded(self, hasher: PasswordHasher) -> None:
        legacy = pbkdf2_sha256.hash("salainen")
        is_valid, new_hash = hasher.verify_and_update("salainen", legacy)
        assert is_valid
        assert new_hash is not None
        assert new_hash.startswith("$argon2id$")


class TestAsyncHelpers:
    async def test_hash_and_verify(self) -> None:
        hashed = await hash_password("salainen")
        assert await verify_password("salainen", hashed)
        assert not await verify_password("wrong", hashed)

    async def test_verify_and_update_wrong_password(self) -> None:
        hashed = await hash_password("salainen")
        assert await verify_and_update_password("wrong", hashed) == (False, None)
