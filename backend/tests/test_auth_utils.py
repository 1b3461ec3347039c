import pytest
from argon2.exceptions import InvalidHashError

from backend.auth_service.utils import hash_password, needs_rehash, verify_password


def test_hash_and_verify():
    pw_hash = hash_password("S3cure!")

    assert isinstance(pw_hash, str)
    assert pw_hash != "S3cure!"
    assert verify_password("S3cure!", pw_hash)


def test_verify_wrong_password():
    pw_hash = hash_password("S3cure!")
    assert verify_password("wrong", pw_hash) is False


def test_hash_uses_fresh_salt():
    first = hash_password("same password")
    second = hash_password("same password")

    assert first != second
    assert verify_password("same password", first)
    assert verify_password("same password", second)


def test_hash_is_self_describing():
    # Algorithm, parameters and salt are all embedded in the string
    pw_hash = hash_password("pw")
    assert pw_hash.startswith("$argon2id$")
    assert pw_hash.count("$") == 5


def test_verify_malformed_hash_raises():
    with pytest.raises(InvalidHashError):
        verify_password("pw", "not-a-hash")


def test_fresh_hash_does_not_need_rehash():
    assert needs_rehash(hash_password("pw")) is False
