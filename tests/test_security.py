"""Tests for the bcrypt password helpers."""

from tech_news.core.security import hash_password, verify_password


def test_hash_is_salted_and_not_plaintext() -> None:
    first = hash_password("secret1", rounds=4)
    second = hash_password("secret1", rounds=4)

    assert first != "secret1"
    assert first != second
    assert first.startswith("$2")


def test_cost_factor_is_encoded_in_hash() -> None:
    assert hash_password("secret1", rounds=5).split("$")[2] == "05"


def test_verify_password() -> None:
    hashed = hash_password("secret1", rounds=4)

    assert verify_password("secret1", hashed) is True
    assert verify_password("secret2", hashed) is False
    assert verify_password("", hashed) is False


def test_verify_password_rejects_non_bcrypt_values() -> None:
    assert verify_password("secret1", "secret1") is False
