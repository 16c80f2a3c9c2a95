"""
Unit tests for the password handler.
"""

import pytest

from questionnaire_api.infrastructure.security.password.password_handler import PasswordHandler


@pytest.fixture(scope="module")
def password_handler() -> PasswordHandler:
    return PasswordHandler()


def test_hash_is_not_plaintext(password_handler):
    hashed = password_handler.get_password_hash("correct horse battery staple")

    assert hashed != "correct horse battery staple"
    assert hashed.startswith("$2")


def test_verify_password(password_handler):
    hashed = password_handler.get_password_hash("s3cret-password")

    assert password_handler.verify_password("s3cret-password", hashed)
    assert not password_handler.verify_password("wrong-password", hashed)


def test_unparseable_hash_does_not_verify(password_handler):
    assert password_handler.verify_password("anything", "not-a-hash") is False
