"""
Tests for the in-memory user store and access tokens.
"""

import jwt
import pytest

from cashcard.core.config import settings
from cashcard.core.errors import AuthError
from cashcard.core.security import (
    InMemoryUserStore,
    Principal,
    make_access_token,
    verify_access_token,
)


@pytest.fixture
def users():
    return InMemoryUserStore.from_config("alice:pw1:CARD-OWNER,ADMIN;bob:pw2:")


def test_authenticate_returns_principal_with_roles(users):
    principal = users.authenticate("alice", "pw1")

    assert principal == Principal(name="alice", roles=frozenset({"CARD-OWNER", "ADMIN"}))


def test_authenticate_rejects_bad_password_and_unknown_user(users):
    assert users.authenticate("alice", "wrong") is None
    assert users.authenticate("nobody", "pw1") is None


def test_authorize_checks_role(users):
    bob = users.authenticate("bob", "pw2")

    assert users.authorize(users.authenticate("alice", "pw1"), "CARD-OWNER")
    assert not users.authorize(bob, "CARD-OWNER")
    assert users.authorize(bob, "")


def test_invalid_user_entry():
    with pytest.raises(ValueError):
        InMemoryUserStore.from_config("carol")


def test_access_token_round_trip():
    token = make_access_token(Principal(name="alice", roles=frozenset({"CARD-OWNER"})))

    principal = verify_access_token(token)

    assert principal.name == "alice"
    assert principal.roles == frozenset({"CARD-OWNER"})


def test_expired_access_token(monkeypatch):
    monkeypatch.setattr(settings, "ACCESS_TOKEN_TTL_SEC", -60)
    token = make_access_token(Principal(name="alice"))

    with pytest.raises(AuthError) as exc:
        verify_access_token(token)
    assert exc.value.code == "ACCESS_TOKEN_EXPIRED"
    assert exc.value.status_code == 401


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": "alice"}, "not-the-secret", algorithm="HS256")

    with pytest.raises(AuthError) as exc:
        verify_access_token(token)
    assert exc.value.code == "ACCESS_TOKEN_INVALID"
