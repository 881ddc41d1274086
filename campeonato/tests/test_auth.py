"""
Tests for the token gate: credential check, token lifetime, header handling.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from jose import jwt

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from campeonato.auth import TokenGate, create_credential, hash_password, verify_password
from campeonato.config import Settings
from campeonato.errors import BadRequest, Conflict, Forbidden, Unauthenticated
from campeonato.persistence.db import get_connection, init_db

SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(database_path=tmp_path / "auth_test.db", jwt_secret=SECRET)


@pytest.fixture
def db_conn(settings):
    init_db(settings.database_path)
    conn = get_connection(settings.database_path)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture
def gate(settings):
    return TokenGate(settings)


def test_password_hash_roundtrip():
    hashed = hash_password("b")
    assert hashed != "b"
    assert verify_password("b", hashed)
    assert not verify_password("c", hashed)
    assert not verify_password("b", "")


def test_issue_token_carries_username_and_one_hour_expiry(db_conn, gate):
    create_credential(db_conn, "a", "b")
    token = gate.issue(db_conn, "a", "b")
    assert isinstance(token, str) and token
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["username"] == "a"
    assert claims["exp"] - claims["iat"] == 3600


def test_issue_wrong_password_is_unauthenticated(db_conn, gate):
    create_credential(db_conn, "a", "b")
    with pytest.raises(Unauthenticated):
        gate.issue(db_conn, "a", "wrong")


def test_issue_unknown_user_is_unauthenticated(db_conn, gate):
    with pytest.raises(Unauthenticated):
        gate.issue(db_conn, "nobody", "b")


@pytest.mark.parametrize("username,password", [("", "b"), ("a", ""), (None, "b"), ("a", None)])
def test_issue_missing_field_is_bad_request(db_conn, gate, username, password):
    with pytest.raises(BadRequest):
        gate.issue(db_conn, username, password)


def test_create_credential_duplicate_is_conflict(db_conn):
    create_credential(db_conn, "a", "b")
    with pytest.raises(Conflict):
        create_credential(db_conn, "a", "other")


def test_authenticate_returns_claims(gate):
    token = gate.create_token("a")
    claims = gate.authenticate(token)
    assert claims["username"] == "a"


@pytest.mark.parametrize("header", [None, ""])
def test_authenticate_missing_header(gate, header):
    with pytest.raises(Unauthenticated):
        gate.authenticate(header)


def test_authenticate_expired_token_is_forbidden(gate):
    token = gate.create_token("a", now=datetime.now(timezone.utc) - timedelta(hours=2))
    with pytest.raises(Forbidden):
        gate.authenticate(token)


def test_authenticate_token_from_other_secret_is_forbidden(tmp_path, gate):
    other = TokenGate(Settings(database_path=tmp_path / "x.db", jwt_secret="another-secret"))
    with pytest.raises(Forbidden):
        gate.authenticate(other.create_token("a"))


def test_authenticate_garbage_is_forbidden(gate):
    with pytest.raises(Forbidden):
        gate.authenticate("not-a-token")


def test_authenticate_does_not_strip_bearer_prefix(gate):
    """The header value is the token itself."""
    token = gate.create_token("a")
    with pytest.raises(Forbidden):
        gate.authenticate(f"Bearer {token}")


def test_token_without_username_is_forbidden(gate):
    token = jwt.encode({"exp": datetime.now(timezone.utc) + timedelta(hours=1)}, SECRET, algorithm="HS256")
    with pytest.raises(Forbidden):
        gate.authenticate(token)
