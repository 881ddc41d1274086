"""
Token gate: hashed credentials, signed JWTs with a one hour lifetime.
Stateless; every request is verified on its own.
"""
from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from campeonato.app_logger import get_logger
from campeonato.config import Settings
from campeonato.errors import BadRequest, Conflict, Forbidden, Unauthenticated
from campeonato.persistence.db import transaction
from campeonato.persistence.repositories import CredentialRepository

logger = get_logger(__name__)

# pbkdf2_sha256 has no 72-byte password limit and needs no C backend
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)


class TokenGate:
    """Issues tokens on login and verifies the Authorization header on protected routes."""

    def __init__(self, settings: Settings) -> None:
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._lifetime = timedelta(seconds=settings.token_expire_seconds)
        self._credentials = CredentialRepository()

    def create_token(self, username: str, now: datetime | None = None) -> str:
        issued = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        claims = {"username": username, "iat": issued, "exp": issued + self._lifetime}
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Return verified claims. Bad signature, malformed or expired token -> Forbidden."""
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            logger.info("Rejected token: %s", e)
            raise Forbidden("Token inválido ou expirado") from e
        if not claims.get("username"):
            raise Forbidden("Token inválido ou expirado")
        return claims

    def authenticate(self, authorization: str | None) -> dict[str, Any]:
        """
        The raw header value is the token; no "Bearer " prefix is stripped.
        Missing header -> Unauthenticated.
        """
        if not authorization:
            raise Unauthenticated("Token de autenticação ausente")
        return self.decode(authorization)

    def issue(self, conn: sqlite3.Connection, username: str | None, password: str | None) -> str:
        """Check the credential pair and return a fresh token."""
        if not username or not password:
            raise BadRequest("Todos os campos são obrigatórios!")
        credential = self._credentials.get_by_username(conn, username)
        if credential is None or not verify_password(password, credential.password_hash):
            logger.info("Failed login for %r", username)
            raise Unauthenticated("Credenciais inválidas")
        logger.info("Issued token for %r", username)
        return self.create_token(username)


def create_credential(conn: sqlite3.Connection, username: str, password: str) -> int:
    """Store a new credential with a hashed password. Returns its row id."""
    if not username or not password:
        raise BadRequest("Todos os campos são obrigatórios!")
    try:
        with transaction(conn):
            uid = CredentialRepository().create(conn, username, hash_password(password))
    except sqlite3.IntegrityError as e:
        raise Conflict(f"Usuário já existe: {username}") from e
    logger.info("Created credential for %r", username)
    return uid
