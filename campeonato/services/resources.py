"""
Resource operations for partidas, jogadores and times.
Input is validated before any store access; every write runs inside one
transaction so the existence check and the mutation commit or abort together.
"""
from __future__ import annotations

import sqlite3
from typing import Any, TypeVar

from pydantic import BaseModel

from campeonato.app_logger import get_logger
from campeonato.errors import BadRequest, Conflict, NotFound
from campeonato.persistence.db import transaction
from campeonato.persistence.repositories import MatchRepository, PlayerRepository, TeamRepository
from campeonato.schemas import (
    MatchIn,
    PlayerIn,
    PlayerUpdateIn,
    TeamIn,
    TeamLogoIn,
    validate,
)

logger = get_logger(__name__)

MISSING_FIELDS = "Todos os campos são obrigatórios!"

M = TypeVar("M", bound=BaseModel)


def require(model: type[M], payload: Any, message: str = MISSING_FIELDS) -> M:
    """Validate payload or raise BadRequest; nothing has touched the store yet."""
    result = validate(model, payload)
    if not result.ok:
        logger.info("Rejected %s: %s", model.__name__, "; ".join(result.errors))
        raise BadRequest(message)
    return result.value


# ---------- MatchService ----------


class MatchService:
    """Matches are addressed by id and accept batch inserts."""

    def __init__(self) -> None:
        self._repo = MatchRepository()

    def list_all(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        return [m.to_dict() for m in self._repo.list_all(conn)]

    def create(self, conn: sqlite3.Connection, payload: Any) -> list[int]:
        """Insert one match or a list of matches. All objects are checked before the first insert."""
        items = payload if isinstance(payload, list) else [payload]
        if not items:
            raise BadRequest("O corpo da requisição deve conter pelo menos um objeto de partida")
        matches = [require(MatchIn, item).to_match() for item in items]
        with transaction(conn):
            ids = [self._repo.insert(conn, m) for m in matches]
        logger.info("Inserted partidas %s", ids)
        return ids

    def update(self, conn: sqlite3.Connection, match_id: str, payload: Any) -> None:
        match = require(MatchIn, payload).to_match()
        with transaction(conn):
            if self._repo.get(conn, match_id) is None:
                raise NotFound("Partida não encontrada")
            self._repo.update(conn, match_id, match)
        logger.info("Updated partida %s", match_id)

    def delete(self, conn: sqlite3.Connection, match_id: str) -> None:
        with transaction(conn):
            if self._repo.get(conn, match_id) is None:
                raise NotFound("Partida não encontrada")
            self._repo.delete(conn, match_id)
        logger.info("Deleted partida %s", match_id)


# ---------- PlayerService ----------


class PlayerService:
    """Players are addressed by nome; one player per create call."""

    def __init__(self) -> None:
        self._repo = PlayerRepository()

    def list_all(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self._repo.list_all(conn)]

    def create(self, conn: sqlite3.Connection, payload: Any) -> list[int]:
        player = require(PlayerIn, payload).to_player()
        try:
            with transaction(conn):
                pid = self._repo.insert(conn, player)
        except sqlite3.IntegrityError as e:
            raise Conflict(f"Jogador já existe: {player.nome}") from e
        logger.info("Inserted jogador %r", player.nome)
        return [pid]

    def update(self, conn: sqlite3.Connection, nome: str, payload: Any) -> None:
        player = require(PlayerUpdateIn, payload).to_player()
        try:
            with transaction(conn):
                if self._repo.get_by_name(conn, nome) is None:
                    raise NotFound("Jogador não encontrado")
                self._repo.update(conn, nome, player)
        except sqlite3.IntegrityError as e:
            raise Conflict(f"Jogador já existe: {player.nome}") from e
        logger.info("Updated jogador %r -> %r", nome, player.nome)

    def delete(self, conn: sqlite3.Connection, nome: str) -> None:
        with transaction(conn):
            if self._repo.get_by_name(conn, nome) is None:
                raise NotFound("Jogador não encontrado")
            self._repo.delete(conn, nome)
        logger.info("Deleted jogador %r", nome)


# ---------- TeamService ----------


class TeamService:
    """Teams are addressed by nome; only the logo can change after creation."""

    def __init__(self) -> None:
        self._repo = TeamRepository()

    def list_all(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        return [t.to_dict() for t in self._repo.list_all(conn)]

    def create(self, conn: sqlite3.Connection, payload: Any) -> list[int]:
        team = require(TeamIn, payload, "Todos os campos devem ser preenchidos!").to_team()
        try:
            with transaction(conn):
                tid = self._repo.insert(conn, team)
        except sqlite3.IntegrityError as e:
            raise Conflict(f"Time já existe: {team.nome}") from e
        logger.info("Inserted time %r", team.nome)
        return [tid]

    def update_logo(self, conn: sqlite3.Connection, nome: str, payload: Any) -> None:
        logo = require(TeamLogoIn, payload, "A URL do logo deve ser preenchida").logo_url
        with transaction(conn):
            if self._repo.get_by_name(conn, nome) is None:
                raise NotFound("Time não encontrado")
            self._repo.update_logo(conn, nome, logo)
        logger.info("Updated logo of time %r", nome)

    def delete(self, conn: sqlite3.Connection, nome: str) -> None:
        with transaction(conn):
            if self._repo.get_by_name(conn, nome) is None:
                raise NotFound("Time não encontrado")
            self._repo.delete(conn, nome)
        logger.info("Deleted time %r", nome)
