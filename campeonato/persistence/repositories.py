"""
Repository interfaces for championship data.
No business logic and no commits — callers own the transaction.
"""
from __future__ import annotations

import sqlite3

from campeonato.models import Credential, Match, Player, Team


# ---------- CredentialRepository ----------


class CredentialRepository:
    """Login credentials (usuarios)."""

    def create(self, conn: sqlite3.Connection, username: str, password_hash: str) -> int:
        cur = conn.execute(
            "INSERT INTO usuarios (username, password_hash) VALUES (?, ?)",
            (username, password_hash),
        )
        return int(cur.lastrowid)

    def get_by_username(self, conn: sqlite3.Connection, username: str) -> Credential | None:
        row = conn.execute(
            "SELECT id, username, password_hash FROM usuarios WHERE username = ?",
            (username,),
        ).fetchone()
        if row is None:
            return None
        return Credential(id=row["id"], username=row["username"], password_hash=row["password_hash"])


# ---------- MatchRepository ----------


def _row_to_match(row: sqlite3.Row) -> Match:
    return Match(
        id=row["id"],
        data=row["data"],
        time_casa=row["time_casa"],
        time_visitante=row["time_visitante"],
        placar_casa=row["placar_casa"],
        placar_visitante=row["placar_visitante"],
    )


class MatchRepository:
    """CRUD for partidas, keyed by id."""

    def list_all(self, conn: sqlite3.Connection) -> list[Match]:
        rows = conn.execute(
            "SELECT id, data, time_casa, time_visitante, placar_casa, placar_visitante FROM partidas"
        ).fetchall()
        return [_row_to_match(r) for r in rows]

    def get(self, conn: sqlite3.Connection, match_id: int | str) -> Match | None:
        row = conn.execute(
            "SELECT id, data, time_casa, time_visitante, placar_casa, placar_visitante FROM partidas WHERE id = ?",
            (match_id,),
        ).fetchone()
        return _row_to_match(row) if row is not None else None

    def insert(self, conn: sqlite3.Connection, match: Match) -> int:
        cur = conn.execute(
            "INSERT INTO partidas (data, time_casa, time_visitante, placar_casa, placar_visitante) VALUES (?, ?, ?, ?, ?)",
            (match.data, match.time_casa, match.time_visitante, match.placar_casa, match.placar_visitante),
        )
        return int(cur.lastrowid)

    def update(self, conn: sqlite3.Connection, match_id: int | str, match: Match) -> int:
        cur = conn.execute(
            """UPDATE partidas
               SET data = ?, time_casa = ?, time_visitante = ?, placar_casa = ?, placar_visitante = ?
               WHERE id = ?""",
            (match.data, match.time_casa, match.time_visitante, match.placar_casa, match.placar_visitante, match_id),
        )
        return cur.rowcount

    def delete(self, conn: sqlite3.Connection, match_id: int | str) -> int:
        return conn.execute("DELETE FROM partidas WHERE id = ?", (match_id,)).rowcount


# ---------- PlayerRepository ----------


def _row_to_player(row: sqlite3.Row) -> Player:
    return Player(
        id=row["id"],
        nome=row["nome"],
        idade=row["idade"],
        posicao=row["posicao"],
        time_q_joga=row["time_q_joga"],
    )


class PlayerRepository:
    """CRUD for jogadores, keyed by nome."""

    def list_all(self, conn: sqlite3.Connection) -> list[Player]:
        rows = conn.execute("SELECT id, nome, idade, posicao, time_q_joga FROM jogadores").fetchall()
        return [_row_to_player(r) for r in rows]

    def get_by_name(self, conn: sqlite3.Connection, nome: str) -> Player | None:
        row = conn.execute(
            "SELECT id, nome, idade, posicao, time_q_joga FROM jogadores WHERE nome = ?",
            (nome,),
        ).fetchone()
        return _row_to_player(row) if row is not None else None

    def insert(self, conn: sqlite3.Connection, player: Player) -> int:
        cur = conn.execute(
            "INSERT INTO jogadores (nome, idade, posicao, time_q_joga) VALUES (?, ?, ?, ?)",
            (player.nome, player.idade, player.posicao, player.time_q_joga),
        )
        return int(cur.lastrowid)

    def update(self, conn: sqlite3.Connection, nome: str, player: Player) -> int:
        """Replace every column of the row named nome; player.nome may be a new name."""
        cur = conn.execute(
            "UPDATE jogadores SET nome = ?, idade = ?, posicao = ?, time_q_joga = ? WHERE nome = ?",
            (player.nome, player.idade, player.posicao, player.time_q_joga, nome),
        )
        return cur.rowcount

    def delete(self, conn: sqlite3.Connection, nome: str) -> int:
        return conn.execute("DELETE FROM jogadores WHERE nome = ?", (nome,)).rowcount


# ---------- TeamRepository ----------


class TeamRepository:
    """CRUD for times, keyed by nome. Only logo_url is mutable."""

    def list_all(self, conn: sqlite3.Connection) -> list[Team]:
        rows = conn.execute("SELECT id, nome, logo_url FROM times").fetchall()
        return [Team(id=r["id"], nome=r["nome"], logo_url=r["logo_url"]) for r in rows]

    def get_by_name(self, conn: sqlite3.Connection, nome: str) -> Team | None:
        row = conn.execute("SELECT id, nome, logo_url FROM times WHERE nome = ?", (nome,)).fetchone()
        if row is None:
            return None
        return Team(id=row["id"], nome=row["nome"], logo_url=row["logo_url"])

    def insert(self, conn: sqlite3.Connection, team: Team) -> int:
        cur = conn.execute("INSERT INTO times (nome, logo_url) VALUES (?, ?)", (team.nome, team.logo_url))
        return int(cur.lastrowid)

    def update_logo(self, conn: sqlite3.Connection, nome: str, logo_url: str) -> int:
        return conn.execute("UPDATE times SET logo_url = ? WHERE nome = ?", (logo_url, nome)).rowcount

    def delete(self, conn: sqlite3.Connection, nome: str) -> int:
        return conn.execute("DELETE FROM times WHERE nome = ?", (nome,)).rowcount
