"""
Data models for the championship backend.
Domain objects only — no persistence or API logic.

Field names follow the stored columns, which are also the keys clients
see when listing resources.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


# ---------- Credential ----------
@dataclass
class Credential:
    """Login identity. password_hash is never exposed over the API."""
    id: int
    username: str
    password_hash: str


# ---------- Match (partida) ----------
@dataclass
class Match:
    data: str
    time_casa: str
    time_visitante: str
    placar_casa: int
    placar_visitante: int
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        # id first, like the row order in the table
        return {"id": d.pop("id"), **d}


# ---------- Player (jogador) ----------
@dataclass
class Player:
    """A player is addressed by nome externally; id is the internal row id."""
    nome: str
    idade: int
    posicao: str
    time_q_joga: str
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        return {"id": d.pop("id"), **d}


# ---------- Team (time) ----------
@dataclass
class Team:
    nome: str
    logo_url: str
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "nome": self.nome, "logo_url": self.logo_url}
