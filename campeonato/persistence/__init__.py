"""
Persistence layer for championship data.
No business logic — only read/write interfaces and the transaction helper.
"""
from .db import get_connection, init_db, transaction
from .repositories import (
    CredentialRepository,
    MatchRepository,
    PlayerRepository,
    TeamRepository,
)

__all__ = [
    "get_connection",
    "init_db",
    "transaction",
    "CredentialRepository",
    "MatchRepository",
    "PlayerRepository",
    "TeamRepository",
]
