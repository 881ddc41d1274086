"""
Service layer: resource operations over the repositories.
Validation happens here, before any transaction is opened.
"""
from .resources import MatchService, PlayerService, TeamService, require

__all__ = [
    "MatchService",
    "PlayerService",
    "TeamService",
    "require",
]
