"""
Input schemas per entity and a pure validation step.
Each field accepts the stored column name (Portuguese) or the English name.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from campeonato.models import Match, Player, Team


# Largest value an SQLite INTEGER column holds
SQLITE_INT_MAX = 2**63 - 1


def _number(*names: str) -> Any:
    return Field(..., ge=0, le=SQLITE_INT_MAX, validation_alias=AliasChoices(*names))


def _text(*names: str) -> Any:
    # Empty strings count as missing
    return Field(..., min_length=1, validation_alias=AliasChoices(*names))


class _Input(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class MatchIn(_Input):
    """Full match; required on create and on update."""
    date: str = _text("data", "date")
    home_team: str = _text("time_casa", "home_team")
    away_team: str = _text("time_visitante", "away_team")
    home_score: int = _number("placar_casa", "home_score")
    away_score: int = _number("placar_visitante", "away_score")

    def to_match(self) -> Match:
        return Match(
            data=self.date,
            time_casa=self.home_team,
            time_visitante=self.away_team,
            placar_casa=self.home_score,
            placar_visitante=self.away_score,
        )


class PlayerIn(_Input):
    name: str = _text("nome", "name")
    age: int = _number("idade", "age")
    position: str = _text("posicao", "position")
    team: str = _text("time_q_joga", "team")

    def to_player(self) -> Player:
        return Player(nome=self.name, idade=self.age, posicao=self.position, time_q_joga=self.team)


class PlayerUpdateIn(_Input):
    """Player update: the row is found by its current name; new_name replaces it."""
    new_name: str = _text("novoNome", "new_name")
    age: int = _number("idade", "age")
    position: str = _text("posicao", "position")
    team: str = _text("time_q_joga", "team")

    def to_player(self) -> Player:
        return Player(nome=self.new_name, idade=self.age, posicao=self.position, time_q_joga=self.team)


class TeamIn(_Input):
    name: str = _text("nome", "name")
    logo_url: str = _text("logo_url")

    def to_team(self) -> Team:
        return Team(nome=self.name, logo_url=self.logo_url)


class TeamLogoIn(_Input):
    logo_url: str = _text("logo_url")


class LoginIn(BaseModel):
    """Credentials are compared exactly as sent; no whitespace stripping."""
    model_config = ConfigDict(extra="ignore")

    username: str | None = None
    password: str | None = None


M = TypeVar("M", bound=BaseModel)


@dataclass
class ValidationResult(Generic[M]):
    value: M | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def validate(model: type[M], payload: Any) -> ValidationResult[M]:
    """
    Validate one JSON object against model.
    Never raises; errors name the offending fields.
    """
    if not isinstance(payload, dict):
        return ValidationResult(errors=["body must be a JSON object"])
    try:
        return ValidationResult(value=model.model_validate(payload))
    except ValidationError as e:
        errors = []
        for err in e.errors():
            loc = ".".join(str(p) for p in err["loc"]) or "body"
            errors.append(f"{loc}: {err['msg']}")
        return ValidationResult(errors=errors)
