"""
Tests for input validation. validate() is pure: no store, no HTTP.
"""
from __future__ import annotations

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from campeonato.schemas import LoginIn, MatchIn, PlayerIn, PlayerUpdateIn, TeamIn, TeamLogoIn, validate

MATCH = {"data": "2024-01-01", "time_casa": "X", "time_visitante": "Y", "placar_casa": 1, "placar_visitante": 2}


def test_match_accepts_column_names():
    result = validate(MatchIn, MATCH)
    assert result.ok
    m = result.value.to_match()
    assert m.data == "2024-01-01"
    assert m.time_casa == "X"
    assert m.placar_visitante == 2


def test_match_accepts_english_names():
    result = validate(
        MatchIn,
        {"date": "2024-01-01", "home_team": "X", "away_team": "Y", "home_score": 1, "away_score": 2},
    )
    assert result.ok
    assert result.value.to_match().time_visitante == "Y"


def test_match_zero_score_is_valid():
    result = validate(MatchIn, {**MATCH, "placar_casa": 0, "placar_visitante": 0})
    assert result.ok
    assert result.value.home_score == 0


@pytest.mark.parametrize("field", list(MATCH))
def test_match_missing_field(field):
    payload = {k: v for k, v in MATCH.items() if k != field}
    result = validate(MatchIn, payload)
    assert not result.ok
    assert result.value is None
    assert result.errors


@pytest.mark.parametrize("value", [None, "", "   "])
def test_match_blank_team_is_missing(value):
    assert not validate(MatchIn, {**MATCH, "time_casa": value}).ok


def test_match_non_numeric_score():
    assert not validate(MatchIn, {**MATCH, "placar_casa": "many"}).ok


@pytest.mark.parametrize("payload", [None, [], "text", 3])
def test_non_object_payload(payload):
    result = validate(MatchIn, payload)
    assert not result.ok
    assert result.errors == ["body must be a JSON object"]


def test_player_create():
    result = validate(PlayerIn, {"nome": "Ana", "idade": 22, "posicao": "ala", "time_q_joga": "Flamengo"})
    assert result.ok
    p = result.value.to_player()
    assert (p.nome, p.idade, p.posicao, p.time_q_joga) == ("Ana", 22, "ala", "Flamengo")


def test_player_update_requires_new_name():
    body = {"idade": 23, "posicao": "ala", "time_q_joga": "Flamengo"}
    assert not validate(PlayerUpdateIn, body).ok
    result = validate(PlayerUpdateIn, {**body, "novoNome": "Ana Maria"})
    assert result.ok
    assert result.value.to_player().nome == "Ana Maria"


def test_player_update_ignores_nome_as_new_name():
    body = {"nome": "Ana Maria", "idade": 23, "posicao": "ala", "time_q_joga": "Flamengo"}
    assert not validate(PlayerUpdateIn, body).ok


def test_team_requires_both_fields():
    assert validate(TeamIn, {"nome": "Flamengo", "logo_url": "http://x/f.png"}).ok
    assert not validate(TeamIn, {"nome": "Flamengo"}).ok
    assert not validate(TeamIn, {"logo_url": "http://x/f.png"}).ok


def test_team_logo_update_only_needs_logo():
    result = validate(TeamLogoIn, {"logo_url": "http://x/new.png", "nome": "ignored"})
    assert result.ok
    assert result.value.logo_url == "http://x/new.png"


def test_score_at_sqlite_integer_limit():
    assert validate(MatchIn, {**MATCH, "placar_casa": 2**63 - 1}).ok


@pytest.mark.parametrize("score", [2**63, 2**70, -1])
def test_score_out_of_range(score):
    assert not validate(MatchIn, {**MATCH, "placar_casa": score}).ok


def test_player_age_out_of_range():
    body = {"nome": "Ana", "idade": 2**64, "posicao": "ala", "time_q_joga": "Flamengo"}
    assert not validate(PlayerIn, body).ok


def test_login_keeps_whitespace():
    result = validate(LoginIn, {"username": "a", "password": " pass "})
    assert result.ok
    assert result.value.password == " pass "
