"""
SQLite schema for championship entities.
Each table created with IF NOT EXISTS; no migrations.
"""
from __future__ import annotations


def usuarios_schema() -> str:
    """Login credentials. Only the password hash is stored."""
    return """
    CREATE TABLE IF NOT EXISTS usuarios (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL
    );
    """


def partidas_schema() -> str:
    return """
    CREATE TABLE IF NOT EXISTS partidas (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        data TEXT NOT NULL,
        time_casa TEXT NOT NULL,
        time_visitante TEXT NOT NULL,
        placar_casa INTEGER NOT NULL,
        placar_visitante INTEGER NOT NULL
    );
    """


def jogadores_schema() -> str:
    """Players are looked up by nome, so it is unique."""
    return """
    CREATE TABLE IF NOT EXISTS jogadores (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        nome TEXT NOT NULL UNIQUE,
        idade INTEGER NOT NULL,
        posicao TEXT NOT NULL,
        time_q_joga TEXT NOT NULL
    );
    """


def times_schema() -> str:
    return """
    CREATE TABLE IF NOT EXISTS times (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        nome TEXT NOT NULL UNIQUE,
        logo_url TEXT NOT NULL
    );
    """


def all_schema_sql() -> str:
    return (
        usuarios_schema()
        + partidas_schema()
        + jogadores_schema()
        + times_schema()
    )
