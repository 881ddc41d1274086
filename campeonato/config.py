"""
Application settings, read once from the environment (and .env when present).
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_db_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "campeonato.db"


class Settings(BaseSettings):
    """Process-wide configuration. Immutable after load."""

    jwt_secret: str = "dev-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    token_expire_seconds: int = 60 * 60  # 1 hour

    database_path: Path = _default_db_path()

    # Comma separated; "*" allows any origin
    cors_origins: str = "*"

    log_level: str = "INFO"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # JWT_SECRET == jwt_secret
        frozen=True,
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
