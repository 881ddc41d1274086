"""
REST API for the championship backend.
Thin wrappers around the token gate and the resource services.
"""
from __future__ import annotations

import sqlite3
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generator

from fastapi import Body, Depends, FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campeonato.app_logger import get_logger, setup_logging
from campeonato.auth import TokenGate
from campeonato.config import Settings, get_settings
from campeonato.errors import INTERNAL_ERROR_MESSAGE, ApiError, BadRequest
from campeonato.persistence import get_connection, init_db
from campeonato.schemas import LoginIn
from campeonato.services import MatchService, PlayerService, TeamService, require

logger = get_logger(__name__)


# ---------- Dependencies ----------


def get_gate(request: Request) -> TokenGate:
    return request.app.state.gate


def db_conn(request: Request) -> Generator[sqlite3.Connection, None, None]:
    """Yield a per-request DB connection, ensure close on exit."""
    conn = get_connection(request.app.state.settings.database_path)
    try:
        yield conn
    finally:
        conn.close()


def current_user(
    authorization: str | None = Header(None),
    gate: TokenGate = Depends(get_gate),
) -> dict[str, Any]:
    """Token gate for protected routes: 401 without header, 403 for a bad or expired token."""
    return gate.authenticate(authorization)


# ---------- Error mapping ----------


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
    return _error(BadRequest.status_code, "Requisição inválida")


async def _internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Internal error on %s %s", request.method, request.url.path)
    return _error(500, INTERNAL_ERROR_MESSAGE)


# ---------- App factory ----------


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.log_level)
        init_db(settings.database_path)
        logger.info("Database ready at %s", settings.database_path)
        yield

    app = FastAPI(
        title="Campeonato API",
        description="Matches, players and teams behind token authentication",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gate = TokenGate(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    # sqlite3.Error is handled inside the app; the Exception fallback is the last resort
    app.add_exception_handler(sqlite3.Error, _internal_error_handler)
    app.add_exception_handler(Exception, _internal_error_handler)

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    matches = MatchService()
    players = PlayerService()
    teams = TeamService()

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/login")
    def login(
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
        gate: TokenGate = Depends(get_gate),
    ) -> dict[str, str]:
        """Exchange username/password for a token valid one hour."""
        creds = require(LoginIn, payload)
        return {"token": gate.issue(conn, creds.username, creds.password)}

    # ---------- Partidas ----------

    @app.get("/partidas", dependencies=[Depends(current_user)])
    def list_partidas(conn: sqlite3.Connection = Depends(db_conn)) -> list[dict[str, Any]]:
        return matches.list_all(conn)

    @app.post("/partidas", status_code=201, dependencies=[Depends(current_user)])
    def create_partidas(
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
    ) -> dict[str, Any]:
        """Body is one match or a list of matches; all or none are inserted."""
        ids = matches.create(conn, payload)
        return {"ids": ids, "message": "Partida(s) inseridas com sucesso"}

    @app.put("/partidas/{match_id}", dependencies=[Depends(current_user)])
    def update_partida(
        match_id: str,
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
    ) -> dict[str, str]:
        matches.update(conn, match_id, payload)
        return {"message": "Partida atualizada com sucesso"}

    @app.delete("/partidas/{match_id}", dependencies=[Depends(current_user)])
    def delete_partida(match_id: str, conn: sqlite3.Connection = Depends(db_conn)) -> dict[str, str]:
        matches.delete(conn, match_id)
        return {"message": "Partida excluída com sucesso"}

    # ---------- Jogadores ----------

    @app.get("/jogadores", dependencies=[Depends(current_user)])
    def list_jogadores(conn: sqlite3.Connection = Depends(db_conn)) -> list[dict[str, Any]]:
        return players.list_all(conn)

    @app.post("/jogadores", status_code=201, dependencies=[Depends(current_user)])
    def create_jogador(
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
    ) -> dict[str, Any]:
        ids = players.create(conn, payload)
        return {"ids": ids, "message": "Jogador(es) inseridos com sucesso"}

    @app.put("/jogadores/{nome}", dependencies=[Depends(current_user)])
    def update_jogador(
        nome: str,
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
    ) -> dict[str, str]:
        """Looks up by current name; body carries novoNome plus idade, posicao, time_q_joga."""
        players.update(conn, nome, payload)
        return {"message": "Jogador atualizado com sucesso"}

    @app.delete("/jogadores/{nome}", dependencies=[Depends(current_user)])
    def delete_jogador(nome: str, conn: sqlite3.Connection = Depends(db_conn)) -> dict[str, str]:
        players.delete(conn, nome)
        return {"message": "Jogador excluído com sucesso"}

    # ---------- Times ----------

    @app.get("/times", dependencies=[Depends(current_user)])
    def list_times(conn: sqlite3.Connection = Depends(db_conn)) -> list[dict[str, Any]]:
        return teams.list_all(conn)

    @app.post("/times", status_code=201, dependencies=[Depends(current_user)])
    def create_time(
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
    ) -> dict[str, Any]:
        ids = teams.create(conn, payload)
        return {"ids": ids, "message": "Time(s) inseridos com sucesso"}

    @app.put("/times/{nome}", dependencies=[Depends(current_user)])
    def update_time(
        nome: str,
        payload: Any = Body(None),
        conn: sqlite3.Connection = Depends(db_conn),
    ) -> dict[str, str]:
        """Only logo_url can be replaced."""
        teams.update_logo(conn, nome, payload)
        return {"message": "URL do logo do time atualizada com sucesso"}

    @app.delete("/times/{nome}", dependencies=[Depends(current_user)])
    def delete_time(nome: str, conn: sqlite3.Connection = Depends(db_conn)) -> dict[str, str]:
        teams.delete(conn, nome)
        return {"message": "Time excluído com sucesso"}


app = create_app()
