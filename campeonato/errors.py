"""
Error taxonomy shared by the token gate, services and HTTP layer.
Each error knows its HTTP status; the API maps them to {"error": message}.
"""
from __future__ import annotations


class ApiError(Exception):
    """Base for errors that carry a user-visible message and a status code."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequest(ApiError):
    """Missing or invalid input fields, empty batch."""

    status_code = 400


class Unauthenticated(ApiError):
    """Missing token or invalid credentials."""

    status_code = 401


class Forbidden(ApiError):
    """Token present but invalid or expired."""

    status_code = 403


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    """Unique name already taken."""

    status_code = 409


INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"
