"""
Serve the API with uvicorn on the configured port.
Run from project root: python -m campeonato.run_server
"""
from __future__ import annotations

import argparse

import uvicorn

from campeonato.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the championship API server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=settings.port, help="Defaults to $PORT or 3000")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    args = parser.parse_args()
    uvicorn.run("campeonato.api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
