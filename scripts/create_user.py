#!/usr/bin/env python3
"""
Provision a login credential (password stored hashed).
Run from project root: python3 scripts/create_user.py USERNAME PASSWORD
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from campeonato.auth import create_credential
from campeonato.config import get_settings
from campeonato.errors import ApiError
from campeonato.persistence import get_connection, init_db


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a user that can log in to the API.")
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("--db", type=Path, default=None, help="Database file (default: $DATABASE_PATH)")
    args = parser.parse_args()

    db_path = args.db or get_settings().database_path
    init_db(db_path)
    conn = get_connection(db_path)
    try:
        uid = create_credential(conn, args.username, args.password)
    except ApiError as e:
        raise SystemExit(e.message)
    finally:
        conn.close()
    print(f"Created user {args.username!r} (id={uid}) in {db_path}")


if __name__ == "__main__":
    main()
