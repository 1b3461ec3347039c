"""
Create the database schema.

Applies schema.sql to the database configured in the environment (.env) and
then checks that the `users` table is present.

Usage:
    python -m backend.database.init_db
"""

import logging
import sys
from pathlib import Path

import psycopg2

from backend.database.db_connection import create_pool, get_db
from backend.gateway.config import Settings

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


def init_db(pool) -> bool:
    """
    Run schema.sql and report whether the users table exists afterwards.

    Args:
        pool: Connection pool to borrow from.

    Returns:
        bool: True if the `users` table is present.
    """
    sql = SCHEMA_PATH.read_text(encoding="utf-8")

    with get_db(pool) as conn:
        with conn.cursor() as cur:
            cur.execute(sql)
            cur.execute("SELECT to_regclass(%s);", ("users",))
            exists = cur.fetchone()[0]

    if exists:
        logging.info("users: Found")
    else:
        logging.error("users: MISSING")
    return bool(exists)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")
    settings = Settings.from_env()

    try:
        pool = create_pool(settings.database_dsn, 1, 1)
    except psycopg2.Error:
        return 1

    try:
        ok = init_db(pool)
    except psycopg2.Error:
        logging.exception("Schema creation FAILED")
        return 1
    finally:
        pool.closeall()

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
