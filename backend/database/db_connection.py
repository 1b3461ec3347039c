"""
PostgreSQL connection helpers.
Provides create_pool() to build the shared pool and get_db() to borrow from it.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2.extras import DictCursor
from psycopg2.pool import ThreadedConnectionPool


def create_pool(dsn: str, minconn: int = 1, maxconn: int = 10) -> ThreadedConnectionPool:
    """
    Build a thread-safe connection pool whose cursors return dictionary rows.

    Args:
        dsn (str): libpq connection string or URL.
        minconn (int): Connections opened up front.
        maxconn (int): Upper bound on open connections.

    Returns:
        ThreadedConnectionPool: The pool shared by every request.

    Raises:
        psycopg2.Error: If the initial connections cannot be opened.
    """
    try:
        pool = ThreadedConnectionPool(minconn, maxconn, dsn, cursor_factory=DictCursor)
    except psycopg2.Error:
        logging.exception("Error connecting to database")
        # Re-raise so startup fails loudly
        raise
    logging.info(f"Database pool ready (min={minconn}, max={maxconn})")
    return pool


@contextmanager
def get_db(pool: ThreadedConnectionPool) -> Iterator["psycopg2.extensions.connection"]:
    """
    Borrow a connection from the pool for the duration of a `with` block.

    Commits when the block exits cleanly, rolls back on any exception, and
    always hands the connection back.

    Usage:
        with get_db(pool) as conn:
            with conn.cursor() as cur:
                cur.execute(...)
    """
    conn = pool.getconn()
    try:
        with conn:
            yield conn
    finally:
        pool.putconn(conn)
