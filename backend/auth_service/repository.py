"""
Data access for the `users` table.

Only reads and writes rows; validation and hashing live in the routes.
"""

from typing import Optional

import psycopg2.errors

from backend.auth_service.errors import ConflictError
from backend.auth_service.models import User
from backend.database.db_connection import get_db


class UserRepository:
    """
    Parameterized queries over `users`, sharing one connection pool.

    Each call borrows its own connection, so the existence check in
    registration and the insert that follows do not share a transaction.
    """

    def __init__(self, pool):
        self.pool = pool

    def find_by_email(self, email: str) -> Optional[User]:
        sql = "SELECT id, name, email, password_hash FROM users WHERE email = %s;"

        with get_db(self.pool) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (email,))
                row = cur.fetchone()

        return User.from_row(row) if row else None

    def insert(self, name: str, email: str, password_hash: str) -> User:
        """
        Store a new user and return it without its hash.

        Raises:
            ConflictError: If the store's unique constraint on email fires.
            psycopg2.Error: On any other database failure.
        """
        sql = """
            INSERT INTO users (name, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id, name, email;
        """

        try:
            with get_db(self.pool) as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (name, email, password_hash))
                    row = cur.fetchone()
        except psycopg2.errors.UniqueViolation:
            raise ConflictError()

        return User.from_row(row)

    def close(self) -> None:
        """Close every pooled connection."""
        self.pool.closeall()
