import psycopg2
import pytest

from backend.database import db_connection
from backend.database.db_connection import create_pool, get_db
from backend.database.init_db import init_db


def test_create_pool_uses_dict_cursor(mocker):
    mock_pool_cls = mocker.patch.object(db_connection, "ThreadedConnectionPool")

    pool = create_pool("postgresql://localhost/test", 2, 5)

    assert pool is mock_pool_cls.return_value
    mock_pool_cls.assert_called_once_with(
        2, 5, "postgresql://localhost/test", cursor_factory=db_connection.DictCursor
    )


def test_create_pool_failure_is_raised(mocker):
    mocker.patch.object(
        db_connection, "ThreadedConnectionPool", side_effect=psycopg2.OperationalError("refused")
    )

    with pytest.raises(psycopg2.OperationalError):
        create_pool("postgresql://localhost/test")


def test_get_db_returns_connection_on_error(mock_db):
    mock_pool, mock_conn, _ = mock_db

    with pytest.raises(RuntimeError):
        with get_db(mock_pool) as conn:
            assert conn is mock_conn
            raise RuntimeError("boom")

    mock_pool.putconn.assert_called_once_with(mock_conn)


def test_init_db_applies_schema(mock_db):
    mock_pool, _, mock_cursor = mock_db
    mock_cursor.fetchone.return_value = ["users"]

    assert init_db(mock_pool) is True

    schema_sql = mock_cursor.execute.call_args_list[0][0][0]
    assert "CREATE TABLE IF NOT EXISTS users" in schema_sql
    assert "email VARCHAR(255) NOT NULL UNIQUE" in schema_sql


def test_init_db_reports_missing_table(mock_db):
    mock_pool, _, mock_cursor = mock_db
    mock_cursor.fetchone.return_value = [None]

    assert init_db(mock_pool) is False
