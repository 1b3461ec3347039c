import pytest

from backend.auth_service.errors import ConflictError
from backend.auth_service.models import User
from backend.gateway.config import Settings
from backend.gateway.server import create_app


class InMemoryUserRepository:
    """
    Stand-in for UserRepository that keeps users in a dict keyed by email.
    """

    def __init__(self):
        self.users = {}
        self.next_id = 1

    def find_by_email(self, email):
        return self.users.get(email)

    def insert(self, name, email, password_hash):
        if email in self.users:
            raise ConflictError()
        user = User(id=self.next_id, name=name, email=email, password_hash=password_hash)
        self.users[email] = user
        self.next_id += 1
        return User(id=user.id, name=user.name, email=user.email)


@pytest.fixture
def public_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Welcome</h1>", encoding="utf-8")
    (tmp_path / "dashboard.html").write_text("<h1>Dashboard</h1>", encoding="utf-8")
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "auth.js").write_text("// auth", encoding="utf-8")
    return tmp_path


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def app(public_dir, repository):
    settings = Settings(public_dir=public_dir)
    app = create_app(settings=settings, repository=repository)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mock_db(mocker):
    """
    Mocks the connection pool, connection and cursor.
    """
    mock_pool = mocker.Mock()
    mock_conn = mocker.MagicMock()
    mock_cursor = mocker.MagicMock()

    # Setup the context manager for connection
    mock_conn.__enter__.return_value = mock_conn
    mock_conn.__exit__.return_value = None

    # Setup the context manager for cursor
    mock_cursor.__enter__.return_value = mock_cursor
    mock_cursor.__exit__.return_value = None

    # Connect cursor to connection, connection to pool
    mock_conn.cursor.return_value = mock_cursor
    mock_pool.getconn.return_value = mock_conn

    return mock_pool, mock_conn, mock_cursor
