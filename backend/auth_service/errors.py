"""
Exceptions raised by the authentication service.

Every error carries the HTTP status it maps to and a message that is safe to
show the client. Handlers raise them; the blueprint's error handler turns them
into JSON responses.
"""

from typing import Optional


class AuthServiceError(Exception):
    """Base class for all authentication service errors."""

    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(AuthServiceError):
    """A required field is missing, empty, or of the wrong type."""

    status_code = 400
    default_message = "All fields are required."


class ConflictError(AuthServiceError):
    """A user with the same email already exists."""

    status_code = 409
    default_message = "This email is already registered."


class AuthenticationError(AuthServiceError):
    """
    Credentials did not match.

    Raised for both an unknown email and a wrong password so the caller
    cannot tell which one was wrong.
    """

    status_code = 401
    default_message = "Invalid credentials."


class InternalError(AuthServiceError):
    """Datastore or hashing failure. Details are logged, never returned."""

    status_code = 500
    default_message = "Internal server error."
