"""
Authentication service route handlers.

Provides routes for:
- User registration
- User login

Both accept a JSON body or an HTML form post. Hashing is delegated to
`auth_service.utils` and storage to the `UserRepository` that the app factory
places in `current_app.extensions["user_repository"]`.

No session or token is issued on login; the front end keeps its own
"logged in" flag.
"""

import logging
from typing import Any, Dict, Iterable, Tuple

import psycopg2
from argon2.exceptions import HashingError, InvalidHashError, VerificationError
from flask import Blueprint, Response, current_app, jsonify, request

from backend.auth_service.errors import (
    AuthenticationError,
    AuthServiceError,
    ConflictError,
    InternalError,
    ValidationError,
)
from backend.auth_service.repository import UserRepository
from backend.auth_service.utils import hash_password, needs_rehash, verify_password

auth_bp = Blueprint("auth", __name__)


# --- REQUEST LOGGING ---
@auth_bp.before_request
def before_request() -> None:
    """
    Log every incoming request method and path to the authentication service.
    Bodies are never logged since they carry passwords.
    """
    logging.info(f"[Auth] Incoming {request.method} {request.path}")


@auth_bp.after_request
def after_request(response: Response) -> Response:
    """
    Log the response status code for every request.

    Args:
        response (Response): The Flask response object.

    Returns:
        Response: The passed-through response object.
    """
    logging.info(f"[Auth] Response {response.status}")
    return response


# --- ERROR MAPPING ---
@auth_bp.errorhandler(AuthServiceError)
def handle_auth_error(error: AuthServiceError) -> Tuple[Response, int]:
    return jsonify(error.to_dict()), error.status_code


# --- HELPERS ---
def get_repository() -> UserRepository:
    return current_app.extensions["user_repository"]


def read_payload() -> Dict[str, Any]:
    """
    Return the request body as a dict, whether it was sent as JSON or as
    application/x-www-form-urlencoded.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def require_fields(data: Dict[str, Any], fields: Iterable[str], message: str) -> Dict[str, str]:
    """
    Pull the named fields out of the payload.

    Raises:
        ValidationError: If any field is absent, not a string, or empty.
    """
    values = {}
    for name in fields:
        value = data.get(name)
        if not isinstance(value, str):
            raise ValidationError(message)
        # Passwords are taken exactly as typed
        if name != "password":
            value = value.strip()
        if not value:
            raise ValidationError(message)
        values[name] = value

    if "email" in values:
        values["email"] = values["email"].lower()
    return values


# --- REGISTER ---
@auth_bp.route("/register", methods=["POST"])
def register() -> Tuple[Response, int]:
    """
    Register a new user in the system.

    Expects a JSON or form body with:
    - name (str)
    - email (str): Unique email address.
    - password (str)

    Returns:
        201: JSON with a message and the new user's id, name and email.
        400: Missing or empty fields.
        409: Email already registered.
        500: Server-side error (hashing or database).
    """
    fields = require_fields(
        read_payload(), ("name", "email", "password"), "All fields are required."
    )
    repo = get_repository()

    try:
        if repo.find_by_email(fields["email"]) is not None:
            raise ConflictError()
        pw_hash = hash_password(fields["password"])
        user = repo.insert(fields["name"], fields["email"], pw_hash)
    except (psycopg2.Error, HashingError):
        logging.exception("Error registering user")
        raise InternalError()

    logging.info(f"[Auth] Registered user id={user.id}")

    return jsonify({
        "message": "User registered successfully.",
        "user": user.to_public(),
    }), 201


# --- LOGIN ---
@auth_bp.route("/login", methods=["POST"])
def login() -> Tuple[Response, int]:
    """
    Check a user's credentials.

    Expects a JSON or form body with:
    - email (str)
    - password (str)

    Returns:
        200: JSON with a message and the user's id, name and email.
        400: Missing credentials.
        401: Invalid credentials (wrong password or unknown email).
        500: Database error or corrupt stored hash.
    """
    fields = require_fields(
        read_payload(), ("email", "password"), "Email and password are required."
    )
    repo = get_repository()

    try:
        user = repo.find_by_email(fields["email"])
        if user is None or not verify_password(fields["password"], user.password_hash):
            raise AuthenticationError()
    except (psycopg2.Error, InvalidHashError, VerificationError):
        logging.exception("Error logging in user")
        raise InternalError()

    if needs_rehash(user.password_hash):
        logging.info(f"[Auth] Stored hash for user id={user.id} uses outdated parameters")

    return jsonify({
        "message": "Login successful.",
        "user": user.to_public(),
    }), 200
