"""
Shared authentication helpers.
Provides password hashing and verification on top of Argon2.
"""

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError

# One hasher for the whole process; it is thread-safe and holds only parameters
ph = PasswordHasher()


# --- HASHING ---
def hash_password(password: str) -> str:
    """
    Hash a password with a freshly generated random salt.

    Args:
        password (str): The clear-text password.

    Returns:
        str: An encoded Argon2 hash. Salt and cost parameters are embedded,
             so the string alone is enough to verify later.

    Raises:
        argon2.exceptions.HashingError: If hashing fails.
    """
    return ph.hash(password)


# --- VERIFICATION ---
def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a clear-text password against a stored hash.

    Args:
        password (str): The password supplied by the client.
        password_hash (str): The stored Argon2 hash.

    Returns:
        bool: True if they match, False otherwise.

    Raises:
        argon2.exceptions.InvalidHashError: If the stored hash is malformed.
    """
    try:
        return ph.verify(password_hash, password)
    except VerifyMismatchError:
        return False


def needs_rehash(password_hash: str) -> bool:
    """
    Report whether a hash was made with parameters older than the current ones.
    """
    return ph.check_needs_rehash(password_hash)
