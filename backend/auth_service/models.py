"""
User model for the authentication service.

Mirrors one row of the `users` table. The password hash is only populated
when the row was read for a login check; it never leaves the service.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass
class User:
    id: int
    name: str
    email: str
    password_hash: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        """
        Build a User from a DictCursor row.

        Works for both full rows and `RETURNING id, name, email` rows.
        """
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row.get("password_hash"),
        )

    def to_public(self) -> Dict[str, Any]:
        """Fields safe to send to the client."""
        return {"id": self.id, "name": self.name, "email": self.email}
