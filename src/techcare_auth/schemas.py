"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded bearer token payload.

    Attributes
    ----------
    subject_email
        Email address of the principal the token was issued to
    roles
        Role identifiers carried by the token (order-insensitive)
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    subject_email: str
    roles: frozenset[str]
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at

    def has_role(self, role: str) -> bool:
        return role in self.roles
