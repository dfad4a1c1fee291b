"""Auth context for request-scoped caller identity."""

from __future__ import annotations

from dataclasses import dataclass

from techcare_auth.schemas import TokenPayload
from techcare_identity.domain.principal import PrincipalRole


@dataclass(frozen=True)
class AuthContext:
    """Immutable identity of the caller, resolved once per request.

    Built by the access gate from a verified token and passed explicitly to
    whatever needs to know who is calling.
    """

    subject_email: str
    roles: frozenset[str]
    token: str

    @classmethod
    def from_payload(cls, payload: TokenPayload, token: str) -> AuthContext:
        return cls(
            subject_email=payload.subject_email,
            roles=payload.roles,
            token=token,
        )

    def has_role(self, role: PrincipalRole) -> bool:
        return role.value in self.roles

    def __str__(self) -> str:
        return f"AuthContext({self.subject_email})"

    def __repr__(self) -> str:
        return (
            f"AuthContext(subject_email={self.subject_email!r}, "
            f"roles={sorted(self.roles)!r})"
        )
