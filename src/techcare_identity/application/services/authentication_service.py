"""Authentication service for login, token resolution and password change."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from techcare_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from techcare_identity.domain.principal import (
    Principal,
    PrincipalRepository,
    PrincipalRole,
)
from techcare_identity.exceptions import SubjectNotFoundError, UnauthenticatedError

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Principal)


@dataclass(frozen=True)
class LoginResult(Generic[P]):
    principal: P
    access_token: str
    expires_in: int


class AuthenticationService(Generic[P]):
    """
    Application service for authenticating one kind of principal.

    One instance serves Admins, one Customers, one Technicians. Each is
    built from that kind's repository and role, and they share the token
    codec and password hasher.
    """

    def __init__(
        self,
        repository: PrincipalRepository[P],
        role: PrincipalRole,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._repo = repository
        self._role = role
        self._password_service = password_service
        self._jwt_service = jwt_service

    @property
    def role(self) -> PrincipalRole:
        return self._role

    def issue_token(self, principal: P) -> str:
        return self._jwt_service.issue(principal.email, [self._role.value])

    async def login(self, email: str, password: str) -> LoginResult[P]:
        """Verify credentials and issue a token.

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password doesn't match
        TechnicianNotApprovedError
            If a technician's application isn't approved
        IncompleteSetupError
            If an approved technician has no password
        """
        principal = await self._repo.find_by_email(email)
        if principal is None:
            logger.info("Login failed for unknown %s: %s", self._role.value, email)
            raise InvalidCredentialsError

        principal.ensure_can_login()

        if not self._password_service.verify(password, principal.password_hash):
            logger.info("Login failed for %s %s: bad password", self._role.value, email)
            raise InvalidCredentialsError

        logger.info("%s logged in: %s", self._role.value, principal.email)
        return LoginResult(
            principal=principal,
            access_token=self.issue_token(principal),
            expires_in=self._jwt_service.expires_in_seconds,
        )

    async def who_am_i(self, token: Optional[str]) -> P:
        """Resolve a token to the principal it was issued to.

        Raises
        ------
        UnauthenticatedError
            If no token was presented
        InvalidTokenError
            If the token fails verification
        SubjectNotFoundError
            If the token isn't for this kind of principal or the account
            no longer exists
        """
        if not token or not token.strip():
            raise UnauthenticatedError

        payload: TokenPayload = self._jwt_service.parse(token.strip())
        if not payload.has_role(self._role.value):
            logger.warning(
                "Token for %s lacks role %s",
                payload.subject_email,
                self._role.value,
            )
            raise SubjectNotFoundError

        principal = await self._repo.find_by_email(payload.subject_email)
        if principal is None:
            logger.warning(
                "Token subject no longer exists: %s (%s)",
                payload.subject_email,
                self._role.value,
            )
            raise SubjectNotFoundError
        return principal

    async def logout(self, token: Optional[str]) -> None:
        """End a session.

        Tokens are stateless, so there is nothing to revoke server-side.
        """
        logger.debug("Logout requested for a %s token", self._role.value)

    async def change_password(
        self,
        token: Optional[str],
        current_password: str,
        new_password: str,
    ) -> P:
        principal = await self.who_am_i(token)

        if not self._password_service.verify(current_password, principal.password_hash):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        principal.change_password_hash(self._password_service.hash(new_password))
        await self._repo.save(principal)

        logger.info("Password changed for %s: %s", self._role.value, principal.email)
        return principal
