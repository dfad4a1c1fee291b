"""JWT token service.

Issues and parses the signed bearer tokens used by every role.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

import jwt

from techcare_auth.exceptions import InvalidTokenError
from techcare_auth.schemas import TokenPayload

BEARER_PREFIX = "Bearer "


class JWTService:
    """Service for bearer token creation and verification.

    Tokens carry the subject email (``sub``) and a comma-joined role list
    (``roles``). They are stateless: a valid signature on an unexpired
    token is the whole proof of authentication.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue("user@example.com", ["CUSTOMER"])
    >>> payload = service.parse(f"Bearer {token}")
    >>> print(payload.subject_email)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def expires_in_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def issue(
        self,
        subject_email: str,
        roles: Iterable[str],
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed token for a principal.

        Parameters
        ----------
        subject_email
            The principal's email address
        roles
            Role identifiers to embed
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": subject_email,
            "roles": ",".join(sorted(set(roles))),
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def parse(self, token: str) -> TokenPayload:
        """Verify and decode a token.

        A leading ``"Bearer "`` (case-sensitive) is stripped first.

        Parameters
        ----------
        token
            The token string, with or without the scheme prefix

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or malformed
        """
        if token.startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX) :]

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )

            subject_email = payload["sub"]
            raw_roles = payload.get("roles", "")
            roles = frozenset(r.strip() for r in raw_roles.split(",") if r.strip())

            return TokenPayload(
                subject_email=subject_email,
                roles=roles,
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, AttributeError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
