"""Customer aggregate, including the password reset token slot."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from techcare.domain.shared.exceptions import BusinessRuleViolation
from techcare.domain.shared.time import ensure_tz_aware, utc_now
from techcare_identity.domain.principal.value_objects import (
    Email,
    PhoneNumber,
    PrincipalRole,
    normalize_full_name,
)


class Customer:
    """
    Customer aggregate root.

    Holds at most one live password reset token. Only the token's digest is
    kept, and the digest and its expiry are always set or cleared together.
    """

    def __init__(  # NOQA: PLR0913
        self,
        full_name: str,
        email: Union[str, Email],
        phone_number: Union[str, PhoneNumber],
        password_hash: str,
        image: Optional[str] = None,
        reset_token_hash: Optional[str] = None,
        reset_token_expires_at: Optional[datetime] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if (reset_token_hash is None) != (reset_token_expires_at is None):
            msg = "Reset token and its expiry must be set together"
            raise BusinessRuleViolation(msg)

        self._id = id or uuid4()
        self._full_name = normalize_full_name(full_name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._phone_number = (
            phone_number
            if isinstance(phone_number, PhoneNumber)
            else PhoneNumber(phone_number)
        )
        self._password_hash = password_hash
        self._image = image
        self._reset_token_hash = reset_token_hash
        self._reset_token_expires_at = (
            ensure_tz_aware(reset_token_expires_at) if reset_token_expires_at else None
        )
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def phone_number(self) -> str:
        return self._phone_number.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def image(self) -> Optional[str]:
        return self._image

    @property
    def reset_token_hash(self) -> Optional[str]:
        return self._reset_token_hash

    @property
    def reset_token_expires_at(self) -> Optional[datetime]:
        return self._reset_token_expires_at

    @property
    def role(self) -> PrincipalRole:
        return PrincipalRole.CUSTOMER

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def ensure_can_login(self) -> None:
        """Customers have no activation gate."""

    def update_profile(
        self,
        full_name: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> bool:
        """Apply non-blank profile fields.

        Returns True if anything changed.
        """
        changed = False

        if full_name is not None and full_name.strip():
            name = normalize_full_name(full_name)
            if name != self._full_name:
                self._full_name = name
                changed = True

        if phone_number is not None and phone_number.strip():
            phone = PhoneNumber(phone_number)
            if phone != self._phone_number:
                self._phone_number = phone
                changed = True

        if changed:
            self._updated_at = utc_now()
        return changed

    def set_image(self, image_url: str) -> None:
        self._image = image_url
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    def issue_reset_token(self, token_hash: str, expires_at: datetime) -> None:
        """Store a new reset token digest, replacing any previous one."""
        self._reset_token_hash = token_hash
        self._reset_token_expires_at = ensure_tz_aware(expires_at)
        self._updated_at = utc_now()

    def is_reset_token_valid(self, now: Optional[datetime] = None) -> bool:
        if self._reset_token_hash is None or self._reset_token_expires_at is None:
            return False
        return (now or utc_now()) < self._reset_token_expires_at

    def complete_password_reset(self, password_hash: str) -> None:
        """Set the new password and consume the reset token."""
        self._password_hash = password_hash
        self.clear_reset_token()

    def clear_reset_token(self) -> None:
        self._reset_token_hash = None
        self._reset_token_expires_at = None
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        full_name: str,
        email: Union[str, Email],
        phone_number: Union[str, PhoneNumber],
        password_hash: str,
        image: Optional[str] = None,
    ) -> "Customer":
        return cls(
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            password_hash=password_hash,
            image=image,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        full_name: str,
        email: str,
        phone_number: str,
        password_hash: str,
        image: Optional[str],
        reset_token_hash: Optional[str],
        reset_token_expires_at: Optional[datetime],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Customer":
        return cls(
            id=id,
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            password_hash=password_hash,
            image=image,
            reset_token_hash=reset_token_hash,
            reset_token_expires_at=reset_token_expires_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Customer(id={self._id}, email={self._email.value})"
