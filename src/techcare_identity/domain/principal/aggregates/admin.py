"""Admin aggregate."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from techcare.domain.shared.time import utc_now
from techcare_identity.domain.principal.value_objects import (
    Email,
    PhoneNumber,
    PrincipalRole,
    normalize_full_name,
)


class Admin:
    """
    Admin aggregate root.

    Admins are always active. After sign-up only the password can change.
    """

    def __init__(  # NOQA: PLR0913
        self,
        full_name: str,
        email: Union[str, Email],
        phone_number: Union[str, PhoneNumber],
        password_hash: str,
        image: Optional[str] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
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
    def role(self) -> PrincipalRole:
        return PrincipalRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def ensure_can_login(self) -> None:
        """Admins have no activation gate."""

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        full_name: str,
        email: Union[str, Email],
        phone_number: Union[str, PhoneNumber],
        password_hash: str,
        image: Optional[str] = None,
    ) -> "Admin":
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
        created_at: datetime,
        updated_at: datetime,
    ) -> "Admin":
        return cls(
            id=id,
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            password_hash=password_hash,
            image=image,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Admin):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Admin(id={self._id}, email={self._email.value})"
