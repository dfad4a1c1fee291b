"""Technician aggregate and its approval state machine."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from techcare.domain.shared.exceptions import ValidationError
from techcare.domain.shared.time import utc_now
from techcare_identity.domain.principal.exceptions import (
    IncompleteSetupError,
    TechnicianAlreadyApprovedError,
    TechnicianNotApprovedError,
)
from techcare_identity.domain.principal.value_objects import (
    Email,
    PhoneNumber,
    PrincipalRole,
    TechnicianStatus,
    normalize_full_name,
)

MIN_RATING = 0.0
MAX_RATING = 5.0
MIN_AGE = 18
MAX_AGE = 100


def _validate_rating(rating: float) -> float:
    if not MIN_RATING <= rating <= MAX_RATING:
        msg = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
        raise ValidationError(msg)
    return float(rating)


def _validate_age(age: int) -> int:
    if not MIN_AGE <= age <= MAX_AGE:
        msg = f"Age must be between {MIN_AGE} and {MAX_AGE}"
        raise ValidationError(msg)
    return age


class Technician:
    """
    Technician aggregate root.

    A technician signs up without a password. Approval is the only path that
    sets one, and login is possible only while the technician is APPROVED
    and has a password hash.
    """

    def __init__(  # NOQA: PLR0913
        self,
        full_name: str,
        email: Union[str, Email],
        phone_number: Union[str, PhoneNumber],
        age: int,
        gender: str,
        specialization: str,
        rating: float = MIN_RATING,
        image_url: Optional[str] = None,
        certification_url: Optional[str] = None,
        password_hash: Optional[str] = None,
        status: Union[str, TechnicianStatus] = TechnicianStatus.PENDING,
        is_available: bool = True,
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
        self._age = _validate_age(age)
        self._gender = gender.strip()
        self._specialization = specialization.strip()
        self._rating = _validate_rating(rating)
        self._image_url = image_url
        self._certification_url = certification_url
        self._password_hash = password_hash
        self._status = (
            status if isinstance(status, TechnicianStatus) else TechnicianStatus(status)
        )
        self._is_available = is_available
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
    def age(self) -> int:
        return self._age

    @property
    def gender(self) -> str:
        return self._gender

    @property
    def specialization(self) -> str:
        return self._specialization

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def image_url(self) -> Optional[str]:
        return self._image_url

    @property
    def certification_url(self) -> Optional[str]:
        return self._certification_url

    @property
    def password_hash(self) -> Optional[str]:
        return self._password_hash

    @property
    def status(self) -> TechnicianStatus:
        return self._status

    @property
    def is_available(self) -> bool:
        return self._is_available

    @property
    def role(self) -> PrincipalRole:
        return PrincipalRole.TECHNICIAN

    @property
    def is_approved(self) -> bool:
        return self._status == TechnicianStatus.APPROVED

    @property
    def can_accept_orders(self) -> bool:
        return (
            self.is_approved
            and self._is_available
            and self._status != TechnicianStatus.SUSPENDED
        )

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def ensure_can_login(self) -> None:
        """Enforce the approval gate.

        Raises
        ------
        TechnicianNotApprovedError
            If status is anything other than APPROVED
        IncompleteSetupError
            If approved but no password hash is set
        """
        if self._status != TechnicianStatus.APPROVED:
            raise TechnicianNotApprovedError(self._status.value)
        if not self._password_hash:
            raise IncompleteSetupError()

    def approve(self, password_hash: str) -> None:
        """Move to APPROVED with a freshly generated password hash."""
        if self._status == TechnicianStatus.APPROVED:
            raise TechnicianAlreadyApprovedError(self._id)
        self._password_hash = password_hash
        self._status = TechnicianStatus.APPROVED
        self._updated_at = utc_now()

    def reject(self) -> None:
        """Move to REJECTED. Rejecting twice is allowed."""
        self._status = TechnicianStatus.REJECTED
        self._updated_at = utc_now()

    def suspend(self) -> None:
        self._status = TechnicianStatus.SUSPENDED
        self._updated_at = utc_now()

    def attach_documents(
        self,
        image_url: Optional[str] = None,
        certification_url: Optional[str] = None,
    ) -> None:
        if image_url is not None:
            self._image_url = image_url
        if certification_url is not None:
            self._certification_url = certification_url
        self._updated_at = utc_now()

    def set_availability(self, is_available: bool) -> None:
        self._is_available = is_available
        self._updated_at = utc_now()

    def update_rating(self, rating: float) -> None:
        self._rating = _validate_rating(rating)
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        full_name: str,
        email: Union[str, Email],
        phone_number: Union[str, PhoneNumber],
        age: int,
        gender: str,
        specialization: str,
    ) -> "Technician":
        return cls(
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            age=age,
            gender=gender,
            specialization=specialization,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        full_name: str,
        email: str,
        phone_number: str,
        age: int,
        gender: str,
        specialization: str,
        rating: float,
        image_url: Optional[str],
        certification_url: Optional[str],
        password_hash: Optional[str],
        status: str,
        is_available: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Technician":
        return cls(
            id=id,
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            age=age,
            gender=gender,
            specialization=specialization,
            rating=rating,
            image_url=image_url,
            certification_url=certification_url,
            password_hash=password_hash,
            status=status,
            is_available=is_available,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Technician):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Technician(id={self._id}, email={self._email.value}, "
            f"status={self._status.value})"
        )
