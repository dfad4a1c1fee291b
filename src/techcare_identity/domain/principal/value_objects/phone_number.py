"""Phone number value object (Rwandan numbering)."""

import re
from dataclasses import dataclass

from techcare_identity.domain.principal.exceptions import InvalidPhoneNumberError

# +250XXXXXXXXX or 0XXXXXXXXX
RWANDAN_PHONE_PATTERN = re.compile(r"^(\+250|0)[0-9]{9}$")


@dataclass(frozen=True)
class PhoneNumber:
    """Value object representing a Rwandan phone number.

    Whitespace is stripped; the number is otherwise stored as entered so
    both the international and the local form round-trip unchanged.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = "".join((self.value or "").split())
        if not RWANDAN_PHONE_PATTERN.match(normalized):
            raise InvalidPhoneNumberError(self.value)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
