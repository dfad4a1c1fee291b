"""The capability set shared by every authenticatable principal.

Admin, Customer and Technician do not share a base class. Each one satisfies
this protocol structurally, which is all the authentication service needs.
"""

from typing import Optional, Protocol
from uuid import UUID

from techcare_identity.domain.principal.value_objects import PrincipalRole


class Principal(Protocol):
    @property
    def id(self) -> UUID: ...

    @property
    def email(self) -> str: ...

    @property
    def full_name(self) -> str: ...

    @property
    def password_hash(self) -> Optional[str]: ...

    @property
    def role(self) -> PrincipalRole: ...

    def ensure_can_login(self) -> None: ...

    def change_password_hash(self, password_hash: str) -> None: ...
