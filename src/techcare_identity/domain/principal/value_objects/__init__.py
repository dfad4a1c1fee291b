from techcare_identity.domain.principal.value_objects.email import Email
from techcare_identity.domain.principal.value_objects.full_name import (
    normalize_full_name,
)
from techcare_identity.domain.principal.value_objects.phone_number import PhoneNumber
from techcare_identity.domain.principal.value_objects.principal_role import (
    PrincipalRole,
)
from techcare_identity.domain.principal.value_objects.technician_status import (
    TechnicianStatus,
)

__all__ = [
    "Email",
    "PhoneNumber",
    "PrincipalRole",
    "TechnicianStatus",
    "normalize_full_name",
]
