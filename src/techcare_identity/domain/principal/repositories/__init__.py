from techcare_identity.domain.principal.repositories.admin_repository import (
    AdminRepository,
)
from techcare_identity.domain.principal.repositories.customer_repository import (
    CustomerRepository,
)
from techcare_identity.domain.principal.repositories.principal_repository import (
    PrincipalRepository,
)
from techcare_identity.domain.principal.repositories.technician_repository import (
    TechnicianRepository,
)

__all__ = [
    "AdminRepository",
    "CustomerRepository",
    "PrincipalRepository",
    "TechnicianRepository",
]
