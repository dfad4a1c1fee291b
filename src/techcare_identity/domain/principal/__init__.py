"""Principal domain: the three kinds of account that can authenticate.

This domain handles:
- Admin, Customer and Technician aggregates (no shared base class)
- The technician approval state machine
- Repository interfaces for each principal kind
"""

from techcare_identity.domain.principal.exceptions import (
    EmailAlreadyExistsError,
    IncompleteSetupError,
    InvalidEmailError,
    InvalidPhoneNumberError,
    TechnicianAlreadyApprovedError,
    TechnicianNotApprovedError,
    TechnicianNotFoundError,
)
from techcare_identity.domain.principal.value_objects import (
    Email,
    PhoneNumber,
    PrincipalRole,
    TechnicianStatus,
)
from techcare_identity.domain.principal.aggregates import (  # NOQA: I001
    Admin,
    Customer,
    Technician,
)
from techcare_identity.domain.principal.principal import Principal
from techcare_identity.domain.principal.repositories import (
    AdminRepository,
    CustomerRepository,
    PrincipalRepository,
    TechnicianRepository,
)

__all__ = [
    "Admin",
    "AdminRepository",
    "Customer",
    "CustomerRepository",
    "Email",
    "EmailAlreadyExistsError",
    "IncompleteSetupError",
    "InvalidEmailError",
    "InvalidPhoneNumberError",
    "PhoneNumber",
    "Principal",
    "PrincipalRepository",
    "PrincipalRole",
    "Technician",
    "TechnicianAlreadyApprovedError",
    "TechnicianNotApprovedError",
    "TechnicianNotFoundError",
    "TechnicianRepository",
    "TechnicianStatus",
]
