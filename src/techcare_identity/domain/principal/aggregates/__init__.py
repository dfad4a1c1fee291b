from techcare_identity.domain.principal.aggregates.admin import Admin
from techcare_identity.domain.principal.aggregates.customer import Customer
from techcare_identity.domain.principal.aggregates.technician import Technician

__all__ = ["Admin", "Customer", "Technician"]
