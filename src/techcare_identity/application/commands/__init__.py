from techcare_identity.application.commands.sign_up_admin_command import (
    SignUpAdminCommand,
)
from techcare_identity.application.commands.sign_up_customer_command import (
    SignUpCustomerCommand,
)
from techcare_identity.application.commands.sign_up_technician_command import (
    SignUpTechnicianCommand,
)

__all__ = [
    "SignUpAdminCommand",
    "SignUpCustomerCommand",
    "SignUpTechnicianCommand",
]
