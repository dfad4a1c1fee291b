from enum import Enum


class TechnicianStatus(str, Enum):
    """Technician application lifecycle.

    PENDING is initial. The approval workflow moves it to APPROVED or
    REJECTED. SUSPENDED is only set by operators outside that workflow.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    SUSPENDED = "SUSPENDED"
