from enum import Enum


class PrincipalRole(str, Enum):
    """Role identifiers embedded in bearer tokens (one per principal kind)."""

    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"
    TECHNICIAN = "TECHNICIAN"
