"""Principal domain exceptions.

Validation failures, lookups that miss, duplicate registrations and the
technician approval gate. All derive from the shared DomainException so the
API maps them to stable error codes.
"""

from techcare.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_FORMAT)


class InvalidPhoneNumberError(ValidationError):
    """Raised when a phone number is not in Rwandan format."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "Please provide a valid Rwandan phone number "
            "(e.g., +250788123456 or 0788123456)",
            ErrorCode.INVALID_FORMAT,
            {"value": value},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered for this kind of principal."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class TechnicianNotFoundError(EntityNotFoundError):
    def __init__(self, identifier: object) -> None:
        super().__init__(
            f"Technician not found: {identifier}",
            ErrorCode.TECHNICIAN_NOT_FOUND,
        )


class TechnicianAlreadyApprovedError(ConflictError):
    """Approval requested for a technician who is already approved."""

    def __init__(self, technician_id: object) -> None:
        super().__init__(
            "Technician is already approved",
            ErrorCode.ALREADY_APPROVED,
            {"technician_id": str(technician_id)},
        )


class TechnicianNotApprovedError(BusinessRuleViolation):
    """Login attempted by a technician whose application is not approved."""

    def __init__(self, status: str) -> None:
        super().__init__(
            "Your account has not been approved yet",
            ErrorCode.NOT_APPROVED,
            {"status": status},
        )


class IncompleteSetupError(BusinessRuleViolation):
    """Login attempted by an approved technician without a password."""

    def __init__(self) -> None:
        super().__init__(
            "Account setup is incomplete. Please contact support.",
            ErrorCode.INCOMPLETE_SETUP,
        )
