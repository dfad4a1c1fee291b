"""Shared kernel: error codes, exception hierarchy and time helpers."""

from techcare.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from techcare.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ExternalServiceError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
