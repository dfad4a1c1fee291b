"""Technician schemas for request/response models.

Technician signup is a multipart form, so its fields are declared on the
route rather than as a body model.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class TechnicianResponse(BaseModel):
    """Technician profile without credentials."""

    id: UUID
    full_name: str
    email: str
    phone_number: str
    age: int
    gender: str
    specialization: str
    rating: float
    image_url: Optional[str] = None
    certification_url: Optional[str] = None
    status: str
    is_available: bool
    role: str
    created_at: datetime
