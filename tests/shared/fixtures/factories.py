"""
Test data factories for creating deterministic principals.

Usage:
    from tests.shared.fixtures.factories import TestPrincipalFactory

    def test_something():
        customer = TestPrincipalFactory.customer()
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from techcare_auth import PasswordHashingService
from techcare_identity import Admin, Customer, Technician, TechnicianStatus
from techcare_identity.infrastructure.storage import FileUpload

# bcrypt's minimum work factor keeps hashing fast in tests
FAST_ROUNDS = 4


def fast_password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=FAST_ROUNDS)


@dataclass(frozen=True)
class TestPrincipalFactory:
    """Factory for principals with fixed IDs and known passwords."""

    __test__ = False

    ADMIN_ID = UUID("00000000-0000-0000-0000-000000000001")
    ADMIN_EMAIL = "admin@techcare.rw"
    ADMIN_PASSWORD = "Adm1n!Secret"

    CUSTOMER_ID = UUID("cccccccc-cccc-cccc-cccc-cccccccccccc")
    CUSTOMER_EMAIL = "alice@example.com"
    CUSTOMER_PASSWORD = "alice-password"

    TECHNICIAN_ID = UUID("eeeeeeee-eeee-eeee-eeee-eeeeeeeeeeee")
    TECHNICIAN_EMAIL = "tech@example.com"
    TECHNICIAN_PASSWORD = "tech-password"

    @classmethod
    def admin(cls, password: str = ADMIN_PASSWORD) -> Admin:
        return Admin(
            id=cls.ADMIN_ID,
            full_name="Admin User",
            email=cls.ADMIN_EMAIL,
            phone_number="+250780000001",
            password_hash=fast_password_service().hash(password),
        )

    @classmethod
    def customer(cls, password: str = CUSTOMER_PASSWORD) -> Customer:
        return Customer(
            id=cls.CUSTOMER_ID,
            full_name="Alice Mukamana",
            email=cls.CUSTOMER_EMAIL,
            phone_number="0781234567",
            password_hash=fast_password_service().hash(password),
        )

    @classmethod
    def technician(
        cls,
        status: TechnicianStatus = TechnicianStatus.PENDING,
        password: Optional[str] = None,
    ) -> Technician:
        password_hash = fast_password_service().hash(password) if password else None
        return Technician(
            id=cls.TECHNICIAN_ID,
            full_name="Eric Niyonzima",
            email=cls.TECHNICIAN_EMAIL,
            phone_number="+250788888888",
            age=30,
            gender="Male",
            specialization="Laptop repair",
            password_hash=password_hash,
            status=status,
        )

    @classmethod
    def approved_technician(cls, password: str = TECHNICIAN_PASSWORD) -> Technician:
        return cls.technician(status=TechnicianStatus.APPROVED, password=password)


def png_upload(name: str = "photo.png", size: int = 64) -> FileUpload:
    return FileUpload(filename=name, content_type="image/png", data=b"\x89PNG" + b"0" * size)


def pdf_upload(name: str = "certificate.pdf", size: int = 64) -> FileUpload:
    return FileUpload(
        filename=name,
        content_type="application/pdf",
        data=b"%PDF-1.4" + b"0" * size,
    )
