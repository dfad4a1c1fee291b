"""Request payloads and small helpers shared by the API tests."""

import re
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

API = "/api/v1"
PUBLIC_BASE_URL = "http://testserver"

ADMIN = {
    "full_name": "Admin User",
    "email": "admin@techcare.rw",
    "phone_number": "+250780000001",
    "password": "Adm1n!Secret",
}
CUSTOMER = {
    "full_name": "Alice Mukamana",
    "email": "alice@example.com",
    "phone_number": "0781234567",
    "password": "alice-password",
}
TECHNICIAN = {
    "full_name": "Eric Niyonzima",
    "email": "tech@example.com",
    "phone_number": "+250788888888",
    "age": "30",
    "gender": "Male",
    "specialization": "Laptop repair",
}


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def login(client: TestClient, role: str, email: str, password: str) -> str:
    response = client.post(
        f"{API}/{role}/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


def technician_files() -> dict:
    return {
        "image": ("photo.png", b"\x89PNG" + b"0" * 64, "image/png"),
        "certification": ("cert.pdf", b"%PDF-1.4" + b"0" * 64, "application/pdf"),
    }


def last_message_to(notifier: AsyncMock, recipient: str) -> tuple[str, str]:
    """Return (subject, body) of the latest message sent to ``recipient``."""
    for call in reversed(notifier.send.await_args_list):
        if call.args[0] == recipient:
            return call.args[1], call.args[2]
    raise AssertionError(f"No message sent to {recipient}")


def extract(pattern: str, text: str) -> str:
    match = re.search(pattern, text)
    assert match, f"{pattern!r} not found in message"
    return match.group(1)
