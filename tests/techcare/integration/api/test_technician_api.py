"""Technician applications and the admin approval workflow."""

from tests.techcare.integration.api.helpers import (
    API,
    TECHNICIAN,
    bearer,
    extract,
    last_message_to,
    login,
    technician_files,
)


def _approve(client, admin_token, technician_id):
    return client.post(
        f"{API}/admin/technicians/{technician_id}/approve",
        headers=bearer(admin_token),
    )


def _generated_password(notifier) -> str:
    subject, body = last_message_to(notifier, TECHNICIAN["email"])
    assert "Approved" in subject
    return extract(r"Password: (\S+)", body)


class TestApplication:
    def test_signup_creates_pending_technician(self, client, notifier):
        response = client.post(
            f"{API}/technician/signup",
            data=TECHNICIAN,
            files=technician_files(),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "PENDING"
        assert body["image_url"].endswith(f"/uploads/images/technician_{body['id']}.png")
        assert body["certification_url"].endswith(
            f"/uploads/documents/technician_{body['id']}.pdf",
        )
        subject, _ = last_message_to(notifier, TECHNICIAN["email"])
        assert "Application Received" in subject

    def test_bad_certification_creates_nothing(self, client, admin_token):
        files = technician_files()
        files["certification"] = ("cert.exe", b"MZ" * 10, "application/octet-stream")

        response = client.post(f"{API}/technician/signup", data=TECHNICIAN, files=files)
        listed = client.get(f"{API}/admin/technicians", headers=bearer(admin_token))

        assert response.status_code == 400
        assert listed.json() == []

    def test_oversized_fields_are_422(self, client, admin_token):
        too_long = [
            {**TECHNICIAN, "gender": "x" * 21},
            {**TECHNICIAN, "specialization": "x" * 101},
        ]

        for data in too_long:
            response = client.post(
                f"{API}/technician/signup",
                data=data,
                files=technician_files(),
            )
            assert response.status_code == 422

        listed = client.get(f"{API}/admin/technicians", headers=bearer(admin_token))
        assert listed.json() == []

    def test_pending_technician_cannot_log_in(self, client, technician_id):
        response = client.post(
            f"{API}/technician/login",
            json={"email": TECHNICIAN["email"], "password": "anything-at-all"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_APPROVED"


class TestApproval:
    def test_pending_list(self, client, admin_token, technician_id):
        response = client.get(
            f"{API}/admin/technicians/pending",
            headers=bearer(admin_token),
        )

        assert [t["id"] for t in response.json()] == [technician_id]

    def test_approve_then_login(self, client, notifier, admin_token, technician_id):
        response = _approve(client, admin_token, technician_id)

        assert response.status_code == 200
        assert response.json()["status"] == "APPROVED"
        token = login(client, "technician", TECHNICIAN["email"], _generated_password(notifier))
        profile = client.get(f"{API}/technician/profile", headers=bearer(token))
        assert profile.json()["status"] == "APPROVED"
        pending = client.get(
            f"{API}/admin/technicians/pending",
            headers=bearer(admin_token),
        )
        assert pending.json() == []

    def test_approve_twice_is_409(self, client, admin_token, technician_id):
        _approve(client, admin_token, technician_id)

        response = _approve(client, admin_token, technician_id)

        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_APPROVED"

    def test_approve_unknown_is_404(self, client, admin_token):
        response = _approve(client, admin_token, "00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json()["code"] == "TECHNICIAN_NOT_FOUND"

    def test_reject_is_repeatable(self, client, notifier, admin_token, technician_id):
        url = f"{API}/admin/technicians/{technician_id}/reject"

        first = client.post(url, headers=bearer(admin_token), params={"reason": "Blurry"})
        second = client.post(url, headers=bearer(admin_token))

        assert first.status_code == second.status_code == 200
        assert second.json()["status"] == "REJECTED"
        rejections = [
            call
            for call in notifier.send.await_args_list
            if call.args[0] == TECHNICIAN["email"] and "Status Update" in call.args[1]
        ]
        assert len(rejections) == 2
        assert "Reason: Blurry" in rejections[0].args[2]

    def test_rejected_technician_cannot_log_in(self, client, admin_token, technician_id):
        client.post(
            f"{API}/admin/technicians/{technician_id}/reject",
            headers=bearer(admin_token),
        )

        response = client.post(
            f"{API}/technician/login",
            json={"email": TECHNICIAN["email"], "password": "anything-at-all"},
        )

        assert response.status_code == 403

    def test_non_admin_cannot_approve(self, client, customer_token, technician_id):
        response = _approve(client, customer_token, technician_id)

        assert response.status_code == 403


class TestChangePassword:
    def test_change_generated_password(self, client, notifier, admin_token, technician_id):
        _approve(client, admin_token, technician_id)
        generated = _generated_password(notifier)
        token = login(client, "technician", TECHNICIAN["email"], generated)

        response = client.post(
            f"{API}/technician/change-password",
            headers=bearer(token),
            json={"current_password": generated, "new_password": "my-own-password"},
        )

        assert response.status_code == 200
        login(client, "technician", TECHNICIAN["email"], "my-own-password")

    def test_wrong_current_password_is_401(
        self,
        client,
        notifier,
        admin_token,
        technician_id,
    ):
        _approve(client, admin_token, technician_id)
        token = login(client, "technician", TECHNICIAN["email"], _generated_password(notifier))

        response = client.post(
            f"{API}/technician/change-password",
            headers=bearer(token),
            json={"current_password": "wrong-guess", "new_password": "my-own-password"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"
