"""Customer account, password reset and profile endpoints."""

from tests.techcare.integration.api.helpers import (
    API,
    CUSTOMER,
    bearer,
    extract,
    last_message_to,
    login,
)


class TestSignupAndLogin:
    def test_signup_returns_profile_without_secrets(self, client, notifier):
        response = client.post(f"{API}/customer/signup", json=CUSTOMER)

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == CUSTOMER["email"]
        assert body["role"] == "CUSTOMER"
        assert "password" not in body
        assert "password_hash" not in body
        subject, _ = last_message_to(notifier, CUSTOMER["email"])
        assert subject == "Welcome to TechCare"

    def test_duplicate_email_is_409(self, client):
        client.post(f"{API}/customer/signup", json=CUSTOMER)

        response = client.post(
            f"{API}/customer/signup",
            json={**CUSTOMER, "email": "ALICE@example.com"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    def test_invalid_phone_is_422(self, client):
        response = client.post(
            f"{API}/customer/signup",
            json={**CUSTOMER, "phone_number": "12345"},
        )

        assert response.status_code == 422

    def test_login_and_profile(self, client, customer_token):
        response = client.get(f"{API}/customer/profile", headers=bearer(customer_token))

        assert response.status_code == 200
        assert response.json()["full_name"] == CUSTOMER["full_name"]

    def test_login_response_shape(self, client):
        client.post(f"{API}/customer/signup", json=CUSTOMER)

        response = client.post(
            f"{API}/customer/login",
            json={"email": CUSTOMER["email"], "password": CUSTOMER["password"]},
        )

        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["role"] == "CUSTOMER"
        assert body["expires_in"] == 24 * 3600

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        client.post(f"{API}/customer/signup", json=CUSTOMER)

        wrong = client.post(
            f"{API}/customer/login",
            json={"email": CUSTOMER["email"], "password": "nope-nope"},
        )
        unknown = client.post(
            f"{API}/customer/login",
            json={"email": "ghost@example.com", "password": "nope-nope"},
        )

        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json()

    def test_unusual_but_valid_address_is_401(self, client):
        response = client.post(
            f"{API}/customer/login",
            json={"email": "o'brien@example.com", "password": "nope-nope"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_logout_is_stateless(self, client, customer_token):
        response = client.post(f"{API}/customer/logout", headers=bearer(customer_token))

        assert response.status_code == 200
        assert client.get(
            f"{API}/customer/profile",
            headers=bearer(customer_token),
        ).status_code == 200


class TestPasswordReset:
    def _request_token(self, client, notifier) -> str:
        response = client.post(
            f"{API}/customer/forgot-password",
            json={"email": CUSTOMER["email"]},
        )
        assert response.status_code == 202
        _, body = last_message_to(notifier, CUSTOMER["email"])
        return extract(r"reset-password\?token=(\S+)", body)

    def test_unknown_email_gets_same_answer(self, client, customer_token):
        known = client.post(
            f"{API}/customer/forgot-password",
            json={"email": CUSTOMER["email"]},
        )
        unknown = client.post(
            f"{API}/customer/forgot-password",
            json={"email": "ghost@example.com"},
        )

        assert known.status_code == unknown.status_code == 202
        assert known.json() == unknown.json()

    def test_unusual_but_valid_address_gets_same_answer(self, client, customer_token):
        known = client.post(
            f"{API}/customer/forgot-password",
            json={"email": CUSTOMER["email"]},
        )
        unusual = client.post(
            f"{API}/customer/forgot-password",
            json={"email": "o'brien@example.com"},
        )

        assert unusual.status_code == 202
        assert unusual.json() == known.json()

    def test_reset_flow_is_single_use(self, client, notifier, customer_token):
        token = self._request_token(client, notifier)
        payload = {
            "token": token,
            "new_password": "brand-new-password",
            "confirm_password": "brand-new-password",
        }

        first = client.post(f"{API}/customer/reset-password", json=payload)
        second = client.post(f"{API}/customer/reset-password", json=payload)

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json()["code"] == "INVALID_OR_EXPIRED_RESET_TOKEN"
        login(client, "customer", CUSTOMER["email"], "brand-new-password")

    def test_new_request_replaces_old_token(self, client, notifier, customer_token):
        old_token = self._request_token(client, notifier)
        self._request_token(client, notifier)

        response = client.post(
            f"{API}/customer/reset-password",
            json={
                "token": old_token,
                "new_password": "brand-new-password",
                "confirm_password": "brand-new-password",
            },
        )

        assert response.status_code == 400

    def test_mismatched_confirmation_is_422(self, client, notifier, customer_token):
        token = self._request_token(client, notifier)

        response = client.post(
            f"{API}/customer/reset-password",
            json={
                "token": token,
                "new_password": "brand-new-password",
                "confirm_password": "different-password",
            },
        )

        assert response.status_code == 422


class TestProfile:
    def test_update_profile_fields(self, client, customer_token):
        response = client.put(
            f"{API}/customer/update-profile",
            headers=bearer(customer_token),
            data={"full_name": "Alice Uwase", "phone_number": "+250789999999"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["full_name"] == "Alice Uwase"
        assert body["phone_number"] == "+250789999999"

    def test_blank_fields_are_ignored(self, client, customer_token):
        response = client.put(
            f"{API}/customer/update-profile",
            headers=bearer(customer_token),
            data={"full_name": "", "phone_number": ""},
        )

        assert response.status_code == 200
        assert response.json()["full_name"] == CUSTOMER["full_name"]

    def test_upload_image_is_served(self, client, customer_token):
        content = b"\x89PNG" + b"1" * 32

        response = client.post(
            f"{API}/customer/upload-image",
            headers=bearer(customer_token),
            files={"image": ("me.png", content, "image/png")},
        )

        assert response.status_code == 200
        image_url = response.json()["image"]
        assert image_url.startswith("http://testserver/uploads/images/customer_")
        served = client.get(image_url.removeprefix("http://testserver"))
        assert served.status_code == 200
        assert served.content == content

    def test_non_image_upload_is_400(self, client, customer_token):
        response = client.post(
            f"{API}/customer/upload-image",
            headers=bearer(customer_token),
            files={"image": ("doc.pdf", b"%PDF", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_UPLOAD"

    def test_missing_upload_is_404(self, client):
        response = client.get("/uploads/images/nobody.png")

        assert response.status_code == 404
        assert response.json()["code"] == "FILE_NOT_FOUND"
