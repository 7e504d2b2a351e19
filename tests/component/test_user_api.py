"""
Component tests for signup, login, signed-cookie authentication and logout.
"""
from fastapi.testclient import TestClient

from storefront.core.config import settings
from storefront.core.cookies import sign_cookie


class TestSignup:
    def test_signup_returns_user_with_document_id(self, test_client: TestClient):
        response = test_client.post("/user/signup", json={"email": "New@Example.com", "password": "pw", "name": "New"})

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new@example.com"
        assert len(data["_id"]) == 24
        assert "password_hash" not in data

    def test_duplicate_email_conflicts(self, test_client: TestClient, shopper):
        response = test_client.post("/user/signup", json={"email": "shopper@example.com", "password": "pw"})

        assert response.status_code == 409


class TestLogin:
    def test_login_returns_token_and_signed_cookie(self, test_client: TestClient, shopper):
        response = test_client.post("/user/login", json={"email": "shopper@example.com", "password": "Secret123!"})

        assert response.status_code == 200
        assert response.json()["token"]
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("token=s%3A")
        assert "HttpOnly" in cookie

    def test_login_accepts_url_encoded_form(self, test_client: TestClient, shopper):
        response = test_client.post("/user/login", data={"email": "shopper@example.com", "password": "Secret123!"})

        assert response.status_code == 200
        assert response.json()["user"]["_id"] == shopper["user_id"]

    def test_wrong_password_is_unauthorized(self, test_client: TestClient, shopper):
        response = test_client.post("/user/login", json={"email": "shopper@example.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect password. Please try again."

    def test_missing_fields_fail_validation(self, test_client: TestClient):
        response = test_client.post("/user/login", json={"email": "shopper@example.com"})

        assert response.status_code == 422


class TestCurrentUser:
    def test_me_with_authorization_header(self, test_client: TestClient, shopper):
        response = test_client.get("/user/me", headers={"Authorization": shopper["token"]})

        assert response.status_code == 200
        assert response.json()["email"] == "shopper@example.com"

    def test_me_with_signed_cookie(self, test_client: TestClient, shopper):
        cookie = sign_cookie(shopper["token"], settings.COOKIE_SECRET)

        response = test_client.get("/user/me", headers={"Cookie": f"token={cookie}"})

        assert response.status_code == 200
        assert response.json()["_id"] == shopper["user_id"]

    def test_tampered_cookie_is_ignored(self, test_client: TestClient, shopper):
        cookie = sign_cookie(shopper["token"], "some-other-secret")

        response = test_client.get("/user/me", headers={"Cookie": f"token={cookie}"})

        assert response.status_code == 401

    def test_logout_clears_cookie(self, test_client: TestClient):
        response = test_client.post("/user/logout")

        assert response.status_code == 200
        assert response.headers["set-cookie"].startswith('token=""')

    def test_non_ascii_cookie_signature_is_ignored(self, test_client: TestClient, shopper):
        response = test_client.get("/user/me", headers={"Cookie": "token=s%3Aabc.%C3%A9"})

        assert response.status_code == 401

    def test_non_ascii_cookie_does_not_break_public_routes(self, test_client: TestClient):
        response = test_client.get("/", headers={"Cookie": "token=s%3Aabc.%C3%A9"})

        assert response.status_code == 200
        assert response.text == "ok"
