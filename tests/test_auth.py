"""
Component tests for sign-in, registration, sessions, profiles and the admin panel
"""
import pytest
from fastapi.testclient import TestClient

from storefront.auth.utils import create_access_token
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, USER_EMAIL, USER_PASSWORD


class TestLogin:

    def test_login_returns_token_and_user(self, test_client: TestClient, admin_user):
        # Act
        response = test_client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["tokenType"] == "bearer"
        assert data["accessToken"]
        assert data["expiresAt"]
        assert data["user"]["email"] == ADMIN_EMAIL
        assert data["user"]["role"] == {"name": "admin", "level": 100}
        assert data["user"]["profile"]["firstName"] == "Admin"

    def test_login_email_is_case_insensitive(self, test_client: TestClient, regular_user):
        response = test_client.post("/api/auth/login", json={"email": USER_EMAIL.upper(), "password": USER_PASSWORD})

        assert response.status_code == 200

    @pytest.mark.parametrize("email, password", [
        (USER_EMAIL, "wrong-password"),
        ("nobody@storefront.dev", USER_PASSWORD),
    ])
    def test_bad_credentials_are_401(self, test_client: TestClient, regular_user, email, password):
        response = test_client.post("/api/auth/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid credentials"}

    def test_issued_token_opens_a_session(self, test_client: TestClient, regular_user):
        token = test_client.post(
            "/api/auth/login", json={"email": USER_EMAIL, "password": USER_PASSWORD}
        ).json()["accessToken"]

        response = test_client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == regular_user.id
        assert data["user"]["role"]["name"] == "user"
        assert data["user"]["profile"] is None
        assert data["expires"]


class TestRegister:

    def test_register_assigns_default_role(self, test_client: TestClient, roles):
        request_data = {
            "email": "new@storefront.dev",
            "password": "secret1",
            "profile": {"firstName": "New", "lastName": "Customer"},
        }

        response = test_client.post("/api/auth/register", json=request_data)

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new@storefront.dev"
        assert data["role"]["name"] == "user"
        assert data["profile"]["lastName"] == "Customer"
        assert "password" not in data

    def test_register_creates_role_on_empty_database(self, test_client: TestClient):
        response = test_client.post("/api/auth/register", json={"email": "first@storefront.dev", "password": "secret1"})

        assert response.status_code == 201
        assert response.json()["role"] == {"name": "user", "level": 10}

    def test_duplicate_email_is_400(self, test_client: TestClient, regular_user):
        response = test_client.post("/api/auth/register", json={"email": USER_EMAIL, "password": "secret1"})

        assert response.status_code == 400

    @pytest.mark.parametrize("body", [
        {"email": "short@storefront.dev", "password": "12345"},
        {"email": "not-an-email", "password": "secret1"},
        {"password": "secret1"},
    ])
    def test_invalid_registration_is_422(self, test_client: TestClient, body):
        response = test_client.post("/api/auth/register", json=body)

        assert response.status_code == 422


class TestSession:

    def test_session_requires_token(self, test_client: TestClient):
        response = test_client.get("/api/auth/session")

        assert response.status_code == 401

    def test_expired_token_is_401(self, test_client: TestClient, regular_user):
        token, _ = create_access_token({"sub": str(regular_user.id), "role": {"name": "user", "level": 10}},
                                       expires_minutes=-1)

        response = test_client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_session_carries_profile(self, test_client: TestClient, admin_user, admin_headers):
        response = test_client.get("/api/auth/session", headers=admin_headers)

        user = response.json()["user"]
        assert user["email"] == ADMIN_EMAIL
        assert user["profile"]["department"] == "IT"


class TestPasswordChange:

    def test_change_password(self, test_client: TestClient, regular_user, user_headers):
        response = test_client.post(
            "/api/auth/password",
            json={"currentPassword": USER_PASSWORD, "newPassword": "brand-new"},
            headers=user_headers,
        )

        assert response.status_code == 200
        login = test_client.post("/api/auth/login", json={"email": USER_EMAIL, "password": "brand-new"})
        assert login.status_code == 200

    def test_wrong_current_password_is_400(self, test_client: TestClient, regular_user, user_headers):
        response = test_client.post(
            "/api/auth/password",
            json={"currentPassword": "nope", "newPassword": "brand-new"},
            headers=user_headers,
        )

        assert response.status_code == 400


class TestProfile:

    def test_profile_is_null_until_saved(self, test_client: TestClient, user_headers):
        response = test_client.get("/api/profile", headers=user_headers)

        assert response.status_code == 200
        assert response.json() is None

    def test_update_creates_then_patches_profile(self, test_client: TestClient, user_headers):
        created = test_client.put("/api/profile", json={"firstName": "Jane", "hireDate": "2022-06-01"},
                                  headers=user_headers)
        updated = test_client.put("/api/profile", json={"phone": "+1-555-0102"}, headers=user_headers)

        assert created.status_code == 200
        assert updated.json()["firstName"] == "Jane"
        assert updated.json()["phone"] == "+1-555-0102"
        assert updated.json()["hireDate"] == "2022-06-01"

    def test_profile_requires_session(self, test_client: TestClient):
        assert test_client.get("/api/profile").status_code == 401


class TestAdminStats:

    def test_stats_for_admin(self, test_client: TestClient, catalog, regular_user, admin_headers, user_headers):
        # Arrange: one cart with two lines, one empty cart
        test_client.post("/api/cart", json={"productId": catalog["products"]["iPhone 15"]}, headers=user_headers)
        test_client.post("/api/cart", json={"productId": catalog["products"]["Galaxy S24"]}, headers=user_headers)
        test_client.get("/api/cart", headers=admin_headers)

        # Act
        response = test_client.get("/api/admin/stats", headers=admin_headers)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["products"] == {"total": 5, "active": 4, "inactive": 1}
        assert data["categories"] == {"total": 4, "active": 3, "inactive": 1}
        assert data["brands"] == {"total": 4, "active": 3, "inactive": 1}
        assert data["users"]["total"] == 2
        assert data["users"]["byRole"] == {"admin": 1, "manager": 0, "user": 1}
        assert data["carts"] == {"totalCarts": 2, "totalItems": 2, "averageItemsPerCart": 2}

    def test_stats_require_admin_role(self, test_client: TestClient, user_headers):
        response = test_client.get("/api/admin/stats", headers=user_headers)

        assert response.status_code == 403

    def test_stats_require_session(self, test_client: TestClient):
        response = test_client.get("/api/admin/stats")

        assert response.status_code == 401


def test_ping(test_client: TestClient):
    assert test_client.get("/ping").json() == {"ping": "pong"}
