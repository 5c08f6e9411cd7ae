from datetime import timedelta

from flask_jwt_extended import create_access_token
from flask_jwt_extended import decode_token

from app.models.enums import UserRole
from tests.helpers import PASSWORD, ApiTestCase


class LoginTests(ApiTestCase):
    def test_login_with_username_issues_token(self):
        response = self.client.post(
            "/api/auth/login", json={"username": "coordinator", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 200)
        payload = response.get_json()
        self.assertEqual(payload["user"]["role"], "coordinator")
        self.assertNotIn("password", payload["user"])

        claims = decode_token(payload["token"])
        self.assertEqual(claims["sub"], self.coordinator.id)
        self.assertEqual(claims["role"], "coordinator")
        self.assertAlmostEqual(claims["exp"] - claims["iat"], timedelta(days=30).total_seconds(), delta=5)

    def test_login_with_email(self):
        response = self.client.post(
            "/api/auth/login", json={"username": "admin@example.com", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 200)

    def test_wrong_password_is_unauthenticated(self):
        response = self.client.post(
            "/api/auth/login", json={"username": "admin", "password": "wrong-password"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["error"], "Invalid credentials")

    def test_unknown_user_is_unauthenticated(self):
        response = self.client.post(
            "/api/auth/login", json={"username": "ghost", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 401)

    def test_pending_account_cannot_log_in(self):
        self.make_user("waiting", UserRole.MEMBER, approved=False)
        response = self.client.post(
            "/api/auth/login", json={"username": "waiting", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json()["error"], "Account not approved")

    def test_missing_fields(self):
        response = self.client.post("/api/auth/login", json={"username": "admin"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["missing_fields"], ["password"])

    def test_empty_body(self):
        response = self.client.post("/api/auth/login")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "No data provided")

    def test_non_string_password_is_rejected(self):
        response = self.client.post(
            "/api/auth/login", json={"username": "admin", "password": 123456}
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.get_json()["fields"])

    def test_non_string_username_is_rejected(self):
        response = self.client.post(
            "/api/auth/login", json={"username": {"a": 1}, "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("username", response.get_json()["fields"])


class RegistrationTests(ApiTestCase):
    def test_register_creates_pending_member(self):
        response = self.client.post(
            "/api/auth/register",
            json={"username": "newcomer", "email": "New@Example.com", "password": "hallelujah"},
        )
        self.assertEqual(response.status_code, 201)
        user = response.get_json()["user"]
        self.assertEqual(user["role"], "member")
        self.assertFalse(user["approved"])
        self.assertEqual(user["email"], "new@example.com")

    def test_register_ignores_requested_role(self):
        response = self.client.post(
            "/api/auth/register",
            json={
                "username": "sneaky",
                "email": "sneaky@example.com",
                "password": "hallelujah",
                "role": "admin",
            },
        )
        self.assertEqual(response.get_json()["user"]["role"], "member")

    def test_duplicate_username_is_conflict(self):
        response = self.client.post(
            "/api/auth/register",
            json={"username": "member", "email": "fresh@example.com", "password": "hallelujah"},
        )
        self.assertEqual(response.status_code, 409)

    def test_duplicate_email_is_conflict(self):
        response = self.client.post(
            "/api/auth/register",
            json={"username": "fresh", "email": "member@example.com", "password": "hallelujah"},
        )
        self.assertEqual(response.status_code, 409)

    def test_invalid_fields_are_reported(self):
        response = self.client.post(
            "/api/auth/register",
            json={"username": "fresh", "email": "not-an-email", "password": "hallelujah"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.get_json()["fields"])

        response = self.client.post(
            "/api/auth/register",
            json={"username": "fresh", "email": "fresh@example.com", "password": "abc"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.get_json()["fields"])


class CoordinatorAccountTests(ApiTestCase):
    payload = {"username": "deacon", "email": "deacon@example.com", "password": "faithful"}

    def test_admin_creates_approved_coordinator(self):
        response = self.client.post(
            "/api/auth/coordinators", json=self.payload, headers=self.headers_for(self.admin)
        )
        self.assertEqual(response.status_code, 201)
        user = response.get_json()["user"]
        self.assertEqual(user["role"], "coordinator")
        self.assertTrue(user["approved"])

        login = self.client.post(
            "/api/auth/login", json={"username": "deacon", "password": "faithful"}
        )
        self.assertEqual(login.status_code, 200)

    def test_coordinator_cannot_create_coordinator(self):
        response = self.client.post(
            "/api/auth/coordinators", json=self.payload, headers=self.headers_for(self.coordinator)
        )
        self.assertEqual(response.status_code, 403)

    def test_anonymous_cannot_create_coordinator(self):
        response = self.client.post("/api/auth/coordinators", json=self.payload)
        self.assertEqual(response.status_code, 401)


class TokenTests(ApiTestCase):
    def test_me_returns_profile(self):
        response = self.client.get("/api/auth/me", headers=self.headers_for(self.member))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["username"], "member")

    def test_me_requires_token(self):
        response = self.client.get("/api/auth/me")
        self.assertEqual(response.status_code, 401)

    def test_garbage_token_is_unauthenticated(self):
        response = self.client.get(
            "/api/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )
        self.assertEqual(response.status_code, 401)

    def test_expired_token_is_unauthenticated(self):
        token = create_access_token(identity=self.member.id, expires_delta=timedelta(seconds=-60))
        response = self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["error"], "Token expired")

    def test_token_for_deleted_user_is_unauthenticated(self):
        headers = self.headers_for(self.member)
        self.store.users.delete(self.member)
        response = self.client.get("/api/auth/me", headers=headers)
        self.assertEqual(response.status_code, 401)

    def test_pending_account_with_token_is_account_pending(self):
        pending = self.make_user("waiting", UserRole.MEMBER, approved=False)
        response = self.client.get("/api/auth/me", headers=self.headers_for(pending))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json()["error"], "Account pending approval")
