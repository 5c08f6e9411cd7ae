import unittest

from flask_jwt_extended import create_access_token
from werkzeug.security import generate_password_hash

from app import create_app
from app.extensions import db
from app.models.enums import UserRole
from app.repositories import get_store

PASSWORD = "secret123"

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "JWT_SECRET_KEY": "test-secret-key-with-at-least-32-bytes!",
    "RATELIMIT_ENABLED": False,
}


class ApiTestCase(unittest.TestCase):
    """Fresh app and in-memory database per test, with one approved user per role."""

    def setUp(self):
        self.app = create_app(TEST_CONFIG)
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()
        self.store = get_store()
        self.client = self.app.test_client()

        self.admin = self.make_user("admin", UserRole.ADMIN)
        self.coordinator = self.make_user("coordinator", UserRole.COORDINATOR)
        self.member = self.make_user("member", UserRole.MEMBER)

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def make_user(self, username, role, approved=True):
        return self.store.users.create(
            {
                "username": username,
                "email": f"{username}@example.com",
                "password": generate_password_hash(PASSWORD),
                "role": role,
                "approved": approved,
            }
        )

    def headers_for(self, user):
        token = create_access_token(
            identity=user.id, additional_claims={"role": user.role.value}
        )
        return {"Authorization": f"Bearer {token}"}

    def create_event(self, user, **overrides):
        payload = {"title": "Bible Study", "date": "2030-05-01", "category": "fellowship"}
        payload.update(overrides)
        return self.client.post("/api/events", json=payload, headers=self.headers_for(user))

    def create_sermon(self, user, **overrides):
        payload = {"title": "Grace Abounds", "pastor": "Rev. Lee"}
        payload.update(overrides)
        return self.client.post("/api/sermons", json=payload, headers=self.headers_for(user))

    def create_gallery_item(self, user, **overrides):
        payload = {"title": "Easter Choir", "imageUrl": "https://images.example.com/choir.jpg"}
        payload.update(overrides)
        return self.client.post("/api/gallery", json=payload, headers=self.headers_for(user))
