"""
Script to create demo accounts for local development.

Creates an approved coordinator and a member whose registration is still
waiting for admin review, so both dashboards have something to show.
"""

from app import create_app
from app.exceptions import ConflictError
from app.models.enums import UserRole
from app.repositories import get_store
from app.services.user_service import UserService

DEMO_PASSWORD = "password"


def main():
    """Create demo accounts unless they already exist."""
    app = create_app()
    with app.app_context():
        store = get_store()
        service = UserService(store)

        admins = store.users.list(approved=True, role=UserRole.ADMIN)
        if not admins:
            print("Run create_admin.py first; demo coordinators are created by the admin.")
            return

        try:
            result = service.create_coordinator(
                {
                    "username": "coordinator",
                    "email": "coordinator@example.com",
                    "password": DEMO_PASSWORD,
                },
                admins[0],
            )
            print(f"Created coordinator with ID: {result['user']['id']}")
        except ConflictError:
            print("Coordinator account already exists")

        try:
            result = service.register(
                {
                    "username": "member",
                    "email": "member@example.com",
                    "password": DEMO_PASSWORD,
                }
            )
            print(f"Created pending member with ID: {result['user']['id']}")
        except ConflictError:
            print("Member account already exists")

        print("Demo accounts setup complete!")


if __name__ == "__main__":
    main()
