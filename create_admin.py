import os
import sys
from dotenv import load_dotenv
from app import create_app
from app.repositories import get_store
from app.services.user_service import UserService

load_dotenv()


def create_admin_user(update=False):
    username = os.getenv("ADMIN_USERNAME", "admin")
    email = os.getenv("ADMIN_EMAIL", "admin@gracecommunity.church")
    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        print("ADMIN_PASSWORD must be set to create the admin account.")
        sys.exit(1)

    app = create_app()
    with app.app_context():
        admin, created = UserService(get_store()).ensure_admin(
            username, email, password, reset_password=update
        )
        if created:
            print(f"Admin user {admin.username} created successfully!")
        elif update:
            print(f"Admin user {admin.username} updated successfully!")
        else:
            print("Admin user already exists!")


if __name__ == '__main__':
    create_admin_user(update="--update" in sys.argv)
