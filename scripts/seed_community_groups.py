import sys
import os

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from app import create_app
from app.repositories import get_store
from app.services.community_group_service import CommunityGroupService


def seed_community_groups():
    app = create_app()
    with app.app_context():
        added = CommunityGroupService(get_store()).seed_defaults()
        print(f"Seeded {added} community groups.")


if __name__ == "__main__":
    seed_community_groups()
