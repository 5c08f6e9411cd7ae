import logging

from app.models.enums import GroupCategory
from app.repositories import Store

logger = logging.getLogger(__name__)

DEFAULT_GROUPS = [
    {
        "id": "sunday-school",
        "name": "Sunday School",
        "description": "Bible lessons and activities for children ages 4-12 during service time.",
        "leader": "Mrs. Emily Davis",
        "meeting_time": "Sundays 9:00 AM",
        "location": "Children's Ministry Room",
        "category": GroupCategory.SUNDAY_SCHOOL,
        "icon": "fas fa-child",
        "color": "bg-yellow-100 text-yellow-600",
    },
    {
        "id": "youth-fellowship",
        "name": "Youth Fellowship",
        "description": "Dynamic ministry for teens with games, discussions, and service projects.",
        "leader": "Pastor Mike Wilson",
        "meeting_time": "Fridays 7:00 PM",
        "location": "Youth Center",
        "category": GroupCategory.YOUTH,
        "icon": "fas fa-users",
        "color": "bg-green-100 text-green-600",
    },
    {
        "id": "women-fellowship",
        "name": "Women Fellowship",
        "description": "Bible study, prayer, and fellowship for women of all ages and backgrounds.",
        "leader": "Mrs. Linda Thompson",
        "meeting_time": "Wednesdays 10:00 AM",
        "location": "Fellowship Hall",
        "category": GroupCategory.WOMEN,
        "icon": "fas fa-female",
        "color": "bg-pink-100 text-pink-600",
    },
    {
        "id": "men-fellowship",
        "name": "Men Fellowship",
        "description": "Brotherhood, accountability, and growth in faith through study and service.",
        "leader": "Deacon Robert Brown",
        "meeting_time": "Saturdays 7:00 AM",
        "location": "Conference Room",
        "category": GroupCategory.MEN,
        "icon": "fas fa-male",
        "color": "bg-blue-100 text-blue-600",
    },
]


class CommunityGroupService:
    def __init__(self, store: Store):
        self.store = store

    def list_groups(self):
        return self.store.groups.list()

    def get_group(self, group_id):
        return self.store.groups.get(group_id)

    def seed_defaults(self):
        """Insert the standing community groups that are missing. Returns how many were added."""
        added = 0
        for group in DEFAULT_GROUPS:
            if self.store.groups.find_by_id(group["id"]):
                continue
            self.store.groups.create(dict(group))
            added += 1
        if added:
            logger.info(f"Seeded {added} community groups")
        return added
