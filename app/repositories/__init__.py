from flask import current_app

from app.repositories.base_repository import BaseRepository
from app.repositories.user_repository import UserRepository
from app.repositories.event_repository import EventRepository
from app.repositories.sermon_repository import SermonRepository
from app.repositories.gallery_repository import GalleryRepository
from app.repositories.contact_repository import ContactRepository
from app.repositories.community_group_repository import CommunityGroupRepository


class Store:
    """One repository per entity kind, built once by the application factory."""

    def __init__(self, db):
        self.db = db
        self.users = UserRepository(db)
        self.events = EventRepository(db)
        self.sermons = SermonRepository(db)
        self.gallery = GalleryRepository(db)
        self.contacts = ContactRepository(db)
        self.groups = CommunityGroupRepository(db)


def get_store() -> Store:
    return current_app.extensions["store"]
