from app.models import ContactMessage
from .base_repository import BaseRepository


class ContactRepository(BaseRepository):
    model = ContactMessage
    label = "Contact message"
