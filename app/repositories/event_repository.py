from datetime import date

from app.models import Event
from .base_repository import BaseRepository


class EventRepository(BaseRepository):
    model = Event
    label = "Event"

    def ordering(self):
        return [Event.date.asc(), Event.created_at.asc()]

    def count_upcoming(self, today: date = None) -> int:
        today = today or date.today()
        return self.query.filter(Event.approved.is_(True), Event.date >= today).count()
