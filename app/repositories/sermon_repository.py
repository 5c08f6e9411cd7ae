from app.models import Sermon
from .base_repository import BaseRepository


class SermonRepository(BaseRepository):
    model = Sermon
    label = "Sermon"

    def ordering(self):
        return [Sermon.date.desc(), Sermon.created_at.desc()]
