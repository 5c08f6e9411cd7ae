from app.models import CommunityGroup
from .base_repository import BaseRepository


class CommunityGroupRepository(BaseRepository):
    model = CommunityGroup
    label = "Community group"

    def ordering(self):
        return [CommunityGroup.name.asc()]
