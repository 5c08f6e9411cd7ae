from app.models import GalleryItem
from .base_repository import BaseRepository


class GalleryRepository(BaseRepository):
    model = GalleryItem
    label = "Gallery item"
