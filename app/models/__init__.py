from app.models.user import User
from app.models.event import Event
from app.models.sermon import Sermon
from app.models.gallery_item import GalleryItem
from app.models.contact_message import ContactMessage
from app.models.community_group import CommunityGroup
from app.models.enums import UserRole, EventCategory, GalleryCategory, GroupCategory
