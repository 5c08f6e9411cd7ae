from app.services.access_control import AccessControl, Action
from app.services.approval_service import ApprovalService
from app.services.content_service import ContentService
from app.services.event_service import EventService
from app.services.sermon_service import SermonService
from app.services.gallery_service import GalleryService
from app.services.user_service import UserService
from app.services.contact_service import ContactService
from app.services.community_group_service import CommunityGroupService
from app.services.admin_service import AdminService
