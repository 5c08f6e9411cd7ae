from enum import Enum


class UserRole(Enum):
    ADMIN = "admin"
    COORDINATOR = "coordinator"
    MEMBER = "member"


class EventCategory(Enum):
    WORSHIP = "worship"
    FELLOWSHIP = "fellowship"
    COMMUNITY = "community"
    YOUTH = "youth"


class GalleryCategory(Enum):
    RECENT = "recent"
    WORSHIP = "worship"
    SERVICE = "service"
    YOUTH = "youth"


class GroupCategory(Enum):
    SUNDAY_SCHOOL = "sunday_school"
    YOUTH = "youth"
    WOMEN = "women"
    MEN = "men"
