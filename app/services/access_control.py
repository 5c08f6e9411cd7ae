from enum import Enum

from app.exceptions import AccountPendingError, ForbiddenError, UnauthenticatedError
from app.models.enums import UserRole


class Action(Enum):
    READ_PUBLIC = "read_public"
    SUBMIT_CONTACT = "submit_contact"
    REGISTER = "register"
    LOGIN = "login"
    VIEW_PROFILE = "view_profile"
    CREATE_CONTENT = "create_content"
    VIEW_OWN_CONTENT = "view_own_content"
    READ_CONTENT = "read_content"
    EDIT_CONTENT = "edit_content"
    DELETE_CONTENT = "delete_content"
    APPROVE_CONTENT = "approve_content"
    REVIEW_PENDING = "review_pending"
    MANAGE_USERS = "manage_users"
    READ_CONTACTS = "read_contacts"
    VIEW_STATS = "view_stats"


PUBLIC_ACTIONS = frozenset(
    {Action.READ_PUBLIC, Action.SUBMIT_CONTACT, Action.REGISTER, Action.LOGIN}
)

# Actions a role may take on any resource.
ROLE_ACTIONS = {
    UserRole.COORDINATOR: frozenset(
        {Action.VIEW_PROFILE, Action.CREATE_CONTENT, Action.VIEW_OWN_CONTENT}
    ),
    UserRole.MEMBER: frozenset({Action.VIEW_PROFILE}),
}

# Actions a role may take only on resources it created.
OWNER_ACTIONS = {
    UserRole.COORDINATOR: frozenset(
        {Action.READ_CONTENT, Action.EDIT_CONTENT, Action.DELETE_CONTENT}
    ),
    UserRole.MEMBER: frozenset(),
}


class AccessControl:
    @staticmethod
    def authorize(caller, action: Action, resource=None):
        """Raise unless ``caller`` may perform ``action`` on ``resource``.

        Precedence: public actions pass, then a missing caller is
        unauthenticated, an unapproved caller is pending, an admin passes
        everything, and finally the role and ownership tables decide.
        """
        if action in PUBLIC_ACTIONS:
            return
        if caller is None:
            raise UnauthenticatedError()
        if not caller.approved:
            raise AccountPendingError()
        if caller.role is UserRole.ADMIN:
            return
        if action in ROLE_ACTIONS.get(caller.role, ()):
            return
        if (
            action in OWNER_ACTIONS.get(caller.role, ())
            and resource is not None
            and getattr(resource, "created_by", None) == caller.id
        ):
            return
        raise ForbiddenError()

    @staticmethod
    def can(caller, action: Action, resource=None) -> bool:
        try:
            AccessControl.authorize(caller, action, resource)
        except (UnauthenticatedError, AccountPendingError, ForbiddenError):
            return False
        return True
