from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token
from app.exceptions import (
    AccountPendingError,
    ConflictError,
    UnauthenticatedError,
    ValidationError,
)
from app.models.enums import UserRole
from app.repositories import Store
from app.services.access_control import AccessControl, Action
from app.services.approval_service import ApprovalService
from app.utils.validation import parse_choice, parse_email, parse_string, require_fields
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class UserService:
    def __init__(self, store: Store):
        self.store = store

    def _parse_account(self, data):
        require_fields(data, ["username", "email", "password"])
        username = parse_string(data, "username", min_length=2, max_length=80)
        email = parse_email(data, "email")
        password = data["password"]
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                fields={"password": f"Must be at least {MIN_PASSWORD_LENGTH} characters"}
            )
        mobile = parse_string(data, "mobile", max_length=20)
        return username, email, password, mobile

    def _create_account(self, data, role: UserRole, approved: bool):
        username, email, password, mobile = self._parse_account(data)

        if self.store.users.find_by_username(username):
            logger.warning(f"Account creation with existing username: {username}")
            raise ConflictError("Username already taken")
        if self.store.users.find_by_email(email):
            logger.warning(f"Account creation with existing email: {email}")
            raise ConflictError("Email already registered")

        user = self.store.users.create(
            {
                "username": username,
                "email": email,
                "mobile": mobile,
                "password": generate_password_hash(password),
                "role": role,
                "approved": approved,
            }
        )
        logger.info(f"{role.value.capitalize()} account created: {user.username}")
        return user

    def register(self, data):
        """Public registration request; the member waits for admin approval."""
        AccessControl.authorize(None, Action.REGISTER)
        user = self._create_account(data, UserRole.MEMBER, approved=False)
        return {
            "message": "Registration received. An administrator will review your account.",
            "user": user.to_dict(),
        }

    def create_coordinator(self, data, caller):
        AccessControl.authorize(caller, Action.MANAGE_USERS)
        coordinator = self._create_account(data, UserRole.COORDINATOR, approved=True)
        return {
            "message": "Coordinator created successfully",
            "user": coordinator.to_dict(),
        }

    def sign_in(self, login, password):
        user = self.store.users.find_by_login(login)
        if not user or not check_password_hash(user.password, password):
            logger.warning(f"Failed login attempt for: {login}")
            raise UnauthenticatedError("Invalid credentials")

        if not user.approved:
            logger.warning(f"Login attempt by pending account: {login}")
            raise AccountPendingError("Account not approved")

        access_token = create_access_token(
            identity=user.id, additional_claims={"role": user.role.value}
        )
        logger.info(f"User logged in successfully: {user.username}")
        return {"token": access_token, "user": user.to_dict()}

    def profile(self, caller):
        AccessControl.authorize(caller, Action.VIEW_PROFILE)
        return caller.to_dict()

    def list_users(self, caller):
        AccessControl.authorize(caller, Action.MANAGE_USERS)
        return self.store.users.list()

    def list_pending(self, caller):
        AccessControl.authorize(caller, Action.MANAGE_USERS)
        return self.store.users.pending()

    def approve(self, user_id, approved: bool, caller):
        AccessControl.authorize(caller, Action.MANAGE_USERS)
        if not approved and str(user_id) == caller.id:
            raise ValidationError("Administrators cannot reject their own account")
        return ApprovalService.decide(self.store.users, user_id, approved)

    def change_role(self, user_id, data, caller):
        AccessControl.authorize(caller, Action.MANAGE_USERS)
        require_fields(data, ["role"])
        role = parse_choice(data, "role", UserRole)
        user = self.store.users.get(user_id)
        if user.id == caller.id and role is not UserRole.ADMIN:
            raise ValidationError("Administrators cannot demote themselves")
        user = self.store.users.update(user, {"role": role})
        logger.info(f"{caller.username} changed role of {user.username} to {role.value}")
        return {
            "message": f"{user.username} is now {role.value}.",
            "user": user.to_dict(),
        }

    def ensure_admin(self, username, email, password, reset_password=False):
        """Create the initial admin account, or reset its password."""
        admin = self.store.users.find_by_email(email)
        if admin:
            if reset_password:
                admin = self.store.users.update(
                    admin,
                    {
                        "password": generate_password_hash(password),
                        "role": UserRole.ADMIN,
                        "approved": True,
                    },
                )
                logger.info(f"Admin account updated: {admin.email}")
            return admin, False

        admin = self._create_account(
            {"username": username, "email": email, "password": password},
            UserRole.ADMIN,
            approved=True,
        )
        return admin, True
