from functools import wraps

from flask import jsonify
from flask_jwt_extended import get_current_user, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from app.extensions import jwt
from app.repositories import get_store
from app.services.access_control import AccessControl


@jwt.user_lookup_loader
def load_user(_jwt_header, jwt_data):
    # Re-read the account on every request so approval, role and deletion
    # changes apply to tokens that are already issued.
    return get_store().users.find_by_id(jwt_data["sub"])


@jwt.user_lookup_error_loader
def user_lookup_error(_jwt_header, _jwt_data):
    return jsonify({"error": "User not found"}), 401


@jwt.unauthorized_loader
def missing_token(reason):
    return jsonify({"error": "Not authorized, no token provided"}), 401


@jwt.invalid_token_loader
def invalid_token(reason):
    return jsonify({"error": "Invalid token"}), 401


@jwt.expired_token_loader
def expired_token(_jwt_header, _jwt_data):
    return jsonify({"error": "Token expired"}), 401


def get_optional_caller():
    """Caller for public routes; absent or unusable tokens mean anonymous."""
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError):
        return None
    return get_current_user()


def get_caller():
    verify_jwt_in_request(optional=True)
    return get_current_user()


def auth_required(action):
    """Verify the bearer token and authorize ``action`` before the view runs.

    A missing token reaches the view as an anonymous caller so that the
    access-control rules, not the token layer, decide between
    ``Unauthenticated`` and ``AccountPending``.
    """

    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            AccessControl.authorize(get_caller(), action)
            return fn(*args, **kwargs)

        return decorator

    return wrapper
