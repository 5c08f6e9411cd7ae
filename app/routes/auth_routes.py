from flask import Blueprint, jsonify
from app.extensions import limiter
from app.repositories import get_store
from app.services.access_control import Action
from app.services.user_service import UserService
from app.utils.auth import auth_required, get_caller
from app.exceptions import ValidationError
from app.utils.validation import get_json_body, parse_string, require_fields

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("10 per minute")
def login():
    data = get_json_body()
    require_fields(data, ["username", "password"])
    username = parse_string(data, "username", min_length=1)
    password = data["password"]
    if not isinstance(password, str):
        raise ValidationError(fields={"password": "Must be a string"})
    result = UserService(get_store()).sign_in(username, password)
    return jsonify(result), 200


@auth_bp.route("/register", methods=["POST"])
@limiter.limit("5 per minute")
def register():
    data = get_json_body()
    result = UserService(get_store()).register(data)
    return jsonify(result), 201


@auth_bp.route("/coordinators", methods=["POST"])
@auth_required(Action.MANAGE_USERS)
def create_coordinator():
    data = get_json_body()
    result = UserService(get_store()).create_coordinator(data, get_caller())
    return jsonify(result), 201


@auth_bp.route("/me", methods=["GET"])
@auth_required(Action.VIEW_PROFILE)
def me():
    return jsonify(UserService(get_store()).profile(get_caller())), 200
