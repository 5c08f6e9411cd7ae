from flask import Blueprint, jsonify
from app.repositories import get_store
from app.services.access_control import Action
from app.services.admin_service import AdminService
from app.services.event_service import EventService
from app.services.gallery_service import GalleryService
from app.services.sermon_service import SermonService
from app.services.user_service import UserService
from app.utils.auth import auth_required, get_caller
from app.utils.validation import get_json_body, parse_bool, require_fields

admin_bp = Blueprint("admin", __name__)

# Review queue name -> (service, id field in the decision body)
REVIEW_QUEUES = {
    "event": (EventService, "eventId"),
    "sermon": (SermonService, "sermonId"),
    "gallery": (GalleryService, "galleryId"),
}


def read_decision(id_field):
    data = get_json_body()
    require_fields(data, [id_field, "approved"])
    return data[id_field], parse_bool(data, "approved")


@admin_bp.route("/stats", methods=["GET"])
@auth_required(Action.VIEW_STATS)
def stats():
    return jsonify(AdminService(get_store()).stats(get_caller())), 200


@admin_bp.route("/users", methods=["GET"])
@auth_required(Action.MANAGE_USERS)
def list_users():
    users = UserService(get_store()).list_users(get_caller())
    return jsonify([user.to_dict() for user in users]), 200


@admin_bp.route("/pending-users", methods=["GET"])
@auth_required(Action.MANAGE_USERS)
def pending_users():
    users = UserService(get_store()).list_pending(get_caller())
    return jsonify([user.to_dict() for user in users]), 200


@admin_bp.route("/approve-user", methods=["POST"])
@auth_required(Action.MANAGE_USERS)
def approve_user():
    user_id, approved = read_decision("userId")
    result = UserService(get_store()).approve(user_id, approved, get_caller())
    return jsonify(result), 200


@admin_bp.route("/users/<user_id>/role", methods=["PATCH"])
@auth_required(Action.MANAGE_USERS)
def change_role(user_id):
    data = get_json_body()
    result = UserService(get_store()).change_role(user_id, data, get_caller())
    return jsonify(result), 200


def register_review_queue(kind, service_cls, id_field):
    plural = "gallery" if kind == "gallery" else f"{kind}s"

    @auth_required(Action.REVIEW_PENDING)
    def list_pending():
        items = service_cls(get_store()).list_pending(get_caller())
        return jsonify([item.to_dict() for item in items]), 200

    @auth_required(Action.APPROVE_CONTENT)
    def decide():
        item_id, approved = read_decision(id_field)
        result = service_cls(get_store()).approve(item_id, approved, get_caller())
        return jsonify(result), 200

    admin_bp.add_url_rule(
        f"/pending-{plural}", f"pending_{plural}", list_pending, methods=["GET"]
    )
    admin_bp.add_url_rule(f"/approve-{kind}", f"approve_{kind}", decide, methods=["POST"])


for _kind, (_service_cls, _id_field) in REVIEW_QUEUES.items():
    register_review_queue(_kind, _service_cls, _id_field)
