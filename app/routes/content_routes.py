from flask import Blueprint, jsonify, request
from app.repositories import get_store
from app.services.access_control import Action
from app.services.event_service import EventService
from app.services.sermon_service import SermonService
from app.services.gallery_service import GalleryService
from app.utils.auth import auth_required, get_caller, get_optional_caller
from app.utils.validation import get_json_body, parse_bool


def create_content_blueprint(name, path, service_cls):
    """Public reads, owner edits and admin approval for one content kind."""
    bp = Blueprint(name, __name__)

    @bp.route(f"/{path}", methods=["GET"])
    def list_items():
        items = service_cls(get_store()).list_public(request.args)
        return jsonify([item.to_dict() for item in items]), 200

    @bp.route(f"/{path}/<item_id>", methods=["GET"])
    def get_item(item_id):
        item = service_cls(get_store()).get_visible(item_id, get_optional_caller())
        return jsonify(item.to_dict()), 200

    @bp.route(f"/{path}", methods=["POST"])
    @auth_required(Action.CREATE_CONTENT)
    def create_item():
        data = get_json_body()
        item = service_cls(get_store()).create(data, get_caller())
        return jsonify(item.to_dict()), 201

    @bp.route(f"/{path}/<item_id>", methods=["PUT"])
    @auth_required(Action.VIEW_PROFILE)
    def update_item(item_id):
        data = get_json_body()
        item = service_cls(get_store()).update(item_id, data, get_caller())
        return jsonify(item.to_dict()), 200

    @bp.route(f"/{path}/<item_id>", methods=["DELETE"])
    @auth_required(Action.VIEW_PROFILE)
    def delete_item(item_id):
        service = service_cls(get_store())
        service.delete(item_id, get_caller())
        return jsonify({"success": True, "message": f"{service.label} deleted"}), 200

    @bp.route(f"/{path}/<item_id>/approve", methods=["PATCH"])
    @auth_required(Action.APPROVE_CONTENT)
    def approve_item(item_id):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        approved = parse_bool(data, "approved", default=True)
        result = service_cls(get_store()).approve(item_id, approved, get_caller())
        return jsonify(result), 200

    return bp


event_bp = create_content_blueprint("events", "events", EventService)
sermon_bp = create_content_blueprint("sermons", "sermons", SermonService)
gallery_bp = create_content_blueprint("gallery", "gallery", GalleryService)
