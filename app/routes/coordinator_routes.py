from flask import Blueprint, jsonify
from app.repositories import get_store
from app.services.access_control import Action
from app.services.event_service import EventService
from app.services.gallery_service import GalleryService
from app.services.sermon_service import SermonService
from app.utils.auth import auth_required, get_caller

coordinator_bp = Blueprint("coordinator", __name__)


@coordinator_bp.route("/my-events", methods=["GET"])
@auth_required(Action.VIEW_OWN_CONTENT)
def my_events():
    """Events the caller created, pending ones included"""
    events = EventService(get_store()).list_for_creator(get_caller())
    return jsonify([event.to_dict() for event in events]), 200


@coordinator_bp.route("/my-sermons", methods=["GET"])
@auth_required(Action.VIEW_OWN_CONTENT)
def my_sermons():
    sermons = SermonService(get_store()).list_for_creator(get_caller())
    return jsonify([sermon.to_dict() for sermon in sermons]), 200


@coordinator_bp.route("/my-gallery", methods=["GET"])
@auth_required(Action.VIEW_OWN_CONTENT)
def my_gallery():
    items = GalleryService(get_store()).list_for_creator(get_caller())
    return jsonify([item.to_dict() for item in items]), 200
