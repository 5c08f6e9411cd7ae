from flask import Blueprint, jsonify
from app.repositories import get_store
from app.services.community_group_service import CommunityGroupService

group_bp = Blueprint("groups", __name__)


@group_bp.route("/groups", methods=["GET"])
def list_groups():
    groups = CommunityGroupService(get_store()).list_groups()
    return jsonify([group.to_dict() for group in groups]), 200


@group_bp.route("/groups/<group_id>", methods=["GET"])
def get_group(group_id):
    group = CommunityGroupService(get_store()).get_group(group_id)
    return jsonify(group.to_dict()), 200
