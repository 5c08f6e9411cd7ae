from flask import Blueprint, jsonify
from app.extensions import limiter
from app.repositories import get_store
from app.services.access_control import Action
from app.services.contact_service import ContactService
from app.utils.auth import auth_required, get_caller
from app.utils.validation import get_json_body

contact_bp = Blueprint("contact", __name__)


@contact_bp.route("/contact", methods=["POST"])
@limiter.limit("5 per minute")
def submit_contact():
    data = get_json_body()
    contact = ContactService(get_store()).submit(data)
    return jsonify(contact.to_dict()), 201


@contact_bp.route("/contact", methods=["GET"])
@auth_required(Action.READ_CONTACTS)
def list_contacts():
    messages = ContactService(get_store()).list_messages(get_caller())
    return jsonify([message.to_dict() for message in messages]), 200
