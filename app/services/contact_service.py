import logging

from app.repositories import Store
from app.services.access_control import AccessControl, Action
from app.utils.validation import parse_bool, parse_email, parse_string, require_fields

logger = logging.getLogger(__name__)


class ContactService:
    required_fields = ("firstName", "lastName", "email", "subject", "message")

    def __init__(self, store: Store):
        self.store = store

    def submit(self, data):
        AccessControl.authorize(None, Action.SUBMIT_CONTACT)
        require_fields(data, self.required_fields)
        contact = self.store.contacts.create(
            {
                "first_name": parse_string(data, "firstName", min_length=1, max_length=100),
                "last_name": parse_string(data, "lastName", min_length=1, max_length=100),
                "email": parse_email(data, "email"),
                "phone": parse_string(data, "phone", max_length=30),
                "subject": parse_string(data, "subject", min_length=1, max_length=255),
                "message": parse_string(data, "message", min_length=1),
                "newsletter_opt_in": parse_bool(data, "newsletterOptIn", default=False),
            }
        )
        logger.info(f"Contact message {contact.id} received from {contact.email}")
        return contact

    def list_messages(self, caller):
        AccessControl.authorize(caller, Action.READ_CONTACTS)
        return self.store.contacts.list()
