import logging
from typing import List

from app.exceptions import ConflictError, NotFoundError, ValidationError
from app.repositories import BaseRepository, Store
from app.services.access_control import AccessControl, Action
from app.services.approval_service import ApprovalService

logger = logging.getLogger(__name__)


class ContentService:
    """Shared lifecycle for user-submitted content (events, sermons, gallery).

    Subclasses name their repository on the store and turn request payloads
    into model attributes with ``parse``.
    """

    repository_name = None
    required_fields = ()

    def __init__(self, store: Store):
        self.store = store

    @property
    def repository(self) -> BaseRepository:
        return getattr(self.store, self.repository_name)

    @property
    def label(self):
        return self.repository.label

    def parse(self, data: dict, partial: bool = False) -> dict:
        raise NotImplementedError

    def list_filters(self, args) -> dict:
        return {}

    def list_public(self, args=None) -> List:
        return self.repository.approved(**self.list_filters(args or {}))

    def get_visible(self, entity_id, caller):
        """Approved items are public; pending ones only reach their creator and admins."""
        entity = self.repository.get(entity_id)
        if entity.approved or AccessControl.can(caller, Action.READ_CONTENT, entity):
            return entity
        raise NotFoundError(f"{self.label} not found")

    def create(self, data: dict, caller):
        AccessControl.authorize(caller, Action.CREATE_CONTENT)
        attrs = self.parse(data)
        attrs["created_by"] = caller.id
        attrs["approved"] = ApprovalService.initial_state(
            caller, data.get("autoApprove", True) is not False
        )
        entity = self.repository.create(attrs)
        logger.info(
            f"{self.label} {entity.id} created by {caller.username} "
            f"({'approved' if entity.approved else 'pending review'})"
        )
        return entity

    def update(self, entity_id, data: dict, caller):
        entity = self.get_visible(entity_id, caller)
        AccessControl.authorize(caller, Action.EDIT_CONTENT, entity)

        expected_version = data.get("version")
        if expected_version is not None and expected_version != entity.version:
            raise ConflictError(f"{self.label} was modified by another request")

        attrs = self.parse(data, partial=True)
        if not attrs:
            raise ValidationError("No updatable fields provided")
        if not caller.is_admin:
            # Coordinator edits go back through review.
            attrs["approved"] = False
        entity = self.repository.update(entity, attrs)
        logger.info(f"{self.label} {entity.id} updated by {caller.username}")
        return entity

    def delete(self, entity_id, caller):
        entity = self.get_visible(entity_id, caller)
        AccessControl.authorize(caller, Action.DELETE_CONTENT, entity)
        self.repository.delete(entity)
        logger.info(f"{self.label} {entity_id} deleted by {caller.username}")

    def list_for_creator(self, caller) -> List:
        AccessControl.authorize(caller, Action.VIEW_OWN_CONTENT)
        return self.repository.list(created_by=caller.id)

    def list_pending(self, caller) -> List:
        AccessControl.authorize(caller, Action.REVIEW_PENDING)
        return self.repository.pending()

    def approve(self, entity_id, approved: bool, caller):
        AccessControl.authorize(caller, Action.APPROVE_CONTENT)
        return ApprovalService.decide(self.repository, entity_id, approved)
