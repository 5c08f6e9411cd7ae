import logging

from app.repositories import BaseRepository

logger = logging.getLogger(__name__)


class ApprovalService:
    @staticmethod
    def initial_state(creator, auto_approve=True) -> bool:
        """Admin submissions skip review unless the admin opts out."""
        return bool(creator is not None and creator.is_admin and auto_approve)

    @staticmethod
    def decide(repository: BaseRepository, entity_id, approved: bool):
        """Approve or reject one pending entity.

        Approval sets the flag and keeps the entity; approving an entity that
        is already approved changes nothing. Rejection deletes the entity, so
        any later decision on the same id raises ``NotFoundError``.
        """
        entity = repository.get(entity_id)
        label = repository.label

        if approved:
            if not entity.approved:
                repository.update(entity, {"approved": True})
                logger.info(f"{label} {entity_id} approved")
            else:
                logger.info(f"{label} {entity_id} already approved, nothing to do")
            return {
                "success": True,
                "approved": True,
                "message": f"{label} approved",
                "item": entity.to_dict(),
            }

        repository.delete(entity)
        logger.info(f"{label} {entity_id} rejected and removed")
        return {
            "success": True,
            "approved": False,
            "message": f"{label} rejected and removed",
        }
