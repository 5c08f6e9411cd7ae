from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from app.exceptions import ConflictError, InternalError, NotFoundError


class BaseRepository:
    """Keyed storage for one entity kind.

    Every mutating call commits on its own, so a single create, update or
    delete is atomic against its key. A failed commit rolls the session
    back before the error leaves the repository.
    """

    model = None
    label = "Resource"

    def __init__(self, db):
        self.db = db

    @property
    def query(self):
        return self.model.query

    def ordering(self):
        return [self.model.created_at.desc()]

    def find_by_id(self, entity_id):
        if entity_id is None:
            return None
        return self.query.filter_by(id=str(entity_id)).first()

    def get(self, entity_id):
        entity = self.find_by_id(entity_id)
        if not entity:
            raise NotFoundError(f"{self.label} not found")
        return entity

    def list(self, approved: Optional[bool] = None, created_by=None, **filters) -> List:
        query = self.query
        if approved is not None:
            query = query.filter_by(approved=approved)
        if created_by is not None:
            query = query.filter_by(created_by=created_by)
        filters = {key: value for key, value in filters.items() if value is not None}
        if filters:
            query = query.filter_by(**filters)
        return query.order_by(*self.ordering()).all()

    def pending(self, **filters) -> List:
        return self.list(approved=False, **filters)

    def approved(self, **filters) -> List:
        return self.list(approved=True, **filters)

    def count(self, **filters) -> int:
        return self.query.filter_by(**filters).count()

    def create(self, attrs: dict):
        entity = self.model(**attrs)
        self.db.session.add(entity)
        self._commit()
        return entity

    def update(self, entity, attrs: dict):
        for key, value in attrs.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        self._commit()
        return entity

    def delete(self, entity):
        self.db.session.delete(entity)
        self._commit()

    def delete_by_id(self, entity_id):
        self.delete(self.get(entity_id))

    def _commit(self):
        try:
            self.db.session.commit()
        except StaleDataError:
            self.db.session.rollback()
            raise ConflictError(f"{self.label} was modified by another request")
        except IntegrityError:
            self.db.session.rollback()
            raise ConflictError(f"{self.label} conflicts with an existing record")
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise InternalError() from e
