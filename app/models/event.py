from app.extensions import db
from .enums import EventCategory
from .mixins import ApprovableMixin, OwnedMixin, isoformat


class Event(ApprovableMixin, OwnedMixin, db.Model):
    __tablename__ = "events"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    date = db.Column(db.Date, nullable=False, index=True)
    time = db.Column(db.String(50), nullable=True)
    location = db.Column(db.String(255), nullable=True)
    category = db.Column(db.Enum(EventCategory), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": isoformat(self.date),
            "time": self.time,
            "location": self.location,
            "category": self.category.value if self.category else None,
            "createdBy": self.created_by,
            "approved": self.approved,
            "version": self.version,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Event id={self.id} title={self.title!r} approved={self.approved}>"
