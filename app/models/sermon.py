from app.extensions import db
from .mixins import ApprovableMixin, OwnedMixin, isoformat


class Sermon(ApprovableMixin, OwnedMixin, db.Model):
    __tablename__ = "sermons"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    pastor = db.Column(db.String(255), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    duration = db.Column(db.String(50), nullable=True)
    audio_url = db.Column(db.String(1024), nullable=True)
    thumbnail_url = db.Column(db.String(1024), nullable=True)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "pastor": self.pastor,
            "date": isoformat(self.date),
            "duration": self.duration,
            "audioUrl": self.audio_url,
            "thumbnailUrl": self.thumbnail_url,
            "createdBy": self.created_by,
            "approved": self.approved,
            "version": self.version,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Sermon id={self.id} title={self.title!r} approved={self.approved}>"
