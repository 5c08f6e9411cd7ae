from app.extensions import db
from .enums import GalleryCategory
from .mixins import ApprovableMixin, OwnedMixin, isoformat


class GalleryItem(ApprovableMixin, OwnedMixin, db.Model):
    __tablename__ = "gallery_items"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(1024), nullable=False)
    category = db.Column(
        db.Enum(GalleryCategory), nullable=False, default=GalleryCategory.RECENT
    )
    is_video = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "category": self.category.value if self.category else None,
            "isVideo": self.is_video,
            "createdBy": self.created_by,
            "approved": self.approved,
            "version": self.version,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<GalleryItem id={self.id} title={self.title!r} approved={self.approved}>"
