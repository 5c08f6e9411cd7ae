import uuid

from sqlalchemy.orm import declared_attr

from app.extensions import db


def generate_id():
    return str(uuid.uuid4())


def isoformat(value):
    return value.isoformat() if value else None


class ApprovableMixin:
    """Identity, approval flag, timestamps and a version counter.

    The version column is the mapper's ``version_id_col``: every UPDATE and
    DELETE is issued with ``WHERE version = <loaded version>`` so a write
    based on a stale read fails instead of silently overwriting.
    """

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    approved = db.Column(db.Boolean, nullable=False, default=False)
    version = db.Column(db.Integer, nullable=False)
    created_at = db.Column(
        db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        db.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    @declared_attr
    def __mapper_args__(cls):
        return {"version_id_col": cls.version}


class OwnedMixin:
    @declared_attr
    def created_by(cls):
        return db.Column(
            db.String(36),
            db.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )
