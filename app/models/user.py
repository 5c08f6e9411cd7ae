from app.extensions import db
from .enums import UserRole
from .mixins import ApprovableMixin, isoformat


class User(ApprovableMixin, db.Model):
    __tablename__ = 'users'

    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    mobile = db.Column(db.String(20), nullable=True)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(UserRole), nullable=False, default=UserRole.MEMBER)

    @property
    def is_admin(self):
        return self.role is UserRole.ADMIN

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'mobile': self.mobile,
            'role': self.role.value if self.role else None,
            'approved': self.approved,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return (
            f"User("
            f"id={self.id}, "
            f"username='{self.username}', "
            f"role={self.role}, "
            f"approved={self.approved}"
            f")"
        )
