from sqlalchemy import or_

from app.models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository):
    model = User
    label = "User"

    def ordering(self):
        return [User.created_at.asc()]

    def find_by_email(self, email):
        return self.query.filter_by(email=email).first()

    def find_by_username(self, username):
        return self.query.filter_by(username=username).first()

    def find_by_login(self, login):
        return self.query.filter(or_(User.username == login, User.email == login)).first()
