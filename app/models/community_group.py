from app.extensions import db
from .enums import GroupCategory


class CommunityGroup(db.Model):
    __tablename__ = 'community_groups'

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=False)
    leader = db.Column(db.String(255), nullable=False)
    meeting_time = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    category = db.Column(db.Enum(GroupCategory), nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    color = db.Column(db.String(100), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'leader': self.leader,
            'meetingTime': self.meeting_time,
            'location': self.location,
            'category': self.category.value if self.category else None,
            'icon': self.icon,
            'color': self.color,
        }
