from app.repositories import Store
from app.services.access_control import AccessControl, Action


class AdminService:
    def __init__(self, store: Store):
        self.store = store

    def stats(self, caller):
        AccessControl.authorize(caller, Action.VIEW_STATS)

        pending_users = self.store.users.count(approved=False)
        pending_events = self.store.events.count(approved=False)
        pending_sermons = self.store.sermons.count(approved=False)
        pending_gallery = self.store.gallery.count(approved=False)

        return {
            "totalMembers": self.store.users.count(approved=True),
            "activeEvents": self.store.events.count_upcoming(),
            "pendingApprovals": pending_users + pending_events + pending_sermons + pending_gallery,
            "pendingUsers": pending_users,
            "pendingEvents": pending_events,
            "pendingSermons": pending_sermons,
            "pendingGallery": pending_gallery,
            "totalSermons": self.store.sermons.count(approved=True),
            "contactMessages": self.store.contacts.count(),
        }
