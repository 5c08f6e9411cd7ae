from app.models.enums import UserRole
from tests.helpers import ApiTestCase


class UserApprovalTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.pending = self.make_user("newcomer", UserRole.MEMBER, approved=False)
        self.pending_id = self.pending.id
        self.headers = self.headers_for(self.admin)

    def test_pending_users_lists_only_unapproved(self):
        response = self.client.get("/api/admin/pending-users", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([u["username"] for u in response.get_json()], ["newcomer"])

    def test_approve_user_allows_login(self):
        response = self.client.post(
            "/api/admin/approve-user",
            json={"userId": self.pending_id, "approved": True},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["message"], "User approved")

        login = self.client.post(
            "/api/auth/login", json={"username": "newcomer", "password": "secret123"}
        )
        self.assertEqual(login.status_code, 200)

    def test_reject_user_deletes_account(self):
        response = self.client.post(
            "/api/admin/approve-user",
            json={"userId": self.pending_id, "approved": False},
            headers=self.headers,
        )
        self.assertEqual(response.get_json()["message"], "User rejected and removed")
        self.assertIsNone(self.store.users.find_by_id(self.pending_id))

        again = self.client.post(
            "/api/admin/approve-user",
            json={"userId": self.pending_id, "approved": False},
            headers=self.headers,
        )
        self.assertEqual(again.status_code, 404)

    def test_admin_cannot_reject_self(self):
        response = self.client.post(
            "/api/admin/approve-user",
            json={"userId": self.admin.id, "approved": False},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)

    def test_decision_requires_fields(self):
        response = self.client.post(
            "/api/admin/approve-user", json={"userId": self.pending_id}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["missing_fields"], ["approved"])

    def test_coordinator_cannot_manage_users(self):
        headers = self.headers_for(self.coordinator)
        self.assertEqual(self.client.get("/api/admin/pending-users", headers=headers).status_code, 403)
        response = self.client.post(
            "/api/admin/approve-user",
            json={"userId": self.pending_id, "approved": True},
            headers=headers,
        )
        self.assertEqual(response.status_code, 403)

    def test_list_users(self):
        response = self.client.get("/api/admin/users", headers=self.headers)
        self.assertEqual(
            {u["username"] for u in response.get_json()},
            {"admin", "coordinator", "member", "newcomer"},
        )

    def test_change_role(self):
        response = self.client.patch(
            f"/api/admin/users/{self.member.id}/role",
            json={"role": "admin"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["user"]["role"], "admin")

        # The promotion applies to the member's existing token immediately.
        stats = self.client.get("/api/admin/stats", headers=self.headers_for(self.member))
        self.assertEqual(stats.status_code, 200)

    def test_change_role_rejects_unknown_role(self):
        response = self.client.patch(
            f"/api/admin/users/{self.member.id}/role",
            json={"role": "bishop"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)

    def test_admin_cannot_demote_self(self):
        response = self.client.patch(
            f"/api/admin/users/{self.admin.id}/role",
            json={"role": "member"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)


class ReviewQueueTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.headers_for(self.admin)
        self.event_id = self.create_event(self.coordinator).get_json()["id"]
        self.sermon_id = self.create_sermon(self.coordinator).get_json()["id"]
        self.gallery_id = self.create_gallery_item(self.coordinator).get_json()["id"]
        self.create_event(self.admin, title="Already Approved")

    def test_pending_queues(self):
        events = self.client.get("/api/admin/pending-events", headers=self.headers).get_json()
        self.assertEqual([e["id"] for e in events], [self.event_id])
        sermons = self.client.get("/api/admin/pending-sermons", headers=self.headers).get_json()
        self.assertEqual([s["id"] for s in sermons], [self.sermon_id])
        gallery = self.client.get("/api/admin/pending-gallery", headers=self.headers).get_json()
        self.assertEqual([g["id"] for g in gallery], [self.gallery_id])

    def test_coordinator_cannot_see_queues(self):
        response = self.client.get(
            "/api/admin/pending-events", headers=self.headers_for(self.coordinator)
        )
        self.assertEqual(response.status_code, 403)

    def test_approve_each_kind(self):
        for path, id_field, item_id, public in (
            ("approve-event", "eventId", self.event_id, "/api/events"),
            ("approve-sermon", "sermonId", self.sermon_id, "/api/sermons"),
            ("approve-gallery", "galleryId", self.gallery_id, "/api/gallery"),
        ):
            response = self.client.post(
                f"/api/admin/{path}", json={id_field: item_id, "approved": True}, headers=self.headers
            )
            self.assertEqual(response.status_code, 200)
            self.assertIn(item_id, [item["id"] for item in self.client.get(public).get_json()])

    def test_approve_twice_is_idempotent(self):
        payload = {"sermonId": self.sermon_id, "approved": True}
        first = self.client.post("/api/admin/approve-sermon", json=payload, headers=self.headers)
        second = self.client.post("/api/admin/approve-sermon", json=payload, headers=self.headers)
        self.assertEqual(second.status_code, 200)
        self.assertEqual(first.get_json()["item"], second.get_json()["item"])

    def test_approve_unknown_id(self):
        response = self.client.post(
            "/api/admin/approve-gallery",
            json={"galleryId": "missing", "approved": True},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 404)

    def test_coordinator_cannot_decide(self):
        response = self.client.post(
            "/api/admin/approve-event",
            json={"eventId": self.event_id, "approved": True},
            headers=self.headers_for(self.coordinator),
        )
        self.assertEqual(response.status_code, 403)


class StatsTests(ApiTestCase):
    def test_stats_counts(self):
        self.make_user("newcomer", UserRole.MEMBER, approved=False)
        self.create_event(self.admin, date="2999-01-01")
        self.create_event(self.admin, title="Long Ago", date="2001-01-01")
        self.create_event(self.coordinator)
        self.create_sermon(self.coordinator)
        self.create_gallery_item(self.coordinator)
        self.client.post(
            "/api/contact",
            json={
                "firstName": "Ruth",
                "lastName": "Moab",
                "email": "ruth@example.com",
                "subject": "Hello",
                "message": "Visiting on Sunday",
            },
        )

        response = self.client.get("/api/admin/stats", headers=self.headers_for(self.admin))
        self.assertEqual(response.status_code, 200)
        stats = response.get_json()
        self.assertEqual(stats["totalMembers"], 3)
        self.assertEqual(stats["activeEvents"], 1)
        self.assertEqual(stats["pendingUsers"], 1)
        self.assertEqual(stats["pendingEvents"], 1)
        self.assertEqual(stats["pendingSermons"], 1)
        self.assertEqual(stats["pendingGallery"], 1)
        self.assertEqual(stats["pendingApprovals"], 4)
        self.assertEqual(stats["contactMessages"], 1)

    def test_stats_admin_only(self):
        for user in (self.coordinator, self.member):
            response = self.client.get("/api/admin/stats", headers=self.headers_for(user))
            self.assertEqual(response.status_code, 403)
        self.assertEqual(self.client.get("/api/admin/stats").status_code, 401)
