"""End-to-end tests for the site dashboard API."""

from tests.conftest import sign_in
from tests.harness import create_client_fixture

client = create_client_fixture()

SITES = "/api/v1/admin/sites"


def guest_comment(client, content: str) -> int:
    response = client.post(
        "/api/v1/sites/comments",
        json={
            "domain": "blog.example.com",
            "pageId": "/posts/hello",
            "content": content,
            "author_name": "Guest",
        },
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestSiteLifecycle:
    def test_create_list_update_delete(self, client):
        owner = sign_in(client, "owner@example.com")

        created = client.post(
            SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner
        )
        site_id = created.json()["id"]
        listed = client.get(SITES, headers=owner)
        renamed = client.patch(f"{SITES}/{site_id}", json={"name": "Notes"}, headers=owner)
        detail = client.get(f"{SITES}/{site_id}", headers=owner)
        deleted = client.delete(f"{SITES}/{site_id}", headers=owner)
        gone = client.get(f"{SITES}/{site_id}", headers=owner)

        assert created.status_code == 201
        assert len(created.json()["api_key"]) > 8
        assert listed.json()["sites"][0]["api_key_preview"] == "********"
        assert renamed.json()["name"] == "Notes"
        assert detail.json()["api_key"] == "HIDDEN"
        assert deleted.json() == {"success": True}
        assert gone.status_code == 404

    def test_duplicate_domain_conflict(self, client):
        owner = sign_in(client, "owner@example.com")
        body = {"name": "Blog", "domain": "blog.example.com"}
        client.post(SITES, json=body, headers=owner)

        response = client.post(SITES, json=body, headers=owner)

        assert response.status_code == 409

    def test_invalid_domain(self, client):
        owner = sign_in(client, "owner@example.com")

        response = client.post(
            SITES, json={"name": "Blog", "domain": "http://blog.example.com/"}, headers=owner
        )

        assert response.status_code == 400

    def test_unverified_site_check_and_widget(self, client):
        owner = sign_in(client, "owner@example.com")
        site_id = client.post(
            SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner
        ).json()["id"]

        check = client.post(f"{SITES}/{site_id}/verify", headers=owner)
        widget = client.get(
            "/api/v1/widget/verify-site", params={"domain": "blog.example.com"}
        )

        assert check.json()["verified"] is False
        assert check.json()["verification_url"].startswith("https://blog.example.com/")
        assert widget.json()["verified"] is False
        assert widget.json()["error"].startswith("This site has not been verified")

    def test_widget_check_without_domain(self, client):
        response = client.get("/api/v1/widget/verify-site")

        assert response.status_code == 400
        assert response.json() == {"error": "Domain parameter is required"}

    def test_other_owner_cannot_see_site(self, client):
        owner = sign_in(client, "owner@example.com")
        stranger = sign_in(client, "stranger@example.com")
        site_id = client.post(
            SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner
        ).json()["id"]

        assert client.get(f"{SITES}/{site_id}", headers=stranger).status_code == 403
        assert client.get(f"{SITES}/{site_id}").status_code == 401
        assert client.get(f"{SITES}/nope", headers=owner).status_code == 400


class TestModerationQueue:
    def test_bulk_and_log(self, client):
        # Arrange
        owner = sign_in(client, "owner@example.com")
        site_id = client.post(
            SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner
        ).json()["id"]
        first = guest_comment(client, "one")
        second = guest_comment(client, "two")

        # Act
        bulk = client.post(
            f"{SITES}/{site_id}/comments/bulk",
            json={"comment_ids": [first, second, 999], "action": "approve"},
            headers=owner,
        )
        pending = client.get(
            f"{SITES}/{site_id}/comments", params={"status": "pending"}, headers=owner
        )
        log = client.get(f"{SITES}/{site_id}/moderation-log", headers=owner)
        stats = client.get(f"{SITES}/{site_id}/stats", headers=owner)

        # Assert
        assert bulk.json()["results"] == {
            str(first): "ok",
            str(second): "ok",
            "999": "not_found",
        }
        assert bulk.json()["succeeded"] == 2
        assert pending.json()["total"] == 0
        assert len(log.json()["entries"]) == 2
        assert stats.json() == {
            "total_pages": 1,
            "total_comments": 2,
            "pending_comments": 0,
            "total_likes": 0,
        }

    def test_empty_bulk_rejected(self, client):
        owner = sign_in(client, "owner@example.com")
        site_id = client.post(
            SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner
        ).json()["id"]

        response = client.post(
            f"{SITES}/{site_id}/comments/bulk",
            json={"comment_ids": [], "action": "spam"},
            headers=owner,
        )

        assert response.status_code == 400

    def test_overview_pages_and_activity(self, client):
        owner = sign_in(client, "owner@example.com")
        client.post(SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner)
        site_id = client.get(SITES, headers=owner).json()["sites"][0]["id"]
        guest_comment(client, "hello")

        overview = client.get(f"{SITES}/overview", headers=owner)
        pages = client.get(f"{SITES}/{site_id}/pages", headers=owner)
        activity = client.get(f"{SITES}/{site_id}/activity", headers=owner)

        assert overview.json()["aggregated"]["pending_comments"] == 1
        assert pages.json()["pages"][0]["slug"] == "/posts/hello"
        assert activity.json()["activity"][0]["type"] == "comment"

    def test_regenerate_key(self, client):
        owner = sign_in(client, "owner@example.com")
        created = client.post(
            SITES, json={"name": "Blog", "domain": "blog.example.com"}, headers=owner
        ).json()

        response = client.post(f"{SITES}/{created['id']}/regenerate-key", headers=owner)

        assert response.json()["api_key"] != created["api_key"]


class TestSuperadmin:
    def test_regular_user_forbidden(self, client):
        user = sign_in(client, "owner@example.com")

        assert client.get("/api/v1/superadmin/stats", headers=user).status_code == 403
        assert client.get("/api/v1/superadmin/stats").status_code == 401
