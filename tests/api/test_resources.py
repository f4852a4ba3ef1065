"""API resource tests."""

import json
from uuid import uuid4

from falcon.testing import TestClient

from tests.conftest import ADMIN_ID, EDITOR_ID, VIEWER_ID


def _open_draft(client: TestClient, role_id) -> dict:
    result = client.simulate_post(f"/v1/roles/{role_id}/drafts")
    assert result.status_code == 201
    return result.json


def _toggle(client: TestClient, draft_id: str, permission: str):
    return client.simulate_post(f"/v1/drafts/{draft_id}/toggle", json={"permission": permission})


class TestCatalog:
    def test_catalog_groups_and_edges(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/catalog")
        assert result.status_code == 200
        assert [g["name"] for g in result.json["groups"]] == ["Posts", "Users", "System Control"]
        assert result.json["administrative"] == ["rbac.manage"]
        critical = [p["id"] for g in result.json["groups"] for p in g["permissions"] if p["critical"]]
        assert critical == ["settings.manage", "rbac.manage"]

    def test_dependencies(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/catalog/dependencies")
        assert result.status_code == 200
        assert {
            "permission": "posts.write",
            "requires": "posts.read",
            "message": "Editing requires viewing",
        } in result.json["items"]


class TestRoles:
    def test_list_and_search(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles")
        assert result.status_code == 200
        assert [r["name"] for r in result.json["items"]] == ["Admin", "Editor", "Viewer"]

        result = client.simulate_get("/v1/roles", params={"q": "edit"})
        assert [r["name"] for r in result.json["items"]] == ["Editor"]

    def test_get_role(self, client: TestClient) -> None:
        result = client.simulate_get(f"/v1/roles/{VIEWER_ID}")
        assert result.status_code == 200
        assert result.json["permissions"]["posts.read"] is True
        assert result.json["version"] == 1

    def test_get_missing_and_malformed_id(self, client: TestClient) -> None:
        assert client.simulate_get(f"/v1/roles/{uuid4()}").status_code == 404
        result = client.simulate_get("/v1/roles/not-a-uuid")
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"

    def test_create_role(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/roles",
            json={"name": "Moderator", "description": "Moderates", "permissions": {"posts.read": True}},
        )
        assert result.status_code == 201
        assert result.json["is_system"] is False
        assert result.json["last_modified"]["actor"] == "alice"
        assert len(result.json["permissions"]) == 7
        assert result.json["color"] == "info"
        assert result.json["status"] == "active"

    def test_create_role_with_color_and_status(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"name": "Banned", "color": "danger", "status": "disabled"}
        )
        assert result.status_code == 201
        assert result.json["color"] == "danger"
        assert result.json["status"] == "disabled"

    def test_create_rejects_unknown_color(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/roles", json={"name": "X", "color": "purple"})
        assert result.status_code == 400
        assert "color must be one of" in result.json["message"]

    def test_create_duplicate_name(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/roles", json={"name": "editor"})
        assert result.status_code == 409
        assert result.json["error"] == "duplicate_name"

    def test_create_requires_name(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/roles", json={"description": "no name"})
        assert result.status_code == 400

    def test_create_rejects_non_boolean_permissions(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/roles", json={"name": "X", "permissions": {"posts.read": "yes"}})
        assert result.status_code == 400

    def test_update_role(self, client: TestClient) -> None:
        result = client.simulate_put(f"/v1/roles/{VIEWER_ID}", json={"name": "Reader"})
        assert result.status_code == 200
        assert result.json["name"] == "Reader"
        assert result.json["version"] == 2

    def test_update_system_role_forbidden(self, client: TestClient) -> None:
        result = client.simulate_put(f"/v1/roles/{ADMIN_ID}", json={"name": "Root"})
        assert result.status_code == 403
        assert result.json["error"] == "system_role_immutable"

    def test_duplicate_role(self, client: TestClient) -> None:
        result = client.simulate_post(f"/v1/roles/{ADMIN_ID}/duplicate")
        assert result.status_code == 201
        assert result.json["name"] == "Admin (Copy)"
        assert result.json["is_system"] is False

    def test_delete_role(self, client: TestClient) -> None:
        result = client.simulate_delete(f"/v1/roles/{VIEWER_ID}")
        assert result.status_code == 204
        assert client.simulate_get(f"/v1/roles/{VIEWER_ID}").status_code == 404

    def test_delete_system_role_forbidden(self, client: TestClient) -> None:
        assert client.simulate_delete(f"/v1/roles/{ADMIN_ID}").status_code == 403

    def test_delete_with_users_needs_replacement(self, client: TestClient) -> None:
        result = client.simulate_post(f"/v1/roles/{VIEWER_ID}/users", json={"user_ids": ["u1", "u2"]})
        assert result.json == {"assigned": 2}

        result = client.simulate_delete(f"/v1/roles/{VIEWER_ID}")
        assert result.status_code == 409
        assert result.json["error"] == "replacement_required"
        assert result.json["user_count"] == 2

        result = client.simulate_delete(
            f"/v1/roles/{VIEWER_ID}", params={"replacement_role_id": str(EDITOR_ID)}
        )
        assert result.status_code == 204
        users = client.simulate_get(f"/v1/roles/{EDITOR_ID}/users").json["items"]
        assert [u["user_id"] for u in users] == ["u1", "u2"]
        assert client.simulate_get(f"/v1/roles/{EDITOR_ID}").json["user_count"] == 2

    def test_assign_users_validation(self, client: TestClient) -> None:
        result = client.simulate_post(f"/v1/roles/{VIEWER_ID}/users", json={"user_ids": "u1"})
        assert result.status_code == 400


class TestDrafts:
    def test_open_draft(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        assert draft["role_name"] == "Viewer"
        assert draft["state"] == "idle"
        assert draft["is_dirty"] is False
        assert draft["changes"] == []

    def test_toggle_enables_prerequisites(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        result = _toggle(client, draft["id"], "posts.publish")
        assert result.status_code == 200
        working = result.json["working_set"]
        assert working["posts.publish"] and working["posts.write"] and working["posts.read"]
        assert [c["id"] for c in result.json["changes"]] == ["posts.write", "posts.publish"]
        # nothing written until commit
        assert client.simulate_get(f"/v1/roles/{VIEWER_ID}").json["permissions"]["posts.write"] is False

    def test_critical_disable_needs_confirmation(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        _toggle(client, draft["id"], "settings.manage")

        result = _toggle(client, draft["id"], "settings.manage")
        assert result.json["state"] == "pending"
        assert result.json["pending_confirmation"] == "settings.manage"
        assert result.json["working_set"]["settings.manage"] is True

        result = _toggle(client, draft["id"], "posts.write")
        assert result.status_code == 409
        assert result.json["error"] == "confirmation_pending"

        result = client.simulate_post(f"/v1/drafts/{draft['id']}/cancel")
        assert result.json["state"] == "idle"
        assert result.json["working_set"]["settings.manage"] is True

        _toggle(client, draft["id"], "settings.manage")
        result = client.simulate_post(
            f"/v1/drafts/{draft['id']}/confirm", json={"permission": "settings.manage"}
        )
        assert result.status_code == 200
        assert result.json["working_set"]["settings.manage"] is False

    def test_confirm_without_pending(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        assert client.simulate_post(f"/v1/drafts/{draft['id']}/confirm").status_code == 400

    def test_toggle_group(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        result = client.simulate_post(f"/v1/drafts/{draft['id']}/toggle-group", json={"group": "Posts"})
        assert result.status_code == 200
        assert all(result.json["working_set"][p] for p in ("posts.read", "posts.write", "posts.publish", "posts.delete"))

    def test_toggle_unknown_permission(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        assert _toggle(client, draft["id"], "nope").status_code == 404
        assert client.simulate_post(f"/v1/drafts/{draft['id']}/toggle", json={}).status_code == 400

    def test_system_role_draft_is_read_only(self, client: TestClient) -> None:
        draft = _open_draft(client, ADMIN_ID)
        assert draft["is_system"] is True
        assert _toggle(client, draft["id"], "posts.read").status_code == 403

    def test_preview_and_commit(self, client: TestClient) -> None:
        client.simulate_post(f"/v1/roles/{EDITOR_ID}/users", json={"user_ids": ["u1", "u2"]})
        draft = _open_draft(client, EDITOR_ID)
        _toggle(client, draft["id"], "posts.write")

        preview = client.simulate_get(f"/v1/drafts/{draft['id']}/preview").json
        assert preview["revoked"] == ["posts.write", "posts.publish", "posts.delete"]
        assert preview["affected_users"] == 2
        assert preview["requires_preview"] is True
        assert preview["changes"][0] == {"id": "posts.write", "label": "Edit Posts", "from": True, "to": False}

        result = client.simulate_post(f"/v1/drafts/{draft['id']}/commit")
        assert result.status_code == 200
        assert result.json["role"]["version"] == 2
        assert result.json["role"]["permissions"]["posts.write"] is False
        assert result.json["draft"]["is_dirty"] is False
        assert result.json["draft"]["base_version"] == 2

        logs = client.simulate_get("/v1/logs", params={"role_id": str(EDITOR_ID)}).json["items"]
        assert logs[0]["action"] == "permission_updated"
        assert logs[0]["performed_by"] == "alice"

    def test_commit_clean_draft_is_noop(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        result = client.simulate_post(f"/v1/drafts/{draft['id']}/commit")
        assert result.status_code == 200
        assert result.json["role"]["version"] == 1
        assert result.json["role"]["last_modified"] is None
        assert client.simulate_get("/v1/logs").json["items"] == []

    def test_commit_empty_set_rejected(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        _toggle(client, draft["id"], "posts.read")
        result = client.simulate_post(f"/v1/drafts/{draft['id']}/commit")
        assert result.status_code == 422
        assert result.json["error"] == "empty_permission_set"

    def test_concurrent_commit_conflict(self, client: TestClient) -> None:
        first = _open_draft(client, VIEWER_ID)
        second = _open_draft(client, VIEWER_ID)
        _toggle(client, first["id"], "users.read")
        _toggle(client, second["id"], "posts.write")

        assert client.simulate_post(f"/v1/drafts/{first['id']}/commit").status_code == 200
        result = client.simulate_post(f"/v1/drafts/{second['id']}/commit")
        assert result.status_code == 409
        assert result.json["error"] == "concurrent_modification"
        assert result.json["expected_version"] == 1
        assert result.json["current_version"] == 2

    def test_commit_rejects_bad_expected_version(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        result = client.simulate_post(f"/v1/drafts/{draft['id']}/commit", json={"expected_version": "1"})
        assert result.status_code == 400

    def test_discard_and_close(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        _toggle(client, draft["id"], "posts.write")
        result = client.simulate_post(f"/v1/drafts/{draft['id']}/discard")
        assert result.json["is_dirty"] is False

        assert client.simulate_delete(f"/v1/drafts/{draft['id']}").status_code == 204
        assert client.simulate_get(f"/v1/drafts/{draft['id']}").status_code == 404

    def test_deleting_role_closes_its_drafts(self, client: TestClient) -> None:
        draft = _open_draft(client, VIEWER_ID)
        client.simulate_delete(f"/v1/roles/{VIEWER_ID}")
        assert client.simulate_get(f"/v1/drafts/{draft['id']}").status_code == 404


class TestTransfer:
    def test_export_then_import(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/export")
        assert result.status_code == 200
        assert "attachment" in result.headers["Content-Disposition"]
        document = json.loads(result.text)

        next(r for r in document["roles"] if r["id"] == str(VIEWER_ID))["description"] = "Read only"
        result = client.simulate_post(
            "/v1/import", body=json.dumps(document), headers={"Content-Type": "application/json"}
        )
        assert result.status_code == 200
        assert result.json == {"imported": 1}
        assert client.simulate_get(f"/v1/roles/{VIEWER_ID}").json["description"] == "Read only"

    def test_import_rejected(self, client: TestClient) -> None:
        document = {
            "schema_version": 1,
            "roles": [{"id": str(uuid4()), "name": "Ghost", "permissions": {"nope": True}}],
        }
        result = client.simulate_post(
            "/v1/import", body=json.dumps(document), headers={"Content-Type": "application/json"}
        )
        assert result.status_code == 422
        assert result.json["error"] == "import_validation_failed"
        assert result.json["violations"]


class TestMiddleware:
    def test_review_mode_blocks_writes(self, review_client: TestClient) -> None:
        assert review_client.simulate_get("/v1/roles").status_code == 200
        result = review_client.simulate_post("/v1/roles", json={"name": "X"})
        assert result.status_code == 423
        assert result.json["error"] == "review_mode_active"
        assert review_client.simulate_post(f"/v1/roles/{VIEWER_ID}/drafts").status_code == 423

    def test_anonymous_actor(self, catalog, uow_factory) -> None:
        from rolekeeper.interfaces.api.app import create_app

        client = TestClient(create_app(catalog, uow_factory))
        created = client.simulate_post("/v1/roles", json={"name": "Anon"}).json
        assert created["last_modified"]["actor"] == "anonymous"

    def test_cors_preflight(self, client: TestClient) -> None:
        result = client.simulate_options("/v1/roles", headers={"Origin": "http://localhost:5173"})
        assert result.status_code == 200
        assert result.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
        assert "X-Actor" in result.headers["Access-Control-Allow-Headers"]

    def test_logs_limit(self, client: TestClient) -> None:
        for name in ("A", "B", "C"):
            client.simulate_post("/v1/roles", json={"name": name})
        items = client.simulate_get("/v1/logs", params={"limit": 2}).json["items"]
        assert len(items) == 2
        assert items[0]["details"].startswith("Created role 'C'")
