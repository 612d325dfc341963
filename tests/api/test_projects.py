"""
Tests for the project API endpoints.

Runs the full stack (router, service, CRUD) against the in-memory
SQLite database provided by the `client` fixture.
"""

from datetime import datetime


def _create(client, **body):
    payload = {"title": "Alpha", "mentor": "Bob", **body}
    response = client.post("/projects", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestProjectLifecycle:
    """Create, list, update and delete a project end to end."""

    def test_full_lifecycle(self, client):
        created = client.post("/projects", json={"title": "Alpha", "mentor": "Bob"})
        assert created.status_code == 201
        body = created.json()
        assert body["id"] == 1
        assert body["title"] == "Alpha"
        assert body["mentor"] == "Bob"
        assert body["students"] == 0

        patched = client.patch("/projects/1/students", json={"students": 5})
        assert patched.status_code == 200
        assert patched.json()["students"] == 5

        deleted = client.delete("/projects/1")
        assert deleted.status_code == 200
        assert deleted.json() == {"ok": True, "message": "Project deleted", "id": 1}

        again = client.delete("/projects/1")
        assert again.status_code == 404
        assert again.json() == {"success": False, "message": "Project not found"}

    def test_list_is_ordered_by_id(self, client):
        assert client.get("/projects").json() == []

        _create(client, title="First")
        _create(client, title="Second")

        response = client.get("/projects")
        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["First", "Second"]
        assert [p["id"] for p in response.json()] == [1, 2]

    def test_ids_are_not_reused_after_delete(self, client):
        first = _create(client)
        client.delete(f"/projects/{first['id']}")

        second = _create(client)
        assert second["id"] > first["id"]


class TestCreateProject:
    """Validation on POST /projects."""

    def test_missing_title_is_rejected(self, client):
        response = client.post("/projects", json={"mentor": "Bob"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "title is required",
            "field": "title",
        }
        assert client.get("/projects").json() == []

    def test_empty_mentor_is_rejected(self, client):
        response = client.post("/projects", json={"title": "Alpha", "mentor": ""})

        assert response.status_code == 400
        assert response.json()["field"] == "mentor"

    def test_students_are_coerced(self, client):
        assert _create(client, students="7")["students"] == 7
        assert _create(client, students="lots")["students"] == 0

    def test_negative_students_are_rejected(self, client):
        response = client.post(
            "/projects", json={"title": "Alpha", "mentor": "Bob", "students": -1}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "students"

    def test_timestamps_are_returned(self, client):
        body = _create(client)

        assert datetime.fromisoformat(body["created_at"])
        assert datetime.fromisoformat(body["updated_at"])


class TestGetProject:
    """GET /projects/{id}."""

    def test_returns_project(self, client):
        created = _create(client)

        response = client.get(f"/projects/{created['id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Alpha"

    def test_unknown_id_is_not_found(self, client):
        response = client.get("/projects/42")

        assert response.status_code == 404
        assert response.json()["message"] == "Project not found"

    def test_non_numeric_id_is_bad_request(self, client):
        response = client.get("/projects/abc")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid id", "field": "id"}


class TestUpdateProject:
    """PUT /projects/{id} applies only the supplied fields."""

    def test_partial_update_leaves_other_fields(self, client):
        created = _create(client, students=3)

        response = client.put(f"/projects/{created['id']}", json={"mentor": "Carol"})

        assert response.status_code == 200
        body = response.json()
        assert body["mentor"] == "Carol"
        assert body["title"] == "Alpha"
        assert body["students"] == 3

    def test_updated_at_does_not_go_backwards(self, client):
        created = _create(client)

        updated = client.put(f"/projects/{created['id']}", json={"title": "Beta"}).json()

        assert updated["created_at"] == created["created_at"]
        assert datetime.fromisoformat(updated["updated_at"]) >= datetime.fromisoformat(
            created["updated_at"]
        )

    def test_empty_body_is_rejected_and_row_unchanged(self, client):
        created = _create(client)

        response = client.put(f"/projects/{created['id']}", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "No fields provided to update"
        assert client.get(f"/projects/{created['id']}").json() == created

    def test_unknown_fields_do_not_count(self, client):
        created = _create(client)

        response = client.put(f"/projects/{created['id']}", json={"owner": "Eve"})

        assert response.status_code == 400

    def test_null_title_is_rejected(self, client):
        created = _create(client)

        response = client.put(f"/projects/{created['id']}", json={"title": None})

        assert response.status_code == 400
        assert response.json()["field"] == "title"

    def test_unknown_id_is_not_found(self, client):
        response = client.put("/projects/99", json={"title": "Beta"})

        assert response.status_code == 404

    def test_non_numeric_id_is_bad_request(self, client):
        response = client.put("/projects/1.5", json={"title": "Beta"})

        assert response.status_code == 400


class TestUpdateStudents:
    """PATCH /projects/{id}/students."""

    def test_missing_students_is_rejected(self, client):
        created = _create(client)

        response = client.patch(f"/projects/{created['id']}/students", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "students is required and must be a number"

    def test_numeric_string_is_accepted(self, client):
        created = _create(client)

        response = client.patch(f"/projects/{created['id']}/students", json={"students": "12"})

        assert response.status_code == 200
        assert response.json()["students"] == 12

    def test_unknown_id_is_not_found(self, client):
        response = client.patch("/projects/7/students", json={"students": 1})

        assert response.status_code == 404


class TestApiPrefix:
    """Resource routes are also served under /api."""

    def test_prefixed_routes_share_the_store(self, client):
        created = client.post("/api/projects", json={"title": "Alpha", "mentor": "Bob"})
        assert created.status_code == 201

        listed = client.get("/projects").json()
        assert [p["id"] for p in listed] == [created.json()["id"]]

        deleted = client.delete(f"/api/projects/{created.json()['id']}")
        assert deleted.json()["message"] == "Project deleted"


class TestIntegerRange:
    """Values beyond the INTEGER columns are rejected before the store."""

    def test_huge_students_on_create_is_bad_request(self, client):
        response = client.post(
            "/projects", json={"title": "Alpha", "mentor": "Bob", "students": 10**20}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "students"
        assert client.get("/projects").json() == []

    def test_huge_students_on_patch_is_bad_request(self, client):
        created = _create(client)

        response = client.patch(
            f"/projects/{created['id']}/students", json={"students": "99999999999999999999"}
        )

        assert response.status_code == 400
        assert client.get(f"/projects/{created['id']}").json()["students"] == 0

    def test_huge_path_id_is_bad_request(self, client):
        response = client.delete("/projects/99999999999999999999")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid id", "field": "id"}
