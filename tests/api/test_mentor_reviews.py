"""
Tests for the mentor review API endpoints.
"""

import pytest


def _review(**body):
    return {"mentor": "Jo", "feedback": "Great", "rating": 4.5, **body}


class TestCreateReview:
    """POST /mentor-reviews."""

    def test_creates_review(self, client):
        response = client.post("/mentor-reviews", json=_review())

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["mentor"] == "Jo"
        assert body["feedback"] == "Great"
        assert body["rating"] == 4.5

    @pytest.mark.parametrize("rating", [0, 5, "3.25"])
    def test_boundary_ratings_are_accepted(self, client, rating):
        response = client.post("/mentor-reviews", json=_review(rating=rating))

        assert response.status_code == 201
        assert response.json()["rating"] == float(rating)

    @pytest.mark.parametrize("rating", [7, -0.01, 5.01])
    def test_out_of_range_rating_is_rejected(self, client, rating):
        response = client.post("/mentor-reviews", json=_review(rating=rating))

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "rating must be between 0 and 5",
            "field": "rating",
        }
        assert client.get("/mentor-reviews").json() == []

    def test_missing_rating_is_rejected(self, client):
        body = _review()
        del body["rating"]

        response = client.post("/mentor-reviews", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "rating is required"

    def test_non_numeric_rating_is_rejected(self, client):
        response = client.post("/mentor-reviews", json=_review(rating="good"))

        assert response.status_code == 400
        assert response.json()["message"] == "rating must be a number"

    def test_missing_feedback_is_rejected(self, client):
        response = client.post("/mentor-reviews", json={"mentor": "Jo", "rating": 3})

        assert response.status_code == 400
        assert response.json()["field"] == "feedback"


class TestReadReviews:
    """GET /mentor-reviews and GET /mentor-reviews/{id}."""

    def test_list_is_ordered_by_id(self, client):
        client.post("/mentor-reviews", json=_review(mentor="A"))
        client.post("/mentor-reviews", json=_review(mentor="B"))

        response = client.get("/mentor-reviews")

        assert response.status_code == 200
        assert [r["mentor"] for r in response.json()] == ["A", "B"]

    def test_get_by_id(self, client):
        created = client.post("/mentor-reviews", json=_review()).json()

        response = client.get(f"/mentor-reviews/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_unknown_id_is_not_found(self, client):
        response = client.get("/mentor-reviews/8")

        assert response.status_code == 404
        assert response.json()["message"] == "Review not found"


class TestUpdateReview:
    """PUT /mentor-reviews/{id}."""

    def test_partial_update(self, client):
        created = client.post("/mentor-reviews", json=_review()).json()

        response = client.put(f"/mentor-reviews/{created['id']}", json={"rating": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["rating"] == 2
        assert body["feedback"] == "Great"

    def test_invalid_rating_leaves_row_unchanged(self, client):
        created = client.post("/mentor-reviews", json=_review()).json()

        response = client.put(
            f"/mentor-reviews/{created['id']}", json={"feedback": "Meh", "rating": 9}
        )

        assert response.status_code == 400
        assert client.get(f"/mentor-reviews/{created['id']}").json()["feedback"] == "Great"

    def test_empty_body_is_rejected(self, client):
        created = client.post("/mentor-reviews", json=_review()).json()

        response = client.put(f"/mentor-reviews/{created['id']}", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "No fields provided to update"


class TestDeleteReview:
    """DELETE /mentor-reviews/{id}."""

    def test_delete_twice(self, client):
        created = client.post("/mentor-reviews", json=_review()).json()

        first = client.delete(f"/mentor-reviews/{created['id']}")
        second = client.delete(f"/mentor-reviews/{created['id']}")

        assert first.status_code == 200
        assert first.json() == {"ok": True, "message": "Review deleted", "id": created["id"]}
        assert second.status_code == 404

    def test_invalid_id_is_bad_request(self, client):
        response = client.delete("/mentor-reviews/abc")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid id"
