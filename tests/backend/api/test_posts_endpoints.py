"""
Tests for the /posts endpoints.

Covers create, read, list ordering, full-replace update and delete, plus
the 400/404 responses each endpoint documents.
"""

import pytest

MALFORMED_IDS = [
    "not-an-id",
    "123",
    "zzzzzzzzzzzzzzzzzzzzzzzz",
    "6530f1d2c9e77a3f1c2b4a1",
    "6530f1d2c9e77a3f1c2b4a10%0A",
    "%0A6530f1d2c9e77a3f1c2b4a10",
]
MISSING_ID = "6530f1d2c9e77a3f1c2b4a10"

VALID_PAYLOAD = {
    "title": "Replacement",
    "content": "New body",
    "category": "News",
}


class TestCreatePost:
    """Test POST /posts."""

    def test_create_returns_201_with_all_fields(self, test_client):
        payload = {
            "title": "Hello",
            "content": "World",
            "category": "Tech",
            "tags": ["a", "b"],
        }

        response = test_client.post("/posts", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id", "title", "content", "category", "tags", "createdAt", "updatedAt"}
        assert data["title"] == "Hello"
        assert data["content"] == "World"
        assert data["category"] == "Tech"
        assert data["tags"] == ["a", "b"]
        assert len(data["id"]) == 24
        assert data["createdAt"] == data["updatedAt"]

    def test_create_defaults_tags_to_empty_list(self, test_client):
        response = test_client.post("/posts", json=VALID_PAYLOAD)

        assert response.status_code == 201
        assert response.json()["tags"] == []

    def test_create_trims_title_and_category_but_not_content(self, test_client):
        response = test_client.post(
            "/posts",
            json={"title": "  Spaced  ", "content": "  body  ", "category": "\tTech\n"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Spaced"
        assert data["category"] == "Tech"
        assert data["content"] == "  body  "

    def test_create_then_get_returns_same_post(self, test_client):
        created = test_client.post(
            "/posts",
            json={"title": "T", "content": "C", "category": "K", "tags": ["x"]},
        ).json()

        response = test_client.get(f"/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.parametrize("field", ["title", "content", "category"])
    def test_create_missing_required_field_returns_400(self, test_client, field):
        payload = dict(VALID_PAYLOAD)
        del payload[field]

        response = test_client.post("/posts", json=payload)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert {"field": field, "message": f"{field} is required"} in errors

    @pytest.mark.parametrize("field", ["title", "category"])
    def test_create_whitespace_only_trimmed_field_returns_400(self, test_client, field):
        payload = dict(VALID_PAYLOAD, **{field: "   "})

        response = test_client.post("/posts", json=payload)

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == [field]

    def test_create_empty_content_returns_400(self, test_client):
        response = test_client.post("/posts", json=dict(VALID_PAYLOAD, content=""))

        assert response.status_code == 400
        assert response.json()["errors"] == [{"field": "content", "message": "content is required"}]

    def test_create_reports_every_invalid_field(self, test_client):
        response = test_client.post("/posts", json={"tags": "nope"})

        assert response.status_code == 400
        fields = [e["field"] for e in response.json()["errors"]]
        assert fields == ["title", "content", "category", "tags"]

    def test_create_invalid_payload_does_not_store_anything(self, test_client):
        test_client.post("/posts", json={"title": "only title"})

        assert test_client.get("/posts").json() == []


class TestListPosts:
    """Test GET /posts without a term."""

    def test_list_empty(self, test_client):
        response = test_client.get("/posts")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_newest_first(self, test_client, make_post):
        a = make_post(title="A")
        b = make_post(title="B")
        c = make_post(title="C")

        response = test_client.get("/posts")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [c["id"], b["id"], a["id"]]

    def test_list_with_empty_term_returns_all(self, test_client, make_post):
        make_post(title="A")
        make_post(title="B")

        response = test_client.get("/posts?term=")

        assert len(response.json()) == 2


class TestGetPost:
    """Test GET /posts/{id}."""

    def test_get_missing_returns_404(self, test_client):
        response = test_client.get(f"/posts/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    @pytest.mark.parametrize("post_id", MALFORMED_IDS)
    def test_get_malformed_id_returns_404(self, test_client, post_id):
        response = test_client.get(f"/posts/{post_id}")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}


class TestUpdatePost:
    """Test PUT /posts/{id}."""

    def test_update_replaces_all_fields(self, test_client, make_post):
        post = make_post(tags=["old"])

        response = test_client.put(
            f"/posts/{post['id']}",
            json={"title": " New ", "content": "Body", "category": "Life", "tags": ["new"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == post["id"]
        assert data["title"] == "New"
        assert data["content"] == "Body"
        assert data["category"] == "Life"
        assert data["tags"] == ["new"]
        assert data["createdAt"] == post["createdAt"]
        assert data["updatedAt"] >= post["updatedAt"]

    def test_update_without_tags_clears_tags(self, test_client, make_post):
        post = make_post(tags=["keep", "me"])

        response = test_client.put(f"/posts/{post['id']}", json=VALID_PAYLOAD)

        assert response.status_code == 200
        assert response.json()["tags"] == []
        assert test_client.get(f"/posts/{post['id']}").json()["tags"] == []

    def test_update_is_visible_on_get(self, test_client, make_post):
        post = make_post()

        updated = test_client.put(f"/posts/{post['id']}", json=VALID_PAYLOAD).json()

        assert test_client.get(f"/posts/{post['id']}").json() == updated

    def test_update_missing_returns_404(self, test_client):
        response = test_client.put(f"/posts/{MISSING_ID}", json=VALID_PAYLOAD)

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    @pytest.mark.parametrize("post_id", MALFORMED_IDS)
    def test_update_malformed_id_returns_404(self, test_client, post_id):
        response = test_client.put(f"/posts/{post_id}", json=VALID_PAYLOAD)

        assert response.status_code == 404

    def test_update_invalid_payload_returns_400_before_lookup(self, test_client):
        response = test_client.put("/posts/not-an-id", json={"title": ""})

        assert response.status_code == 400
        assert "errors" in response.json()

    def test_update_invalid_payload_leaves_post_unchanged(self, test_client, make_post):
        post = make_post()

        test_client.put(f"/posts/{post['id']}", json={"title": "x", "content": "y", "category": " "})

        assert test_client.get(f"/posts/{post['id']}").json() == post


class TestDeletePost:
    """Test DELETE /posts/{id}."""

    def test_delete_returns_204_with_empty_body(self, test_client, make_post):
        post = make_post()

        response = test_client.delete(f"/posts/{post['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert test_client.get(f"/posts/{post['id']}").status_code == 404

    def test_delete_twice_returns_404(self, test_client, make_post):
        post = make_post()
        test_client.delete(f"/posts/{post['id']}")

        response = test_client.delete(f"/posts/{post['id']}")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_delete_missing_returns_404(self, test_client):
        assert test_client.delete(f"/posts/{MISSING_ID}").status_code == 404

    @pytest.mark.parametrize("post_id", MALFORMED_IDS)
    def test_delete_malformed_id_returns_404(self, test_client, post_id):
        response = test_client.delete(f"/posts/{post_id}")

        assert response.status_code == 404

    def test_delete_only_removes_target(self, test_client, make_post):
        keep = make_post(title="keep")
        drop = make_post(title="drop")

        test_client.delete(f"/posts/{drop['id']}")

        assert [p["id"] for p in test_client.get("/posts").json()] == [keep["id"]]
