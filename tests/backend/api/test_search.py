"""
Tests for term search on GET /posts.
"""

import pytest


@pytest.fixture
def seeded(make_post):
    """Three posts with distinct title, content and category words."""
    return {
        "tech": make_post(title="Async IO", content="Event loops explained", category="Tech"),
        "food": make_post(title="Sourdough", content="Starter and flour", category="Cooking"),
        "cpp": make_post(title="C++ tips", content="Templates (advanced)", category="Programming"),
    }


class TestTermSearch:
    """Case-insensitive substring matching across title, content and category."""

    def test_term_matches_category_case_insensitively(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "tech"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [seeded["tech"]["id"]]

    def test_term_matches_title_substring(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "DOUGH"})

        assert [p["title"] for p in response.json()] == ["Sourdough"]

    def test_term_matches_content(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "loops"})

        assert [p["category"] for p in response.json()] == ["Tech"]

    def test_term_does_not_match_tags(self, test_client, make_post):
        make_post(title="Plain", content="Nothing", category="Misc", tags=["hidden"])

        response = test_client.get("/posts", params={"term": "hidden"})

        assert response.json() == []

    def test_term_without_match_returns_empty_list(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "quantum"})

        assert response.status_code == 200
        assert response.json() == []

    def test_term_matching_several_posts_keeps_newest_first(self, test_client, seeded):
        # "o" appears in every seeded post
        response = test_client.get("/posts", params={"term": "o"})

        ids = [p["id"] for p in response.json()]
        assert ids == [seeded["cpp"]["id"], seeded["food"]["id"], seeded["tech"]["id"]]


class TestLiteralMatching:
    """Regex metacharacters in the term are matched literally."""

    def test_plus_signs_match_literally(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "c++"})

        assert [p["title"] for p in response.json()] == ["C++ tips"]

    def test_parentheses_match_literally(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "(advanced)"})

        assert [p["title"] for p in response.json()] == ["C++ tips"]

    def test_dot_does_not_act_as_wildcard(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "."})

        assert response.json() == []

    def test_unbalanced_bracket_is_not_an_error(self, test_client, seeded):
        response = test_client.get("/posts", params={"term": "["})

        assert response.status_code == 200
        assert response.json() == []
