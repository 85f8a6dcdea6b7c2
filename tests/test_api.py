"""REST surface over the topic store."""

import pytest

from debate_board import create_app
from debate_board.config import TestingConfig
from debate_board.db.session import db


@pytest.fixture()
def client():
    app = create_app(TestingConfig)
    app.config.update(TESTING=True)
    return app.test_client()


def test_health(client):
    assert client.get("/api/health/").get_json() == {"data": {"status": "ok"}}
    assert client.get("/api/health/store").get_json()["data"] == {"initialized": True, "topics": 3}


def test_list_topics_newest_first(client):
    data = client.get("/api/topics/").get_json()["data"]
    assert [t["id"] for t in data] == [1, 2, 3]
    assert data[0]["replies"][0]["author"] == "DebateEnthusiast"


def test_list_by_category(client):
    assert [t["id"] for t in client.get("/api/topics/?category=society").get_json()["data"]] == [2]
    assert [t["id"] for t in client.get("/api/topics/category/education").get_json()["data"]] == [3]
    assert client.get("/api/topics/category/ethics").get_json()["data"] == []


def test_unknown_category_filter_is_rejected(client):
    resp = client.get("/api/topics/category/sports")
    assert resp.status_code == 422
    assert resp.get_json()["error"] == "invalid_input"


def test_create_topic(client):
    resp = client.post("/api/topics/", json={
        "title": "Nuclear power?", "content": "Discuss.", "category": "science", "userId": "user_abc",
    })
    assert resp.status_code == 201
    topic = resp.get_json()["data"]
    assert topic["author"] == "Anonymous"
    assert topic["replies"] == []
    assert topic["userId"] == "user_abc"
    assert topic["date"].endswith("Z")
    assert client.get("/api/topics/").get_json()["data"][0]["id"] == topic["id"]


def test_create_topic_validation(client):
    resp = client.post("/api/topics/", json={"title": " ", "content": "x", "category": "science"})
    assert resp.status_code == 422
    assert resp.get_json()["error"] == "invalid_input"
    resp = client.post("/api/topics/", json={"title": "t", "content": "x", "category": "sports"})
    assert resp.status_code == 422
    assert len(client.get("/api/topics/").get_json()["data"]) == 3


def test_create_reply(client):
    resp = client.post("/api/topics/3/replies", json={"content": "Yes", "author": "Coach"})
    assert resp.status_code == 201
    reply = resp.get_json()["data"]
    assert reply["author"] == "Coach"
    topic = client.get("/api/topics/3").get_json()["data"]
    assert [r["content"] for r in topic["replies"]] == ["Yes"]


def test_reply_to_unknown_topic(client):
    resp = client.post("/api/topics/999999/replies", json={"content": "hi"})
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


def test_get_unknown_topic(client):
    assert client.get("/api/topics/999999").status_code == 404


def test_non_object_body_is_invalid(client):
    resp = client.post("/api/topics/", json=["not", "an", "object"])
    assert resp.status_code == 422


def test_collection_path_without_trailing_slash(client):
    resp = client.get("/api/topics")
    assert resp.status_code == 200
    assert [t["id"] for t in resp.get_json()["data"]] == [1, 2, 3]
    resp = client.post("/api/topics", json={"title": "t", "content": "c", "category": "other"})
    assert resp.status_code == 201
    assert client.get("/api/health").status_code == 200


def test_sql_backed_app():
    config = TestingConfig(STORAGE_BACKEND="sql", DATABASE_URL="sqlite://")
    app = create_app(config)
    client = app.test_client()
    created = client.post("/api/topics/", json={"title": "t", "content": "c", "category": "ethics"})
    assert created.status_code == 201
    assert client.get("/api/topics/").get_json()["data"][0]["id"] == created.get_json()["data"]["id"]
    db.dispose()
