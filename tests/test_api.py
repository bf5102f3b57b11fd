"""Tests for the REST API."""

import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from rudeshare.board.service import BoardService
from rudeshare.config import Settings
from web.backend.app.main import app
from web.backend.app.middleware.identity import get_service


@pytest.fixture
def client():
    with tempfile.TemporaryDirectory() as tmpdir:
        service = BoardService(settings=Settings(data_dir=Path(tmpdir)))
        app.dependency_overrides[get_service] = lambda: service
        yield TestClient(app)
        app.dependency_overrides.clear()


def _post(client, content: str) -> dict:
    resp = client.post("/api/posts", json={"content": content})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_and_fetch_post(client):
    created = _post(client, "this is fucking garbage and I hate it!!!")
    assert created["rudeness_score"] == 34
    assert created["is_boosted"] is False
    assert created["post_code"].startswith("#")

    fetched = client.get(f"/api/posts/{created['id']}").json()
    assert fetched["content"] == created["content"]
    assert [p["id"] for p in client.get("/api/posts").json()] == [created["id"]]


def test_missing_post_is_404(client):
    assert client.get("/api/posts/99").status_code == 404
    assert client.post("/api/posts/99/vote", json={"vote_type": "up"}).status_code == 404


def test_polite_post_is_forbidden_and_shamed(client):
    resp = client.post("/api/posts", json={"content": "please thank you"})
    assert resp.status_code == 403
    detail = resp.json()["detail"]
    assert detail["flagged_terms"] == ["please", "thank you"]
    assert detail["rude_response"]

    shame = client.get("/api/hall-of-shame").json()
    assert len(shame) == 1
    assert shame[0]["content"] == "please thank you"
    assert "ip_hash" not in shame[0]


def test_illegal_post_is_forbidden(client):
    resp = client.post("/api/posts", json={"content": "I will kill you"})
    assert resp.status_code == 403
    detail = resp.json()["detail"]
    assert detail["flagged_terms"] == ["kill"]
    assert "rude_response" not in detail
    assert client.get("/api/hall-of-shame").json() == []


def test_empty_post_is_rejected(client):
    assert client.post("/api/posts", json={"content": "  "}).status_code == 400


def test_duplicate_vote_conflicts(client):
    post = _post(client, "trash")
    assert client.post(f"/api/posts/{post['id']}/vote", json={"vote_type": "up"}).status_code == 201
    assert client.post(f"/api/posts/{post['id']}/vote", json={"vote_type": "down"}).status_code == 409
    assert client.get(f"/api/posts/{post['id']}").json()["score"] == 1


def test_reaction_toggle(client):
    post = _post(client, "trash")
    url = f"/api/posts/{post['id']}/react"
    added = client.post(url, json={"reaction_type": "savage"})
    assert added.status_code == 201
    assert added.json()["reactions"] == {"savage": 1}

    removed = client.post(url, json={"reaction_type": "savage"})
    assert removed.status_code == 200
    assert removed.json()["added"] is False
    assert client.post(url, json={"reaction_type": "polite"}).status_code == 422


def test_report(client):
    post = _post(client, "trash")
    resp = client.post(f"/api/posts/{post['id']}/report", json={"reason": "not rude enough"})
    assert resp.status_code == 201
    assert client.get(f"/api/posts/{post['id']}").json()["report_count"] == 1


def test_search(client):
    _post(client, "pineapple pizza is garbage")
    _post(client, "cats are lame")
    assert client.get("/api/posts/search").status_code == 400
    results = client.get("/api/posts/search", params={"q": "pineapple"}).json()
    assert [p["content"] for p in results] == ["pineapple pizza is garbage"]


def test_comments(client):
    post = _post(client, "hot take, idiot")
    url = f"/api/posts/{post['id']}/comments"

    resp = client.post(url, json={"content": "garbage"})
    assert resp.status_code == 201
    comment = resp.json()
    assert comment["rudeness_score"] == 5

    assert client.post(url, json={"content": "sorry, thanks"}).status_code == 403
    assert client.post("/api/posts/99/comments", json={"content": "garbage"}).status_code == 404
    assert [c["id"] for c in client.get(url).json()] == [comment["id"]]

    vote_url = f"/api/comments/{comment['id']}/vote"
    assert client.post(vote_url, json={"vote_type": "up"}).status_code == 201
    assert client.post(vote_url, json={"vote_type": "up"}).status_code == 409
    assert client.post("/api/comments/99/vote", json={"vote_type": "up"}).status_code == 404


def test_daily_challenge_and_statistics(client):
    assert client.get("/api/daily-challenge").json()["prompt"]
    _post(client, "trash")
    stats = client.get("/api/statistics").json()
    assert stats["total_posts"] == 1
    assert stats["avg_rudeness_score"] == 5


def test_cleanup(client):
    _post(client, "trash")
    assert client.post("/api/cleanup").json() == {"message": "Cleaned up 0 old posts"}


def test_moderate_dry_run(client):
    resp = client.post("/api/moderate", json={"content": "KILL THE VIBE"})
    body = resp.json()
    assert body["severity"] == "banned_illegal"
    assert body["is_death_threat"] is True
    assert body["rudeness_score"] == 0
