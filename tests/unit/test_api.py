"""Tests for the HTTP surface."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from app.container import container
from app.errors import NotFoundError, ServiceUnavailableError
from app.models.blog import Metadata
from web.server import create_app


class FakeCache:
    def __init__(self):
        self.entries = {"a": Metadata(views=10), "b": Metadata(views=20, comments=2, reactions=3)}
        self.unavailable = False
        self.delay = 0.0
        self.invalidated = 0

    async def get_one(self, slug):
        await asyncio.sleep(self.delay)
        if self.unavailable:
            raise ServiceUnavailableError()
        if slug not in self.entries:
            raise NotFoundError(f"Blog post not found: {slug}")
        return self.entries[slug]

    async def get_all(self):
        if self.unavailable:
            raise ServiceUnavailableError()
        return dict(self.entries)

    async def invalidate(self):
        self.invalidated += 1

    async def status(self):
        return {"posts": 2, "stale_posts": 0, "has_token": True, "index_age": 1.5, "aggregate_age": None}


@pytest.fixture
def fake(monkeypatch):
    cache = FakeCache()
    monkeypatch.setattr(container, "metadata", cache, raising=False)
    return cache


@pytest.fixture
def client(fake):
    return TestClient(create_app(allow_origin=None))


class TestRoutes:
    def test_hello(self, client):
        resp = client.get("/hello")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Hello, world!"}

    def test_one(self, client):
        resp = client.get("/blog/metadata/b")
        assert resp.status_code == 200
        assert resp.json() == {"views": 20, "comments": 2, "reactions": 3}

    def test_not_found(self, client):
        resp = client.get("/blog/metadata/missing")
        assert resp.status_code == 404
        assert "missing" in resp.json()["detail"]

    def test_invalid_slug(self, client):
        resp = client.get("/blog/metadata/" + "x" * 201)
        assert resp.status_code == 400

    def test_all(self, client):
        resp = client.get("/blog/metadata")
        assert resp.status_code == 200
        assert resp.json() == {
            "a": {"views": 10, "comments": 0, "reactions": 0},
            "b": {"views": 20, "comments": 2, "reactions": 3},
        }

    def test_unavailable(self, client, fake):
        fake.unavailable = True
        assert client.get("/blog/metadata/a").status_code == 503
        assert client.get("/blog/metadata").status_code == 503

    def test_invalidate(self, client, fake):
        resp = client.post("/blog/metadata/invalidate")
        assert resp.status_code == 204
        assert fake.invalidated == 1
        assert client.get("/blog/metadata/a").status_code == 200

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["posts"] == 2

    def test_openapi(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert "/blog/metadata/{slug}" in paths
        assert "/blog/metadata" in paths


class TestMiddleware:
    def test_cors_header(self, fake):
        client = TestClient(create_app(allow_origin="https://zlendy.com"))
        resp = client.get("/blog/metadata/a", headers={"Origin": "https://zlendy.com"})
        assert resp.headers["access-control-allow-origin"] == "https://zlendy.com"

    def test_no_cors_by_default(self, client):
        resp = client.get("/blog/metadata/a", headers={"Origin": "https://zlendy.com"})
        assert "access-control-allow-origin" not in resp.headers

    def test_timeout(self, fake):
        fake.delay = 1.0
        client = TestClient(create_app(allow_origin=None, request_timeout=0.05))
        assert client.get("/blog/metadata/a").status_code == 408
