"""Tests for the Umami client."""

import json

import httpx
import pytest

from upstream_client.errors import (
    UnauthorizedError,
    UpstreamDecodeError,
    UpstreamNotFoundError,
    UpstreamTransportError,
)
from upstream_client.umami import UmamiClient
from upstream_client.umami.client import END_AT, START_AT

LOGIN_BODY = {
    "token": "tok-1",
    "user": {
        "id": "41e2b680-648e-4b09-bcd7-3e2b10c06264",
        "username": "admin",
        "role": "admin",
        "createdAt": "2024-01-01T00:00:00.000Z",
        "isAdmin": True,
    },
}


def make_client(handler) -> UmamiClient:
    return UmamiClient("https://umami.test/", "site-1", transport=httpx.MockTransport(handler))


class TestVerify:
    @pytest.mark.asyncio
    async def test_missing_token_skips_network(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200)

        async with make_client(handler) as client:
            with pytest.raises(UnauthorizedError):
                await client.verify(None)
        assert requests == []

    @pytest.mark.asyncio
    async def test_valid_token(self):
        def handler(request):
            assert request.method == "POST"
            assert request.url.path == "/api/auth/verify"
            assert request.headers["authorization"] == "Bearer tok-1"
            return httpx.Response(200, json={"id": "u1"})

        async with make_client(handler) as client:
            assert await client.verify("tok-1") == "tok-1"

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        async with make_client(lambda request: httpx.Response(401)) as client:
            with pytest.raises(UnauthorizedError):
                await client.verify("expired")


class TestLogin:
    @pytest.mark.asyncio
    async def test_parses_token_and_user(self):
        def handler(request):
            assert request.url.path == "/api/auth/login"
            assert json.loads(request.read()) == {"username": "admin", "password": "secret"}
            return httpx.Response(200, json=LOGIN_BODY)

        async with make_client(handler) as client:
            login = await client.login("admin", "secret")
        assert login.token == "tok-1"
        assert login.user.username == "admin"
        assert login.user.is_admin is True

    @pytest.mark.asyncio
    async def test_bad_credentials(self):
        async with make_client(lambda request: httpx.Response(401, json={"error": "nope"})) as client:
            with pytest.raises(UpstreamTransportError):
                await client.login("admin", "wrong")

    @pytest.mark.asyncio
    async def test_malformed_body(self):
        async with make_client(lambda request: httpx.Response(200, json={"user": {}})) as client:
            with pytest.raises(UpstreamDecodeError):
                await client.login("admin", "secret")

    @pytest.mark.asyncio
    async def test_not_json(self):
        async with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(UpstreamDecodeError):
                await client.login("admin", "secret")


class TestPageviews:
    @pytest.mark.asyncio
    async def test_path_query(self):
        def handler(request):
            assert request.url.path == "/api/websites/site-1/metrics"
            assert request.headers["authorization"] == "Bearer tok"
            params = request.url.params
            assert params["startAt"] == str(START_AT)
            assert params["endAt"] == str(END_AT)
            assert params["url"] == "/blog/a"
            return httpx.Response(200, json=[{"x": "/blog/a", "y": "10"}])

        async with make_client(handler) as client:
            assert await client.pageviews_path("tok", "/blog/a") == 10

    @pytest.mark.asyncio
    async def test_path_picks_exact_match(self):
        rows = [{"x": "/blog/ab", "y": 3}, {"x": "/blog/a", "y": 7}]
        async with make_client(lambda request: httpx.Response(200, json=rows)) as client:
            assert await client.pageviews_path("tok", "/blog/a") == 7

    @pytest.mark.asyncio
    async def test_path_ignores_similar_paths(self):
        rows = [{"x": "/blog/ab", "y": 3}]
        async with make_client(lambda request: httpx.Response(200, json=rows)) as client:
            with pytest.raises(UpstreamNotFoundError):
                await client.pageviews_path("tok", "/blog/a")
            assert (await client.pageviews_prefix("tok", "/blog")).get("/blog/a", 0) == 0

    @pytest.mark.asyncio
    async def test_name_pageviews_aliases(self):
        rows = [{"name": "/blog/a", "pageviews": "12"}]
        async with make_client(lambda request: httpx.Response(200, json=rows)) as client:
            assert await client.pageviews_path("tok", "/blog/a") == 12

    @pytest.mark.asyncio
    async def test_path_empty_result(self):
        async with make_client(lambda request: httpx.Response(200, json=[])) as client:
            with pytest.raises(UpstreamNotFoundError):
                await client.pageviews_path("tok", "/blog/a")

    @pytest.mark.asyncio
    async def test_non_numeric_count(self):
        rows = [{"x": "/blog/a", "y": "lots"}]
        async with make_client(lambda request: httpx.Response(200, json=rows)) as client:
            with pytest.raises(UpstreamDecodeError):
                await client.pageviews_path("tok", "/blog/a")

    @pytest.mark.asyncio
    async def test_prefix_map(self):
        rows = [
            {"x": "/blog/a", "y": "10"},
            {"x": "/blog/b", "y": 20},
            {"x": "/about", "y": 99},
        ]

        def handler(request):
            assert request.url.params["search"] == "/blog"
            return httpx.Response(200, json=rows)

        async with make_client(handler) as client:
            assert await client.pageviews_prefix("tok", "/blog") == {"/blog/a": 10, "/blog/b": 20}

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(UpstreamTransportError):
                await client.pageviews_prefix("tok", "/blog")

    @pytest.mark.asyncio
    async def test_server_error(self):
        async with make_client(lambda request: httpx.Response(500)) as client:
            with pytest.raises(UpstreamTransportError):
                await client.pageviews_path("tok", "/blog/a")
