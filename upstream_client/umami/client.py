"""Umami API client - login, token verification, pageviews."""

import httpx
from loguru import logger

from upstream_client.base import BaseClient, parse_count
from upstream_client.errors import UnauthorizedError, UpstreamNotFoundError
from upstream_client.umami.schemas import LoginRequestSchema, LoginSchema, MetricSchema

# All-time range in epoch milliseconds
START_AT = 0
END_AT = 9999999999999


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class UmamiClient(BaseClient):
    """Client for the Umami analytics API of one website."""

    def __init__(self, base_url: str, website_id: str, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(base_url, transport)
        self._website_id = website_id

    async def verify(self, token: str | None) -> str:
        """POST /api/auth/verify - return the token if Umami still accepts it."""
        if not token:
            raise UnauthorizedError("No analytics token")

        resp = await self._request("POST", "/api/auth/verify", check=False, headers=_auth(token))
        if not resp.is_success:
            raise UnauthorizedError(f"Token rejected: HTTP {resp.status_code}")
        return token

    async def login(self, username: str, password: str) -> LoginSchema:
        """POST /api/auth/login - obtain a new session token."""
        payload = LoginRequestSchema(username=username, password=password).model_dump()
        login = self._parse(LoginSchema, await self._post("/api/auth/login", payload))
        logger.info("Logged in as {} ({})", login.user.username, login.user.role)
        return login

    async def _metrics(self, token: str, **params) -> list[MetricSchema]:
        """GET /api/websites/{id}/metrics - url metrics over all time."""
        data = await self._get(
            f"/api/websites/{self._website_id}/metrics",
            params={"type": "url", "startAt": START_AT, "endAt": END_AT, **params},
            headers=_auth(token),
        )
        return self._parse(list[MetricSchema], data)

    async def pageviews_path(self, token: str, path: str) -> int:
        """Pageviews for one exact path. Rows for other paths are ignored."""
        rows = [r for r in await self._metrics(token, url=path) if r.x == path]
        if not rows:
            raise UpstreamNotFoundError(f"No pageviews for {path}")

        return sum(parse_count(r.y) for r in rows)

    async def pageviews_prefix(self, token: str, prefix: str) -> dict[str, int]:
        """Pageviews for every path under a prefix, keyed by path."""
        rows = await self._metrics(token, search=prefix)

        counts: dict[str, int] = {}
        for r in rows:
            if not r.x.startswith(prefix):
                continue
            counts[r.x] = counts.get(r.x, 0) + parse_count(r.y)

        logger.debug("Pageviews under {}: {} paths", prefix, len(counts))
        return counts
