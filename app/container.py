"""Dependency Injection container - initialized at app startup."""

from loguru import logger

import settings
from app.services.blog import MetadataCache
from upstream_client import FediverseClient, SiteClient, UmamiClient


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Upstream clients (singletons)
        self._umami = UmamiClient(settings.UMAMI_URL, settings.UMAMI_WEBSITE_ID)
        self._fediverse = FediverseClient(settings.FEDIVERSE_URL)
        self._site = SiteClient(settings.ZLENDY_URL)

        # Services (with injected clients)
        self.metadata = MetadataCache(
            umami=self._umami,
            fediverse=self._fediverse,
            site=self._site,
            username=settings.UMAMI_USERNAME,
            password=settings.UMAMI_PASSWORD,
            fediverse_user_id=settings.FEDIVERSE_USER_ID,
            ttl=settings.CACHE_TTL,
        )

        self._initialized = True

    async def startup(self) -> None:
        """Initialize and open upstream connections."""
        self.init()
        for client in (self._umami, self._fediverse, self._site):
            await client.open()
        logger.info("Upstream clients opened")

    async def shutdown(self) -> None:
        """Close upstream connections."""
        if not self._initialized:
            return
        for client in (self._umami, self._fediverse, self._site):
            await client.close()


# Global container instance
container = Container()
