"""Application settings."""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

if load_dotenv():
    logger.info("Found .env file")
else:
    logger.debug("No .env file, using environment variables")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
ACCESS_CONTROL_ALLOW_ORIGIN = os.getenv("ACCESS_CONTROL_ALLOW_ORIGIN")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
MAX_CONCURRENT_REQUESTS = int(os.getenv("MAX_CONCURRENT_REQUESTS", "64"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

# Umami (analytics)
UMAMI_URL = os.getenv("UMAMI_URL", "")
UMAMI_USERNAME = os.getenv("UMAMI_USERNAME", "")
UMAMI_PASSWORD = os.getenv("UMAMI_PASSWORD", "")
UMAMI_WEBSITE_ID = os.getenv("UMAMI_WEBSITE_ID", "")

# Fediverse (social instance)
FEDIVERSE_URL = os.getenv("FEDIVERSE_URL", "")
FEDIVERSE_USER_ID = os.getenv("FEDIVERSE_USER_ID", "")

# Site hosting blog.json
ZLENDY_URL = os.getenv("ZLENDY_URL", "")

# Upstream HTTP
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))
UPSTREAM_RETRY_ATTEMPTS = int(os.getenv("UPSTREAM_RETRY_ATTEMPTS", "1"))

# Cache
CACHE_TTL = int(os.getenv("CACHE_TTL", "300"))

REQUIRED = (
    "UMAMI_URL",
    "UMAMI_USERNAME",
    "UMAMI_PASSWORD",
    "UMAMI_WEBSITE_ID",
    "FEDIVERSE_URL",
    "FEDIVERSE_USER_ID",
    "ZLENDY_URL",
)


def missing_required() -> list[str]:
    """Names of required settings that are empty."""
    return [name for name in REQUIRED if not globals()[name]]
