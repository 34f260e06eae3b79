#!/usr/bin/env python3
"""
Run the blog metadata API server.

Usage:
    python run.py                          # HOST/PORT from environment (.env)
    python run.py --host 127.0.0.1 --port 8080
"""

import argparse
import sys

import uvicorn

import settings
from settings.logging import setup_logging

logger = setup_logging(level=settings.LOG_LEVEL, to_file=True)


def main() -> None:
    parser = argparse.ArgumentParser(description="Blog metadata API")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    args = parser.parse_args()

    missing = settings.missing_required()
    if missing:
        logger.error("Missing required settings: {}", ", ".join(missing))
        sys.exit(1)

    from web.server import app

    logger.info("Listening on {}:{}", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
