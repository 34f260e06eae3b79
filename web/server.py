"""FastAPI application - middleware, error mapping and lifespan."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import settings
from app.container import container
from web.api.errors import NotFoundError, RequestTimeoutError, ServiceUnavailableError, ValidationError
from web.api.routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await container.startup()
    yield
    await container.shutdown()


def _handler(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse({"detail": exc.message}, status_code=status_code)

    return handle


def create_app(
    allow_origin: str | None = settings.ACCESS_CONTROL_ALLOW_ORIGIN,
    request_timeout: float = settings.REQUEST_TIMEOUT,
    max_concurrent: int = settings.MAX_CONCURRENT_REQUESTS,
) -> FastAPI:
    """Build the application."""
    app = FastAPI(title="Blog Metadata", version="0.1.0", lifespan=lifespan)
    app.state.limiter = asyncio.Semaphore(max_concurrent)
    app.state.request_timeout = request_timeout
    app.include_router(router)

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    if allow_origin:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[allow_origin],
            allow_methods=["GET"],
            allow_headers=["*"],
        )
        logger.info("CORS enabled for {}", allow_origin)

    app.add_exception_handler(ValidationError, _handler(400))
    app.add_exception_handler(NotFoundError, _handler(404))
    app.add_exception_handler(RequestTimeoutError, _handler(408))
    app.add_exception_handler(ServiceUnavailableError, _handler(503))

    return app


app = create_app()
