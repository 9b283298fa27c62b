"""hello-service: Cloud Run deployment smoke-test API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_service.config import settings
from hello_service.api.routes_greeting import router as greeting_router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"hello-service starting up on {settings.host}:{settings.port}")

    yield

    logger.info("hello-service shutting down...")


# Docs routes stay off: "/" is the only path the service answers.
app = FastAPI(
    title="hello-service",
    description="Static greeting used to smoke-test the CI/CD pipeline.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(greeting_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Answer disallowed methods on known paths with the default 404, not 405."""
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)
