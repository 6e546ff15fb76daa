"""
FastAPI application with assembled routers.

Initializes the FastAPI app with all API routers, observability middleware
and request-validation mapping. Launched through mindmenu.main.

Dependencies: fastapi, python-dotenv, mindmenu.api.routers, mindmenu.observability
System role: API application assembly
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mindmenu.api.deps.dependencies import get_service_cache
from mindmenu.configs import get_settings
from mindmenu.observability.logger import configure_logging
from mindmenu.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    branches_router,
    chatbots_router,
    health_router,
    history_router,
    query_router,
    restaurants_router,
)

logger = logging.getLogger(__name__)

# boto3 and the Google client read credentials from os.environ
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup; drains the indexing queue and clears
    cached provider clients on shutdown.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    cache = get_service_cache()
    await cache.shutdown()
    logger.info("Service cache cleared")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.service_name,
        description="Restaurant knowledge-base chatbots with retrieval-augmented answers",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    for router in (
        health_router,
        restaurants_router,
        branches_router,
        chatbots_router,
        query_router,
        history_router,
    ):
        app.include_router(router, prefix=settings.api_prefix)

    return app


app = create_app()
