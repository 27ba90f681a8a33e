"""Main FastAPI application for Jira Notifier."""

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time
from typing import Callable

from jira_notifier.config import settings
from jira_notifier.api.routes import api_router
from jira_notifier.webhooks.routes import webhook_router


# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Sends Jira issue and comment events as Rocket.Chat direct messages to the people involved",
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Add middleware
    setup_middleware(app)

    # Add routes
    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(webhook_router, prefix="/webhooks")

    # Add exception handlers
    setup_exception_handlers(app)

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    return app


def setup_middleware(app: FastAPI) -> None:
    """Configure application middleware."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next: Callable):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable):
        logger.info(f"{request.method} {request.url}")
        response = await call_next(request)
        logger.info(f"Response status: {response.status_code}")
        return response


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure JSON error responses."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent error format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.status_code,
                    "message": exc.detail,
                    "path": str(request.url),
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": 500,
                    "message": "Internal server error",
                    "path": str(request.url),
                }
            },
        )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    import os

    port = int(os.environ.get("PORT", settings.api_port))

    uvicorn.run(
        "jira_notifier.main:app",
        host=settings.api_host,
        port=port,
        reload=settings.debug,
    )
