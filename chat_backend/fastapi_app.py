"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /user/*  registration, login, logout, user directory
- /chat/*  direct messages and the conversation list
- /group/* group lifecycle and group messages
"""

import logging
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chat_backend.config.logging_config import correlation_id_var, setup_logging
from chat_backend.config.settings import Config
from chat_backend.presentation.api import chat_router, groups_router, users_router

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


def create_fastapi_app(container: AsyncContainer) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container providing repositories and handlers.
            Closed on shutdown, which disconnects Prisma.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Chat backend started (env=%s)", Config.APP_ENV)
        yield
        await container.close()
        logger.info("Chat backend shutdown. DI container closed.")

    app = FastAPI(
        title="Chat Backend API",
        description="Accounts, direct messaging and group chats",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info("Invalid request body on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(users_router)
    app.include_router(chat_router)
    app.include_router(groups_router)

    return app
