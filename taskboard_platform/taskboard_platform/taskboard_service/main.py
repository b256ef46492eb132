"""
Taskboard service - projects and kanban todos for registered users
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .auth import PasswordHasher, TokenIssuer
from .config import Settings
from .db import build_engine, build_session_factory, init_db
from .errors import TaskboardError
from .routes import accounts, health, projects, todos
from .utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


async def handle_taskboard_error(_request: Request, exc: TaskboardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and wire its collaborators from ``settings``.

    The engine, session factory, password hasher and token issuer are created
    here and kept on ``app.state`` for the request dependencies.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    if settings.uses_default_secret:
        if not settings.DEV_MODE:
            raise RuntimeError("JWT_SECRET must be set unless DEV_MODE is enabled")
        logger.warning("JWT_SECRET is not set, using the built-in development secret (DEV_MODE)")

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Initialize database on startup"""
        init_db(engine)
        logger.info("Taskboard service started")
        yield
        engine.dispose()

    app = FastAPI(
        title="Taskboard Service",
        description="Projects and kanban todos for registered users",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher(settings.PASSWORD_SCHEMES)
    app.state.token_issuer = TokenIssuer(settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskboardError, handle_taskboard_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(accounts.router)
    app.include_router(projects.router)
    app.include_router(todos.router)
    app.include_router(health.router)

    return app


def serve() -> None:
    """Run the service with uvicorn using HOST/PORT from the environment."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "taskboard_platform.taskboard_platform.taskboard_service.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT
    )
