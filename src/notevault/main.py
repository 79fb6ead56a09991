# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import auth_router, health_router, notes_router, search_router, sharing_router
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import RedisClient
from .database import Database
from .errors import register_error_handlers
from .middleware.rate_limit import RateLimitMiddleware
from .middleware.security_headers import SecurityHeadersMiddleware
from .security.jwt import TokenService
from .security.password import PasswordHasher

logger = get_logger("main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own database handle, Redis client and token service."""
    settings = settings or get_settings()
    setup_logging(settings)

    database = Database(settings.database_url, echo=settings.database_echo)
    redis_client = RedisClient(settings.redis_url, max_connections=settings.redis_max_connections)
    token_service = TokenService.from_settings(settings)
    password_hasher = PasswordHasher.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            "Starting NoteVault application",
            extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
        )
        if settings.uses_default_secret and settings.environment != "development":
            logger.warning("SECRET_KEY is not set; tokens are signed with the default secret")

        await database.connect()
        if settings.database_create_tables:
            try:
                await database.create_tables()
                logger.info("Database tables created/verified")
            except Exception as e:
                logger.error("Failed to create database tables", exc_info=e)
                await database.disconnect()
                raise

        if settings.rate_limit_enabled:
            try:
                await redis_client.connect()
            except Exception as e:
                logger.warning(f"Redis connection failed: {e}. Rate limiting disabled.")

        yield

        logger.info("Shutting down NoteVault application")
        await redis_client.disconnect()
        await database.disconnect()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-user notes API with owner-only access and note sharing",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.redis = redis_client
    app.state.token_service = token_service
    app.state.password_hasher = password_hasher

    # Middleware: the last one added runs first, so requests pass
    # CORS -> security headers -> rate limiter -> request logger -> routes
    app.add_middleware(LoggingMiddleware)
    if settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            redis_client=redis_client,
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_minutes * 60,
        )
    if settings.security_headers_enabled:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(sharing_router, prefix="/api")
    app.include_router(search_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "NoteVault API", "version": __version__}

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host/port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("notevault.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
