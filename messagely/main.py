"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from messagely.config import get_settings
from messagely.infrastructure.database import init_db, ping_db
from messagely.core.logging import configure_logging
from messagely.core.middleware import setup_middleware
from messagely.core.exceptions import AppError, ConfigurationError, global_exception_handler
from messagely.interfaces.deps import get_session_issuer

from messagely.interfaces.api.auth import router as auth_router
from messagely.interfaces.api.users import router as users_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail fast on a bad signing secret or unreachable storage."""
    logger.info("Starting Messagely...", env=settings.ENVIRONMENT)

    get_session_issuer()

    try:
        ping_db()
        # Create DB tables (no migrations in this service)
        init_db()
    except SQLAlchemyError as exc:
        logger.error("Database unreachable at startup", error=str(exc))
        raise ConfigurationError("Database unreachable at startup") from exc
    logger.info("Database tables created/verified")

    yield

    logger.info("Messagely stopped")


app = FastAPI(
    title="Messagely",
    description="User accounts, session tokens and direct-message listings",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)

# AppError is handled inside the router stack; Exception is the last-resort 500
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(auth_router)
app.include_router(users_router)


@app.get("/")
def root():
    return {
        "name": "Messagely",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
