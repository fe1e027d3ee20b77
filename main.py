import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from notifier.config import get_settings
from notifier.infrastructure.database import engine, initialize_database
from notifier.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""

    configure_logging(get_settings().log_level)
    app = FastAPI(title="Notifier", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
