import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from validation_rules.config import get_settings
from validation_rules.infrastructure.database import engine, initialize_database
from validation_rules.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the rule tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the validation rules API."""

    logging.basicConfig(level=get_settings().log_level.upper())

    app = FastAPI(title="Validation Rules", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
