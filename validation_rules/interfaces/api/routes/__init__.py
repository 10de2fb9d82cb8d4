from fastapi import FastAPI

from .validation_rules import router as validation_rules_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(validation_rules_router)
