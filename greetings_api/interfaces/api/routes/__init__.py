from fastapi import FastAPI

from .greetings import router as greetings_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(greetings_router)
