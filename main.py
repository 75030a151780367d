from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI

from greetings_api.config import Settings, get_settings
from greetings_api.interfaces.api.routes import register_routes
from greetings_api.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the application start and stop; no resources are held."""

    logger.info("Starting %s %s", app.title, app.version)
    yield
    logger.info("Stopping %s", app.title)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the main FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    register_routes(app)
    return app


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""

    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


app = create_app()


if __name__ == "__main__":
    run()
