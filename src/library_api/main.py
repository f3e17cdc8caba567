"""Library API main entry point."""

import logging

import uvicorn

from .api import create_app
from .config import get_settings, setup_logging

settings = get_settings()

# Configure logging before the application is built
setup_logging(settings)

logger = logging.getLogger(__name__)

# Create the FastAPI application
app = create_app(settings)


def run() -> None:
    """Run the application with uvicorn."""
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    run()
