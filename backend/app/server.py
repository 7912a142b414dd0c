"""Run the API with uvicorn on the configured port."""

import logging

import uvicorn

from backend.app.config import get_settings
from backend.app.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Entry point for the `travel-aggregator` console script."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Server starting on port {settings.port}")
    uvicorn.run("backend.app.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
