"""
Application entry point.

All configuration, middleware, and lifecycle management is delegated
to specialized modules.
"""

import logging

from agenda.config.settings import get_settings
from agenda.core.app_factory import create_app
from agenda.core.shared.logger import configure_logging

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

logger = logging.getLogger(__name__)

# Create application using factory
app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "agenda.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
