"""Process entry point: ``python -m order_processor``.

This is the supported launcher; it logs the port it hands to uvicorn.
"""

import logging

import uvicorn

from order_processor.deps import get_settings
from order_processor.logging_config import configure_logging
from order_processor.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
