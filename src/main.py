import logging
import sys

import uvicorn

from config.config import load_settings
from config.logging_config import LOG_LEVEL, resolve_log_level, setup_logging
from core.errors import ConfigError
from exporter import create_app

logger = logging.getLogger(__name__)


def main():
    try:
        setup_logging()
    except ConfigError as e:
        logging.basicConfig()
        logger.critical(f"Error parsing log level: {e}")
        sys.exit(1)

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical(f"Error parsing configuration: {e}")
        sys.exit(1)

    app = create_app(settings)
    logger.info(
        f"Serving mirror metrics on {settings.metrics_host}:{settings.metrics_port}"
    )
    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(
        app,
        host=settings.metrics_host,
        port=settings.metrics_port,
        log_config=None,
        log_level=resolve_log_level(LOG_LEVEL).lower(),
    )


if __name__ == "__main__":
    main()
