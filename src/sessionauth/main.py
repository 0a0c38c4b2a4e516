"""Application entry point for the sessionauth backend server."""

import structlog

from sessionauth.app import App
from sessionauth.config import Config
from sessionauth.logging import setup_logging
from sessionauth.web.runner import run_server

logger = structlog.get_logger(__name__)


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    logger.info("starting", host=config.host, port=config.port, cors_origins=config.cors_origins)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
