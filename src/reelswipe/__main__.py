"""Entry point: ``python -m reelswipe`` or the ``reelswipe`` console script."""

from __future__ import annotations

import logging

import uvicorn

from reelswipe import APP_NAME
from reelswipe.api.app import create_app
from reelswipe.config import load_config
from reelswipe.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Load configuration, configure logging and serve the API."""
    config = load_config()
    configure_logging(config)
    app = create_app(config)
    logger.info(f"{APP_NAME} running on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
