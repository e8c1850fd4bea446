"""Run the Game Hub server with uvicorn."""
from __future__ import annotations

import logging

from uvicorn import run

from gamehub.core.config import get_settings
from gamehub.core.logging_config import setup_logging

logger = logging.getLogger("gamehub")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    display_host = "localhost" if settings.host in ("0.0.0.0", "") else settings.host
    logger.info("Server running at http://%s:%d", display_host, settings.port)
    run("gamehub.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
