"""Run dirlistd: python -m dirlistd."""

import logging
import sys
from pathlib import Path

import uvicorn

from dirlist_library.config.loader import load_config

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the configured data directory with uvicorn.

    Exits with status 1 when the data directory is missing, since every
    browse request would fail.
    """
    try:
        config = load_config()

        if not Path(config.data_path).is_dir():
            logger.error(f"Data path is not a directory: {config.data_path}")
            sys.exit(1)

        logger.info(f"Serving listings of {config.data_path} on {config.host}:{config.port}")
        uvicorn.run(
            "dirlistd.main:app",
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            workers=config.workers,
        )

    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Failed to start dirlistd: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
