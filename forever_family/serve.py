"""
Run the Forever Family backend under uvicorn.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from forever_family.config import get_settings
from forever_family.dependencies import get_collection_store

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Forever Family web backend")
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help="Interface to bind",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=settings.port,
        help="Port to listen on",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Creates the data directory before the first request.
    get_collection_store()
    if settings.permissive:
        logger.warning("Running in %s mode: admin key checks are off", settings.app_env)

    logger.info("Forever Family - Server running")
    logger.info("Local: http://localhost:%d", args.port)
    uvicorn.run(
        "forever_family.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
