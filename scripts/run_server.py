"""
scripts/run_server.py — Start the lead classifier HTTP server.

Usage:
    python scripts/run_server.py
    python scripts/run_server.py --port 8080
    python scripts/run_server.py --reload     # development auto-reload
"""

import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("run_server")

import uvicorn


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Run the lead classifier API server.")
    parser.add_argument(
        "--host", type=str, default=settings.host,
        help="Bind address (default from .env / HOST)"
    )
    parser.add_argument(
        "--port", type=int, default=settings.port,
        help="Port to listen on (default from .env / PORT)"
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload for development"
    )
    args = parser.parse_args(argv)

    # The app lifespan logs from settings; a --reload worker re-reads the env
    settings.host = args.host
    settings.port = args.port
    os.environ["HOST"] = args.host
    os.environ["PORT"] = str(args.port)

    logger.info("Starting server on %s:%d", args.host, args.port)
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
