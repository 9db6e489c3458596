#!/usr/bin/env python3
"""
Entry point for running the game platform web server.

Usage:
    python run_web.py [--host HOST] [--port PORT] [--reload]

Examples:
    python run_web.py                    # Run on localhost:3000
    python run_web.py --port 8000        # Run on localhost:8000
    python run_web.py --host 0.0.0.0     # Allow external connections
    python run_web.py --reload           # Auto-reload on code changes

Defaults come from the GAME_PLATFORM_* environment variables.
"""
import argparse
import logging
import uvicorn

from gameplatform.config import get_settings
from gameplatform.utils.logging_setup import configure_logging

logger = logging.getLogger("gameplatform")


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the game platform web server")
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload on code changes"
    )

    args = parser.parse_args()
    configure_logging(settings.log_level)

    logger.info("Server is running on http://%s:%s", args.host, args.port)
    logger.info("API documentation: http://%s:%s/docs", args.host, args.port)

    uvicorn.run(
        "gameplatform.web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
