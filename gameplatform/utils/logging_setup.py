"""
Logging configuration shared by the server and console client.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO"):
    """
    Configure the root logger once for an entry point.

    Args:
        level: Level name such as "DEBUG" or "INFO"
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
