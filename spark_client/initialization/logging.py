"""
Client Initialization - Logging Module.

Configures loguru logger for the client.
Sets up log rotation and retention policies.
"""

import sys

from loguru import logger

from spark_client.config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stderr sink and, if enabled, a rotating file sink."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            level=settings.log_level,
            encoding="utf-8",
        )

    logger.info(f"Starting Spark client ({settings.environment}, network={settings.default_network})...")
