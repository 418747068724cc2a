"""
Configuration.

Settings loaded from the environment and application-wide constants.
"""

from spark_client.config.settings import Settings, settings


__all__ = ["Settings", "settings"]
