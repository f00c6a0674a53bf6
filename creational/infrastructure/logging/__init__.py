"""Logging infrastructure."""

from .logger import configure_default_logging, get_logger, setup_logging

__all__ = ["configure_default_logging", "get_logger", "setup_logging"]
