# capkit/logging/__init__.py
"""Logging setup and subsystem tags for capkit."""

from .logger import configure_from_config, configure_logging, get_logger

__all__ = ["configure_logging", "configure_from_config", "get_logger"]
