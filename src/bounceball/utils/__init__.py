"""Shared utilities for Bounceball Pairing."""

from bounceball.utils.logging import LOG_FMT, set_console_level, setup_logger

__all__ = ["LOG_FMT", "set_console_level", "setup_logger"]
