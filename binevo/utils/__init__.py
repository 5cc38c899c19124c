"""Utility helpers shared across the binevo codebase."""

from binevo.utils.logger_setup import setup_logger

__all__ = ["setup_logger"]
