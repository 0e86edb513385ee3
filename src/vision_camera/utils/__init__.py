"""Utility functions."""

from vision_camera.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
