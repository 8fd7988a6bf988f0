"""Utility modules for strip_json_comments.

Provides:
- logger: get_logger for logging
"""

from strip_json_comments.utils.logger import get_logger

__all__ = ["get_logger"]
