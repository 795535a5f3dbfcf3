"""Utility modules for pinpoint.

Provides:
- logger: get_logger for logging
"""

from pinpoint.utils.logger import get_logger

__all__ = ["get_logger"]
