"""Utility modules for Hana.

Provides:
- logger: get_logger for logging
"""

from hana.utils.logger import get_logger

__all__ = ["get_logger"]
