# adoptme/utils/__init__.py
"""
Shared helpers used across the adoptme package.
"""

from .datetime_utils import DateTimeUtils

__all__ = ['DateTimeUtils']
