"""
Core module providing shared configuration, HTTP sessions, and utilities.

Usage:
    from graticule.core import settings, build_session
    from graticule.core.utils import underscore, is_within_bounds
"""

from graticule.core.config import settings, Settings
from graticule.core.http import build_session

__all__ = [
    "settings",
    "Settings",
    "build_session",
]
