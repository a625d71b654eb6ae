"""
Core 설정 및 utilities, 커스텀 예외
"""

from app.core.config import settings

from app.core.exceptions import (
    MetroException,
    ConfigurationError,
    InvalidStationException,
    RouteNotFoundException,
    MissingParameterException,
)

__all__ = [
    "settings",
    "MetroException",
    "ConfigurationError",
    "InvalidStationException",
    "RouteNotFoundException",
    "MissingParameterException",
]
