"""
pydantic models for 응답, 도메인 객체
"""


from app.models.responses import (
    RouteResponse,
    ErrorResponse,
    StationInfo,
    StationListResponse,
    StationSearchResponse,
    StationValidateResponse,
    LinesResponse,
)
from app.models.domain import Station, Route, JourneyEstimate

__all__ = [
    "RouteResponse",
    "ErrorResponse",
    "StationInfo",
    "StationListResponse",
    "StationSearchResponse",
    "StationValidateResponse",
    "LinesResponse",
    "Station",
    "Route",
    "JourneyEstimate",
]
