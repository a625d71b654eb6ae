"""
Business logic services
"""

from app.services.route_service import RouteService
from app.services.estimation_service import (
    estimate_time,
    estimate_cost,
    estimate_journey,
)

__all__ = [
    "RouteService",
    "estimate_time",
    "estimate_cost",
    "estimate_journey",
]
