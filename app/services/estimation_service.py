# 소요시간 / 요금 추정
# 경로 길이에 대한 선형 함수, 상태 없음

from typing import Optional

from app.core.config import settings
from app.models.domain import JourneyEstimate, Route


def estimate_time(
    stations_traveled: int,
    interchanges: int,
    time_per_station: Optional[int] = None,
    interchange_time: Optional[int] = None,
) -> int:
    """예상 소요시간(분) = 역 수 * 역당 시간 + 환승 횟수 * 환승 시간"""
    if time_per_station is None:
        time_per_station = settings.TIME_PER_STATION_MINS
    if interchange_time is None:
        interchange_time = settings.INTERCHANGE_TIME_MINS

    return stations_traveled * time_per_station + interchanges * interchange_time


def estimate_cost(stations_traveled: int, cost_per_station: Optional[int] = None) -> int:
    """예상 요금(INR) = 역 수 * 역당 요금"""
    if cost_per_station is None:
        cost_per_station = settings.COST_PER_STATION_INR

    return stations_traveled * cost_per_station


def estimate_journey(route: Route) -> JourneyEstimate:
    stations_traveled = route.stations_traveled

    return JourneyEstimate(
        stations_traveled=stations_traveled,
        interchanges=route.interchanges,
        estimated_time_minutes=estimate_time(stations_traveled, route.interchanges),
        estimated_price_inr=estimate_cost(stations_traveled),
    )
