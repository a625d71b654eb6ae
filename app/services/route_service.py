# 경로 찾기 서비스

import logging
import time
from typing import Optional, Dict, Any

from app.algorithms.network import MetroNetwork
from app.algorithms.route_resolver import RouteResolver
from app.db.cache import get_network
from app.core.exceptions import InvalidStationException, RouteNotFoundException
from app.services.estimation_service import estimate_journey

logger = logging.getLogger(__name__)


class RouteService:

    def __init__(self, network: Optional[MetroNetwork] = None):
        # 주입받은 노선망이 없으면 cache에서 직접 가져오기
        self.network = network if network is not None else get_network()
        self.resolver = RouteResolver(self.network)
        logger.info("RouteService 초기화 완료")

    def calculate_route(self, origin_name: str, destination_name: str) -> Dict[str, Any]:
        """
        경로 계산 및 소요시간/요금 추정

        Args:
            origin_name: 출발역 이름
            destination_name: 도착역 이름

        Returns:
            경로 응답 딕셔너리 (from, to, route, numberOfStations, ...)

        Raises:
            InvalidStationException: 역을 찾을 수 없을 때
            RouteNotFoundException: 경로를 찾을 수 없을 때
        """
        start_time = time.time()

        try:
            logger.info(f"경로 계산 요청: {origin_name} → {destination_name}")

            route = self.resolver.resolve(origin_name, destination_name)
            estimate = estimate_journey(route)

            result = {
                "from": origin_name,
                "to": destination_name,
                "route": list(route.path),
                "numberOfStations": estimate.stations_traveled,
                "numberOfInterchanges": estimate.interchanges,
                "changeAt": route.change_at,
                "estimatedTimeMinutes": estimate.estimated_time_minutes,
                "estimatedPriceINR": estimate.estimated_price_inr,
            }

            elapsed_time = time.time() - start_time
            logger.info(
                f"경로 계산 완료: {origin_name} → {destination_name}, "
                f"역 {estimate.stations_traveled}개, 환승={route.change_at or '없음'}, "
                f"계산시간={elapsed_time*1000:.2f}ms"
            )
            return result

        except (InvalidStationException, RouteNotFoundException) as e:
            logger.error(f"경로 계산 실패: {e.message}")
            raise

    def validate_station(self, station_name: str) -> Dict[str, Any]:
        """역 이름 검증 (정확 일치)"""
        station = self.network.get_station(station_name)

        if station is None:
            return {
                "valid": False,
                "station_name": station_name,
                "message": f"'{station_name}' 역을 찾을 수 없습니다",
            }

        return {
            "valid": True,
            "station_name": station.name,
            "line": station.line,
            "interchange": station.interchange,
        }
