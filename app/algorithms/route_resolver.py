import logging
from typing import List, Optional

from app.algorithms.network import MetroNetwork
from app.core.exceptions import InvalidStationException, RouteNotFoundException
from app.models.domain import Route

logger = logging.getLogger(__name__)


class RouteResolver:
    """
    출발역 -> 도착역 경로 탐색

    - 같은 노선: 노선의 역 순서를 그대로 잘라서 반환 (환승 0회)
    - 다른 노선: 모든 환승역을 후보로 두 구간(leg)을 이어 붙이고 가장 짧은 경로 선택 (환승 1회)

    환승은 최대 1회까지만 고려함
    2회 이상 환승이 필요한 경우 RouteNotFoundException
    """

    def __init__(self, network: MetroNetwork):
        self.network = network

    def resolve(self, origin: str, destination: str) -> Route:
        """
        경로 탐색

        Args:
            origin: 출발역 이름 (정확 일치)
            destination: 도착역 이름 (정확 일치)

        Returns:
            Route

        Raises:
            InvalidStationException: 등록되지 않은 역 이름
            RouteNotFoundException: 환승 1회 이내로 연결되지 않음
        """
        origin_station = self.network.get_station(origin)
        if origin_station is None:
            raise InvalidStationException(f"출발역을 찾을 수 없습니다: {origin}")

        destination_station = self.network.get_station(destination)
        if destination_station is None:
            raise InvalidStationException(f"도착역을 찾을 수 없습니다: {destination}")

        # Case 1: 같은 노선
        if origin_station.line == destination_station.line:
            path = self._slice(origin_station.line, origin, destination)
            return Route(path=tuple(path), interchanges=0, change_at=None)

        # Case 2: 다른 노선 => 환승 필요
        best_path: Optional[List[str]] = None
        best_interchange: Optional[str] = None

        # 환승역 선언 순서대로 탐색, 길이가 같으면 먼저 찾은 후보 유지
        for interchange in self.network.interchanges:
            leg1 = self._slice(origin_station.line, origin, interchange)
            if leg1 is None:
                continue

            leg2 = self._slice(destination_station.line, interchange, destination)
            if leg2 is None:
                continue

            candidate = leg1 + leg2[1:]  # 환승역 중복 제거

            if best_path is None or len(candidate) < len(best_path):
                best_path = candidate
                best_interchange = interchange

        if best_path is None:
            raise RouteNotFoundException(
                f"{origin}에서 {destination}까지 경로를 찾을 수 없습니다"
            )

        logger.debug(f"환승 경로 선택: {origin} → {destination}, 환승역={best_interchange}")
        return Route(path=tuple(best_path), interchanges=1, change_at=best_interchange)

    def _slice(self, line_id: int, start: str, end: str) -> Optional[List[str]]:
        """
        노선에서 start ~ end 구간 추출 (양 끝 포함)
        start가 end보다 뒤에 있으면 역순으로 반환
        둘 중 하나라도 노선에 없으면 None
        """
        start_idx = self.network.position_of(line_id, start)
        end_idx = self.network.position_of(line_id, end)
        if start_idx is None or end_idx is None:
            return None

        line = self.network.get_line(line_id)
        path = list(line[min(start_idx, end_idx) : max(start_idx, end_idx) + 1])
        if start_idx > end_idx:
            path.reverse()
        return path
