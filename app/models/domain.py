from typing import Optional, Tuple
from dataclasses import dataclass

# domain 정의
# 노선 데이터는 서버 시작 후 변경되지 않음 => frozen으로 불변성 보장


@dataclass(frozen=True, slots=True)
class Station:
    name: str  # 역 이름이 곧 식별자 (정확 일치)
    line: int  # 기준 노선(home line), 환승역도 하나의 노선에 소속
    interchange: bool = False


@dataclass(frozen=True, slots=True)
class Route:
    path: Tuple[str, ...]  # 출발역 ~ 도착역 (양 끝 포함)
    interchanges: int
    change_at: Optional[str] = None

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def stations_traveled(self) -> int:
        """이동한 역 수 (출발역 제외)"""
        return len(self.path) - 1


@dataclass(frozen=True, slots=True)
class JourneyEstimate:
    stations_traveled: int
    interchanges: int
    estimated_time_minutes: int
    estimated_price_inr: int
