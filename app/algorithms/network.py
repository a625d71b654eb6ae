"""
노선망 모델 (Network Model)

역 / 노선별 역 순서 / 환승역 정보를 하나의 불변 객체로 관리
서버 시작 시 한 번만 생성되고 이후 읽기 전용
=> 동시 요청에서도 lock 없이 공유 가능

생성 시점에 데이터 정합성을 모두 검증하며,
문제가 있으면 ConfigurationError를 발생시켜 서버 시작을 중단함
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from app.core.exceptions import ConfigurationError
from app.models.domain import Station

logger = logging.getLogger(__name__)


class MetroNetwork:

    def __init__(
        self,
        stations: Iterable[Station],
        lines: Mapping[int, Iterable[str]],
        interchanges: Mapping[str, Iterable[int]],
    ):
        station_map: Dict[str, Station] = {}
        for station in stations:
            if station.name in station_map:
                raise ConfigurationError(f"역이 중복 정의되었습니다: {station.name}")
            station_map[station.name] = station

        line_map = {line_id: tuple(names) for line_id, names in lines.items()}
        interchange_map = {
            name: frozenset(line_ids) for name, line_ids in interchanges.items()
        }

        # 역 이름 -> 노선 내 인덱스 (노선별로 한 번만 계산)
        positions = {
            line_id: {name: idx for idx, name in enumerate(names)}
            for line_id, names in line_map.items()
        }

        # 역 이름 -> 실제로 지나는 노선 집합
        membership: Dict[str, set] = {}
        for line_id, names in line_map.items():
            for name in names:
                membership.setdefault(name, set()).add(line_id)

        self._validate(station_map, line_map, interchange_map, positions, membership)

        self._stations = MappingProxyType(station_map)
        self._lines = MappingProxyType(line_map)
        self._interchanges = MappingProxyType(interchange_map)
        self._positions = MappingProxyType(
            {line_id: MappingProxyType(index) for line_id, index in positions.items()}
        )
        self._membership = MappingProxyType(
            {name: frozenset(line_ids) for name, line_ids in membership.items()}
        )

        logger.debug(
            f"노선망 생성: 역 {len(self._stations)}개, 노선 {len(self._lines)}개, "
            f"환승역 {len(self._interchanges)}개"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MetroNetwork":
        """
        정적 데이터(dict)로부터 노선망 생성

        Args:
            data: {"stations": {name: {"line", "interchange"}},
                   "lines": {line_id: [name, ...]},
                   "interchanges": {name: [line_id, ...]}}
                  JSON에서 읽은 경우 line_id가 문자열이어도 허용

        Raises:
            ConfigurationError: 필수 키 누락, 잘못된 타입, 정합성 오류
        """
        try:
            stations = [
                Station(
                    name=name,
                    line=_as_line_id(info["line"]),
                    interchange=bool(info.get("interchange", False)),
                )
                for name, info in data["stations"].items()
            ]
            lines = {
                _as_line_id(line_id): _as_names(line_id, names)
                for line_id, names in data["lines"].items()
            }
            interchanges = {
                name: [_as_line_id(line_id) for line_id in line_ids]
                for name, line_ids in data["interchanges"].items()
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"노선 데이터 형식이 올바르지 않습니다: {e!r}") from e

        return cls(stations, lines, interchanges)

    @staticmethod
    def _validate(station_map, line_map, interchange_map, positions, membership):
        for line_id, names in line_map.items():
            if not names:
                raise ConfigurationError(f"{line_id}호선에 역이 없습니다")

            # 중복 역이 있으면 인덱스 맵의 크기가 줄어듦
            if len(positions[line_id]) != len(names):
                raise ConfigurationError(f"{line_id}호선에 중복된 역이 있습니다")

            unknown = [name for name in names if name not in station_map]
            if unknown:
                raise ConfigurationError(
                    f"{line_id}호선이 등록되지 않은 역을 참조합니다: {unknown}"
                )

        for name, station in station_map.items():
            if name not in membership:
                raise ConfigurationError(f"어느 노선에도 속하지 않은 역입니다: {name}")

            if station.line not in line_map:
                raise ConfigurationError(
                    f"{name}의 기준 노선({station.line})이 존재하지 않습니다"
                )

            if name not in positions[station.line]:
                raise ConfigurationError(
                    f"{name}이(가) 기준 노선({station.line}호선)에 없습니다"
                )

        # 환승역 목록 == 2개 이상 노선에 속한 역
        expected = {
            name: frozenset(line_ids)
            for name, line_ids in membership.items()
            if len(line_ids) >= 2
        }

        missing = [name for name in expected if name not in interchange_map]
        extra = [name for name in interchange_map if name not in expected]
        if missing or extra:
            raise ConfigurationError(
                f"환승역 목록이 노선 데이터와 일치하지 않습니다: "
                f"누락={missing}, 불필요={extra}"
            )

        for name, line_ids in interchange_map.items():
            if line_ids != expected[name]:
                raise ConfigurationError(
                    f"{name}의 환승 노선 {sorted(line_ids)}이(가) "
                    f"실제 노선 {sorted(expected[name])}과 다릅니다"
                )

        for name, station in station_map.items():
            if station.interchange != (name in interchange_map):
                raise ConfigurationError(f"{name}의 환승역 표시가 환승역 목록과 다릅니다")

    # ========== 조회 ==========

    def __contains__(self, name: object) -> bool:
        return name in self._stations

    def __len__(self) -> int:
        return len(self._stations)

    def has_station(self, name: str) -> bool:
        return name in self._stations

    def get_station(self, name: str) -> Optional[Station]:
        # 정확 일치만 허용 (공백 제거, 대소문자 변환 없음)
        return self._stations.get(name)

    def get_line(self, line_id: int) -> Tuple[str, ...]:
        return self._lines[line_id]

    def get_interchange_lines(self, name: str) -> Optional[FrozenSet[int]]:
        return self._interchanges.get(name)

    def lines_of(self, name: str) -> FrozenSet[int]:
        """역이 실제로 지나는 모든 노선"""
        return self._membership.get(name, frozenset())

    def position_of(self, line_id: int, name: str) -> Optional[int]:
        index = self._positions.get(line_id)
        if index is None:
            return None
        return index.get(name)

    @property
    def stations(self) -> Tuple[Station, ...]:
        return tuple(self._stations.values())

    @property
    def station_names(self) -> Tuple[str, ...]:
        return tuple(self._stations)

    @property
    def line_ids(self) -> Tuple[int, ...]:
        return tuple(self._lines)

    @property
    def lines(self) -> Mapping[int, Tuple[str, ...]]:
        return self._lines

    @property
    def interchanges(self) -> Tuple[str, ...]:
        """환승역 이름 (데이터에 선언된 순서)"""
        return tuple(self._interchanges)


def _as_line_id(value: Any) -> int:
    """노선 번호 변환 (JSON 문자열 키 허용, 1.9 같은 비정수는 거부)"""
    if isinstance(value, bool):
        raise ValueError(f"노선 번호가 올바르지 않습니다: {value!r}")

    line_id = int(value)
    if isinstance(value, float) and line_id != value:
        raise ValueError(f"노선 번호가 올바르지 않습니다: {value!r}")

    return line_id


def _as_names(line_id: Any, names: Iterable[Any]) -> list:
    names = list(names)
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"{line_id}호선의 역 이름이 문자열이 아닙니다: {name!r}")
    return names
