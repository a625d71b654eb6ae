"""
singleton caching 전략 사용
Thread Lock으로 서버 시작 시 한 번만 노선망을 생성하여 메모리에 유지
노선 데이터는 정적 데이터 => 생성 후 변경 없음

경로 탐색기(RouteResolver)는 이 모듈이 아니라 MetroNetwork 객체를 주입받으므로
테스트에서는 작은 노선망으로 쉽게 교체 가능
"""

import json
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional

from app.algorithms.network import MetroNetwork
from app.core.config import settings
from app.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_cache_lock = Lock()
_cache_init = False

_network: Optional[MetroNetwork] = None


def load_network_data(path: Optional[str] = None) -> Mapping[str, Any]:
    """
    노선 원본 데이터 로드

    Args:
        path: JSON 파일 경로, None이면 내장 Patna Metro 데이터

    Raises:
        ConfigurationError: 파일이 없거나 JSON 형식이 아닐 때
    """
    if path is None:
        from app.db.metro_data import METRO_DATA

        return METRO_DATA

    try:
        with open(Path(path), encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"노선 데이터 파일을 읽을 수 없습니다: {path} ({e})") from e


def initialize_cache(path: Optional[str] = None):
    """
    서버 시작 시 노선망 생성
    Thread-safe singleton pattern

    Raises:
        ConfigurationError: 노선 데이터 오류 => 서버 시작 중단
    """
    global _cache_init, _network

    with _cache_lock:
        if _cache_init:
            logger.info("노선망 캐시가 이미 초기화되었습니다.")
            return

        source = path or settings.NETWORK_DATA_FILE
        logger.info(f"노선망 캐시 초기화 시작 (source={source or 'builtin'})")

        data = load_network_data(source)
        _network = MetroNetwork.from_dict(data)

        logger.info(f"✓ 역 데이터 로드 완료: {len(_network)}개")
        logger.info(f"✓ 노선 데이터 로드 완료: {len(_network.line_ids)}개 노선")
        logger.info(f"✓ 환승역 데이터 로드 완료: {len(_network.interchanges)}개")

        _cache_init = True
        logger.info("노선망 캐시 초기화 완료")


def get_network() -> MetroNetwork:
    if not _cache_init:
        initialize_cache()
    return _network


def is_initialized() -> bool:
    return _cache_init


def get_stations_list() -> List[Dict]:
    network = get_network()
    return [
        {"name": s.name, "line": s.line, "interchange": s.interchange}
        for s in network.stations
    ]


def get_lines_dict() -> Dict[int, List[str]]:
    network = get_network()
    return {line_id: list(names) for line_id, names in network.lines.items()}


def search_stations_by_name(keyword: str, limit: int = 10) -> List[Dict]:
    """
    자동완성용 역 검색 (대소문자 무시, 부분 일치)
    경로 탐색은 정확 일치만 허용하므로 여기서 찾은 이름을 그대로 사용해야 함
    """
    keyword = keyword.strip().lower()
    results = []

    for station in get_stations_list():
        name_lower = station["name"].lower()
        if keyword in name_lower:
            if name_lower == keyword:
                priority = 1
            elif name_lower.startswith(keyword):
                priority = 2
            else:
                priority = 3
            results.append({**station, "_priority": priority})

    results.sort(key=lambda x: (x["_priority"], len(x["name"]), x["name"]))
    for r in results:
        r.pop("_priority", None)

    return results[:limit]


def clear_cache():
    global _cache_init, _network

    with _cache_lock:
        _network = None
        _cache_init = False
        logger.info("노선망 캐시 초기화됨")


def reload_cache(path: Optional[str] = None):
    clear_cache()
    initialize_cache(path)
