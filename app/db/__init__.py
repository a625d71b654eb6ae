"""
정적 노선 데이터 및 노선망 캐시
"""

from app.db.cache import (
    initialize_cache,
    get_network,
    get_stations_list,
    get_lines_dict,
    search_stations_by_name,
    clear_cache,
    reload_cache,
)

__all__ = [
    "initialize_cache",
    "get_network",
    "get_stations_list",
    "get_lines_dict",
    "search_stations_by_name",
    "clear_cache",
    "reload_cache",
]
