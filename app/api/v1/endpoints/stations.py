"""
역 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Query, HTTPException
import logging

from app.db.cache import get_stations_list, search_stations_by_name, get_lines_dict
from app.models.responses import (
    StationListResponse,
    StationSearchResponse,
    StationValidateResponse,
    LinesResponse,
)
from app.services.route_service import RouteService
from app.api.v1.endpoints.route import get_route_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=StationListResponse)
async def list_stations():
    """
    전체 역 목록 (데이터에 선언된 순서)
    """
    stations = get_stations_list()
    return {"count": len(stations), "stations": stations}


@router.get("/search", response_model=StationSearchResponse)
async def search_stations(
    q: str = Query(..., description="검색 키워드", min_length=1, max_length=50),
    limit: int = Query(10, ge=1, le=50, description="최대 결과 수")
):
    """
    역 검색 (자동완성용)

    - **q**: 검색 키워드 (1-50자, 대소문자 무시)
    - **limit**: 최대 결과 수 (1-50, 기본값 10)

    Example:
        GET /api/stations/search?q=patna&limit=5
    """
    try:
        logger.info(f"역 검색: keyword={q}, limit={limit}")
        results = search_stations_by_name(q, limit)

        return {
            "keyword": q,
            "count": len(results),
            "results": results
        }
    except Exception as e:
        logger.error(f"역 검색 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"검색 중 오류 발생: {str(e)}")


@router.post("/validate", response_model=StationValidateResponse)
async def validate_station(
    station_name: str = Query(..., min_length=1),
    service: RouteService = Depends(get_route_service),
):
    """
    역 이름 유효성 검증 (경로 계산과 동일하게 정확 일치)

    Example:
        POST /api/stations/validate?station_name=PMCH
    """
    logger.info(f"역 검증: station_name={station_name}")
    return service.validate_station(station_name)


@router.get("/lines", response_model=LinesResponse)
async def get_all_lines():
    """
    전체 노선 목록 조회

    Returns:
        {
            "lines": {"1": ["Danapur Cantonment", ...], "2": ["Patna Junction", ...]},
            "total_lines": 2
        }
    """
    lines = get_lines_dict()
    return {
        "lines": lines,
        "total_lines": len(lines)
    }
