"""
REST API 경로 계산 엔드포인트
"""

from fastapi import APIRouter, Depends, Query
import logging
from functools import lru_cache
from typing import Optional

from app.models.responses import RouteResponse, ErrorResponse
from app.services.route_service import RouteService
from app.core.exceptions import MissingParameterException


router = APIRouter()
logger = logging.getLogger(__name__)


# lru_cache 사용하여 싱글톤 패턴과 유사한 효과, 의존성 주입
@lru_cache()
def get_route_service() -> RouteService:
    return RouteService()


@router.get(
    "/route",
    response_model=RouteResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def find_route(
    origin: Optional[str] = Query(None, alias="from", description="출발역 이름"),
    destination: Optional[str] = Query(None, alias="to", description="도착역 이름"),
    service: RouteService = Depends(get_route_service),
):
    """
    경로 계산

    역 이름은 대소문자, 공백까지 정확히 일치해야 함

    - **from**: 출발역 이름
    - **to**: 도착역 이름

    Returns:
        역 순서, 환승 정보, 예상 소요시간/요금

    Example:
        GET /api/route?from=Danapur%20Cantonment&to=New%20ISBT
    """
    # 빈 문자열도 누락으로 처리
    if not origin or not destination:
        raise MissingParameterException()

    logger.info(f"REST 경로 계산: {origin} → {destination}")

    # InvalidStationException / RouteNotFoundException => main의 exception handler에서 404 변환
    return service.calculate_route(origin_name=origin, destination_name=destination)
