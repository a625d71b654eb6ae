"""
Patna Metro Route API - FastAPI Application

두 역 사이의 경로, 환승 정보, 예상 소요시간/요금 안내
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import MetroException
from app.db.cache import initialize_cache, get_network, is_initialized
from app.api.v1.router import api_router

# 성능 모니터링
from app.middleware.performance_monitoring import (
    PerformanceMonitoringMiddleware,
    RequestLoggingMiddleware,
    get_metrics_collector,
)

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 노선망 생성 및 검증
    노선 데이터 오류(ConfigurationError)는 서버 시작을 중단시킴
    """
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} 시작 중...")
    logger.info("=" * 60)

    try:
        initialize_cache()
    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    logger.info(f"{settings.PROJECT_NAME} 시작 완료!")

    yield

    logger.info(f"✓ {settings.PROJECT_NAME} 종료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## Patna Metro 경로 안내 API

    ### 주요 기능
    - 🚇 출발역 → 도착역 경로 (역 순서)
    - 🔄 환승 횟수 및 환승역 안내 (최대 1회)
    - ⏱️ 예상 소요시간 / 💰 예상 요금
    - 🚉 역 검색 및 노선 조회
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.ENABLE_PERFORMANCE_MONITORING:
    app.add_middleware(PerformanceMonitoringMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    logger.info("✓ 성능 모니터링 미들웨어 활성화")

# API 라우터 등록 => /api/route, /api/stations/...
app.include_router(api_router, prefix="/api")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "example": "/api/route?from=Danapur%20Cantonment&to=New%20ISBT",
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트 (로드 밸런서, 모니터링)
    노선망이 로드되어 있으면 healthy
    """
    if is_initialized():
        network = get_network()
        network_status = "healthy"
        network_info = {
            "stations": len(network),
            "lines": len(network.line_ids),
            "interchanges": len(network.interchanges),
        }
    else:
        network_status = "unhealthy"
        network_info = None

    status_code = 200 if network_status == "healthy" else 503

    return JSONResponse(
        status_code=status_code,
        content={
            "status": network_status,
            "version": settings.VERSION,
            "timestamp": time.time(),
            "components": {"network": network_status},
            "network": network_info,
        },
    )


@app.get("/api/info")
async def api_info():
    """
    API 정보 엔드포인트

    사용 가능한 엔드포인트 및 요금/소요시간 추정 상수
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "endpoints": {
            "find_route": "GET /api/route?from=...&to=...",
            "list_stations": "GET /api/stations",
            "search_stations": "GET /api/stations/search",
            "validate_station": "POST /api/stations/validate",
            "get_lines": "GET /api/stations/lines",
        },
        "estimation": settings.FARE_CONFIG,
        "documentation": {"swagger": "/docs", "redoc": "/redoc"},
    }


@app.get("/api/metrics")
async def get_metrics():
    """
    성능 메트릭 엔드포인트
    """
    if not settings.ENABLE_PERFORMANCE_MONITORING:
        return {"message": "성능 모니터링이 비활성화되어 있습니다"}

    metrics = get_metrics_collector()
    return {
        "summary": metrics.get_summary(),
        "top_paths": metrics.get_path_stats(top_n=10),
        "configuration": {
            "slow_request_threshold_ms": settings.SLOW_REQUEST_THRESHOLD_MS,
            "monitoring_enabled": settings.ENABLE_PERFORMANCE_MONITORING,
        },
    }


# ========== Exception Handlers ==========


@app.exception_handler(MetroException)
async def metro_exception_handler(request: Request, exc: MetroException):
    """
    요청 단위 오류 (역 없음, 경로 없음, 파라미터 누락)
    => {"error", "code"} 구조로 응답
    """
    logger.warning(f"요청 처리 실패: {exc.code} - {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
