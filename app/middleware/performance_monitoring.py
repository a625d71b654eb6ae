# 성능 모니터링 미들웨어

import time
import logging
import json
from typing import Callable, Dict
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.config import settings

logger = logging.getLogger(__name__)


class MetricsCollector:
    """
    메모리 기반 요청 메트릭 수집기
    프로세스 재시작 시 초기화됨
    """

    def __init__(self):
        self.request_count = 0
        self.total_elapsed_time_ms = 0.0
        self.slow_request_count = 0
        self.error_count = 0
        self.path_stats: Dict[str, Dict] = {}

    def record_request(
        self, path: str, method: str, status_code: int, elapsed_time_ms: float, is_slow: bool = False
    ):
        self.request_count += 1
        self.total_elapsed_time_ms += elapsed_time_ms

        stats = self.path_stats.setdefault(
            f"{method} {path}",
            {"count": 0, "total_time_ms": 0.0, "slow_count": 0, "error_count": 0},
        )
        stats["count"] += 1
        stats["total_time_ms"] += elapsed_time_ms

        if is_slow:
            self.slow_request_count += 1
            stats["slow_count"] += 1

        if status_code >= 400:
            self.error_count += 1
            stats["error_count"] += 1

    def get_summary(self) -> dict:
        if self.request_count == 0:
            return {
                "total_requests": 0,
                "average_elapsed_time_ms": 0,
                "slow_requests": 0,
                "error_requests": 0,
                "success_rate": 0,
            }

        return {
            "total_requests": self.request_count,
            "average_elapsed_time_ms": round(
                self.total_elapsed_time_ms / self.request_count, 2
            ),
            "slow_requests": self.slow_request_count,
            "error_requests": self.error_count,
            "success_rate": round(
                (self.request_count - self.error_count) / self.request_count * 100, 2
            ),
        }

    def get_path_stats(self, top_n: int = 10) -> list:
        """요청 수 기준 상위 N개 경로 통계"""
        ranked = sorted(
            self.path_stats.items(), key=lambda item: item[1]["count"], reverse=True
        )

        return [
            {
                "path": path,
                "count": stats["count"],
                "avg_time_ms": round(stats["total_time_ms"] / stats["count"], 2),
                "slow_count": stats["slow_count"],
                "error_count": stats["error_count"],
            }
            for path, stats in ranked[:top_n]
        ]

    def reset(self):
        """/api/metrics 누적값 초기화"""
        self.request_count = 0
        self.total_elapsed_time_ms = 0.0
        self.slow_request_count = 0
        self.error_count = 0
        self.path_stats.clear()


# 전역 메트릭 수집기 인스턴스
_metrics_collector = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    return _metrics_collector


class PerformanceMonitoringMiddleware(BaseHTTPMiddleware):
    """
    요청별 응답 시간 측정

    - X-Process-Time-Ms 응답 헤더 추가
    - threshold 초과 요청은 warning 로깅
    - MetricsCollector에 기록
    """

    def __init__(self, app: ASGIApp, slow_threshold_ms: float = None):
        super().__init__(app)
        self.slow_threshold_ms = (
            slow_threshold_ms
            if slow_threshold_ms is not None
            else settings.SLOW_REQUEST_THRESHOLD_MS
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_time_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"요청 처리 중 예외 발생: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms, 예외={str(e)}",
                exc_info=True,
            )
            raise

        elapsed_time_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_time_ms:.2f}"

        is_slow = elapsed_time_ms > self.slow_threshold_ms
        if is_slow:
            logger.warning(
                f"⚠️ 느린 요청 감지: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms (기준: {self.slow_threshold_ms}ms)"
            )

        get_metrics_collector().record_request(
            path=request.url.path,
            method=request.method,
            status_code=response.status_code,
            elapsed_time_ms=elapsed_time_ms,
            is_slow=is_slow,
        )

        metrics = {
            "event": "http_request",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "elapsed_time_ms": round(elapsed_time_ms, 2),
            "slow_request": is_slow,
        }
        # 역 이름 쿼리는 민감 정보가 아니므로 그대로 기록
        if request.query_params:
            metrics["query_params"] = dict(request.query_params)

        logger.info(f"PERFORMANCE: {json.dumps(metrics, ensure_ascii=False)}")

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 한 줄 로깅"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client = request.client.host if request.client else "unknown"
        logger.info(f"→ {request.method} {request.url.path} from {client}")

        response = await call_next(request)

        log_level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(
            log_level, f"← {request.method} {request.url.path} status={response.status_code}"
        )
        return response
