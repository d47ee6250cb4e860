"""요청/응답 로깅 미들웨어"""

from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.context import set_request_id
from app.core.logging import get_logger
from app.core.utils.time import measure_time

logger = get_logger(__name__)

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


def _describe(request: Request) -> str:
    """로그용 요청 경로 (검색 조건 확인을 위해 쿼리스트링 포함)"""
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로깅 및 처리 시간 측정 미들웨어"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        # 제외 경로 체크
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        # 요청 ID 설정 (헤더에서 가져오거나 새로 생성)
        request_id = set_request_id(request.headers.get("X-Request-ID"))
        target = _describe(request)

        logger.info(
            f"→ {request.method} {target} "
            f"| Client: {request.client.host if request.client else 'unknown'}"
        )

        # 요청 처리 및 시간 측정
        with measure_time() as timer:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"✗ {request.method} {target} "
                    f"| Error: {str(e)} | Time: {timer['elapsed_ms']:.2f}ms"
                )
                raise

        process_time = timer["elapsed_ms"]

        # 응답 헤더에 요청 ID와 처리 시간 추가
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"

        status_emoji = "✓" if response.status_code < 400 else "✗"
        log_method = (
            logger.info if response.status_code < 400 else logger.warning
        )

        log_method(
            f"{status_emoji} {request.method} {target} "
            f"| Status: {response.status_code} "
            f"| Time: {process_time:.2f}ms"
        )

        return cast(Response, response)
