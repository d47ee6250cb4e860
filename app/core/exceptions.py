"""전역 예외 및 예외 핸들러

모든 에러 응답은 같은 봉투로 직렬화됩니다::

    {
        "success": false,
        "message": "...",
        "error": {"code": "...", "message": "...", "detail": {...}}
    }

도메인 예외는 ``BaseAPIException`` 하위 클래스로 정의하고, 예상하지 못한
예외(저장소 장애, 쿼리 변환 실패 등)는 500으로 변환되며 상세 내용은 로그에만
남깁니다.
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.context import get_request_id
from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    CONFLICT = "CONFLICT"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"


# HTTP 상태 코드 → 전역 에러 코드 (프레임워크가 직접 발생시킨 HTTPException용)
STATUS_ERROR_CODES: Dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.BAD_REQUEST,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    status.HTTP_422_UNPROCESSABLE_ENTITY: ErrorCode.VALIDATION_ERROR,
}


class BaseAPIException(HTTPException):
    """기본 API 예외 클래스"""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.detail_info = detail or {}
        super().__init__(status_code=status_code, detail=message)


class BadRequestException(BaseAPIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "잘못된 요청입니다.",
        error_code: str = ErrorCode.BAD_REQUEST,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class NotFoundException(BaseAPIException):
    """404 Not Found"""

    def __init__(
        self,
        message: str = "리소스를 찾을 수 없습니다.",
        error_code: str = ErrorCode.NOT_FOUND,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class ConflictException(BaseAPIException):
    """409 Conflict"""

    def __init__(
        self,
        message: str = "리소스 충돌이 발생했습니다.",
        error_code: str = ErrorCode.CONFLICT,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class InternalServerException(BaseAPIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "서버 내부 오류가 발생했습니다.",
        error_code: str = ErrorCode.INTERNAL_ERROR,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            message=message,
            detail=detail,
        )


def error_response(
    status_code: int,
    code: str,
    message: str,
    detail: Optional[Any] = None,
) -> JSONResponse:
    """에러 응답 봉투 생성"""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "error": {
                "code": code,
                "message": message,
                "detail": jsonable_encoder(detail),
            },
        },
    )


async def base_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """도메인 예외 핸들러"""
    logger.info(
        f"{request.method} {request.url.path} → {exc.error_code}",
        extra={"status_code": exc.status_code, "detail": exc.detail_info},
    )
    return error_response(
        exc.status_code, exc.error_code, exc.message, exc.detail_info
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """프레임워크 HTTPException 핸들러 (없는 경로, 허용되지 않은 메서드 등)"""
    code = STATUS_ERROR_CODES.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
    return error_response(exc.status_code, code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 본문 검증 실패 핸들러 (422)"""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR,
        "요청 값이 올바르지 않습니다.",
        {"errors": errors},
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """일반 예외 핸들러 (저장소 장애, 쿼리 변환 실패 등)"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        exc_info=exc,
        extra={
            "request_id": get_request_id(),
            "error_type": type(exc).__name__,
        },
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
        "서버 내부 오류가 발생했습니다.",
    )
