"""Leads 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, NotFoundException


class LeadErrorCode(str, Enum):
    """리드 도메인 에러 코드"""

    LEAD_NOT_FOUND = "LEAD_NOT_FOUND"
    SCHEDULED_AT_REQUIRED = "SCHEDULED_AT_REQUIRED"


class LeadNotFoundException(NotFoundException):
    """리드를 찾을 수 없는 경우"""

    def __init__(self, lead_id: int | None = None):
        detail = {"lead_id": lead_id} if lead_id else {}
        super().__init__(
            message="리드를 찾을 수 없습니다.",
            error_code=LeadErrorCode.LEAD_NOT_FOUND,
            detail=detail,
        )


class ScheduledAtRequiredException(BadRequestException):
    """리드 전환 시 방문 일시가 없는 경우"""

    def __init__(self, lead_id: int | None = None):
        detail = {"lead_id": lead_id} if lead_id else {}
        super().__init__(
            message="방문 일시는 필수입니다.",
            error_code=LeadErrorCode.SCHEDULED_AT_REQUIRED,
            detail=detail,
        )
