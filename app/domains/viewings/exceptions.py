"""Viewings 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import NotFoundException


class ViewingErrorCode(str, Enum):
    """방문 예약 도메인 에러 코드"""

    VIEWING_NOT_FOUND = "VIEWING_NOT_FOUND"


class ViewingNotFoundException(NotFoundException):
    """방문 예약을 찾을 수 없는 경우"""

    def __init__(self, viewing_id: int | None = None):
        detail = {"viewing_id": viewing_id} if viewing_id else {}
        super().__init__(
            message="방문 예약을 찾을 수 없습니다.",
            error_code=ViewingErrorCode.VIEWING_NOT_FOUND,
            detail=detail,
        )
