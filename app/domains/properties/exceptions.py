"""Properties 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, NotFoundException


class PropertyErrorCode(str, Enum):
    """매물 도메인 에러 코드"""

    PROPERTY_NOT_FOUND = "PROPERTY_NOT_FOUND"
    VIEWING_REQUEST_INCOMPLETE = "VIEWING_REQUEST_INCOMPLETE"


class PropertyNotFoundException(NotFoundException):
    """매물을 찾을 수 없는 경우"""

    def __init__(self, property_id: int | None = None):
        detail = {"property_id": property_id} if property_id else {}
        super().__init__(
            message="매물을 찾을 수 없습니다.",
            error_code=PropertyErrorCode.PROPERTY_NOT_FOUND,
            detail=detail,
        )


class ViewingRequestIncompleteException(BadRequestException):
    """방문 예약에 필요한 고객 ID 또는 일시가 없는 경우"""

    def __init__(self, missing: list[str] | None = None):
        detail = {"missing": missing} if missing else {}
        super().__init__(
            message="고객 ID와 방문 일시는 필수입니다.",
            error_code=PropertyErrorCode.VIEWING_REQUEST_INCOMPLETE,
            detail=detail,
        )
