"""Clients 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import NotFoundException


class ClientErrorCode(str, Enum):
    """고객 도메인 에러 코드"""

    CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"


class ClientNotFoundException(NotFoundException):
    """고객을 찾을 수 없는 경우"""

    def __init__(self, client_id: int | None = None):
        detail = {"client_id": client_id} if client_id else {}
        super().__init__(
            message="고객을 찾을 수 없습니다.",
            error_code=ClientErrorCode.CLIENT_NOT_FOUND,
            detail=detail,
        )
