"""Viewings 도메인 모듈

고객의 매물 방문 예약을 관리하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (Viewing, ViewingStatus)
    - schemas.py: Pydantic 스키마 (Request/Response)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (예약 생성/수정/목록)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.viewings.exceptions import (
    ViewingErrorCode,
    ViewingNotFoundException,
)
from app.domains.viewings.models import Viewing, ViewingStatus

__all__ = [
    "Viewing",
    "ViewingStatus",
    "ViewingErrorCode",
    "ViewingNotFoundException",
]
