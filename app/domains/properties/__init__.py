"""Properties 도메인 모듈

매매/임대 매물 검색과 관리를 담당하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (Property, PropertyType)
    - schemas.py: Pydantic 스키마 (검색 조건, Request/Response)
    - repository.py: 데이터 접근 계층 + 검색용 컬렉션
    - service.py: 비즈니스 로직 (검색 필터 조합, CRUD, 보관, 방문 예약)
    - router.py: API 엔드포인트 (관리자/프론트엔드)
    - exceptions.py: 도메인 예외
"""

from app.domains.properties.exceptions import (
    PropertyErrorCode,
    PropertyNotFoundException,
    ViewingRequestIncompleteException,
)
from app.domains.properties.models import Property, PropertyType

__all__ = [
    "Property",
    "PropertyType",
    "PropertyErrorCode",
    "PropertyNotFoundException",
    "ViewingRequestIncompleteException",
]
