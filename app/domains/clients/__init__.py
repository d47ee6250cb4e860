"""Clients 도메인 모듈

방문 예약 고객을 관리하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (Client)
    - schemas.py: Pydantic 스키마 (Request/Response)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (목록/상세 조회)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.clients.exceptions import (
    ClientErrorCode,
    ClientNotFoundException,
)
from app.domains.clients.models import Client

__all__ = [
    "Client",
    "ClientErrorCode",
    "ClientNotFoundException",
]
