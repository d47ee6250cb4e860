"""Leads 도메인 모듈

매물 문의(리드) 접수와 고객 전환을 담당하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (Lead, LeadStatus)
    - schemas.py: Pydantic 스키마 (Request/Response)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (접수, 목록, 전환)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.leads.exceptions import (
    LeadErrorCode,
    LeadNotFoundException,
    ScheduledAtRequiredException,
)
from app.domains.leads.models import Lead, LeadStatus

__all__ = [
    "Lead",
    "LeadStatus",
    "LeadErrorCode",
    "LeadNotFoundException",
    "ScheduledAtRequiredException",
]
