"""Clients 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.core.schemas import BaseSchema
from app.domains.viewings.models import ViewingStatus


class ClientListParams(BaseSchema):
    """고객 목록 검색 조건"""

    search: Optional[str] = Field(None, description="이름/이메일 부분 일치")

    @field_validator("search", mode="before")
    @classmethod
    def normalize_search(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ClientViewingResponse(BaseSchema):
    """고객 상세에 포함되는 방문 예약"""

    id: int
    property_id: int
    scheduled_at: datetime
    status: ViewingStatus
    notes: Optional[str] = None


class ClientResponse(BaseSchema):
    """고객 응답"""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    created_at: datetime


class ClientDetailResponse(ClientResponse):
    """고객 응답 (방문 예약 포함)"""

    viewings: list[ClientViewingResponse] = Field(default_factory=list)
