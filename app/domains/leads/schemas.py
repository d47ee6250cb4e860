"""Leads 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.core.schemas import BaseSchema
from app.domains.leads.models import LeadStatus
from app.domains.properties.schemas import PropertyResponse
from app.domains.viewings.schemas import ViewingDetailResponse

# Request Schemas


class LeadSubmit(BaseSchema):
    """매물 문의 접수 요청"""

    name: str = Field(..., min_length=1, max_length=200, description="이름")
    email: str = Field(
        ..., min_length=3, max_length=320, description="이메일"
    )
    phone: Optional[str] = Field(None, max_length=50, description="전화번호")
    message: Optional[str] = Field(None, description="문의 내용")
    property_id: int = Field(..., gt=0, description="문의 매물 ID")


class LeadConvertRequest(BaseSchema):
    """리드 전환 요청

    방문 일시 누락은 422 대신 서비스에서 400으로 응답합니다.
    """

    scheduled_at: Optional[datetime] = Field(None, description="방문 일시")
    notes: Optional[str] = Field(None, description="방문 메모")


class LeadListParams(BaseSchema):
    """리드 목록 검색 조건"""

    status: Optional[LeadStatus] = None
    property_id: Optional[int] = None


# Response Schemas


class LeadResponse(BaseSchema):
    """리드 응답"""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    message: Optional[str] = None
    property_id: int
    status: LeadStatus
    converted_to_client_id: Optional[int] = None
    submitted_at: datetime


class LeadDetailResponse(LeadResponse):
    """리드 응답 (문의 매물 포함)"""

    property: PropertyResponse


class LeadConversionResponse(BaseSchema):
    """리드 전환 결과"""

    lead: LeadResponse
    viewing: ViewingDetailResponse
