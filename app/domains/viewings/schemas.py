"""Viewings 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.core.schemas import BaseSchema
from app.domains.clients.schemas import ClientResponse
from app.domains.properties.schemas import PropertyResponse
from app.domains.viewings.models import ViewingStatus

# Request Schemas


class ViewingCreate(BaseSchema):
    """방문 예약 생성 요청"""

    client_id: int = Field(..., gt=0, description="고객 ID")
    property_id: int = Field(..., gt=0, description="매물 ID")
    scheduled_at: datetime = Field(..., description="방문 일시")
    notes: Optional[str] = Field(None, description="메모")


class ViewingUpdate(BaseSchema):
    """방문 예약 수정 요청 (상태/메모)"""

    status: Optional[ViewingStatus] = None
    notes: Optional[str] = None


class ViewingListParams(BaseSchema):
    """방문 예약 목록 검색 조건"""

    status: Optional[ViewingStatus] = None
    client_id: Optional[int] = None
    property_id: Optional[int] = None


# Response Schemas


class ViewingResponse(BaseSchema):
    """방문 예약 응답"""

    id: int
    client_id: int
    property_id: int
    scheduled_at: datetime
    status: ViewingStatus
    notes: Optional[str] = None
    created_at: datetime


class ViewingDetailResponse(ViewingResponse):
    """방문 예약 응답 (고객/매물 포함)"""

    client: ClientResponse
    property: PropertyResponse
