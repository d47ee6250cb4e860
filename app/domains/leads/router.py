"""Leads 도메인 라우터"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.database import get_db, get_session_maker
from app.core.schemas import (
    APIResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import PageParams
from app.domains.leads.models import LeadStatus
from app.domains.leads.schemas import (
    LeadConversionResponse,
    LeadConvertRequest,
    LeadDetailResponse,
    LeadListParams,
    LeadResponse,
    LeadSubmit,
)
from app.domains.leads.service import LeadService
from app.domains.viewings.schemas import ViewingDetailResponse

router = APIRouter()


def get_lead_service(
    session: AsyncSession = Depends(get_db),
    session_maker: async_sessionmaker[AsyncSession] = Depends(
        get_session_maker
    ),
) -> LeadService:
    """LeadService 의존성"""
    return LeadService(session, session_maker)


def get_lead_filters(
    status: Optional[LeadStatus] = Query(None, description="상태"),
    property_id: Optional[int] = Query(
        None, alias="propertyId", description="매물 ID"
    ),
) -> LeadListParams:
    """리드 목록 검색 조건 의존성"""
    return LeadListParams(status=status, property_id=property_id)


@router.post("", response_model=APIResponse[LeadResponse], status_code=201)
async def submit_lead(
    data: LeadSubmit,
    service: LeadService = Depends(get_lead_service),
):
    """매물 문의 접수"""
    lead = await service.submit_lead(data)
    return create_response(
        data=LeadResponse.model_validate(lead),
        message="문의가 접수되었습니다.",
    )


@router.get("", response_model=ListAPIResponse[LeadDetailResponse])
async def list_leads(
    page_params: PageParams = Depends(),
    filters: LeadListParams = Depends(get_lead_filters),
    service: LeadService = Depends(get_lead_service),
):
    """리드 목록 조회"""
    page = await service.list_leads(filters, page_params.params)
    return create_list_response(
        data=[LeadDetailResponse.model_validate(lead) for lead in page.data],
        pagination=page.pagination,
    )


@router.post(
    "/{lead_id}/convert",
    response_model=APIResponse[LeadConversionResponse],
    status_code=201,
)
async def convert_lead(
    lead_id: int,
    data: LeadConvertRequest,
    service: LeadService = Depends(get_lead_service),
):
    """리드를 고객으로 전환하고 방문 예약 생성"""
    lead, viewing = await service.convert_lead(lead_id, data)
    return create_response(
        data=LeadConversionResponse(
            lead=LeadResponse.model_validate(lead),
            viewing=ViewingDetailResponse.model_validate(viewing),
        ),
        message="리드가 전환되고 방문 예약이 생성되었습니다.",
    )
