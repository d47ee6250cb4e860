"""Viewings 도메인 라우터"""

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
from app.domains.viewings.models import ViewingStatus
from app.domains.viewings.schemas import (
    ViewingCreate,
    ViewingDetailResponse,
    ViewingListParams,
    ViewingResponse,
    ViewingUpdate,
)
from app.domains.viewings.service import ViewingService

router = APIRouter()


def get_viewing_service(
    session: AsyncSession = Depends(get_db),
    session_maker: async_sessionmaker[AsyncSession] = Depends(
        get_session_maker
    ),
) -> ViewingService:
    """ViewingService 의존성"""
    return ViewingService(session, session_maker)


def get_viewing_filters(
    status: Optional[ViewingStatus] = Query(None, description="상태"),
    client_id: Optional[int] = Query(
        None, alias="clientId", description="고객 ID"
    ),
    property_id: Optional[int] = Query(
        None, alias="propertyId", description="매물 ID"
    ),
) -> ViewingListParams:
    """방문 예약 목록 검색 조건 의존성"""
    return ViewingListParams(
        status=status, client_id=client_id, property_id=property_id
    )


@router.get("", response_model=ListAPIResponse[ViewingDetailResponse])
async def list_viewings(
    page_params: PageParams = Depends(),
    filters: ViewingListParams = Depends(get_viewing_filters),
    service: ViewingService = Depends(get_viewing_service),
):
    """방문 예약 목록 조회"""
    page = await service.list_viewings(filters, page_params.params)
    return create_list_response(
        data=[ViewingDetailResponse.model_validate(v) for v in page.data],
        pagination=page.pagination,
    )


@router.post(
    "",
    response_model=APIResponse[ViewingDetailResponse],
    status_code=201,
)
async def create_viewing(
    data: ViewingCreate,
    service: ViewingService = Depends(get_viewing_service),
):
    """방문 예약 생성"""
    viewing = await service.create_viewing(data)
    return create_response(
        data=ViewingDetailResponse.model_validate(viewing),
        message="방문 예약이 생성되었습니다.",
    )


@router.put("/{viewing_id}", response_model=APIResponse[ViewingResponse])
async def update_viewing(
    viewing_id: int,
    data: ViewingUpdate,
    service: ViewingService = Depends(get_viewing_service),
):
    """방문 예약 상태/메모 수정"""
    viewing = await service.update_viewing(viewing_id, data)
    return create_response(
        data=ViewingResponse.model_validate(viewing),
        message="방문 예약이 수정되었습니다.",
    )
