"""Properties 도메인 라우터

관리자용 ``/properties`` 와 프론트엔드용 ``/frontend/properties`` 두 개의
조회 화면을 제공합니다. 검색 파라미터는 문자열로 받아 잘못된 값도 422로
거부하지 않고 ``PropertySearchParams`` 에서 "조건 없음"으로 처리합니다.
"""

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
from app.domains.properties.schemas import (
    PropertyCreate,
    PropertyResponse,
    PropertySearchParams,
    PropertyStatusResponse,
    PropertyUpdate,
    ScheduleViewingRequest,
)
from app.domains.properties.service import (
    LOCATION_FIELDS,
    SEARCH_TERM_FIELDS,
    PropertyService,
)
from app.domains.viewings.schemas import ViewingDetailResponse

router = APIRouter()
frontend_router = APIRouter()


def get_property_service(
    session: AsyncSession = Depends(get_db),
    session_maker: async_sessionmaker[AsyncSession] = Depends(
        get_session_maker
    ),
) -> PropertyService:
    """PropertyService 의존성"""
    return PropertyService(session, session_maker)


def get_search_params(
    type: Optional[str] = Query(None, description="거래 유형 (sale/rent)"),
    city: Optional[str] = Query(None, description="도시 (정확 일치)"),
    location: Optional[str] = Query(
        None, description="도시/주소 부분 일치 검색어"
    ),
    search_term: Optional[str] = Query(
        None, alias="searchTerm", description="부분 일치 (관리자: 제목/도시/주소, 프론트: 도시/주소)"
    ),
    min_price: Optional[str] = Query(
        None, alias="minPrice", description="최소 가격"
    ),
    max_price: Optional[str] = Query(
        None, alias="maxPrice", description="최대 가격"
    ),
    bedrooms: Optional[str] = Query(None, description="침실 수"),
    bathrooms: Optional[str] = Query(None, description="욕실 수"),
    amenities: Optional[list[str]] = Query(
        None, description="편의시설 (반복 또는 쉼표 구분)"
    ),
    archived: Optional[str] = Query(None, description="보관 여부"),
    q: Optional[str] = Query(None, description="전문 검색어"),
    lat: Optional[str] = Query(None, description="반경 검색 중심 위도"),
    lng: Optional[str] = Query(None, description="반경 검색 중심 경도"),
    radius: Optional[str] = Query(None, description="반경 (미터)"),
) -> PropertySearchParams:
    """매물 검색 조건 의존성"""
    return PropertySearchParams.model_validate(
        {
            "type": type,
            "city": city,
            "location": location,
            "search_term": search_term,
            "min_price": min_price,
            "max_price": max_price,
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "amenities": amenities,
            "archived": archived,
            "q": q,
            "lat": lat,
            "lng": lng,
            "radius": radius,
        }
    )


# Admin


@router.get("", response_model=ListAPIResponse[PropertyResponse])
async def list_properties(
    page_params: PageParams = Depends(),
    filters: PropertySearchParams = Depends(get_search_params),
    service: PropertyService = Depends(get_property_service),
):
    """매물 목록 검색 (관리자, searchTerm은 제목도 검색)"""
    page = await service.search(
        filters, page_params.params, SEARCH_TERM_FIELDS
    )
    return create_list_response(
        data=[PropertyResponse.model_validate(p) for p in page.data],
        pagination=page.pagination,
    )


@router.get("/{property_id}", response_model=APIResponse[PropertyResponse])
async def get_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
):
    """매물 상세 조회"""
    property_ = await service.get_property(property_id)
    return create_response(
        data=PropertyResponse.model_validate(property_),
        message="매물 정보를 조회했습니다.",
    )


@router.post(
    "",
    response_model=APIResponse[PropertyResponse],
    status_code=201,
)
async def create_property(
    data: PropertyCreate,
    service: PropertyService = Depends(get_property_service),
):
    """매물 등록"""
    property_ = await service.create_property(data)
    return create_response(
        data=PropertyResponse.model_validate(property_),
        message="매물이 등록되었습니다.",
    )


@router.put("/{property_id}", response_model=APIResponse[PropertyResponse])
async def update_property(
    property_id: int,
    data: PropertyUpdate,
    service: PropertyService = Depends(get_property_service),
):
    """매물 수정"""
    property_ = await service.update_property(property_id, data)
    return create_response(
        data=PropertyResponse.model_validate(property_),
        message="매물이 수정되었습니다.",
    )


@router.delete(
    "/{property_id}", response_model=APIResponse[PropertyStatusResponse]
)
async def delete_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
):
    """매물 삭제"""
    await service.delete_property(property_id)
    return create_response(
        data=PropertyStatusResponse(property_id=property_id),
        message="매물이 삭제되었습니다.",
    )


@router.patch(
    "/{property_id}/archive",
    response_model=APIResponse[PropertyStatusResponse],
)
async def archive_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
):
    """매물 보관"""
    property_ = await service.set_archived(property_id, True)
    return create_response(
        data=PropertyStatusResponse(
            property_id=property_.id, archived=property_.archived
        ),
        message="매물이 보관되었습니다.",
    )


@router.patch(
    "/{property_id}/unarchive",
    response_model=APIResponse[PropertyStatusResponse],
)
async def unarchive_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
):
    """매물 보관 해제"""
    property_ = await service.set_archived(property_id, False)
    return create_response(
        data=PropertyStatusResponse(
            property_id=property_.id, archived=property_.archived
        ),
        message="매물 보관이 해제되었습니다.",
    )


@router.post(
    "/{property_id}/viewings",
    response_model=APIResponse[ViewingDetailResponse],
    status_code=201,
)
async def schedule_viewing(
    property_id: int,
    data: ScheduleViewingRequest,
    service: PropertyService = Depends(get_property_service),
):
    """매물 방문 예약"""
    viewing = await service.schedule_viewing(property_id, data)
    return create_response(
        data=ViewingDetailResponse.model_validate(viewing),
        message="방문 예약이 생성되었습니다.",
    )


# Frontend


@frontend_router.get("", response_model=ListAPIResponse[PropertyResponse])
async def list_frontend_properties(
    page_params: PageParams = Depends(),
    filters: PropertySearchParams = Depends(get_search_params),
    service: PropertyService = Depends(get_property_service),
):
    """매물 목록 검색 (프론트엔드, 위치 검색은 도시/주소만)"""
    page = await service.search(filters, page_params.params, LOCATION_FIELDS)
    return create_list_response(
        data=[PropertyResponse.model_validate(p) for p in page.data],
        pagination=page.pagination,
    )


@frontend_router.get(
    "/{property_id}", response_model=APIResponse[PropertyResponse]
)
async def get_frontend_property(
    property_id: int,
    service: PropertyService = Depends(get_property_service),
):
    """매물 상세 조회 (프론트엔드)"""
    property_ = await service.get_property(property_id)
    return create_response(
        data=PropertyResponse.model_validate(property_),
        message="매물 정보를 조회했습니다.",
    )
