"""Properties 도메인 서비스

매물 검색 흐름:
    쿼리 파라미터 → ``PropertySearchParams`` (검증/변환)
    → ``build_search_filter`` (문서 필터)
    → ``paginate`` (페이지 조회 + 전체 건수 동시 실행)
    → ``Page`` 응답 봉투
"""

from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.context import get_request_id
from app.core.logging import get_logger
from app.core.query import FilterBuilder, Page, QueryOptions, paginate
from app.core.utils.pagination import PaginationParams
from app.core.utils.time import QueryTimer
from app.domains.properties.exceptions import (
    PropertyNotFoundException,
    ViewingRequestIncompleteException,
)
from app.domains.properties.models import Property
from app.domains.properties.repository import (
    PropertyRepository,
    property_collection,
)
from app.domains.properties.schemas import (
    PropertyCreate,
    PropertyLocation,
    PropertySearchParams,
    PropertyUpdate,
    ScheduleViewingRequest,
)
from app.domains.viewings.models import Viewing
from app.domains.viewings.service import ViewingService

logger = get_logger(__name__)

# location 검색어와 프론트 목록 searchTerm: 도시/주소
LOCATION_FIELDS = ("location.city", "location.address")
# 관리자 목록 searchTerm: 제목까지 포함
SEARCH_TERM_FIELDS = ("title", "location.city", "location.address")
# 수정 요청에서 null로 지울 수 없는 필드
NON_NULLABLE_FIELDS = frozenset(
    {"title", "price", "type", "amenities", "images", "archived"}
)


def query_options() -> QueryOptions:
    """설정 기반 검색 옵션"""
    return QueryOptions(
        enable_text_search=settings.enable_text_search,
        enable_geospatial=settings.enable_geospatial,
    )


def build_search_filter(
    params: PropertySearchParams,
    options: Optional[QueryOptions] = None,
    search_fields: Sequence[str] = LOCATION_FIELDS,
) -> dict:
    """검색 조건으로 문서 필터 생성

    선택도가 높은 조건부터 추가합니다. ``location`` 과 ``searchTerm`` 이
    모두 주어지면 각각 별도의 OR 그룹이 되어 AND로 결합됩니다.

    Args:
        params: 검증된 검색 조건
        options: 전문 검색/반경 검색 활성화 여부
        search_fields: ``searchTerm`` 이 검색할 필드 경로

    Returns:
        문서 필터 (``archived`` 미입력 시 ``False`` 조건 포함)
    """
    builder = FilterBuilder(options=options or QueryOptions())
    return (
        builder.add_exact("type", params.type)
        .add_substring_or(LOCATION_FIELDS, params.location)
        .add_substring_or(search_fields, params.search_term)
        .add_exact("location.city", params.city)
        .add_range("price", params.min_price, params.max_price)
        .add_exact("bedrooms", params.bedrooms)
        .add_exact("bathrooms", params.bathrooms)
        .add_set_contains_all("amenities", params.amenities)
        .add_text_search(params.q)
        .add_geo_near(params.lat, params.lng, params.radius)
        .add_exact("archived", params.archived)
        .build()
    )


def _location_columns(location: PropertyLocation) -> dict:
    coordinates = location.coordinates or [None, None]
    return {
        "location_address": location.address,
        "location_city": location.city,
        "location_state": location.state,
        "location_country": location.country,
        "location_lng": coordinates[0],
        "location_lat": coordinates[1],
    }


class PropertyService:
    """매물 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        session_maker: async_sessionmaker[AsyncSession],
    ):
        self.repository = PropertyRepository(session)
        self.collection = property_collection(session_maker)
        self.viewing_service = ViewingService(session, session_maker)

    async def search(
        self,
        params: PropertySearchParams,
        pagination: PaginationParams,
        search_fields: Sequence[str] = LOCATION_FIELDS,
    ) -> Page[Property]:
        """매물 검색

        Args:
            params: 검증된 검색 조건
            pagination: 검증된 페이지네이션 파라미터
            search_fields: ``searchTerm`` 검색 대상 필드

        Returns:
            Page: 현재 페이지 매물과 페이지 메타 정보
        """
        filter_doc = build_search_filter(
            params, query_options(), search_fields
        )
        timer = QueryTimer(logger, settings.slow_query_threshold_ms)
        page = await paginate(self.collection, filter_doc, pagination)
        timer.log("Property search query")
        return page

    async def get_property(self, property_id: int) -> Property:
        """매물 상세 조회

        Raises:
            PropertyNotFoundException: 매물을 찾을 수 없는 경우
        """
        property_ = await self.repository.get_by_id(property_id)
        if not property_:
            raise PropertyNotFoundException(property_id=property_id)
        return property_

    async def create_property(self, data: PropertyCreate) -> Property:
        """매물 등록"""
        property_ = Property(
            title=data.title,
            description=data.description,
            price=data.price,
            type=data.type.value,
            amenities=list(data.amenities),
            images=list(data.images),
            bedrooms=data.bedrooms,
            bathrooms=data.bathrooms,
            area=data.area,
            archived=data.archived,
            **_location_columns(data.location),
        )
        property_ = await self.repository.create(property_)

        logger.info(
            "Property created",
            extra={
                "request_id": get_request_id(),
                "property_id": property_.id,
                "type": property_.type,
            },
        )
        return property_

    async def update_property(
        self, property_id: int, data: PropertyUpdate
    ) -> Property:
        """매물 수정 (요청에 포함된 필드만 반영)

        Raises:
            PropertyNotFoundException: 매물을 찾을 수 없는 경우
        """
        property_ = await self.get_property(property_id)

        changes = data.model_dump(exclude_unset=True, exclude={"location"})
        for field_name, value in changes.items():
            if value is None and field_name in NON_NULLABLE_FIELDS:
                continue
            if field_name == "type":
                value = value.value if hasattr(value, "value") else value
            setattr(property_, field_name, value)

        if data.location is not None:
            for column, value in _location_columns(data.location).items():
                setattr(property_, column, value)

        property_ = await self.repository.update(property_)
        logger.info(
            "Property updated",
            extra={
                "request_id": get_request_id(),
                "property_id": property_id,
                "fields": sorted(data.model_fields_set),
            },
        )
        return property_

    async def delete_property(self, property_id: int) -> None:
        """매물 삭제

        Raises:
            PropertyNotFoundException: 매물을 찾을 수 없는 경우
        """
        property_ = await self.get_property(property_id)
        await self.repository.delete(property_)
        logger.info(
            "Property deleted",
            extra={"request_id": get_request_id(), "property_id": property_id},
        )

    async def set_archived(self, property_id: int, archived: bool) -> Property:
        """매물 보관/보관 해제

        Raises:
            PropertyNotFoundException: 매물을 찾을 수 없는 경우
        """
        property_ = await self.get_property(property_id)
        property_.archived = archived
        property_ = await self.repository.update(property_)
        logger.info(
            "Property archived" if archived else "Property unarchived",
            extra={"request_id": get_request_id(), "property_id": property_id},
        )
        return property_

    async def schedule_viewing(
        self, property_id: int, data: ScheduleViewingRequest
    ) -> Viewing:
        """매물 방문 예약

        Raises:
            PropertyNotFoundException: 매물을 찾을 수 없는 경우
            ViewingRequestIncompleteException: 고객 ID 또는 방문 일시 누락
            ClientNotFoundException: 고객을 찾을 수 없는 경우
        """
        await self.get_property(property_id)

        missing = [
            name
            for name, value in (
                ("clientId", data.client_id),
                ("scheduledAt", data.scheduled_at),
            )
            if value is None
        ]
        if data.client_id is None or data.scheduled_at is None:
            raise ViewingRequestIncompleteException(missing=missing)

        return await self.viewing_service.schedule(
            client_id=data.client_id,
            property_id=property_id,
            scheduled_at=data.scheduled_at,
            notes=data.notes,
        )
