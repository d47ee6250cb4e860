"""Viewings 도메인 서비스

방문 예약 생성은 매물 방문 예약(``PropertyService.schedule_viewing``)과
리드 전환(``LeadService.convert_lead``)에서도 사용됩니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.context import get_request_id
from app.core.logging import get_logger
from app.core.query import FilterBuilder, Page, paginate
from app.core.utils.pagination import PaginationParams
from app.core.utils.datetime import ensure_utc
from app.core.utils.time import QueryTimer
from app.domains.clients.exceptions import ClientNotFoundException
from app.domains.clients.repository import ClientRepository
from app.domains.properties.exceptions import PropertyNotFoundException
from app.domains.properties.repository import PropertyRepository
from app.domains.viewings.exceptions import ViewingNotFoundException
from app.domains.viewings.models import Viewing, ViewingStatus
from app.domains.viewings.repository import (
    ViewingRepository,
    viewing_collection,
)
from app.domains.viewings.schemas import (
    ViewingCreate,
    ViewingListParams,
    ViewingUpdate,
)

logger = get_logger(__name__)


class ViewingService:
    """방문 예약 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        session_maker: async_sessionmaker[AsyncSession],
    ):
        self.repository = ViewingRepository(session)
        self.client_repository = ClientRepository(session)
        self.property_repository = PropertyRepository(session)
        self.collection = viewing_collection(session_maker)

    async def schedule(
        self,
        client_id: int,
        property_id: int,
        scheduled_at: datetime,
        notes: Optional[str] = None,
    ) -> Viewing:
        """방문 예약 생성

        시간대가 없는 방문 일시는 UTC로 간주합니다.

        Raises:
            ClientNotFoundException: 고객을 찾을 수 없는 경우
            PropertyNotFoundException: 매물을 찾을 수 없는 경우
        """
        if not await self.client_repository.get_by_id(client_id):
            raise ClientNotFoundException(client_id=client_id)
        if not await self.property_repository.get_by_id(property_id):
            raise PropertyNotFoundException(property_id=property_id)

        viewing = await self.repository.create(
            Viewing(
                client_id=client_id,
                property_id=property_id,
                scheduled_at=ensure_utc(scheduled_at),
                status=ViewingStatus.SCHEDULED.value,
                notes=notes,
            )
        )

        logger.info(
            "Viewing scheduled",
            extra={
                "request_id": get_request_id(),
                "viewing_id": viewing.id,
                "client_id": client_id,
                "property_id": property_id,
            },
        )
        return viewing

    async def create_viewing(self, data: ViewingCreate) -> Viewing:
        """방문 예약 생성 (요청 스키마)"""
        return await self.schedule(
            client_id=data.client_id,
            property_id=data.property_id,
            scheduled_at=data.scheduled_at,
            notes=data.notes,
        )

    async def update_viewing(
        self, viewing_id: int, data: ViewingUpdate
    ) -> Viewing:
        """방문 예약 상태/메모 수정

        Raises:
            ViewingNotFoundException: 방문 예약을 찾을 수 없는 경우
        """
        viewing = await self.repository.get_by_id(viewing_id)
        if not viewing:
            raise ViewingNotFoundException(viewing_id=viewing_id)

        changes = data.model_dump(exclude_unset=True)
        if "status" in changes and changes["status"] is not None:
            viewing.status = ViewingStatus(changes["status"]).value
        if "notes" in changes:
            viewing.notes = changes["notes"]

        viewing = await self.repository.update(viewing)
        logger.info(
            "Viewing updated",
            extra={
                "request_id": get_request_id(),
                "viewing_id": viewing.id,
                "status": viewing.status,
            },
        )
        return viewing

    async def list_viewings(
        self, filters: ViewingListParams, params: PaginationParams
    ) -> Page[Viewing]:
        """방문 예약 목록 조회 (고객/매물 포함)"""
        status = filters.status.value if filters.status else None
        filter_doc = (
            FilterBuilder()
            .add_exact("status", status)
            .add_exact("client_id", filters.client_id)
            .add_exact("property_id", filters.property_id)
            .build()
        )
        timer = QueryTimer(logger, settings.slow_query_threshold_ms)
        page = await paginate(
            self.collection,
            filter_doc,
            params,
            populate=["client", "property"],
        )
        timer.log("Viewing list query")
        return page
