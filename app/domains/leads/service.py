"""Leads 도메인 서비스

리드 전환은 세 단계의 쓰기를 순서대로 실행합니다.

    1. 이메일로 고객 조회, 없으면 생성
    2. 리드의 매물에 대한 방문 예약 생성
    3. 리드 상태를 converted로 변경하고 고객 연결

세 쓰기는 요청 세션(``get_db``) 안에서 실행되므로 요청이 실패하면 함께
롤백됩니다.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.context import get_request_id
from app.core.logging import get_logger
from app.core.query import FilterBuilder, Page, paginate
from app.core.utils.pagination import PaginationParams
from app.core.utils.time import QueryTimer
from app.domains.clients.models import Client
from app.domains.clients.repository import ClientRepository
from app.domains.leads.exceptions import (
    LeadNotFoundException,
    ScheduledAtRequiredException,
)
from app.domains.leads.models import Lead, LeadStatus
from app.domains.leads.repository import (
    LEAD_SORT,
    LeadRepository,
    lead_collection,
)
from app.domains.leads.schemas import (
    LeadConvertRequest,
    LeadListParams,
    LeadSubmit,
)
from app.domains.properties.exceptions import PropertyNotFoundException
from app.domains.properties.repository import PropertyRepository
from app.domains.viewings.models import Viewing
from app.domains.viewings.service import ViewingService

logger = get_logger(__name__)


class LeadService:
    """리드 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        session_maker: async_sessionmaker[AsyncSession],
    ):
        self.repository = LeadRepository(session)
        self.client_repository = ClientRepository(session)
        self.property_repository = PropertyRepository(session)
        self.viewing_service = ViewingService(session, session_maker)
        self.collection = lead_collection(session_maker)

    async def submit_lead(self, data: LeadSubmit) -> Lead:
        """매물 문의 접수

        Raises:
            PropertyNotFoundException: 문의 매물을 찾을 수 없는 경우
        """
        if not await self.property_repository.get_by_id(data.property_id):
            raise PropertyNotFoundException(property_id=data.property_id)

        lead = await self.repository.create(
            Lead(
                name=data.name,
                email=data.email,
                phone=data.phone,
                message=data.message,
                property_id=data.property_id,
                status=LeadStatus.NEW.value,
            )
        )

        logger.info(
            "Lead submitted",
            extra={
                "request_id": get_request_id(),
                "lead_id": lead.id,
                "property_id": lead.property_id,
            },
        )
        return lead

    async def list_leads(
        self, filters: LeadListParams, params: PaginationParams
    ) -> Page[Lead]:
        """리드 목록 조회 (문의 매물 포함)"""
        status = filters.status.value if filters.status else None
        filter_doc = (
            FilterBuilder()
            .add_exact("status", status)
            .add_exact("property_id", filters.property_id)
            .build()
        )
        timer = QueryTimer(logger, settings.slow_query_threshold_ms)
        page = await paginate(
            self.collection,
            filter_doc,
            params,
            sort=LEAD_SORT,
            populate=["property"],
        )
        timer.log("Lead list query")
        return page

    async def convert_lead(
        self, lead_id: int, data: LeadConvertRequest
    ) -> tuple[Lead, Viewing]:
        """리드를 고객으로 전환하고 방문 예약 생성

        Args:
            lead_id: 리드 ID
            data: 방문 일시/메모

        Returns:
            (전환된 리드, 생성된 방문 예약) 튜플

        Raises:
            LeadNotFoundException: 리드를 찾을 수 없는 경우
            ScheduledAtRequiredException: 방문 일시가 없는 경우
        """
        lead = await self.repository.get_by_id(lead_id)
        if not lead:
            raise LeadNotFoundException(lead_id=lead_id)
        if data.scheduled_at is None:
            raise ScheduledAtRequiredException(lead_id=lead_id)

        client = await self.client_repository.get_by_email(lead.email)
        client_created = client is None
        if client is None:
            client = await self.client_repository.create(
                Client(name=lead.name, email=lead.email, phone=lead.phone)
            )

        viewing = await self.viewing_service.schedule(
            client_id=client.id,
            property_id=lead.property_id,
            scheduled_at=data.scheduled_at,
            notes=data.notes,
        )

        lead.status = LeadStatus.CONVERTED.value
        lead.converted_to_client_id = client.id
        lead = await self.repository.update(lead)

        logger.info(
            "Lead converted",
            extra={
                "request_id": get_request_id(),
                "lead_id": lead.id,
                "client_id": client.id,
                "client_created": client_created,
                "viewing_id": viewing.id,
            },
        )
        return lead, viewing
