"""Clients 도메인 서비스"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.logging import get_logger
from app.core.query import FilterBuilder, Page, paginate
from app.core.utils.pagination import PaginationParams
from app.core.utils.time import QueryTimer
from app.domains.clients.exceptions import ClientNotFoundException
from app.domains.clients.models import Client
from app.domains.clients.repository import ClientRepository, client_collection
from app.domains.clients.schemas import ClientListParams

logger = get_logger(__name__)

SEARCH_FIELDS = ("name", "email")


class ClientService:
    """고객 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        session_maker: async_sessionmaker[AsyncSession],
    ):
        self.repository = ClientRepository(session)
        self.collection = client_collection(session_maker)

    async def list_clients(
        self, filters: ClientListParams, params: PaginationParams
    ) -> Page[Client]:
        """고객 목록 조회 (방문 예약 포함)"""
        filter_doc = (
            FilterBuilder()
            .add_substring_or(SEARCH_FIELDS, filters.search)
            .build()
        )
        timer = QueryTimer(logger, settings.slow_query_threshold_ms)
        page = await paginate(
            self.collection, filter_doc, params, populate=["viewings"]
        )
        timer.log("Client list query")
        return page

    async def get_client(self, client_id: int) -> Client:
        """고객 상세 조회

        Raises:
            ClientNotFoundException: 고객을 찾을 수 없는 경우
        """
        client = await self.repository.get_by_id(client_id, with_viewings=True)
        if not client:
            raise ClientNotFoundException(client_id=client_id)
        return client
