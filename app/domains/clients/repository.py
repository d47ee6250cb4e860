"""Clients 도메인 리포지토리"""

from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.core.query import FilterCompiler, SQLAlchemyCollection
from app.domains.clients.models import Client

client_compiler = FilterCompiler(
    {
        "id": Client.id,
        "name": Client.name,
        "email": Client.email,
        "created_at": Client.created_at,
    }
)


def client_collection(
    session_maker: async_sessionmaker[AsyncSession],
) -> SQLAlchemyCollection[Client]:
    """고객 목록 조회용 컬렉션"""
    return SQLAlchemyCollection(
        Client,
        session_maker,
        client_compiler,
        relations={"viewings": Client.viewings},
    )


class ClientRepository:
    """고객 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self, client_id: int, with_viewings: bool = False
    ) -> Optional[Client]:
        """ID로 고객 조회

        Args:
            client_id: 고객 ID
            with_viewings: 방문 예약 함께 로딩 여부

        Returns:
            고객 객체 또는 None
        """
        query = select(Client).where(Client.id == client_id)
        if with_viewings:
            query = query.options(
                selectinload(Client.viewings)
            ).execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return cast(Optional[Client], result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> Optional[Client]:
        """이메일로 고객 조회 (가장 먼저 등록된 고객)"""
        query = (
            select(Client)
            .where(Client.email == email)
            .order_by(Client.id)
            .limit(1)
        )
        result = await self.session.execute(query)
        return cast(Optional[Client], result.scalar_one_or_none())

    async def create(self, client: Client) -> Client:
        """고객 생성"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client
