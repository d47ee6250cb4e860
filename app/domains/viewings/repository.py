"""Viewings 도메인 리포지토리"""

from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.core.query import FilterCompiler, SQLAlchemyCollection
from app.domains.viewings.models import Viewing

viewing_compiler = FilterCompiler(
    {
        "id": Viewing.id,
        "client_id": Viewing.client_id,
        "property_id": Viewing.property_id,
        "status": Viewing.status,
        "scheduled_at": Viewing.scheduled_at,
        "created_at": Viewing.created_at,
    }
)


def viewing_collection(
    session_maker: async_sessionmaker[AsyncSession],
) -> SQLAlchemyCollection[Viewing]:
    """방문 예약 목록 조회용 컬렉션"""
    return SQLAlchemyCollection(
        Viewing,
        session_maker,
        viewing_compiler,
        relations={"client": Viewing.client, "property": Viewing.property},
    )


class ViewingRepository:
    """방문 예약 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self, viewing_id: int, with_relations: bool = False
    ) -> Optional[Viewing]:
        """ID로 방문 예약 조회

        Args:
            viewing_id: 방문 예약 ID
            with_relations: 고객/매물 함께 로딩 여부

        Returns:
            방문 예약 객체 또는 None
        """
        query = select(Viewing).where(Viewing.id == viewing_id)
        if with_relations:
            query = query.options(
                selectinload(Viewing.client),
                selectinload(Viewing.property),
            ).execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return cast(Optional[Viewing], result.scalar_one_or_none())

    async def create(self, viewing: Viewing) -> Viewing:
        """방문 예약 생성 후 고객/매물을 함께 로딩해 반환"""
        self.session.add(viewing)
        await self.session.flush()
        loaded = await self.get_by_id(viewing.id, with_relations=True)
        return cast(Viewing, loaded)

    async def update(self, viewing: Viewing) -> Viewing:
        """방문 예약 수정"""
        await self.session.flush()
        await self.session.refresh(viewing)
        return viewing
