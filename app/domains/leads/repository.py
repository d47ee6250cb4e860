"""Leads 도메인 리포지토리"""

from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.query import FilterCompiler, SQLAlchemyCollection
from app.domains.leads.models import Lead

# 최신 접수순 + 동일 시각은 ID 오름차순
LEAD_SORT = {"submitted_at": -1, "id": 1}

lead_compiler = FilterCompiler(
    {
        "id": Lead.id,
        "email": Lead.email,
        "status": Lead.status,
        "property_id": Lead.property_id,
        "submitted_at": Lead.submitted_at,
    }
)


def lead_collection(
    session_maker: async_sessionmaker[AsyncSession],
) -> SQLAlchemyCollection[Lead]:
    """리드 목록 조회용 컬렉션"""
    return SQLAlchemyCollection(
        Lead,
        session_maker,
        lead_compiler,
        relations={"property": Lead.property},
    )


class LeadRepository:
    """리드 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, lead_id: int) -> Optional[Lead]:
        """ID로 리드 조회"""
        query = select(Lead).where(Lead.id == lead_id)
        result = await self.session.execute(query)
        return cast(Optional[Lead], result.scalar_one_or_none())

    async def create(self, lead: Lead) -> Lead:
        """리드 생성"""
        self.session.add(lead)
        await self.session.flush()
        await self.session.refresh(lead)
        return lead

    async def update(self, lead: Lead) -> Lead:
        """리드 수정"""
        await self.session.flush()
        await self.session.refresh(lead)
        return lead
