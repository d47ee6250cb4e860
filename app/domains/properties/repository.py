"""Properties 도메인 리포지토리

매물 CRUD와 검색용 컬렉션을 제공하는 데이터 접근 계층입니다.
"""

from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.query import FilterCompiler, SQLAlchemyCollection
from app.core.query.filters import GEO_FIELD
from app.domains.properties.models import Property, search_vector

# 문서 필터 필드 경로 → 컬럼
PROPERTY_FIELDS = {
    "id": Property.id,
    "title": Property.title,
    "type": Property.type,
    "price": Property.price,
    "location.city": Property.location_city,
    "location.address": Property.location_address,
    "location.state": Property.location_state,
    "location.country": Property.location_country,
    "bedrooms": Property.bedrooms,
    "bathrooms": Property.bathrooms,
    "area": Property.area,
    "amenities": Property.amenities,
    "archived": Property.archived,
    "created_at": Property.created_at,
}

property_compiler = FilterCompiler(
    PROPERTY_FIELDS,
    text_vector=search_vector,
    geo_fields={GEO_FIELD: (Property.location_lat, Property.location_lng)},
)


def property_collection(
    session_maker: async_sessionmaker[AsyncSession],
) -> SQLAlchemyCollection[Property]:
    """매물 검색용 컬렉션"""
    return SQLAlchemyCollection(Property, session_maker, property_compiler)


class PropertyRepository:
    """매물 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, property_id: int) -> Optional[Property]:
        """ID로 매물 조회

        Args:
            property_id: 매물 ID

        Returns:
            매물 객체 또는 None
        """
        query = select(Property).where(Property.id == property_id)
        result = await self.session.execute(query)
        return cast(Optional[Property], result.scalar_one_or_none())

    async def create(self, property_: Property) -> Property:
        """매물 생성"""
        self.session.add(property_)
        await self.session.flush()
        await self.session.refresh(property_)
        return property_

    async def update(self, property_: Property) -> Property:
        """매물 업데이트"""
        await self.session.flush()
        await self.session.refresh(property_)
        return property_

    async def delete(self, property_: Property) -> None:
        """매물 삭제"""
        await self.session.delete(property_)
        await self.session.flush()
