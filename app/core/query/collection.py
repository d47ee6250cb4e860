"""SQLAlchemy 기반 문서 컬렉션

``paginate`` 가 페이지 조회와 건수 조회를 동시에 실행할 수 있도록, 각
조회마다 세션 팩토리에서 독립된 세션을 열어 사용합니다. (하나의
AsyncSession 은 동시에 두 개의 쿼리를 실행할 수 없음)
"""

from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar, cast

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.core.query.sql import FilterCompiler, UnsupportedFilterOperatorError

ModelT = TypeVar("ModelT")


class SQLAlchemyCollection(Generic[ModelT]):
    """모델 테이블을 문서 컬렉션처럼 조회

    Args:
        model: SQLAlchemy 모델 클래스
        session_maker: 조회마다 새 세션을 여는 세션 팩토리
        compiler: 문서 필터 변환기
        relations: ``populate`` 이름 → 관계 속성 매핑
    """

    def __init__(
        self,
        model: type[ModelT],
        session_maker: async_sessionmaker[AsyncSession],
        compiler: FilterCompiler,
        relations: Optional[Mapping[str, Any]] = None,
    ):
        self.model = model
        self.session_maker = session_maker
        self.compiler = compiler
        self.relations = dict(relations or {})

    def select_page(
        self,
        filter_doc: Mapping[str, Any],
        *,
        sort: Mapping[str, int],
        skip: int,
        limit: int,
        populate: Sequence[str] = (),
    ) -> Select:
        """페이지 조회 쿼리 생성"""
        query = select(self.model).where(self.compiler.compile(filter_doc))

        for name in populate:
            try:
                relation = self.relations[name]
            except KeyError:
                raise UnsupportedFilterOperatorError(
                    f"Unknown relation to populate: {name}"
                ) from None
            query = query.options(selectinload(relation))

        return (
            query.order_by(*self.compiler.order_by(sort))
            .offset(skip)
            .limit(limit)
        )

    def select_count(self, filter_doc: Mapping[str, Any]) -> Select:
        """전체 건수 조회 쿼리 생성 (페이지네이션 미적용)"""
        return (
            select(func.count())
            .select_from(self.model)
            .where(self.compiler.compile(filter_doc))
        )

    async def find(
        self,
        filter_doc: Mapping[str, Any],
        *,
        sort: Mapping[str, int],
        skip: int,
        limit: int,
        populate: Sequence[str] = (),
    ) -> Sequence[ModelT]:
        """정렬/페이지네이션이 적용된 목록 조회"""
        query = self.select_page(
            filter_doc, sort=sort, skip=skip, limit=limit, populate=populate
        )
        async with self.session_maker() as session:
            result = await session.execute(query)
            return cast(Sequence[ModelT], result.scalars().all())

    async def count(self, filter_doc: Mapping[str, Any]) -> int:
        """필터 조건에 맞는 전체 건수"""
        async with self.session_maker() as session:
            result = await session.execute(self.select_count(filter_doc))
            return int(result.scalar_one())
