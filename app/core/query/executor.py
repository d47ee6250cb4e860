"""페이지 조회 실행기

하나의 문서 필터에 대해 "현재 페이지 조회"와 "전체 건수 조회"를 동시에
실행하고, 두 작업이 모두 끝나면 ``Page`` 응답 봉투를 조립합니다.

두 조회는 트랜잭션으로 묶이지 않습니다. 두 조회 사이에 쓰기가 끼어들면
``total`` 이 실제 페이지 데이터 합계와 약간 어긋날 수 있으며, 이는 오류로
취급하지 않습니다. 어느 한쪽이라도 실패하면 예외가 그대로 전파됩니다.
"""

import asyncio
from dataclasses import dataclass
from typing import (
    Any,
    Generic,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from app.core.logging import get_logger
from app.core.utils.pagination import (
    PaginationParams,
    PaginationResult,
    summarize,
)

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")
RecordT_co = TypeVar("RecordT_co", covariant=True)

# 최신 등록순 + 동일 시각은 ID 오름차순으로 고정 (페이지 간 중복/누락 방지)
DEFAULT_SORT: Mapping[str, int] = {"created_at": -1, "id": 1}


class DocumentCollection(Protocol[RecordT_co]):
    """페이지 조회 대상 저장소 인터페이스"""

    async def find(
        self,
        filter_doc: Mapping[str, Any],
        *,
        sort: Mapping[str, int],
        skip: int,
        limit: int,
        populate: Sequence[str] = (),
    ) -> Sequence[RecordT_co]: ...

    async def count(self, filter_doc: Mapping[str, Any]) -> int: ...


@dataclass(frozen=True)
class Page(Generic[RecordT]):
    """페이지 응답 봉투 (data + pagination)"""

    data: list[RecordT]
    pagination: PaginationResult


async def paginate(
    collection: DocumentCollection[RecordT],
    filter_doc: Mapping[str, Any],
    params: PaginationParams,
    *,
    sort: Optional[Mapping[str, int]] = None,
    populate: Sequence[str] = (),
) -> Page[RecordT]:
    """필터 조건에 맞는 페이지와 전체 건수를 동시에 조회

    Args:
        collection: 조회 대상 저장소
        filter_doc: 문서 필터
        params: 검증된 페이지네이션 파라미터
        sort: 정렬 조건 (기본: 최신 등록순)
        populate: 함께 로딩할 연관 엔티티 이름

    Returns:
        Page: 현재 페이지 데이터와 페이지 메타 정보

    Raises:
        저장소 조회 중 발생한 예외를 변환 없이 그대로 전파합니다.
    """
    records, total = await asyncio.gather(
        collection.find(
            filter_doc,
            sort=sort or DEFAULT_SORT,
            skip=params.skip,
            limit=params.limit,
            populate=populate,
        ),
        collection.count(filter_doc),
    )

    logger.debug(
        "Paginated query executed",
        extra={
            "page": params.page,
            "limit": params.limit,
            "returned": len(records),
            "total": total,
        },
    )

    return Page(
        data=list(records),
        pagination=summarize(params.page, params.limit, total),
    )
