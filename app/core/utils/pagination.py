"""페이지네이션 유틸리티

클라이언트가 보낸 page/limit 값은 문자열, 누락, 숫자가 아닌 값 등 무엇이든
올 수 있습니다. 잘못된 값은 거부하지 않고 기본값으로 대체합니다.

- page: 숫자로 변환할 수 없거나 1 미만이면 기본 페이지(1)
- limit: 숫자로 변환할 수 없거나 1 미만이면 기본 크기(10), 이후 최대값으로 제한
- page가 너무 커서 오프셋이 bigint 범위를 넘으면 마지막 표현 가능한 페이지로 제한
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from fastapi import Query

from app.core.config import settings

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# PostgreSQL OFFSET (bigint) 상한
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PaginationParams:
    """검증된 페이지네이션 파라미터"""

    page: int
    limit: int

    @property
    def skip(self) -> int:
        """오프셋 계산"""
        return compute_skip(self.page, self.limit)


@dataclass(frozen=True)
class PaginationResult:
    """페이지네이션 메타 정보"""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool


def _coerce_positive(raw: Any) -> Optional[int]:
    """원시 입력을 1 이상의 정수로 변환 (실패 시 None)"""
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < 1:
        return None
    return int(value)


def parse_pagination(
    raw: Mapping[str, Any],
    defaults: Optional[Mapping[str, int]] = None,
    max_limit: int = MAX_LIMIT,
) -> PaginationParams:
    """원시 page/limit 입력을 검증된 파라미터로 변환

    page와 limit은 서로 독립적으로 검증합니다. page가 잘못되어도 올바른
    limit은 그대로 적용됩니다.

    Args:
        raw: ``page``, ``limit`` 키를 가진 원시 입력 (쿼리스트링 등)
        defaults: 기본값 (``{"page": 1, "limit": 10}``)
        max_limit: 페이지 크기 상한

    Returns:
        PaginationParams: page >= 1, 1 <= limit <= max_limit,
            skip <= MAX_OFFSET
    """
    defaults = defaults or {}
    default_page = defaults.get("page", DEFAULT_PAGE)
    default_limit = defaults.get("limit", DEFAULT_LIMIT)

    page = _coerce_positive(raw.get("page"))
    limit = _coerce_positive(raw.get("limit"))

    if page is None:
        page = default_page
    if limit is None:
        limit = default_limit

    limit = min(max_limit, max(1, limit))
    page = min(page, MAX_OFFSET // limit + 1)
    return PaginationParams(page=page, limit=limit)


def compute_skip(page: int, limit: int) -> int:
    """건너뛸 레코드 수 계산"""
    return (page - 1) * limit


def summarize(page: int, limit: int, total: int) -> PaginationResult:
    """전체 건수로부터 페이지 메타 정보 계산

    Note:
        total이 0이어도 page > 1이면 has_previous는 True입니다.
    """
    total_pages = math.ceil(total / limit) if total > 0 else 0
    return PaginationResult(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1,
    )


class PageParams:
    """페이지네이션 파라미터 의존성

    숫자가 아닌 값도 422로 거부하지 않기 위해 문자열로 받은 뒤
    ``parse_pagination`` 으로 보정합니다.

    Example::

        from app.core.utils.pagination import PageParams

        @router.get("", response_model=ListAPIResponse[PropertyResponse])
        async def list_properties(page_params: PageParams = Depends()):
            page = await service.search(filters, page_params.params)
            return create_list_response(
                data=[PropertyResponse.model_validate(p) for p in page.data],
                pagination=page.pagination,
            )
    """

    def __init__(
        self,
        page: Optional[str] = Query(None, description="페이지 번호"),
        limit: Optional[str] = Query(None, description="페이지 크기"),
    ):
        self.params = parse_pagination(
            {"page": page, "limit": limit},
            defaults={
                "page": DEFAULT_PAGE,
                "limit": settings.pagination_default_limit,
            },
            max_limit=settings.pagination_max_limit,
        )

    @property
    def page(self) -> int:
        return self.params.page

    @property
    def limit(self) -> int:
        return self.params.limit

    @property
    def skip(self) -> int:
        """오프셋 계산"""
        return self.params.skip
