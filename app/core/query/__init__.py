"""검색 쿼리 모듈

구조:
    - filters.py: 검색 조건(FilterCriterion)과 필터 빌더
    - sql.py: 문서 필터 → SQLAlchemy 조건식 변환
    - collection.py: 조회마다 독립 세션을 사용하는 SQLAlchemy 컬렉션
    - executor.py: 페이지 조회 + 전체 건수 동시 실행
"""

from app.core.query.collection import SQLAlchemyCollection
from app.core.query.executor import (
    DEFAULT_SORT,
    DocumentCollection,
    Page,
    paginate,
)
from app.core.query.filters import (
    Exact,
    FilterBuilder,
    FilterCriterion,
    GeoNear,
    QueryOptions,
    Range,
    SetContainsAll,
    SubstringOr,
    TextSearch,
    compile_filter,
)
from app.core.query.sql import FilterCompiler, UnsupportedFilterOperatorError

__all__ = [
    "DEFAULT_SORT",
    "DocumentCollection",
    "Page",
    "paginate",
    "Exact",
    "Range",
    "SubstringOr",
    "SetContainsAll",
    "TextSearch",
    "GeoNear",
    "FilterCriterion",
    "FilterBuilder",
    "QueryOptions",
    "compile_filter",
    "FilterCompiler",
    "UnsupportedFilterOperatorError",
    "SQLAlchemyCollection",
]
