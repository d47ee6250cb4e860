"""유틸리티 모듈"""

from app.core.utils.datetime import UTC, ensure_utc, now_utc
from app.core.utils.pagination import (
    PageParams,
    PaginationParams,
    PaginationResult,
    compute_skip,
    parse_pagination,
    summarize,
)
from app.core.utils.time import (
    QueryTimer,
    calculate_elapsed_time_ms,
    measure_time,
)

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    "ensure_utc",
    # pagination
    "PageParams",
    "PaginationParams",
    "PaginationResult",
    "parse_pagination",
    "compute_skip",
    "summarize",
    # time measurement
    "calculate_elapsed_time_ms",
    "measure_time",
    "QueryTimer",
]
