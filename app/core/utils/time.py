"""시간 측정 유틸리티"""

import logging
import time
from contextlib import contextmanager
from typing import Generator, Optional


def calculate_elapsed_time_ms(start_time: float) -> float:
    """시작 시간으로부터 경과 시간을 밀리초로 계산

    Args:
        start_time: perf_counter() 시작 시간

    Returns:
        float: 경과 시간 (밀리초)
    """
    return (time.perf_counter() - start_time) * 1000


@contextmanager
def measure_time() -> Generator[dict[str, float], None, None]:
    """처리 시간을 측정하는 컨텍스트 매니저

    Usage:
        with measure_time() as timer:
            # 시간을 측정할 코드
            ...
        elapsed_ms = timer["elapsed_ms"]

    Yields:
        dict: elapsed_ms 키를 포함하는 딕셔너리
    """
    timer = {"elapsed_ms": 0.0}
    start = time.perf_counter()
    try:
        yield timer
    finally:
        timer["elapsed_ms"] = (time.perf_counter() - start) * 1000


class QueryTimer:
    """조회 작업 소요 시간 측정기

    생성 시점을 시작 시각으로 기록하고, 필요할 때 경과 시간을 반환하거나
    로그로 남깁니다. 측정 결과는 로그에만 쓰이며 호출 흐름에는 영향을
    주지 않습니다.

    Example::

        timer = QueryTimer(logger, slow_threshold_ms=100)
        page = await paginate(collection, filter_doc, params)
        timer.log("Property search query")
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        slow_threshold_ms: Optional[float] = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._slow_threshold_ms = slow_threshold_ms
        self._start = time.perf_counter()

    @property
    def start(self) -> float:
        """측정 시작 시각 (perf_counter 기준)"""
        return self._start

    def elapsed_ms(self) -> float:
        """현재까지 경과 시간 (밀리초)"""
        return calculate_elapsed_time_ms(self._start)

    def log(self, operation: str) -> float:
        """경과 시간을 로그로 남기고 반환

        임계값을 넘긴 느린 조회는 WARNING 레벨로 기록합니다.
        """
        duration = self.elapsed_ms()
        is_slow = (
            self._slow_threshold_ms is not None
            and duration > self._slow_threshold_ms
        )
        log_method = self._logger.warning if is_slow else self._logger.info
        log_method(
            f"⏱️  {operation} completed in {duration:.2f}ms",
            extra={"operation": operation, "duration_ms": duration},
        )
        return duration
