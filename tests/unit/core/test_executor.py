"""페이지 조회 실행기 테스트"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.core.query import DEFAULT_SORT, Page, paginate
from app.core.utils.pagination import PaginationParams


def make_collection(records=None, total=0):
    """find/count를 가진 목 컬렉션"""
    collection = AsyncMock()
    collection.find.return_value = records or []
    collection.count.return_value = total
    return collection


class TestPaginate:
    """paginate 테스트"""

    @pytest.mark.asyncio
    async def test_builds_page_envelope(self):
        """12건 중 2페이지 (limit 5)"""
        # Given
        records = [f"listing-{i}" for i in range(6, 11)]
        collection = make_collection(records=records, total=12)
        params = PaginationParams(page=2, limit=5)

        # When
        page = await paginate(collection, {"archived": False}, params)

        # Then
        assert isinstance(page, Page)
        assert page.data == records
        assert page.pagination.page == 2
        assert page.pagination.limit == 5
        assert page.pagination.total == 12
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next is True
        assert page.pagination.has_previous is True

    @pytest.mark.asyncio
    async def test_passes_skip_limit_and_default_sort(self):
        """skip/limit 계산값과 기본 정렬 전달"""
        collection = make_collection()
        filter_doc = {"type": "sale"}

        await paginate(collection, filter_doc, PaginationParams(page=3, limit=10))

        collection.find.assert_awaited_once_with(
            filter_doc,
            sort=DEFAULT_SORT,
            skip=20,
            limit=10,
            populate=(),
        )
        collection.count.assert_awaited_once_with(filter_doc)

    @pytest.mark.asyncio
    async def test_custom_sort_and_populate(self):
        """정렬과 연관 로딩 지정"""
        collection = make_collection()

        await paginate(
            collection,
            {},
            PaginationParams(page=1, limit=10),
            sort={"submitted_at": -1, "id": 1},
            populate=("property",),
        )

        _, kwargs = collection.find.call_args
        assert kwargs["sort"] == {"submitted_at": -1, "id": 1}
        assert kwargs["populate"] == ("property",)

    @pytest.mark.asyncio
    async def test_find_and_count_run_concurrently(self):
        """페이지 조회와 건수 조회는 동시에 실행"""
        # Given: 두 조회가 서로를 기다리도록 구성 (순차 실행이면 타임아웃)
        find_started = asyncio.Event()
        count_started = asyncio.Event()

        async def find(*args, **kwargs):
            find_started.set()
            await asyncio.wait_for(count_started.wait(), timeout=1)
            return ["a"]

        async def count(*args, **kwargs):
            count_started.set()
            await asyncio.wait_for(find_started.wait(), timeout=1)
            return 1

        collection = AsyncMock()
        collection.find.side_effect = find
        collection.count.side_effect = count

        # When
        page = await paginate(collection, {}, PaginationParams(page=1, limit=10))

        # Then
        assert page.data == ["a"]
        assert page.pagination.total == 1

    @pytest.mark.asyncio
    async def test_find_failure_propagates(self):
        """페이지 조회 실패는 그대로 전파"""
        collection = make_collection(total=3)
        collection.find.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            await paginate(collection, {}, PaginationParams(page=1, limit=10))

    @pytest.mark.asyncio
    async def test_count_failure_propagates(self):
        """건수 조회 실패도 그대로 전파"""
        collection = make_collection(records=["a"])
        collection.count.side_effect = RuntimeError("timeout")

        with pytest.raises(RuntimeError, match="timeout"):
            await paginate(collection, {}, PaginationParams(page=1, limit=10))

    @pytest.mark.asyncio
    async def test_empty_result(self):
        """결과 없음"""
        collection = make_collection(records=[], total=0)

        page = await paginate(collection, {}, PaginationParams(page=2, limit=10))

        assert page.data == []
        assert page.pagination.total_pages == 0
        assert page.pagination.has_next is False
        assert page.pagination.has_previous is True
