"""스키마 단위 테스트"""

from app.core.schemas import (
    APIResponse,
    ErrorDetail,
    ErrorResponse,
    ListAPIResponse,
    PageMeta,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import summarize


class TestAPIResponse:
    """APIResponse 테스트"""

    def test_success_response_with_data(self):
        """데이터가 있는 성공 응답"""
        response = APIResponse(
            success=True,
            data={"id": 1, "title": "Loft"},
            message="조회 성공",
        )

        assert response.success is True
        assert response.message == "조회 성공"
        assert response.data == {"id": 1, "title": "Loft"}

    def test_default_message(self):
        """기본 메시지"""
        response = APIResponse(success=True)

        assert response.message == "요청이 성공적으로 처리되었습니다."
        assert response.data is None

    def test_create_response(self):
        """create_response 팩토리"""
        response = create_response(data=[1, 2], message="완료")

        assert response.success is True
        assert response.data == [1, 2]


class TestListAPIResponse:
    """ListAPIResponse 테스트"""

    def test_pagination_serialized_as_camel_case(self):
        """페이지 메타 정보는 camelCase로 직렬화"""
        meta = PageMeta(
            page=2,
            limit=5,
            total=12,
            total_pages=3,
            has_next=True,
            has_previous=True,
        )
        response = ListAPIResponse(data=[{"id": 1}], pagination=meta)

        dumped = response.model_dump(by_alias=True)

        assert dumped["pagination"] == {
            "page": 2,
            "limit": 5,
            "total": 12,
            "totalPages": 3,
            "hasNext": True,
            "hasPrevious": True,
        }

    def test_create_list_response_from_summary(self):
        """summarize 결과로 목록 응답 생성"""
        response = create_list_response(
            data=["a", "b"],
            pagination=summarize(page=1, limit=2, total=5),
        )

        assert response.data == ["a", "b"]
        assert response.pagination.total_pages == 3
        assert response.pagination.has_next is True
        assert response.pagination.has_previous is False

    def test_empty_list(self):
        """빈 목록"""
        response = create_list_response(
            data=[], pagination=summarize(page=1, limit=10, total=0)
        )

        assert response.data == []
        assert response.pagination.total == 0
        assert response.pagination.total_pages == 0


class TestErrorResponse:
    """ErrorResponse 테스트"""

    def test_error_response(self):
        """에러 응답 구조"""
        response = ErrorResponse(
            message="매물을 찾을 수 없습니다.",
            error=ErrorDetail(
                code="PROPERTY_NOT_FOUND",
                message="매물을 찾을 수 없습니다.",
                detail={"property_id": 123},
            ),
        )

        assert response.success is False
        assert response.error.code == "PROPERTY_NOT_FOUND"
        assert response.error.detail == {"property_id": 123}
