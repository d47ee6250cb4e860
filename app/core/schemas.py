"""공통 API 응답 스키마

이 모듈은 API 응답의 일관된 구조를 정의합니다. JSON 필드명은 camelCase로
직렬화됩니다 (``total_pages`` → ``totalPages``).

Usage::

    # 단일 데이터 응답
    from app.core.schemas import APIResponse, create_response
    return create_response(data=PropertyResponse.model_validate(p))

    # 목록 데이터 응답 (페이지네이션)
    from app.core.schemas import ListAPIResponse, create_list_response
    return create_list_response(data=items, pagination=page.pagination)

Note:
    Generic 타입의 classmethod는 Pydantic에서 제한이 있으므로,
    팩토리 함수(create_response, create_list_response)를 사용하거나
    직접 생성자를 호출하세요.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.utils.pagination import PaginationResult

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """기본 스키마 (ORM 모델 변환 + camelCase 직렬화)"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        @router.get("/{id}", response_model=APIResponse[PropertyResponse])
        async def get_property(id: int):
            property_ = await service.get_property(id)
            return APIResponse(
                success=True,
                data=PropertyResponse.model_validate(property_),
                message="매물을 조회했습니다.",
            )
    """

    success: bool = True
    message: str = "요청이 성공적으로 처리되었습니다."
    data: Optional[DataT] = None


class PageMeta(BaseSchema):
    """페이지네이션 메타 정보"""

    page: int = Field(..., description="현재 페이지")
    limit: int = Field(..., description="페이지 크기")
    total: int = Field(..., description="전체 아이템 수")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next: bool = Field(..., description="다음 페이지 존재 여부")
    has_previous: bool = Field(..., description="이전 페이지 존재 여부")


class ListAPIResponse(BaseSchema, Generic[DataT]):
    """목록 데이터 API 응답 (페이지네이션 포함)

    Example::

        {
            "data": [...],
            "pagination": {
                "page": 2, "limit": 5, "total": 12,
                "totalPages": 3, "hasNext": true, "hasPrevious": true
            }
        }
    """

    data: list[DataT] = Field(default_factory=list)
    pagination: PageMeta


def create_response(
    data: Optional[DataT] = None,
    message: str = "요청이 성공적으로 처리되었습니다.",
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수

    Args:
        data: 응답 데이터
        message: 응답 메시지
        success: 성공 여부

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=success, message=message, data=data)


def create_list_response(
    data: list[DataT],
    pagination: PaginationResult,
) -> ListAPIResponse[DataT]:
    """목록 API 응답 생성 팩토리 함수

    Args:
        data: 현재 페이지 데이터
        pagination: ``summarize`` 로 계산된 페이지 메타 정보

    Returns:
        ListAPIResponse 인스턴스
    """
    return ListAPIResponse(
        data=data,
        pagination=PageMeta.model_validate(pagination),
    )


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "매물을 찾을 수 없습니다.",
            "error": {
                "code": "PROPERTY_NOT_FOUND",
                "message": "매물을 찾을 수 없습니다.",
                "detail": {"property_id": 123}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail
