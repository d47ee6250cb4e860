"""예외 단위 테스트"""

import json

import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from app.core.exceptions import (
    BadRequestException,
    ConflictException,
    ErrorCode,
    InternalServerException,
    NotFoundException,
    base_exception_handler,
    generic_exception_handler,
    http_exception_handler,
)
from app.domains.clients.exceptions import (
    ClientErrorCode,
    ClientNotFoundException,
)
from app.domains.leads.exceptions import (
    LeadErrorCode,
    LeadNotFoundException,
    ScheduledAtRequiredException,
)
from app.domains.properties.exceptions import (
    PropertyErrorCode,
    PropertyNotFoundException,
    ViewingRequestIncompleteException,
)
from app.domains.viewings.exceptions import (
    ViewingErrorCode,
    ViewingNotFoundException,
)


def make_request(path: str = "/api/v1/properties") -> Request:
    """핸들러 테스트용 최소 요청"""
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_not_found_exception(self):
        """NotFoundException 기본값"""
        exc = NotFoundException()

        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.NOT_FOUND
        assert exc.message == "리소스를 찾을 수 없습니다."

    def test_not_found_exception_custom(self):
        """NotFoundException 커스텀 메시지"""
        exc = NotFoundException(
            message="매물을 찾을 수 없습니다.",
            detail={"property_id": 123},
        )

        assert exc.message == "매물을 찾을 수 없습니다."
        assert exc.detail_info == {"property_id": 123}

    def test_bad_request_exception(self):
        """BadRequestException"""
        exc = BadRequestException(message="잘못된 입력입니다.")

        assert exc.status_code == 400
        assert exc.error_code == ErrorCode.BAD_REQUEST

    def test_conflict_exception(self):
        """ConflictException"""
        exc = ConflictException()

        assert exc.status_code == 409
        assert exc.error_code == ErrorCode.CONFLICT

    def test_internal_server_exception(self):
        """InternalServerException"""
        exc = InternalServerException()

        assert exc.status_code == 500
        assert exc.error_code == ErrorCode.INTERNAL_ERROR


class TestDomainExceptions:
    """도메인 예외 테스트"""

    def test_property_not_found_exception(self):
        """PropertyNotFoundException"""
        exc = PropertyNotFoundException(property_id=7)

        assert exc.status_code == 404
        assert exc.error_code == PropertyErrorCode.PROPERTY_NOT_FOUND
        assert exc.detail_info == {"property_id": 7}

    def test_viewing_request_incomplete_exception(self):
        """ViewingRequestIncompleteException"""
        exc = ViewingRequestIncompleteException(missing=["scheduledAt"])

        assert exc.status_code == 400
        assert exc.error_code == PropertyErrorCode.VIEWING_REQUEST_INCOMPLETE
        assert exc.detail_info == {"missing": ["scheduledAt"]}

    def test_client_not_found_exception(self):
        """ClientNotFoundException"""
        exc = ClientNotFoundException(client_id=3)

        assert exc.status_code == 404
        assert exc.error_code == ClientErrorCode.CLIENT_NOT_FOUND

    def test_viewing_not_found_exception(self):
        """ViewingNotFoundException"""
        exc = ViewingNotFoundException(viewing_id=5)

        assert exc.status_code == 404
        assert exc.error_code == ViewingErrorCode.VIEWING_NOT_FOUND

    def test_lead_exceptions(self):
        """LeadNotFoundException / ScheduledAtRequiredException"""
        not_found = LeadNotFoundException(lead_id=9)
        missing = ScheduledAtRequiredException(lead_id=9)

        assert not_found.status_code == 404
        assert not_found.error_code == LeadErrorCode.LEAD_NOT_FOUND
        assert missing.status_code == 400
        assert missing.error_code == LeadErrorCode.SCHEDULED_AT_REQUIRED

    def test_detail_omitted_without_id(self):
        """ID가 없으면 상세 정보 없음"""
        assert PropertyNotFoundException().detail_info == {}


class TestExceptionHandlers:
    """예외 핸들러 테스트"""

    @pytest.mark.asyncio
    async def test_base_exception_handler_envelope(self):
        """도메인 예외는 에러 봉투로 변환"""
        exc = PropertyNotFoundException(property_id=1)

        response = await base_exception_handler(make_request(), exc)
        body = json.loads(response.body)

        assert response.status_code == 404
        assert body["success"] is False
        assert body["error"]["code"] == "PROPERTY_NOT_FOUND"
        assert body["error"]["detail"] == {"property_id": 1}

    @pytest.mark.asyncio
    async def test_generic_exception_handler_hides_detail(self):
        """예상하지 못한 예외는 500으로 변환하고 상세 정보 숨김"""
        response = await generic_exception_handler(
            make_request(), RuntimeError("connection refused")
        )
        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["error"]["code"] == "INTERNAL_ERROR"
        assert "connection refused" not in response.body.decode()

    @pytest.mark.asyncio
    async def test_http_exception_handler_maps_status(self):
        """프레임워크 404는 NOT_FOUND 코드"""
        response = await http_exception_handler(
            make_request("/missing"), StarletteHTTPException(status_code=404)
        )
        body = json.loads(response.body)

        assert response.status_code == 404
        assert body["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_http_exception_handler_unknown_status(self):
        """매핑되지 않은 상태 코드는 INTERNAL_ERROR"""
        response = await http_exception_handler(
            make_request(), StarletteHTTPException(status_code=503)
        )

        assert json.loads(response.body)["error"]["code"] == "INTERNAL_ERROR"
