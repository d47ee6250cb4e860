"""API 통합 테스트 - 헬스 체크, 루트, 미들웨어, 에러 응답"""

import pytest


class TestHealthCheck:
    """헬스 체크 API 테스트"""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        """헬스 체크 응답 구조"""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["status"] == "healthy"
        assert data["data"]["app_name"] == "Estate Listings API"

    @pytest.mark.asyncio
    async def test_health_check_excluded_from_request_logging(self, client):
        """헬스 체크는 요청 ID 헤더 없음"""
        response = await client.get("/health")

        assert "x-request-id" not in response.headers


class TestAPIRoot:
    """API 루트 테스트"""

    @pytest.mark.asyncio
    async def test_api_v1_root(self, client):
        """API v1 루트 응답"""
        response = await client.get("/api/v1/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Estate Listings API v1"
        assert data["data"]["version"] == "1.0.0"


class TestMiddleware:
    """미들웨어 테스트"""

    @pytest.mark.asyncio
    async def test_request_id_and_process_time_headers(self, client):
        """응답에 요청 ID와 처리 시간 포함"""
        response = await client.get("/api/v1/properties")

        assert len(response.headers["x-request-id"]) == 36
        assert response.headers["x-process-time"].endswith("ms")

    @pytest.mark.asyncio
    async def test_custom_request_id_forwarded(self, client):
        """클라이언트가 보낸 X-Request-ID 유지"""
        response = await client.get(
            "/api/v1/",
            headers={"X-Request-ID": "listing-search-42"},
        )

        assert response.headers["x-request-id"] == "listing-search-42"


class TestErrorResponses:
    """에러 응답 구조 테스트"""

    @pytest.mark.asyncio
    async def test_not_found_envelope(self, client):
        """도메인 404 응답 구조"""
        response = await client.get("/api/v1/properties/999999")

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "PROPERTY_NOT_FOUND"
        assert data["error"]["detail"] == {"property_id": 999999}

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        """없는 경로는 404"""
        response = await client.get("/api/v1/unknown")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_validation_error_envelope(self, client):
        """요청 본문 검증 실패는 422 에러 봉투"""
        response = await client.post("/api/v1/properties", json={})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        fields = {item["field"] for item in error["detail"]["errors"]}
        assert {"title", "price", "type", "location"} <= fields
