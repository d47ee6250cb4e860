"""Leads / Clients / Viewings API 통합 테스트"""

import pytest
import pytest_asyncio

LEADS = "/api/v1/leads"
CLIENTS = "/api/v1/clients"
VIEWINGS = "/api/v1/viewings"
SCHEDULED_AT = "2026-06-01T11:00:00+00:00"


@pytest_asyncio.fixture
async def listing(db_session, property_factory):
    """문의 대상 매물"""
    property_ = property_factory(title="Riverside loft")
    db_session.add(property_)
    await db_session.commit()
    return property_


async def submit_lead(client, property_id, email="ada@example.com"):
    response = await client.post(
        LEADS,
        json={
            "name": "Ada Lovelace",
            "email": email,
            "phone": "+44 20 0000 0000",
            "message": "Is it still available?",
            "propertyId": property_id,
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


class TestLeadSubmission:
    """리드 접수 테스트"""

    @pytest.mark.asyncio
    async def test_submit_and_list(self, client, listing):
        """접수된 리드는 new 상태로 목록에 매물과 함께 표시"""
        lead = await submit_lead(client, listing.id)

        response = await client.get(LEADS)

        assert lead["status"] == "new"
        body = response.json()
        assert body["pagination"]["total"] == 1
        assert body["data"][0]["property"]["title"] == "Riverside loft"

    @pytest.mark.asyncio
    async def test_submit_unknown_property(self, client):
        """없는 매물 문의는 404"""
        response = await client.post(
            LEADS,
            json={"name": "Ada", "email": "ada@example.com", "propertyId": 42},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_submit_missing_email(self, client, listing):
        """필수 필드 누락은 422"""
        response = await client.post(
            LEADS, json={"name": "Ada", "propertyId": listing.id}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_filter_by_status(self, client, listing):
        """상태 필터"""
        await submit_lead(client, listing.id)

        new = await client.get(LEADS, params={"status": "new"})
        converted = await client.get(LEADS, params={"status": "converted"})

        assert new.json()["pagination"]["total"] == 1
        assert converted.json()["pagination"]["total"] == 0


class TestLeadConversion:
    """리드 전환 테스트"""

    @pytest.mark.asyncio
    async def test_convert_creates_client_and_viewing(self, client, listing):
        """전환 시 고객과 방문 예약 생성"""
        # Given
        lead = await submit_lead(client, listing.id)

        # When
        response = await client.post(
            f"{LEADS}/{lead['id']}/convert",
            json={"scheduledAt": SCHEDULED_AT, "notes": "Bring keys"},
        )

        # Then
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["lead"]["status"] == "converted"
        client_id = data["lead"]["convertedToClientId"]
        assert data["viewing"]["client"]["id"] == client_id
        assert data["viewing"]["client"]["email"] == "ada@example.com"
        assert data["viewing"]["property"]["id"] == listing.id
        assert data["viewing"]["status"] == "scheduled"

        detail = await client.get(f"{CLIENTS}/{client_id}")
        assert detail.status_code == 200
        assert len(detail.json()["data"]["viewings"]) == 1

    @pytest.mark.asyncio
    async def test_convert_reuses_client_with_same_email(
        self, client, listing
    ):
        """같은 이메일의 리드는 기존 고객으로 전환"""
        first = await submit_lead(client, listing.id)
        second = await submit_lead(client, listing.id)

        await client.post(
            f"{LEADS}/{first['id']}/convert", json={"scheduledAt": SCHEDULED_AT}
        )
        await client.post(
            f"{LEADS}/{second['id']}/convert",
            json={"scheduledAt": SCHEDULED_AT},
        )

        clients = await client.get(CLIENTS)
        body = clients.json()
        assert body["pagination"]["total"] == 1
        assert len(body["data"][0]["viewings"]) == 2

    @pytest.mark.asyncio
    async def test_convert_requires_scheduled_at(self, client, listing):
        """방문 일시가 없으면 400, 리드 상태 유지"""
        lead = await submit_lead(client, listing.id)

        response = await client.post(f"{LEADS}/{lead['id']}/convert", json={})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "SCHEDULED_AT_REQUIRED"
        leads = await client.get(LEADS)
        assert leads.json()["data"][0]["status"] == "new"

    @pytest.mark.asyncio
    async def test_convert_unknown_lead(self, client):
        """없는 리드는 404"""
        response = await client.post(
            f"{LEADS}/999/convert", json={"scheduledAt": SCHEDULED_AT}
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "LEAD_NOT_FOUND"


class TestClientsAndViewings:
    """고객/방문 예약 조회 테스트"""

    @pytest.mark.asyncio
    async def test_client_search(self, client, listing):
        """이름/이메일 검색"""
        for email in ("ada@example.com", "grace@navy.mil"):
            lead = await submit_lead(client, listing.id, email=email)
            await client.post(
                f"{LEADS}/{lead['id']}/convert",
                json={"scheduledAt": SCHEDULED_AT},
            )

        response = await client.get(CLIENTS, params={"search": "navy"})

        emails = [item["email"] for item in response.json()["data"]]
        assert emails == ["grace@navy.mil"]

    @pytest.mark.asyncio
    async def test_client_not_found(self, client):
        """없는 고객은 404"""
        response = await client.get(f"{CLIENTS}/999")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_viewing_status(self, client, listing):
        """방문 예약 상태 변경과 상태 필터"""
        # Given
        lead = await submit_lead(client, listing.id)
        converted = await client.post(
            f"{LEADS}/{lead['id']}/convert", json={"scheduledAt": SCHEDULED_AT}
        )
        viewing_id = converted.json()["data"]["viewing"]["id"]

        # When
        response = await client.put(
            f"{VIEWINGS}/{viewing_id}", json={"status": "completed"}
        )

        # Then
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "completed"
        completed = await client.get(VIEWINGS, params={"status": "completed"})
        scheduled = await client.get(VIEWINGS, params={"status": "scheduled"})
        assert completed.json()["pagination"]["total"] == 1
        assert scheduled.json()["pagination"]["total"] == 0

    @pytest.mark.asyncio
    async def test_create_viewing_directly(self, client, listing):
        """방문 예약 직접 생성과 고객 필터"""
        lead = await submit_lead(client, listing.id)
        converted = await client.post(
            f"{LEADS}/{lead['id']}/convert", json={"scheduledAt": SCHEDULED_AT}
        )
        client_id = converted.json()["data"]["lead"]["convertedToClientId"]

        created = await client.post(
            VIEWINGS,
            json={
                "clientId": client_id,
                "propertyId": listing.id,
                "scheduledAt": "2026-06-02T09:00:00+00:00",
            },
        )
        listed = await client.get(VIEWINGS, params={"clientId": client_id})

        assert created.status_code == 201
        assert listed.json()["pagination"]["total"] == 2

    @pytest.mark.asyncio
    async def test_update_unknown_viewing(self, client):
        """없는 방문 예약은 404"""
        response = await client.put(f"{VIEWINGS}/999", json={"notes": "x"})

        assert response.status_code == 404
