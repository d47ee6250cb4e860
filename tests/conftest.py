"""테스트 설정"""

import os
from datetime import datetime, timedelta
from typing import Any, Generator, Optional

import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from app.core.database import Base, get_db, get_session_maker
from app.core.utils.datetime import now_utc
from app.domains.properties.models import Property, PropertyType
from app.main import app


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False
    except Exception:
        return False


DOCKER_AVAILABLE = _is_docker_available()


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL"""
    # asyncpg를 위한 URL 생성
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


# NOTE:
# pytest-asyncio는 기본적으로 테스트마다 독립적인 event loop를 생성
# session 스코프 async fixture는 이 구조와 충돌하여 ScopeMismatch 에러를 유발할 수 있음
# 이를 방지하기 위해 async fixture는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def session_maker(test_database_url: str):
    """테스트 DB 세션 팩토리 (테스트마다 깨끗한 스키마)"""
    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    yield maker

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_maker):
    """테스트 데이터 준비용 세션"""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_maker):
    """비동기 테스트 클라이언트 (테스트 DB 사용)

    목록 조회는 세션 팩토리에서 조회마다 새 세션을 열기 때문에, 요청 세션도
    실제 ``get_db`` 와 같이 요청 단위로 커밋해야 다음 요청에서 보입니다.
    """

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_maker] = lambda: session_maker

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()


@pytest.fixture
def property_factory():
    """매물 모델 생성 팩토리

    ``created_at`` 을 지정하지 않으면 호출 순서대로 1분씩 늦은 시각을
    사용하므로 나중에 만든 매물이 최신 등록순 정렬에서 먼저 옵니다.
    """
    base_time = now_utc() - timedelta(days=1)
    counter = {"n": 0}

    def _factory(
        created_at: Optional[datetime] = None, **overrides: Any
    ) -> Property:
        counter["n"] += 1
        values: dict[str, Any] = {
            "title": f"Listing {counter['n']}",
            "description": "Bright apartment close to the station",
            "price": 250000.0,
            "type": PropertyType.SALE.value,
            "location_city": "London",
            "location_address": f"{counter['n']} Baker Street",
            "amenities": ["parking"],
            "images": [],
            "bedrooms": 2,
            "bathrooms": 1,
            "archived": False,
            "created_at": created_at
            or base_time + timedelta(minutes=counter["n"]),
        }
        values.update(overrides)
        return Property(**values)

    return _factory
