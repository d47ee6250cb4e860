"""마이그레이션 유틸리티 테스트"""

from unittest.mock import patch

from app.core.migration import (
    PROJECT_ROOT,
    check_migration_status,
    get_alembic_config,
    get_head_revision,
    get_sync_database_url,
)


def test_sync_url_uses_psycopg2():
    """asyncpg URL은 psycopg2 URL로 변환"""
    url = get_sync_database_url("postgresql+asyncpg://u:p@db:5432/estate")

    assert url == "postgresql+psycopg2://u:p@db:5432/estate"


def test_alembic_config_points_to_project_migrations():
    """Alembic 설정은 프로젝트 migrations 디렉터리와 지정 URL 사용"""
    config = get_alembic_config("postgresql+asyncpg://u:p@db:5432/estate")

    assert config.get_main_option("script_location") == str(
        PROJECT_ROOT / "migrations"
    )
    assert config.get_main_option("sqlalchemy.url") == (
        "postgresql+psycopg2://u:p@db:5432/estate"
    )


def test_head_revision_is_latest_schema():
    """최신 리비전은 고객/방문 예약/리드 테이블 생성"""
    assert get_head_revision() == "8f41d3c6e2a7"


def test_migration_status_without_database():
    """DB에 연결할 수 없으면 현재 버전 None"""
    with patch(
        "app.core.migration.get_current_revision", return_value=None
    ):
        status = check_migration_status()

    assert status["current"] is None
    assert status["head"] == "8f41d3c6e2a7"
    assert status["is_up_to_date"] is False
