"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션 상태를 확인하고, 설정에 따라 최신
버전으로 업데이트합니다. Alembic은 동기 드라이버(psycopg2)로 접속합니다.
"""

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_sync_database_url(database_url: Optional[str] = None) -> str:
    """asyncpg URL을 psycopg2 URL로 변환"""
    url = database_url or settings.database_url
    return url.replace("postgresql+asyncpg", "postgresql+psycopg2")


def get_alembic_config(database_url: Optional[str] = None) -> Config:
    """Alembic 설정 객체 반환"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option(
        "sqlalchemy.url", get_sync_database_url(database_url)
    )
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 조회"""
    try:
        engine = create_engine(get_sync_database_url())
        try:
            with engine.connect() as conn:
                context = MigrationContext.configure(conn)
                rev = context.get_current_revision()
                return str(rev) if rev else None
        finally:
            engine.dispose()
    except Exception as e:
        logger.warning(f"현재 마이그레이션 버전 조회 실패: {e}")
        return None


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> dict:
    """마이그레이션 상태 확인

    Returns:
        dict: current (현재 버전), head (최신 버전), is_up_to_date (최신 여부)
    """
    current = get_current_revision()
    head = get_head_revision()

    return {
        "current": current,
        "head": head,
        "is_up_to_date": current == head,
    }


def run_migrations(database_url: Optional[str] = None) -> bool:
    """최신 버전까지 마이그레이션 실행

    Args:
        database_url: 대상 DB URL (기본: 설정값, 테스트 컨테이너 등에서 지정)

    Returns:
        bool: 성공 여부
    """
    try:
        command.upgrade(get_alembic_config(database_url), "head")
        logger.info("✅ 마이그레이션 완료 (revision: head)")
        return True
    except Exception as e:
        logger.error(f"❌ 마이그레이션 실행 실패: {e}")
        return False


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 자동 마이그레이션, False면 상태만 확인
    """
    try:
        status = check_migration_status()

        if status["is_up_to_date"]:
            logger.info(
                f"✅ 마이그레이션 상태: 최신 (revision: {status['current']})"
            )
            return

        if status["current"] is None:
            logger.warning(
                "⚠️ 데이터베이스에 마이그레이션 기록이 없습니다. "
                "초기 마이그레이션이 필요합니다."
            )
        else:
            logger.warning(
                f"⚠️ 마이그레이션이 최신 상태가 아닙니다. "
                f"(현재: {status['current']}, 최신: {status['head']})"
            )

        if auto_migrate:
            logger.info(
                f"🔄 마이그레이션 업데이트 중... "
                f"({status['current']} → {status['head']})"
            )
            run_migrations()

    except Exception as e:
        logger.error(f"❌ 마이그레이션 상태 확인 실패: {e}")
        # 개발 환경에서는 DB 없이도 서버를 시작
        if not settings.is_production:
            logger.warning("⚠️ 개발 환경이므로 서버를 계속 시작합니다.")
        else:
            raise RuntimeError("프로덕션 환경에서 마이그레이션 확인 실패") from e
