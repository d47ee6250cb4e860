"""create_clients_viewings_leads_tables

Revision ID: 8f41d3c6e2a7
Revises: 5c2e9a71b0d4
Create Date: 2026-03-02 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8f41d3c6e2a7"
down_revision: Union[str, None] = "5c2e9a71b0d4"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: clients, viewings, leads 테이블 생성"""
    op.create_table(
        "clients",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="고객 ID",
        ),
        sa.Column("name", sa.String(length=200), nullable=False, comment="이름"),
        sa.Column(
            "email", sa.String(length=320), nullable=False, comment="이메일"
        ),
        sa.Column(
            "phone", sa.String(length=50), nullable=True, comment="전화번호"
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="등록 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_email", "clients", ["email"])

    op.create_table(
        "viewings",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="방문 예약 ID",
        ),
        sa.Column("client_id", sa.Integer(), nullable=False, comment="고객 ID"),
        sa.Column(
            "property_id", sa.Integer(), nullable=False, comment="매물 ID"
        ),
        sa.Column(
            "scheduled_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="방문 일시",
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            server_default="scheduled",
            nullable=False,
            comment="상태 (scheduled/completed/no-show)",
        ),
        sa.Column("notes", sa.Text(), nullable=True, comment="메모"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="등록 일시",
        ),
        sa.ForeignKeyConstraint(
            ["client_id"], ["clients.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["property_id"], ["properties.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_viewings_client_id", "viewings", ["client_id"])
    op.create_index("ix_viewings_property_id", "viewings", ["property_id"])

    op.create_table(
        "leads",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="리드 ID",
        ),
        sa.Column("name", sa.String(length=200), nullable=False, comment="이름"),
        sa.Column(
            "email", sa.String(length=320), nullable=False, comment="이메일"
        ),
        sa.Column(
            "phone", sa.String(length=50), nullable=True, comment="전화번호"
        ),
        sa.Column("message", sa.Text(), nullable=True, comment="문의 내용"),
        sa.Column(
            "property_id", sa.Integer(), nullable=False, comment="문의 매물 ID"
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            server_default="new",
            nullable=False,
            comment="상태 (new/contacted/converted/archived)",
        ),
        sa.Column(
            "converted_to_client_id",
            sa.Integer(),
            nullable=True,
            comment="전환된 고객 ID",
        ),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="접수 일시",
        ),
        sa.ForeignKeyConstraint(
            ["property_id"], ["properties.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["converted_to_client_id"], ["clients.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_leads_property_id", "leads", ["property_id"])
    op.create_index("ix_leads_status", "leads", ["status"])


def downgrade() -> None:
    """다운그레이드 마이그레이션: clients, viewings, leads 테이블 삭제"""
    op.drop_index("ix_leads_status", table_name="leads")
    op.drop_index("ix_leads_property_id", table_name="leads")
    op.drop_table("leads")
    op.drop_index("ix_viewings_property_id", table_name="viewings")
    op.drop_index("ix_viewings_client_id", table_name="viewings")
    op.drop_table("viewings")
    op.drop_index("ix_clients_email", table_name="clients")
    op.drop_table("clients")
