"""create_properties_table

Revision ID: 5c2e9a71b0d4
Revises:
Create Date: 2026-03-01 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "5c2e9a71b0d4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# app.domains.properties.models.search_vector 와 같은 식이어야 인덱스가 사용됨
SEARCH_VECTOR_SQL = " || ".join(
    f"setweight(to_tsvector('simple'::regconfig, "
    f"coalesce({column}, '')), '{weight}')"
    for column, weight in (
        ("title", "A"),
        ("location_city", "B"),
        ("location_address", "C"),
        ("description", "D"),
    )
)


def upgrade() -> None:
    """업그레이드 마이그레이션: properties 테이블 및 검색 인덱스 생성"""
    op.create_table(
        "properties",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="매물 ID",
        ),
        sa.Column(
            "title", sa.String(length=300), nullable=False, comment="매물 제목"
        ),
        sa.Column(
            "description", sa.Text(), nullable=True, comment="매물 설명"
        ),
        sa.Column("price", sa.Float(), nullable=False, comment="가격"),
        sa.Column(
            "type",
            sa.String(length=10),
            nullable=False,
            comment="거래 유형 (sale/rent)",
        ),
        sa.Column(
            "location_address",
            sa.String(length=500),
            nullable=True,
            comment="주소",
        ),
        sa.Column(
            "location_city",
            sa.String(length=100),
            nullable=False,
            comment="도시",
        ),
        sa.Column(
            "location_state",
            sa.String(length=100),
            nullable=True,
            comment="주/도",
        ),
        sa.Column(
            "location_country",
            sa.String(length=100),
            nullable=True,
            comment="국가",
        ),
        sa.Column(
            "location_lng",
            sa.Float(),
            nullable=True,
            comment="경도 (-180 ~ 180)",
        ),
        sa.Column(
            "location_lat",
            sa.Float(),
            nullable=True,
            comment="위도 (-90 ~ 90)",
        ),
        sa.Column(
            "amenities",
            postgresql.ARRAY(sa.String()),
            server_default="{}",
            nullable=False,
            comment="편의시설 목록",
        ),
        sa.Column(
            "images",
            postgresql.ARRAY(sa.String()),
            server_default="{}",
            nullable=False,
            comment="이미지 URL 목록",
        ),
        sa.Column("bedrooms", sa.Integer(), nullable=True, comment="침실 수"),
        sa.Column("bathrooms", sa.Integer(), nullable=True, comment="욕실 수"),
        sa.Column("area", sa.Float(), nullable=True, comment="면적"),
        sa.Column(
            "archived",
            sa.Boolean(),
            server_default="false",
            nullable=False,
            comment="보관 여부",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="등록 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "location_lng IS NULL OR location_lng BETWEEN -180 AND 180",
            name="ck_properties_location_lng",
        ),
        sa.CheckConstraint(
            "location_lat IS NULL OR location_lat BETWEEN -90 AND 90",
            name="ck_properties_location_lat",
        ),
    )

    # 단일 필드 인덱스
    op.create_index("ix_properties_type", "properties", ["type"])
    op.create_index("ix_properties_price", "properties", ["price"])
    op.create_index("ix_properties_bedrooms", "properties", ["bedrooms"])
    op.create_index("ix_properties_bathrooms", "properties", ["bathrooms"])
    op.create_index(
        "ix_properties_location_city", "properties", ["location_city"]
    )
    op.create_index(
        "ix_properties_location_address", "properties", ["location_address"]
    )
    op.create_index(
        "ix_properties_created_at",
        "properties",
        [sa.text("created_at DESC")],
    )

    # 복합 인덱스 (자주 쓰이는 검색 조합)
    op.create_index("ix_properties_type_price", "properties", ["type", "price"])
    op.create_index(
        "ix_properties_city_price", "properties", ["location_city", "price"]
    )
    op.create_index(
        "ix_properties_bedrooms_bathrooms_price",
        "properties",
        ["bedrooms", "bathrooms", "price"],
    )
    op.create_index(
        "ix_properties_type_city_price",
        "properties",
        ["type", "location_city", "price"],
    )
    op.create_index(
        "ix_properties_created_at_id",
        "properties",
        [sa.text("created_at DESC"), "id"],
    )

    # GIN 인덱스 (편의시설 포함 검색, 전문 검색)
    op.create_index(
        "ix_properties_amenities",
        "properties",
        ["amenities"],
        postgresql_using="gin",
    )
    op.execute(
        "CREATE INDEX ix_properties_search_vector ON properties "
        f"USING gin (({SEARCH_VECTOR_SQL}))"
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: properties 테이블 삭제"""
    op.execute("DROP INDEX IF EXISTS ix_properties_search_vector")
    op.drop_index("ix_properties_amenities", table_name="properties")
    op.drop_index("ix_properties_created_at_id", table_name="properties")
    op.drop_index("ix_properties_type_city_price", table_name="properties")
    op.drop_index(
        "ix_properties_bedrooms_bathrooms_price", table_name="properties"
    )
    op.drop_index("ix_properties_city_price", table_name="properties")
    op.drop_index("ix_properties_type_price", table_name="properties")
    op.drop_index("ix_properties_created_at", table_name="properties")
    op.drop_index("ix_properties_location_address", table_name="properties")
    op.drop_index("ix_properties_location_city", table_name="properties")
    op.drop_index("ix_properties_bathrooms", table_name="properties")
    op.drop_index("ix_properties_bedrooms", table_name="properties")
    op.drop_index("ix_properties_price", table_name="properties")
    op.drop_index("ix_properties_type", table_name="properties")
    op.drop_table("properties")
