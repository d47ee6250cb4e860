"""Properties 도메인 모델 정의

매매/임대 매물 모델입니다. 위치 정보는 ``location.*`` 필드 경로로
조회되며 컬럼은 ``location_*`` 로 평탄화되어 있습니다.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    func,
    literal_column,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.core.query.sql import text_search_config


class PropertyType(str, Enum):
    """매물 거래 유형"""

    SALE = "sale"
    RENT = "rent"


class Property(Base):
    """매물 모델

    인덱스는 자주 쓰이는 검색 조합을 기준으로 구성합니다.
    - 단일 필드: type, price, bedrooms, bathrooms, created_at, city, address
    - 복합: type+price, city+price, bedrooms+bathrooms+price,
      type+city+price, created_at desc + id (페이지 정렬)
    - GIN: amenities (``@>`` 포함 검색), 가중치 tsvector (마이그레이션에서 생성)
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="매물 ID",
    )

    title: Mapped[str] = mapped_column(
        String(300),
        nullable=False,
        comment="매물 제목",
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="매물 설명",
    )
    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="가격",
    )
    type: Mapped[PropertyType] = mapped_column(
        String(10),
        nullable=False,
        comment="거래 유형 (sale/rent)",
    )

    # Location
    location_address: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="주소",
    )
    location_city: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="도시",
    )
    location_state: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="주/도",
    )
    location_country: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="국가",
    )
    location_lng: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
        comment="경도 (-180 ~ 180)",
    )
    location_lat: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
        comment="위도 (-90 ~ 90)",
    )

    amenities: Mapped[list[str]] = mapped_column(
        ARRAY(String),
        nullable=False,
        default=list,
        server_default="{}",
        comment="편의시설 목록",
    )
    images: Mapped[list[str]] = mapped_column(
        ARRAY(String),
        nullable=False,
        default=list,
        server_default="{}",
        comment="이미지 URL 목록",
    )
    bedrooms: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="침실 수",
    )
    bathrooms: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="욕실 수",
    )
    area: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
        comment="면적",
    )

    archived: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
        comment="보관 여부",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="등록 일시",
    )

    __table_args__ = (
        Index("ix_properties_type", "type"),
        Index("ix_properties_price", "price"),
        Index("ix_properties_bedrooms", "bedrooms"),
        Index("ix_properties_bathrooms", "bathrooms"),
        Index("ix_properties_location_city", "location_city"),
        Index("ix_properties_location_address", "location_address"),
        Index("ix_properties_type_price", "type", "price"),
        Index("ix_properties_city_price", "location_city", "price"),
        Index(
            "ix_properties_bedrooms_bathrooms_price",
            "bedrooms",
            "bathrooms",
            "price",
        ),
        Index(
            "ix_properties_type_city_price", "type", "location_city", "price"
        ),
        Index("ix_properties_amenities", "amenities", postgresql_using="gin"),
        CheckConstraint(
            "location_lng IS NULL OR location_lng BETWEEN -180 AND 180",
            name="ck_properties_location_lng",
        ),
        CheckConstraint(
            "location_lat IS NULL OR location_lat BETWEEN -90 AND 90",
            name="ck_properties_location_lat",
        ),
    )

    @property
    def location(self) -> dict[str, Any]:
        """응답용 위치 정보 (coordinates는 [경도, 위도])"""
        coordinates = None
        if self.location_lng is not None and self.location_lat is not None:
            coordinates = [self.location_lng, self.location_lat]
        return {
            "address": self.location_address,
            "city": self.location_city,
            "state": self.location_state,
            "country": self.location_country,
            "coordinates": coordinates,
        }

    def __repr__(self) -> str:
        return (
            f"<Property(id={self.id}, type={self.type}, "
            f"city={self.location_city}, price={self.price}, "
            f"archived={self.archived})>"
        )


# 정렬 방향이 포함된 인덱스는 컬럼 식이 필요하므로 클래스 정의 이후에 선언
Index("ix_properties_created_at", Property.created_at.desc())
Index("ix_properties_created_at_id", Property.created_at.desc(), Property.id)


def search_vector() -> Any:
    """가중치 전문 검색 벡터 (제목 > 도시 > 주소 > 설명)"""

    def weighted(column: Any, weight: str) -> Any:
        document = func.coalesce(column, literal_column("''"))
        return func.setweight(
            func.to_tsvector(text_search_config(), document),
            literal_column(f"'{weight}'"),
        )

    return (
        weighted(Property.title, "A")
        .op("||")(weighted(Property.location_city, "B"))
        .op("||")(weighted(Property.location_address, "C"))
        .op("||")(weighted(Property.description, "D"))
    )
