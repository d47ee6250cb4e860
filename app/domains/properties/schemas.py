"""Properties 도메인 스키마 정의

매물 검색 조건, 생성/수정 요청, 응답 스키마입니다. JSON 필드명은
camelCase로 주고받습니다 (``minPrice``, ``createdAt`` 등).
"""

import math
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from app.core.schemas import BaseSchema
from app.domains.properties.models import PropertyType


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _to_positive_number(value: Any) -> Optional[float]:
    """숫자 문자열을 양수로 변환 (변환 불가/0 이하는 미입력 처리)"""
    value = _blank_to_none(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def _to_number(value: Any) -> Optional[float]:
    """좌표용 숫자 변환 (0 허용, 변환 불가는 미입력 처리)"""
    value = _blank_to_none(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


# Request Schemas


class PropertySearchParams(BaseSchema):
    """매물 검색 조건

    쿼리스트링 원시 값을 검증/변환한 결과입니다. 잘못된 값은 거부하지 않고
    "조건 없음"으로 처리합니다.

    - 가격, 침실/욕실 수: 숫자로 변환할 수 없거나 0 이하이면 무시
    - amenities: 반복 파라미터 또는 쉼표 구분 문자열
    - archived: 미입력이면 False, "true"/"false" 외의 값이면 필터 미적용(None)
    """

    type: Optional[str] = Field(None, description="거래 유형 (sale/rent)")
    city: Optional[str] = Field(None, description="도시 (정확 일치)")
    location: Optional[str] = Field(
        None, description="도시/주소 부분 일치 검색어"
    )
    search_term: Optional[str] = Field(
        None, description="제목/도시/주소 부분 일치 검색어"
    )
    min_price: Optional[float] = Field(None, description="최소 가격")
    max_price: Optional[float] = Field(None, description="최대 가격")
    bedrooms: Optional[int] = Field(None, description="침실 수")
    bathrooms: Optional[int] = Field(None, description="욕실 수")
    amenities: list[str] = Field(
        default_factory=list, description="편의시설 (모두 포함)"
    )
    archived: Optional[bool] = Field(False, description="보관 여부")
    q: Optional[str] = Field(None, description="전문 검색어")
    lat: Optional[float] = Field(None, description="반경 검색 중심 위도")
    lng: Optional[float] = Field(None, description="반경 검색 중심 경도")
    radius: Optional[float] = Field(None, description="반경 (미터)")

    @field_validator(
        "type", "city", "location", "search_term", "q", mode="before"
    )
    @classmethod
    def normalize_text(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("min_price", "max_price", "radius", mode="before")
    @classmethod
    def parse_positive_number(cls, v: Any) -> Optional[float]:
        return _to_positive_number(v)

    @field_validator("bedrooms", "bathrooms", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> Optional[int]:
        number = _to_positive_number(v)
        return int(number) if number is not None else None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def parse_coordinate(cls, v: Any) -> Optional[float]:
        return _to_number(v)

    @field_validator("amenities", mode="before")
    @classmethod
    def split_amenities(cls, v: Any) -> list[str]:
        if v is None:
            return []
        values = [v] if isinstance(v, str) else list(v)
        amenities: list[str] = []
        for value in values:
            for item in str(value).split(","):
                item = item.strip()
                if item and item not in amenities:
                    amenities.append(item)
        return amenities

    @field_validator("archived", mode="before")
    @classmethod
    def parse_archived(cls, v: Any) -> Optional[bool]:
        if v is None:
            return False
        if isinstance(v, bool):
            return v
        text = str(v).strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        return None


class PropertyLocation(BaseSchema):
    """매물 위치"""

    address: Optional[str] = Field(None, max_length=500)
    city: str = Field(..., min_length=1, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    coordinates: Optional[list[float]] = Field(
        None, description="[경도, 위도]"
    )

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(
        cls, v: Optional[list[float]]
    ) -> Optional[list[float]]:
        if v is None:
            return v
        if len(v) != 2:
            raise ValueError("좌표는 [경도, 위도] 형식이어야 합니다.")
        lng, lat = v
        if not -180 <= lng <= 180 or not -90 <= lat <= 90:
            raise ValueError(
                "경도는 -180~180, 위도는 -90~90 범위여야 합니다."
            )
        return v


class PropertyCreate(BaseSchema):
    """매물 등록 요청"""

    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    type: PropertyType
    location: PropertyLocation
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[float] = Field(None, ge=0)
    archived: bool = False


class PropertyUpdate(BaseSchema):
    """매물 수정 요청 (제공된 필드만 반영)"""

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    type: Optional[PropertyType] = None
    location: Optional[PropertyLocation] = None
    amenities: Optional[list[str]] = None
    images: Optional[list[str]] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[float] = Field(None, ge=0)
    archived: Optional[bool] = None


class ScheduleViewingRequest(BaseSchema):
    """매물 방문 예약 요청

    필수값 누락은 422 대신 서비스에서 400으로 응답합니다.
    """

    client_id: Optional[int] = Field(None, gt=0, description="고객 ID")
    scheduled_at: Optional[datetime] = Field(None, description="방문 일시")
    notes: Optional[str] = Field(None, description="메모")


# Response Schemas


class PropertyResponse(BaseSchema):
    """매물 응답"""

    id: int
    title: str
    description: Optional[str] = None
    price: float
    type: PropertyType
    location: PropertyLocation
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    area: Optional[float] = None
    archived: bool = False
    created_at: datetime


class PropertyStatusResponse(BaseSchema):
    """매물 삭제/보관 처리 응답"""

    property_id: int
    archived: Optional[bool] = None
