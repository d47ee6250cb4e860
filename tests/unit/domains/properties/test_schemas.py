"""Properties 스키마 단위 테스트"""

import pytest
from pydantic import ValidationError

from app.domains.properties.schemas import (
    PropertyCreate,
    PropertyLocation,
    PropertySearchParams,
)


class TestPropertySearchParams:
    """검색 조건 변환 테스트"""

    def test_empty_input(self):
        """입력이 없으면 archived=False 외에는 조건 없음"""
        params = PropertySearchParams.model_validate({})

        assert params.type is None
        assert params.min_price is None
        assert params.amenities == []
        assert params.archived is False

    def test_camel_case_aliases(self):
        """camelCase 파라미터 이름 허용"""
        params = PropertySearchParams.model_validate(
            {"minPrice": "100000", "maxPrice": "500000", "searchTerm": "loft"}
        )

        assert params.min_price == 100000
        assert params.max_price == 500000
        assert params.search_term == "loft"

    @pytest.mark.parametrize("raw", ["abc", "0", "-5", "", "  ", "inf"])
    def test_invalid_price_is_ignored(self, raw):
        """숫자가 아니거나 0 이하인 가격은 무시"""
        params = PropertySearchParams.model_validate(
            {"min_price": raw, "max_price": raw}
        )

        assert params.min_price is None
        assert params.max_price is None

    def test_room_counts_are_truncated_to_int(self):
        """침실/욕실 수는 정수로 변환"""
        params = PropertySearchParams.model_validate(
            {"bedrooms": "3", "bathrooms": "2.0"}
        )

        assert params.bedrooms == 3
        assert params.bathrooms == 2

    def test_zero_bedrooms_is_ignored(self):
        """침실 수 0은 조건 없음"""
        params = PropertySearchParams.model_validate({"bedrooms": "0"})

        assert params.bedrooms is None

    def test_amenities_from_comma_separated_string(self):
        """쉼표 구분 문자열"""
        params = PropertySearchParams.model_validate(
            {"amenities": "pool, gym,,pool"}
        )

        assert params.amenities == ["pool", "gym"]

    def test_amenities_from_repeated_values(self):
        """반복 파라미터와 쉼표 구분 혼합"""
        params = PropertySearchParams.model_validate(
            {"amenities": ["pool", "gym,parking"]}
        )

        assert params.amenities == ["pool", "gym", "parking"]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, False),
            ("true", True),
            ("TRUE", True),
            ("false", False),
            ("False", False),
            ("maybe", None),
            ("1", None),
        ],
    )
    def test_archived_parsing(self, raw, expected):
        """archived는 미입력 False, true/false 외 값은 필터 미적용"""
        params = PropertySearchParams.model_validate({"archived": raw})

        assert params.archived is expected

    def test_blank_text_is_none(self):
        """공백 문자열은 미입력"""
        params = PropertySearchParams.model_validate(
            {"type": "", "city": "  ", "location": "", "q": ""}
        )

        assert params.type is None
        assert params.city is None
        assert params.location is None
        assert params.q is None

    def test_coordinates_allow_zero(self):
        """좌표는 0 허용"""
        params = PropertySearchParams.model_validate(
            {"lat": "0", "lng": "-0.1276", "radius": "5000"}
        )

        assert params.lat == 0
        assert params.lng == pytest.approx(-0.1276)
        assert params.radius == 5000


class TestPropertyLocation:
    """위치 스키마 테스트"""

    def test_valid_coordinates(self):
        """[경도, 위도] 좌표"""
        location = PropertyLocation(city="London", coordinates=[-0.12, 51.5])

        assert location.coordinates == [-0.12, 51.5]

    @pytest.mark.parametrize(
        "coordinates", [[200.0, 10.0], [10.0, 95.0], [1.0], [1.0, 2.0, 3.0]]
    )
    def test_invalid_coordinates(self, coordinates):
        """범위를 벗어나거나 형식이 잘못된 좌표 거부"""
        with pytest.raises(ValidationError):
            PropertyLocation(city="London", coordinates=coordinates)


class TestPropertyCreate:
    """매물 등록 스키마 테스트"""

    def test_requires_title_and_city(self):
        """제목과 도시는 필수"""
        with pytest.raises(ValidationError):
            PropertyCreate.model_validate(
                {"price": 1000, "type": "sale", "location": {}}
            )

    def test_rejects_unknown_type(self):
        """거래 유형은 sale/rent만 허용"""
        with pytest.raises(ValidationError):
            PropertyCreate.model_validate(
                {
                    "title": "Loft",
                    "price": 1000,
                    "type": "lease",
                    "location": {"city": "London"},
                }
            )
