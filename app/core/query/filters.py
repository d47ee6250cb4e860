"""검색 필터 조합

클라이언트 검색 조건을 불변 ``FilterCriterion`` 값의 목록으로 표현하고,
순수 함수 ``compile_filter`` 로 하나의 문서 필터(dict)로 변환합니다.

문서 필터 형식::

    {
        "type": "sale",
        "$or": [{"location.city": {"$regex": "^London$", "$options": "i"}}, ...],
        "price": {"$gte": 100000, "$lte": 500000},
        "amenities": {"$all": ["pool", "gym"]},
    }

키는 필드 경로(또는 ``$or``/``$and``/``$text``), 값은 조건입니다. 모든 키는
AND로 결합되므로 조건을 추가하는 순서는 결과에 영향을 주지 않습니다.
순서는 선택도(selectivity)가 높은 조건부터 추가하는 관례를 따릅니다.

    type(정확 일치) → 위치 부분 일치 → city(정확 일치) → 가격 범위
    → 침실/욕실 수 → 편의시설 포함
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence, Union

GEO_FIELD = "location.coordinates"


@dataclass(frozen=True)
class QueryOptions:
    """검색 옵션

    전문 검색/반경 검색은 해당 인덱스가 준비된 경우에만 켭니다.
    비활성 상태에서는 관련 조건이 조용히 무시됩니다.
    """

    enable_text_search: bool = False
    enable_geospatial: bool = False


@dataclass(frozen=True)
class Exact:
    """정확 일치"""

    field: str
    value: Any

    def render(self) -> dict[str, Any]:
        return {self.field: self.value}


@dataclass(frozen=True)
class Range:
    """범위 조건 (제공된 쪽만 적용)"""

    field: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def render(self) -> dict[str, Any]:
        condition: dict[str, Any] = {}
        if self.minimum is not None:
            condition["$gte"] = self.minimum
        if self.maximum is not None:
            condition["$lte"] = self.maximum
        return {self.field: condition}


@dataclass(frozen=True)
class SubstringOr:
    """여러 필드에 대한 대소문자 무시 부분 일치 (OR)

    각 필드마다 전체 일치(``^term$``)와 부분 일치 패턴을 함께 만듭니다.
    검색어는 정규식 메타문자를 이스케이프한 뒤 사용합니다.
    """

    fields: tuple[str, ...]
    term: str

    def render(self) -> dict[str, Any]:
        escaped = re.escape(self.term)
        branches: list[dict[str, Any]] = []
        for name in self.fields:
            branches.append(
                {name: {"$regex": f"^{escaped}$", "$options": "i"}}
            )
            branches.append({name: {"$regex": escaped, "$options": "i"}})
        return {"$or": branches}


@dataclass(frozen=True)
class SetContainsAll:
    """배열 필드가 모든 값을 포함 (교집합이 아닌 상위집합)"""

    field: str
    values: tuple[str, ...]

    def render(self) -> dict[str, Any]:
        return {self.field: {"$all": list(self.values)}}


@dataclass(frozen=True)
class TextSearch:
    """가중치 전문 검색"""

    term: str

    def render(self) -> dict[str, Any]:
        return {"$text": {"$search": self.term}}


@dataclass(frozen=True)
class GeoNear:
    """좌표 기준 반경 검색 (미터)"""

    lat: float
    lng: float
    radius_m: float
    field: str = GEO_FIELD

    def render(self) -> dict[str, Any]:
        return {
            self.field: {
                "$near": {
                    "$geometry": {
                        "type": "Point",
                        "coordinates": [self.lng, self.lat],
                    },
                    "$maxDistance": self.radius_m,
                }
            }
        }


FilterCriterion = Union[
    Exact, Range, SubstringOr, SetContainsAll, TextSearch, GeoNear
]


def _is_operator_dict(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and bool(value)
        and all(str(key).startswith("$") for key in value)
    )


def compile_filter(criteria: Iterable[FilterCriterion]) -> dict[str, Any]:
    """조건 목록을 하나의 문서 필터로 변환

    - 같은 필드의 연산자 조건은 병합됩니다 (예: ``$gte`` + ``$lte``).
    - 같은 필드의 정확 일치는 나중 조건이 우선합니다.
    - OR 그룹이 둘 이상이면 ``$and`` 로 묶어 모두 만족하도록 합니다.
    """
    compiled: dict[str, Any] = {}
    or_groups: list[list[dict[str, Any]]] = []

    for criterion in criteria:
        for key, condition in criterion.render().items():
            if key == "$or":
                or_groups.append(condition)
                continue

            existing = compiled.get(key)
            if _is_operator_dict(existing) and _is_operator_dict(condition):
                compiled[key] = {**existing, **condition}
            else:
                compiled[key] = condition

    if len(or_groups) == 1:
        compiled["$or"] = or_groups[0]
    elif or_groups:
        compiled["$and"] = [{"$or": group} for group in or_groups]

    return compiled


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


@dataclass
class FilterBuilder:
    """검색 필터 빌더

    조건 추가 메서드는 모두 빌더 자신을 반환하므로 체이닝이 가능하며,
    입력이 없거나 비어 있으면 아무것도 추가하지 않습니다. 빌더는 요청마다
    새로 만들어 사용하고 공유하지 않습니다.

    Example::

        filter_doc = (
            FilterBuilder()
            .add_exact("type", "sale")
            .add_range("price", 100000, 500000)
            .add_set_contains_all("amenities", ["pool", "gym"])
            .build()
        )
    """

    options: QueryOptions = field(default_factory=QueryOptions)
    _criteria: list[FilterCriterion] = field(default_factory=list)

    @property
    def criteria(self) -> tuple[FilterCriterion, ...]:
        """지금까지 추가된 조건 (추가 순서)"""
        return tuple(self._criteria)

    def add(self, criterion: Optional[FilterCriterion]) -> "FilterBuilder":
        if criterion is not None:
            self._criteria.append(criterion)
        return self

    def add_exact(self, field_path: str, value: Any) -> "FilterBuilder":
        if _is_blank(value):
            return self
        return self.add(Exact(field_path, value))

    def add_range(
        self,
        field_path: str,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> "FilterBuilder":
        if minimum is None and maximum is None:
            return self
        return self.add(Range(field_path, minimum, maximum))

    def add_substring_or(
        self, field_paths: Sequence[str], term: Optional[str]
    ) -> "FilterBuilder":
        if _is_blank(term) or not field_paths:
            return self
        return self.add(SubstringOr(tuple(field_paths), str(term)))

    def add_set_contains_all(
        self, field_path: str, values: Optional[Sequence[str]]
    ) -> "FilterBuilder":
        if not values:
            return self
        return self.add(SetContainsAll(field_path, tuple(values)))

    def add_text_search(self, term: Optional[str]) -> "FilterBuilder":
        if _is_blank(term) or not self.options.enable_text_search:
            return self
        return self.add(TextSearch(str(term)))

    def add_geo_near(
        self,
        lat: Optional[float],
        lng: Optional[float],
        radius_m: Optional[float],
    ) -> "FilterBuilder":
        if not self.options.enable_geospatial:
            return self
        if lat is None or lng is None or not radius_m or radius_m <= 0:
            return self
        return self.add(GeoNear(lat, lng, radius_m))

    def build(self) -> dict[str, Any]:
        """누적된 조건으로 문서 필터 생성 (매번 새 dict 반환)"""
        return compile_filter(self._criteria)
