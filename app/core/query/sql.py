"""문서 필터 → SQLAlchemy 조건식 변환

``app.core.query.filters`` 가 만든 문서 필터를 PostgreSQL용 WHERE/ORDER BY
절로 변환합니다. 필드 경로는 모델 컬럼에 매핑되어야 하며, 지원하지 않는
연산자나 매핑되지 않은 필드는 ``UnsupportedFilterOperatorError`` 를
발생시킵니다.

지원 연산자:
    - 스칼라 값: 정확 일치 (배열 컬럼이면 값 포함)
    - ``$eq``, ``$ne``, ``$gt``, ``$gte``, ``$lt``, ``$lte``, ``$in``, ``$nin``
    - ``$regex`` + ``$options: "i"``: PostgreSQL ``~*`` (대소문자 무시)
    - ``$all``: 배열 포함 (``@>``)
    - ``$or``, ``$and``
    - ``$text``: 가중치 tsvector ``@@ plainto_tsquery``
    - ``$near``: 대원 거리(haversine) <= ``$maxDistance`` (미터)
"""

from typing import Any, Callable, Mapping, Optional

from sqlalchemy import and_, false, func, literal_column, not_, or_, true
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.types import ARRAY

EARTH_RADIUS_M = 6_371_000
TEXT_SEARCH_CONFIG = "simple"


def text_search_config() -> Any:
    """전문 검색 설정 (regconfig 리터럴, 인덱스 식과 동일하게 렌더링)"""
    return literal_column(f"'{TEXT_SEARCH_CONFIG}'::regconfig")


class UnsupportedFilterOperatorError(ValueError):
    """SQL로 변환할 수 없는 필터 조건"""


class FilterCompiler:
    """문서 필터를 SQLAlchemy 조건식으로 변환

    Args:
        fields: 필드 경로 → 컬럼 매핑 (예: ``{"location.city": Property.location_city}``)
        text_vector: ``$text`` 검색에 사용할 tsvector 식 생성 함수
        geo_fields: 필드 경로 → (위도 컬럼, 경도 컬럼)
    """

    def __init__(
        self,
        fields: Mapping[str, Any],
        text_vector: Optional[Callable[[], Any]] = None,
        geo_fields: Optional[Mapping[str, tuple[Any, Any]]] = None,
    ):
        self.fields = dict(fields)
        self.text_vector = text_vector
        self.geo_fields = dict(geo_fields or {})

    def compile(self, filter_doc: Mapping[str, Any]) -> ColumnElement[bool]:
        """문서 필터 전체를 하나의 AND 조건으로 변환"""
        clauses = [
            self._compile_entry(key, condition)
            for key, condition in filter_doc.items()
        ]
        if not clauses:
            return true()
        if len(clauses) == 1:
            return clauses[0]
        return and_(*clauses)

    def order_by(self, sort: Mapping[str, int]) -> list[Any]:
        """``{"created_at": -1, "id": 1}`` 형식 정렬 조건 변환"""
        ordering = []
        for path, direction in sort.items():
            column = self._column(path)
            ordering.append(column.desc() if direction < 0 else column.asc())
        return ordering

    def _column(self, path: str) -> Any:
        try:
            return self.fields[path]
        except KeyError:
            raise UnsupportedFilterOperatorError(
                f"Unknown field path: {path}"
            ) from None

    def _compile_entry(self, key: str, condition: Any) -> ColumnElement[bool]:
        if key == "$or":
            return or_(*[self.compile(branch) for branch in condition])
        if key == "$and":
            return and_(*[self.compile(branch) for branch in condition])
        if key == "$text":
            return self._compile_text(condition)
        if key.startswith("$"):
            raise UnsupportedFilterOperatorError(
                f"Unsupported top-level operator: {key}"
            )

        if key in self.geo_fields:
            return self._compile_geo(key, condition)

        column = self._column(key)
        if isinstance(condition, dict) and condition:
            if all(str(op).startswith("$") for op in condition):
                return self._compile_operators(column, condition)
        return self._compile_equals(column, condition)

    def _compile_equals(self, column: Any, value: Any) -> ColumnElement[bool]:
        if value is None:
            return column.is_(None)
        if _is_array(column) and not isinstance(value, (list, tuple)):
            return column.contains([value])
        return column == value

    def _compile_operators(
        self, column: Any, condition: Mapping[str, Any]
    ) -> ColumnElement[bool]:
        clauses: list[ColumnElement[bool]] = []
        for op, operand in condition.items():
            if op == "$options":
                continue
            if op == "$eq":
                clauses.append(self._compile_equals(column, operand))
            elif op == "$ne":
                clauses.append(not_(self._compile_equals(column, operand)))
            elif op == "$gt":
                clauses.append(column > operand)
            elif op == "$gte":
                clauses.append(column >= operand)
            elif op == "$lt":
                clauses.append(column < operand)
            elif op == "$lte":
                clauses.append(column <= operand)
            elif op == "$in":
                clauses.append(
                    column.in_(list(operand)) if operand else false()
                )
            elif op == "$nin":
                clauses.append(
                    column.not_in(list(operand)) if operand else true()
                )
            elif op == "$all":
                clauses.append(column.contains(list(operand)))
            elif op == "$regex":
                flags = condition.get("$options", "")
                if "i" in flags:
                    clauses.append(column.regexp_match(operand, flags="i"))
                else:
                    clauses.append(column.regexp_match(operand))
            else:
                raise UnsupportedFilterOperatorError(
                    f"Unsupported operator: {op}"
                )
        if len(clauses) == 1:
            return clauses[0]
        return and_(*clauses)

    def _compile_text(
        self, condition: Mapping[str, Any]
    ) -> ColumnElement[bool]:
        if self.text_vector is None:
            raise UnsupportedFilterOperatorError(
                "Text search is not configured for this collection"
            )
        query = func.plainto_tsquery(
            text_search_config(), condition["$search"]
        )
        return self.text_vector().op("@@")(query)

    def _compile_geo(
        self, path: str, condition: Mapping[str, Any]
    ) -> ColumnElement[bool]:
        near = condition.get("$near") if isinstance(condition, dict) else None
        if near is None:
            raise UnsupportedFilterOperatorError(
                f"Geo field {path} only supports $near"
            )
        lng, lat = near["$geometry"]["coordinates"]
        lat_column, lng_column = self.geo_fields[path]
        distance = haversine_distance(lat_column, lng_column, lat, lng)
        return and_(
            lat_column.is_not(None),
            lng_column.is_not(None),
            distance <= near["$maxDistance"],
        )


def haversine_distance(
    lat_column: Any, lng_column: Any, lat: float, lng: float
) -> Any:
    """두 좌표 사이의 대원 거리 (미터) SQL 식"""
    d_lat = func.radians(lat_column - lat) / 2
    d_lng = func.radians(lng_column - lng) / 2
    a = func.power(func.sin(d_lat), 2) + (
        func.cos(func.radians(lat))
        * func.cos(func.radians(lat_column))
        * func.power(func.sin(d_lng), 2)
    )
    return 2 * EARTH_RADIUS_M * func.asin(func.sqrt(a))


def _is_array(column: Any) -> bool:
    return isinstance(getattr(column, "type", None), ARRAY)
