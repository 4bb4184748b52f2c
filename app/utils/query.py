"""
Query-string normalization for list endpoints.

Every list route runs its query parameters through ``normalize_query`` before
touching the database. The normalizer never rejects input: anything it cannot
coerce falls back to the field default, and unknown keys pass through as
strings for the route to consume.
"""

import math
import re
from typing import Any, Callable, Dict, Mapping, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50

# largest value a database INTEGER column or OFFSET accepts
MAX_INT = 2 ** 63 - 1
_MAX_DIGITS = len(str(MAX_INT))

_LEADING_INT = re.compile(r'^([+-]?)0*(\d+)')


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a base-10 integer prefix ("12abc" -> 12). Returns None when absent.

    Magnitudes beyond MAX_INT saturate at MAX_INT.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value).strip())
    if not match:
        return None
    sign, digits = match.groups()
    number = MAX_INT if len(digits) > _MAX_DIGITS else min(int(digits), MAX_INT)
    return -number if sign == '-' else number


def parse_flag(value: Optional[str]) -> bool:
    """Only the literal string "true" is truthy."""
    return value == 'true'


def _positive_int(default: int) -> Callable[[Optional[str]], int]:
    def parser(value):
        number = parse_int(value)
        if number is None or number < 1:
            return default
        return number
    return parser


# field name -> parser
QUERY_FIELDS: Dict[str, Callable[[Optional[str]], Any]] = {
    'page': _positive_int(DEFAULT_PAGE),
    'limit': _positive_int(DEFAULT_LIMIT),
    'lowStock': parse_flag,
    'critical': parse_flag,
}

QUERY_DEFAULTS: Dict[str, Any] = {
    'page': DEFAULT_PAGE,
    'limit': DEFAULT_LIMIT,
}


class NormalizedQuery:
    """Typed view over a normalized query mapping."""

    def __init__(self, values: Dict[str, Any]):
        self._values = values

    @property
    def page(self) -> int:
        return self._values['page']

    @property
    def limit(self) -> int:
        return self._values['limit']

    @property
    def skip(self) -> int:
        return min((self.page - 1) * self.limit, MAX_INT)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def flag(self, key: str) -> bool:
        return bool(self._values.get(key, False))

    def __contains__(self, key):
        return key in self._values

    def __getitem__(self, key):
        return self._values[key]

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __repr__(self):
        return f"NormalizedQuery({self._values!r})"


def normalize_query(params: Optional[Mapping[str, str]]) -> NormalizedQuery:
    """
    Normalize raw query parameters into a defaulted filter.

    Defaults are laid down first and the coerced values overlaid on top, so the
    result always carries a positive ``page`` and ``limit``. Keys outside the
    field table are copied through unchanged.

    Args:
        params: Mapping of query parameter names to raw string values.
            A werkzeug MultiDict works too; the first value of a key wins.

    Returns:
        NormalizedQuery
    """
    values = dict(QUERY_DEFAULTS)
    for key in (params or {}):
        raw = params[key]
        parser = QUERY_FIELDS.get(key)
        values[key] = parser(raw) if parser else raw
    return NormalizedQuery(values)


def build_pagination(page: int, limit: int, total: int) -> Dict[str, int]:
    """Pagination block returned alongside list results."""
    return {
        'page': page,
        'limit': limit,
        'total': total,
        'pages': math.ceil(total / limit) if limit else 0,
    }
