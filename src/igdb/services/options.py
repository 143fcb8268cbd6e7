"""Functional options that build the query parameters of an API call.

Each option is a callable that mutates an ``Options`` accumulator and raises
a ``ValidationError`` subclass when its arguments are invalid. Options are
applied in the order given, so a later option for the same key overwrites an
earlier one. ``set_filter`` writes a distinct key per field/operator pair.
"""

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

import httpx

from .errors import (
    EmptyFieldError,
    EmptyFilterValueError,
    EmptyQueryError,
    OutOfRangeError,
    TooManyArgsError,
    ValidationError,
)

# Pagination bounds accepted by the API.
LIMIT_MIN = 1
LIMIT_MAX = 50
OFFSET_MIN = 0
OFFSET_MAX = 10000


class Options:
    """Case-sensitive key/value accumulator for query parameters."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str:
        return self.values.get(key, "")

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def encode(self) -> str:
        """Encode the values as a query string sorted by key."""
        return str(httpx.QueryParams(sorted(self.values.items())))


Option = Callable[[Options], None]

E = TypeVar("E", bound=Enum)


class Operator(str, Enum):
    """Postfix operators accepted by ``set_filter``."""
    EQUALS = "eq"
    NOT_EQUALS = "not_eq"
    GREATER_THAN = "gt"
    GREATER_THAN_EQUAL = "gte"
    LESS_THAN = "lt"
    LESS_THAN_EQUAL = "lte"
    PREFIX = "prefix"
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"
    CONTAINS_AT_LEAST = "in"
    NOT_CONTAINS = "not_in"
    CONTAINS_ANY = "any"


class Order(str, Enum):
    """Sort directions accepted by ``set_order``."""
    ASCENDING = ":asc"
    DESCENDING = ":desc"


class Subfilter(str, Enum):
    """Array reductions used to order by an array field."""
    MAX = ":max"
    MIN = ":min"
    SUM = ":sum"
    AVERAGE = ":avg"
    MEDIAN = ":median"


_ZERO_VALUE_OPERATORS = {Operator.EXISTS, Operator.NOT_EXISTS}
_MULTI_VALUE_OPERATORS = {Operator.CONTAINS_AT_LEAST, Operator.NOT_CONTAINS, Operator.CONTAINS_ANY}


def new_options(*opts: Option) -> Options:
    """Return an Options object mutated by the provided options.

    Raises the first error reported by any option.
    """
    options = Options()
    for opt in opts:
        opt(options)
    return options


def compose_options(*opts: Option) -> Option:
    """Compose multiple options into a single reusable option."""
    def apply(options: Options) -> None:
        for opt in opts:
            opt(options)
    return apply


def set_fields(*fields: str) -> Option:
    """Select which fields of the requested object the API returns.

    Subfields are reached with a dot (``cover.url``) and ``*`` selects every
    field. Field names must match the JSON keys of the remote object. Calling
    it without fields leaves the option set untouched.
    """
    def apply(options: Options) -> None:
        if not fields:
            return
        if _has_blank(fields):
            raise EmptyFieldError(field="fields", value=list(fields))
        options.set("fields", ",".join(fields))
    return apply


def set_filter(field: str, op: Operator, *values: str) -> Option:
    """Filter the results of an API call.

    Values are joined into a comma separated list. ``EXISTS`` and
    ``NOT_EXISTS`` take no value; the multi-value operators take one or more;
    every other operator takes exactly one. Enumerated fields must be
    filtered by their numeric code.
    """
    def apply(options: Options) -> None:
        operator = _member(Operator, op, "op")
        if not field or not field.strip():
            raise EmptyFieldError(field="filter", value=field)

        if operator in _ZERO_VALUE_OPERATORS:
            if values:
                raise TooManyArgsError(field=field, value=list(values))
            value = "1"  # placeholder, the API requires a value
        else:
            if not values or _has_blank(values):
                raise EmptyFilterValueError(field=field, value=list(values))
            if operator not in _MULTI_VALUE_OPERATORS and len(values) > 1:
                raise TooManyArgsError(field=field, value=list(values))
            value = ",".join(str(v) for v in values)

        options.set(filter_key(field, operator), value)
    return apply


def set_order(field: str, order: Order, *subfilter: Subfilter) -> Option:
    """Order the results by ``field``, optionally reducing an array field."""
    def apply(options: Options) -> None:
        direction = _member(Order, order, "order")
        if not field or not field.strip():
            raise EmptyFieldError(field="order", value=field)
        if len(subfilter) > 1:
            raise TooManyArgsError(field="order", value=list(subfilter))

        value = field + direction.value
        if subfilter:
            value += _member(Subfilter, subfilter[0], "subfilter").value
        options.set("order", value)
    return apply


def set_limit(limit: int) -> Option:
    """Limit the number of results. The API default is 10."""
    def apply(options: Options) -> None:
        if not _is_int(limit) or limit < LIMIT_MIN or limit > LIMIT_MAX:
            raise OutOfRangeError(field="limit", value=limit)
        options.set("limit", str(limit))
    return apply


def set_offset(offset: int) -> Option:
    """Skip the first ``offset`` results. The API default is 0."""
    def apply(options: Options) -> None:
        if not _is_int(offset) or offset < OFFSET_MIN or offset > OFFSET_MAX:
            raise OutOfRangeError(field="offset", value=offset)
        options.set("offset", str(offset))
    return apply


def set_scroll(page: int) -> Option:
    """Request a page of a scrolled result set."""
    def apply(options: Options) -> None:
        if not _is_int(page) or page < 1:
            raise OutOfRangeError(field="scroll", value=page)
        options.set("scroll", str(page))
    return apply


def set_search(query: str) -> Option:
    # Used by the searchable services only.
    def apply(options: Options) -> None:
        if not query or not query.strip():
            raise EmptyQueryError(field="search", value=query)
        options.set("search", query)
    return apply


def filter_key(field: str, op: Operator) -> str:
    return f"filter[{field}][{Operator(op).value}]"


def encode_url(options: Options, url: str) -> str:
    """Append the encoded options to ``url``.

    Spaces are stripped from the URL, which the API rejects.
    """
    url = url.replace(" ", "")
    encoded = options.encode()
    if encoded:
        url += "?" + encoded
    return url


def _has_blank(values: tuple[str, ...]) -> bool:
    return any(not str(v).strip() for v in values)


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a valid count or ID.
    return isinstance(value, int) and not isinstance(value, bool)


def _member(enum_cls: type[E], value: object, field: str) -> E:
    try:
        return enum_cls(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(field=field, value=value) from e
