"""Base types shared by the IGDB data models."""

import dataclasses
import types
import typing
from dataclasses import dataclass
from enum import IntEnum
from functools import cache
from typing import Any, TypeVar

T = TypeVar("T", bound="Model")


class CodedEnum(IntEnum):
    """Integer enum whose members render as the API's label."""

    label: str

    def __new__(cls, value: int, label: str = "") -> "CodedEnum":
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    def __str__(self) -> str:
        return self.label or self.name

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Return the member for ``value``, or ``value`` itself if unknown."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return value


@dataclass(frozen=True)
class Model:
    """Base for records decoded from API responses.

    Unknown keys in the payload are ignored and missing keys keep the field
    default. Fields typed as a CodedEnum or a nested Model are converted.
    """

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        hints = _type_hints(cls)
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            key = f.metadata.get("json", f.name)
            if key not in data or data[key] is None:
                continue
            kwargs[f.name] = _convert(hints[f.name], data[key])
        return cls(**kwargs)

    @classmethod
    def json_fields(cls) -> list[str]:
        """Return the JSON keys this model decodes."""
        return [f.metadata.get("json", f.name) for f in dataclasses.fields(cls)]


@dataclass(frozen=True)
class Entity(Model):
    """A record addressable by its IGDB ID."""
    id: int = 0


@dataclass(frozen=True)
class Count(Model):
    """Number of objects counted at an endpoint."""
    count: int = 0


def json_key(name: str) -> dict[str, str]:
    """Field metadata for a JSON key that differs from the attribute name."""
    return {"json": name}


@cache
def _type_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _convert(hint: Any, value: Any) -> Any:
    origin = typing.get_origin(hint)
    if origin is list and isinstance(value, list):
        (item_hint,) = typing.get_args(hint) or (Any,)
        return [_convert(item_hint, item) for item in value]
    if origin in (typing.Union, types.UnionType):
        # Enum fields are declared as ``SomeEnum | int``.
        hint = typing.get_args(hint)[0]
    if isinstance(hint, type):
        if issubclass(hint, CodedEnum):
            return hint.coerce(value)
        if issubclass(hint, Model) and isinstance(value, dict):
            return hint.from_dict(value)
        if hint is float and isinstance(value, int):
            return float(value)
    return value
