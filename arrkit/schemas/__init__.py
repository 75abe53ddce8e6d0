"""Pydantic base model for *arr wire payloads.

The backends compare request bodies field by field, so payloads serialize in
declaration order with camelCase names, and selected fields are dropped when
empty. Mark such fields with `OmitEmpty` (drop None, zero, False, empty
string or container) or `OmitNone` (drop only None) through `Annotated`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Final, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

__all__ = ["ArrModel", "NullableList", "OmitEmpty", "OmitNone", "encode_body"]


class _OmitRule:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return self.name


OmitEmpty: Final = _OmitRule("OmitEmpty")
OmitNone: Final = _OmitRule("OmitNone")

T = TypeVar("T")


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


# Backends send null for empty collections; decode it as an empty list.
NullableList = Annotated[list[T], BeforeValidator(_none_as_empty)]

_EMPTY_TYPES = (bool, int, float, str, bytes, list, tuple, dict, set, frozenset)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, _EMPTY_TYPES) and not value


@lru_cache(maxsize=None)
def _omit_rules(cls: type[BaseModel]) -> tuple[tuple[str, str | None, _OmitRule], ...]:
    rules: list[tuple[str, str | None, _OmitRule]] = []
    for name, field in cls.model_fields.items():
        for meta in field.metadata:
            if isinstance(meta, _OmitRule):
                rules.append((name, field.serialization_alias or field.alias, meta))
                break
    return tuple(rules)


class ArrModel(BaseModel):
    """Base for request and response bodies exchanged with the backends."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def _drop_omitted(
        self,
        handler: SerializerFunctionWrapHandler,
        info: SerializationInfo,
    ) -> dict[str, Any]:
        data = handler(self)
        for name, alias, rule in _omit_rules(type(self)):
            key = alias if info.by_alias and alias else name
            if key not in data:
                continue
            value = getattr(self, name)
            if value is None or (rule is OmitEmpty and _is_empty(value)):
                del data[key]
        return data


def encode_body(model: BaseModel) -> bytes:
    """Serialize a request body: compact UTF-8 JSON terminated by a newline."""
    return model.model_dump_json(by_alias=True).encode("utf-8") + b"\n"
