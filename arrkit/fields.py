"""Dynamic name/value settings used by configurable backend resources.

Download clients, indexers, notifications and similar providers describe their
settings as a list of fields whose value type is chosen by the backend per
field. `FieldInput` is what callers send, `FieldOutput` is what the backend
returns (a read-only superset with labels, help text and select options).

Values are restricted to `FieldValue`, a closed union of strict JSON kinds, so
a JSON number never turns into a string and a boolean never turns into a
number on either path.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Union

from pydantic import ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr

from arrkit.schemas import ArrModel, NullableList, OmitEmpty, OmitNone

__all__ = [
    "FieldInput",
    "FieldInputs",
    "FieldKind",
    "FieldObject",
    "FieldOutput",
    "FieldOutputs",
    "FieldScalar",
    "FieldValue",
    "SelectOption",
    "field_kind",
]

FieldScalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
# Structured settings (request headers, key/value maps) arrive as JSON objects.
FieldObject = dict[str, Any]
FieldValue = Union[FieldScalar, FieldObject, list[Union[FieldScalar, FieldObject]]]


class FieldKind(str, enum.Enum):
    """Runtime tag for a field value."""

    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    OBJECT = "object"


def field_kind(value: Any) -> FieldKind:
    """Return the FieldKind of a decoded value.

    bool is tested before int since bool subclasses int.
    """
    if value is None:
        return FieldKind.NONE
    if isinstance(value, bool):
        return FieldKind.BOOL
    if isinstance(value, int):
        return FieldKind.INT
    if isinstance(value, float):
        return FieldKind.FLOAT
    if isinstance(value, str):
        return FieldKind.STRING
    if isinstance(value, list):
        return FieldKind.LIST
    if isinstance(value, dict):
        return FieldKind.OBJECT
    raise TypeError(f"Unsupported field value type: {type(value).__name__}")


class SelectOption(ArrModel):
    """One choice offered for a select-type field."""

    model_config = ConfigDict(frozen=True)

    divider_after: Annotated[bool, OmitEmpty] = False
    order: int = 0
    value: int = 0
    hint: str = ""
    name: str = ""


class FieldInput(ArrModel):
    """A user-settable configuration entry.

    The value key is left out of the body when value is None; ``0``, ``""``
    and ``False`` are still sent.
    """

    name: str
    value: Annotated[FieldValue | None, OmitNone] = None


class FieldOutput(ArrModel):
    """A configuration entry as described by the backend."""

    model_config = ConfigDict(frozen=True)

    advanced: Annotated[bool, OmitEmpty] = False
    order: Annotated[int, OmitEmpty] = 0
    help_link: Annotated[str, OmitEmpty] = ""
    help_text: Annotated[str, OmitEmpty] = ""
    hidden: Annotated[str, OmitEmpty] = ""
    label: Annotated[str, OmitEmpty] = ""
    name: str
    select_options_provider_action: Annotated[str, OmitEmpty] = ""
    type: Annotated[str, OmitEmpty] = ""
    privacy: str = ""
    value: Annotated[FieldValue | None, OmitNone] = None
    select_options: Annotated[NullableList[SelectOption], OmitEmpty] = []

    @property
    def kind(self) -> FieldKind:
        return field_kind(self.value)

    def to_input(self) -> FieldInput:
        """Return the writable part of this field, for read-modify-write updates."""
        return FieldInput(name=self.name, value=self.value)


# Absent, null and empty "fields" keys all decode to an empty list.
FieldInputs = NullableList[FieldInput]
FieldOutputs = NullableList[FieldOutput]
