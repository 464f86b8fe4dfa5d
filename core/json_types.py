"""
JSON value classification for JSON Diff Pro.

Every value produced by the JSON decoder falls into exactly one JsonKind.
Arrays and objects are both containers: the differ walks them the same way,
keyed by property name or by stringified index.
"""
from typing import Any, Union
from enum import Enum


JsonValue = Union[None, bool, int, float, str, list, dict]


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (JsonKind.ARRAY, JsonKind.OBJECT)

    @property
    def family(self) -> str:
        """
        Comparison family used to decide between a type change and a
        value comparison. Arrays and objects share one family.
        """
        if self.is_container:
            return "container"
        return self.value


def kind_of(value: Any) -> JsonKind:
    """Classify a decoded JSON value. bool is checked before numbers."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def as_mapping(value: Any) -> dict:
    """View a container as an ordered key -> value mapping."""
    if isinstance(value, dict):
        return value
    return {str(index): item for index, item in enumerate(value)}
