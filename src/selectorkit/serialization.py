"""JSON rendering and reconstruction of plain objects."""

from __future__ import annotations

import dataclasses
import json
import types
from enum import Enum
from typing import Any, TypeVar

from selectorkit.errors import SerializationError

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _fields_of(obj: Any) -> Any:
    """Return the JSON-encodable form of objects json cannot encode on its own."""
    if isinstance(obj, Enum):
        return obj.value
    # Classes, functions and modules carry a __dict__ but are not plain objects.
    if isinstance(obj, (type, types.ModuleType)) or callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Examples:
        [1, 2, 3]                      -> '[1,2,3]'
        Rectangle(width=10, height=20) -> '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_fields_of)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* whose fields come from the JSON object *text*.

    ``cls.__init__`` is not called: the JSON supplies the state and *cls* the
    behaviour, so ``from_json(Rectangle, '{"width":10,"height":20}').area()``
    returns 200.
    """
    try:
        values = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc
    if not isinstance(values, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(values).__name__}"
        )

    instance = cls.__new__(cls)
    if not hasattr(instance, "__dict__"):
        raise SerializationError(
            f"Cannot set fields on {cls.__name__} instances: no instance __dict__"
        )
    # Frozen dataclasses block setattr, so write the instance dict directly.
    instance.__dict__.update(values)
    return instance
