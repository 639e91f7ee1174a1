"""Compact JSON encoding and decoding of plain objects."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    ``[1, 2, 3]`` -> ``'[1,2,3]'``; ``Rectangle(10, 20)`` ->
    ``'{"width":10,"height":20}'``.
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Decode a JSON object into an instance of *cls*.

    ``__init__`` is not called: the decoded keys become instance attributes
    as-is, so the result picks up the class's methods and properties::

        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.area  # 200
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance
