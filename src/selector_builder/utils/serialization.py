"""JSON helpers for selector state records."""

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def to_json(obj: Any) -> str:
    """Return the JSON representation of an object.

    Dataclass instances are converted with ``dataclasses.asdict`` first.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    return json.dumps(obj)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of ``cls`` from a JSON object.

    Args:
        cls: Target class; its constructor must accept the object's keys.
        text: JSON text holding an object.

    Raises:
        ValueError: If the JSON is not an object or has keys ``cls`` does
            not declare.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    if dataclasses.is_dataclass(cls):
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown fields for {cls.__name__}: {', '.join(unknown)}"
            )
    return cls(**data)
