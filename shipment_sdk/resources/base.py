"""
Resource base class.

Resources are plain dataclasses. API responses are dictionaries; `from_dict`
maps them onto the dataclass fields, ignoring keys the SDK does not know and
converting nested resources, lists of resources and ISO timestamps.
"""

from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Resource")


class Resource:
    @classmethod
    def from_dict(cls: Type[R], data: Optional[Dict[str, Any]]) -> R:
        data = data or {}
        hints = _field_types(cls)
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            values[f.name] = _coerce(hints.get(f.name, Any), data[f.name])
        return cls(**values)


def merge(target: Resource, source: Resource) -> Resource:
    """Overwrite target's fields with source's non-null fields."""
    for f in fields(source):
        value = getattr(source, f.name)
        if value is not None:
            setattr(target, f.name, value)
    return target


def parse_timestamp(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Leaving unparseable timestamp as text: {value!r}")
        return value


@lru_cache(maxsize=None)
def _field_types(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _coerce(tp: Any, value: Any) -> Any:
    if value is None:
        return None

    origin = get_origin(tp)
    if origin is Union:
        args = [a for a in get_args(tp) if a is not type(None)]
        return _coerce(args[0], value) if args else value
    if origin is list:
        (item_type,) = get_args(tp) or (Any,)
        return [_coerce(item_type, item) for item in value]
    if isinstance(tp, type) and issubclass(tp, Resource) and is_dataclass(tp) and isinstance(value, dict):
        return tp.from_dict(value)
    if tp is datetime:
        return parse_timestamp(value)
    return value
