"""Record decoding for FlashArray REST payloads and the shared space record."""

from __future__ import annotations

import dataclasses
import json
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from typing import Any, TypeVar

T = TypeVar("T", bound="Model")

_SCALARS: dict[str, type] = {"bool": bool, "int": int, "float": float, "str": str}
_REGISTRY: dict[str, list[type]] = {}


class Model:
    """Base for dataclass records decoded from REST JSON payloads.

    Missing keys and nulls leave a field at its zero value, unknown keys are
    ignored, keys match field names exactly or case-insensitively, and a
    value of the wrong JSON type raises TypeError.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY.setdefault(cls.__name__, []).append(cls)

    @classmethod
    def decode(cls: type[T], data: Any) -> T:
        """Build a record from already parsed JSON data."""
        return decode(cls, data)

    @classmethod
    def loads(cls: type[T], text: str | bytes) -> T:
        """Parse a JSON document and build a record from it."""
        return loads(cls, text)


def decode(cls: type[T], data: Any) -> T:
    """Build a record of type ``cls`` from already parsed JSON data."""
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise TypeError(
            f"{cls.__name__}: expected a JSON object, got {type(data).__name__}"
        )
    hints = _field_types(cls)
    folded = {name.casefold(): name for name in hints}
    values: dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            continue
        name = key if key in hints else folded.get(key.casefold())
        if name is None or value is None:
            continue
        values[name] = _convert(hints[name], value, f"{cls.__name__}.{name}")
    return cls(**values)


def loads(cls: type[T], text: str | bytes) -> T:
    """Parse a JSON document and build a record of type ``cls`` from it."""
    return decode(cls, json.loads(text))


def _lookup(name: str, owner: type) -> Any:
    if name in _SCALARS:
        return _SCALARS[name]
    candidates = _REGISTRY.get(name)
    if not candidates:
        raise TypeError(f"{owner.__name__}: unknown field type {name!r}")
    for candidate in candidates:
        if candidate.__module__ == owner.__module__:
            return candidate
    return candidates[-1]


def _resolve(tp: Any, owner: type) -> Any:
    if isinstance(tp, typing.ForwardRef):
        tp = tp.__forward_arg__
    if isinstance(tp, str):
        text = tp.strip()
        for prefix in ("list[", "List[", "typing.List["):
            if text.startswith(prefix) and text.endswith("]"):
                return list[_resolve(text[len(prefix):-1], owner)]
        return _lookup(text, owner)
    if typing.get_origin(tp) is list:
        (item_type,) = typing.get_args(tp)
        return list[_resolve(item_type, owner)]
    return tp


@cache
def _field_types(cls: type) -> dict[str, Any]:
    return {f.name: _resolve(f.type, cls) for f in dataclasses.fields(cls)}


def _zero(tp: Any) -> Any:
    if typing.get_origin(tp) is list:
        return []
    if isinstance(tp, type) and issubclass(tp, Model):
        return tp()
    if tp in (bool, int, float, str):
        return tp()
    raise TypeError(f"unsupported field type {tp!r}")


def _convert(tp: Any, value: Any, where: str) -> Any:
    if value is None:
        return _zero(tp)
    if typing.get_origin(tp) is list:
        if not isinstance(value, list):
            raise TypeError(f"{where}: expected a JSON array, got {type(value).__name__}")
        (item_type,) = typing.get_args(tp)
        return [
            _convert(item_type, item, f"{where}[{position}]")
            for position, item in enumerate(value)
        ]
    if isinstance(tp, type) and issubclass(tp, Model):
        return decode(tp, value)
    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    else:
        raise TypeError(f"{where}: unsupported field type {tp!r}")
    raise TypeError(f"{where}: expected {tp.__name__}, got {type(value).__name__}")


@dataclass
class Space(Model):
    """Space accounting shared by arrays, hosts, pods, volumes and directories."""

    data_reduction: float = 0.0
    shared: float = 0.0
    snapshots: float = 0.0
    system: float = 0.0
    thin_provisioning: float = 0.0
    total_physical: float = 0.0
    total_provisioned: float = 0.0
    total_reduction: float = 0.0
    unique: float = 0.0
    virtual: float = 0.0
    replication: float = 0.0
    shared_effective: float = 0.0
    snapshots_effective: float = 0.0
    unique_effective: float = 0.0
    total_effective: float = 0.0