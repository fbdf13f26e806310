"""
Field introspection registry.

Structured values expose their named fields through one of these capabilities,
checked in order:

1. a ``__easylog_fields__()`` method returning ``(name, value)`` pairs;
2. an adapter registered with :func:`register_fields` for the value's type
   (resolved along the MRO);
3. dataclass fields;
4. pydantic model fields;
5. named tuple fields;
6. mapping items (keys rendered as names);
7. instance attributes (``__dict__`` and ``__slots__``) plus public properties.

A value with none of these has no capability and renders as its type name.
Each field is returned with a deferred accessor so that a failure reading one
field stays local to that field.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Mapping
from functools import singledispatch
from typing import Any, Callable, Iterable

from pydantic import BaseModel

from .primitives import safe_str

FieldAccessor = tuple[str, Callable[[], Any]]
FieldProvider = Callable[[Any], Iterable[tuple[str, Any]]]

VISITOR_METHOD = "__easylog_fields__"


@singledispatch
def _registered_fields(value: Any) -> Iterable[tuple[str, Any]] | None:
    return None


def register_fields(cls: type, provider: FieldProvider | None = None):
    """Register a field provider for ``cls`` and its subclasses.

    Usable directly or as a decorator::

        @register_fields(Point)
        def _point_fields(p):
            return [("x", p.x), ("y", p.y)]
    """
    if provider is None:
        return lambda func: register_fields(cls, func)
    _registered_fields.register(cls)(provider)
    return provider


@register_fields(BaseException)
def _exception_fields(exc: BaseException) -> Iterable[tuple[str, Any]]:
    fields = [("args", exc.args), ("message", safe_str(exc))]
    fields.extend((name, value) for name, value in vars(exc).items() if not _is_dunder(safe_str(name)))
    return fields


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _constant(value: Any) -> Callable[[], Any]:
    return lambda: value


def _attribute(owner: Any, name: str) -> Callable[[], Any]:
    return lambda: getattr(owner, name)


def _has_registered(value: Any) -> bool:
    return _registered_fields.dispatch(type(value)) is not _registered_fields.dispatch(object)


def _is_opaque_object(value: Any) -> bool:
    return isinstance(value, (type, types.ModuleType)) or inspect.isroutine(value)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in ("__dict__", "__weakref__") and slot not in names:
                names.append(slot)
    return names


def _property_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        for name, member in klass.__dict__.items():
            if isinstance(member, property) and not name.startswith("_") and name not in names:
                names.append(name)
    return names


def _object_accessors(value: Any) -> list[FieldAccessor]:
    accessors: dict[str, Callable[[], Any]] = {}
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        for key, item in instance_dict.items():
            name = safe_str(key)
            if not _is_dunder(name):
                accessors[name] = _constant(item)
    cls = type(value)
    for name in _slot_names(cls):
        accessors.setdefault(name, _attribute(value, name))
    for name in _property_names(cls):
        accessors.setdefault(name, _attribute(value, name))
    return list(accessors.items())


def _has_attribute_storage(value: Any) -> bool:
    if isinstance(getattr(value, "__dict__", None), Mapping):
        return True
    return bool(_slot_names(type(value)))


def _resolve(value: Any) -> Callable[[], list[FieldAccessor]] | None:
    visitor = getattr(type(value), VISITOR_METHOD, None)
    if callable(visitor):
        return lambda: [(safe_str(name), _constant(item)) for name, item in visitor(value)]

    if _has_registered(value):
        return lambda: [(safe_str(name), _constant(item)) for name, item in _registered_fields(value)]

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return lambda: [(f.name, _attribute(value, f.name)) for f in dataclasses.fields(value)]

    if isinstance(value, BaseModel):
        return lambda: [(name, _attribute(value, name)) for name in type(value).model_fields]

    if isinstance(value, tuple) and hasattr(type(value), "_fields"):
        return lambda: [(name, _attribute(value, name)) for name in type(value)._fields]

    if isinstance(value, Mapping):
        return lambda: [(safe_str(key), _constant(item)) for key, item in value.items()]

    if _is_opaque_object(value):
        return None

    if _has_attribute_storage(value):
        return lambda: _object_accessors(value)

    return None


def has_fields(value: Any) -> bool:
    """True when ``value`` offers a field capability (possibly with zero fields)."""
    try:
        return _resolve(value) is not None
    except Exception:
        return False


def introspect(value: Any) -> list[FieldAccessor] | None:
    """Return the value's fields sorted by name, or None without a capability.

    Exceptions raised by the capability itself propagate to the caller.
    """
    provider = _resolve(value)
    if provider is None:
        return None
    return sorted(provider(), key=lambda accessor: accessor[0])
