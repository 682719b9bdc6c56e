"""Checks for empty and nil values."""

from __future__ import annotations

import dataclasses
import numbers
import weakref
from typing import Any


def is_empty(value: Any) -> bool:
    """Tell whether ``value`` is empty.

    ``None``, ``False``, numeric zero and zero-length strings or containers are
    empty. An object with an ``is_zero()`` method is empty when it returns true.
    A dataclass instance is empty only when it declares no fields.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    is_zero = getattr(value, "is_zero", None)
    if callable(is_zero):
        return bool(is_zero())
    if hasattr(value, "__len__"):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return not dataclasses.fields(value)
    return False


def is_nil(value: Any, trace_source: bool = False) -> bool:
    """Tell whether ``value`` is ``None``.

    With ``trace_source``, weak references are followed down to what they refer
    to, and the result is true when the chain ends in a dead reference.
    """
    if value is None:
        return True
    if trace_source:
        while isinstance(value, weakref.ReferenceType):
            value = value()
            if value is None:
                return True
    return False