"""Predicates on the kind of a value."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

from gconvkit import empty


def is_nil(value: Any) -> bool:
    """Tell whether ``value`` is ``None``."""
    return value is None


def is_empty(value: Any) -> bool:
    """Tell whether ``value`` is empty; see :func:`gconvkit.empty.is_empty`."""
    return empty.is_empty(value)


def is_int(value: Any) -> bool:
    """Tell whether ``value`` is an integer (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_uint(value: Any) -> bool:
    """Tell whether ``value`` is a non-negative integer (booleans excluded)."""
    return is_int(value) and value >= 0


def is_float(value: Any) -> bool:
    """Tell whether ``value`` is a float."""
    return isinstance(value, float)


def is_slice(value: Any) -> bool:
    """Tell whether ``value`` is a list-like sequence (strings and bytes excluded)."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray, memoryview)
    )


def is_array(value: Any) -> bool:
    """Tell whether ``value`` is an array or list-like sequence."""
    return is_slice(value)


def is_map(value: Any) -> bool:
    """Tell whether ``value`` is a mapping."""
    return isinstance(value, Mapping)


def is_struct(value: Any) -> bool:
    """Tell whether ``value`` is a dataclass instance."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)