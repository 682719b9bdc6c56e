"""Inspection of dataclass fields and their tags.

A field's tags come from its dataclass metadata. The ``"tag"`` entry may hold
a tag string such as ``'json:"id" params:"uid"'``, which :func:`parse_tag`
splits into key/value pairs; any other string entry is taken as a tag on its
own. A field whose metadata has ``"embedded": True`` is treated as embedded:
its own fields are searched as well.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from collections.abc import Iterable, Mapping
from typing import Any

_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}


@dataclasses.dataclass
class Field:
    """One field of a dataclass, with its value and tags."""

    name: str
    type: Any
    value: Any = None
    tags: dict[str, str] = dataclasses.field(default_factory=dict)
    embedded: bool = False
    tag_value: str = ""

    def tag(self, key: str) -> str:
        """Return the tag value for ``key``, or an empty string."""
        return self.tags.get(key, "")

    def tag_lookup(self, key: str) -> str | None:
        """Return the tag value for ``key`` (possibly empty), or None if absent."""
        return self.tags.get(key)

    def is_exported(self) -> bool:
        """Tell whether the field is public, that is, not underscore-prefixed."""
        return not self.name.startswith("_")


@dataclasses.dataclass(frozen=True)
class StructType:
    """The dataclass type behind some value."""

    cls: type

    @property
    def name(self) -> str:
        return self.cls.__name__

    def __str__(self) -> str:
        package = self.cls.__module__.rpartition(".")[2]
        return f"{package}.{self.cls.__name__}"

    def signature(self) -> str:
        """Return a string unique to this type: module path and short name."""
        return f"{self.cls.__module__}/{self}"

    def field_keys(self) -> list[str]:
        """Return the names of all fields, in declaration order."""
        return [f.name for f in dataclasses.fields(self.cls)]


def _unquote(quoted: str) -> str:
    """Decode a double-quoted string with backslash escapes."""
    if len(quoted) < 2 or quoted[0] != '"' or quoted[-1] != '"':
        raise ValueError(f"invalid syntax: {quoted!r}")
    body = quoted[1:-1]
    out: list[str] = []
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char == '"' or char == "\n":
            raise ValueError(f"invalid syntax: {quoted!r}")
        if char != "\\":
            out.append(char)
            pos += 1
            continue
        pos += 1
        if pos >= len(body):
            raise ValueError(f"invalid syntax: {quoted!r}")
        esc = body[pos]
        if esc in _ESCAPES:
            out.append(_ESCAPES[esc])
            pos += 1
        elif esc in "xuU":
            width = {"x": 2, "u": 4, "U": 8}[esc]
            digits = body[pos + 1 : pos + 1 + width]
            if len(digits) != width:
                raise ValueError(f"invalid syntax: {quoted!r}")
            try:
                code = int(digits, 16)
            except ValueError:
                raise ValueError(f"invalid syntax: {quoted!r}") from None
            if esc == "x":
                out.append(bytes([code]).decode("latin-1"))
            else:
                if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                    raise ValueError(f"invalid syntax: {quoted!r}")
                out.append(chr(code))
            pos += 1 + width
        elif "0" <= esc <= "7":
            digits = body[pos : pos + 3]
            if len(digits) != 3 or any(not "0" <= d <= "7" for d in digits):
                raise ValueError(f"invalid syntax: {quoted!r}")
            code = int(digits, 8)
            if code > 255:
                raise ValueError(f"invalid syntax: {quoted!r}")
            out.append(chr(code))
            pos += 3
        else:
            raise ValueError(f"invalid syntax: {quoted!r}")
    return "".join(out)


def parse_tag(tag: str) -> dict[str, str]:
    """Parse a tag string like ``'a:"1" b:"2"'`` into a dict.

    Parsing stops at the first malformed pair. A value whose escapes cannot be
    decoded raises ValueError.
    """
    data: dict[str, str] = {}
    while tag:
        tag = tag.lstrip(" ")
        if not tag:
            break
        i = 0
        while i < len(tag) and tag[i] > " " and tag[i] not in ':"\x7f':
            i += 1
        if i == 0 or i + 1 >= len(tag) or tag[i] != ":" or tag[i + 1] != '"':
            break
        key = tag[:i]
        tag = tag[i + 1 :]
        i = 1
        while i < len(tag) and tag[i] != '"':
            if tag[i] == "\\":
                i += 1
            i += 1
        if i >= len(tag):
            break
        quoted = tag[: i + 1]
        tag = tag[i + 1 :]
        data[key] = _unquote(quoted)
    return data


def _kind_name(obj: Any) -> str:
    if obj is None:
        return "invalid"
    if isinstance(obj, type):
        return obj.__name__
    return type(obj).__name__


def _resolve(obj: Any) -> tuple[type | None, Any, str]:
    """Find the dataclass behind ``obj``: (class, instance or None, kind name)."""
    while True:
        if dataclasses.is_dataclass(obj):
            if isinstance(obj, type):
                return obj, None, "struct"
            return type(obj), obj, "struct"
        origin = typing.get_origin(obj)
        if origin is not None:
            args = [a for a in typing.get_args(obj) if a is not type(None)]
            if origin is typing.Union or origin is types.UnionType:
                if not args:
                    return None, None, "invalid"
                obj = args[0]
                continue
            if isinstance(origin, type) and issubclass(origin, Iterable) and not issubclass(
                origin, (Mapping, str, bytes)
            ):
                if not args:
                    return None, None, origin.__name__
                obj = args[0]
                continue
            return None, None, _kind_name(origin)
        if isinstance(obj, (list, tuple)) and obj:
            obj = obj[0]
            continue
        return None, None, _kind_name(obj)


def _field_type(cls: type, annotation: Any) -> Any:
    """Return the annotation, looking a plain class name up in the defining module."""
    if not isinstance(annotation, str):
        return annotation
    name = annotation.strip()
    for suffix in (" | None", "|None"):
        if name.endswith(suffix):
            name = name[: -len(suffix)].strip()
    if name.startswith("Optional[") and name.endswith("]"):
        name = name[len("Optional[") : -1].strip()
    if not name.isidentifier():
        return annotation
    module = inspect.getmodule(cls)
    namespace = vars(module) if module is not None else {}
    return namespace.get(name, annotation)


def _field_values(obj: Any) -> list[Field]:
    cls, instance, _ = _resolve(obj)
    if cls is None:
        raise TypeError(
            "given value should be either type of struct/*struct/[]struct/[]*struct"
        )
    fields = []
    for f in dataclasses.fields(cls):
        if instance is not None:
            value = getattr(instance, f.name)
        elif f.default is not dataclasses.MISSING:
            value = f.default
        elif f.default_factory is not dataclasses.MISSING:
            value = f.default_factory()
        else:
            value = None
        meta = f.metadata
        tags = parse_tag(meta["tag"]) if isinstance(meta.get("tag"), str) else {}
        tags.update(
            (k, v)
            for k, v in meta.items()
            if k not in ("tag", "embedded") and isinstance(k, str) and isinstance(v, str)
        )
        fields.append(
            Field(
                name=f.name,
                type=_field_type(cls, f.type),
                value=value,
                tags=tags,
                embedded=bool(meta.get("embedded", False)),
            )
        )
    return fields


def _embedded_source(field: Field) -> Any:
    return field.value if field.value is not None else field.type


def _priority_tag(field: Field, priority: Iterable[str] | None) -> str:
    tag_value = ""
    for key in priority or ():
        tag_value = field.tag(key)
        if tag_value and tag_value != "-":
            break
    return tag_value


def tag_fields(obj: Any, priority: Iterable[str] | None) -> list[Field]:
    """Return the public fields of ``obj`` that carry one of the ``priority`` tags.

    ``obj`` may be a dataclass instance or class, a list of instances, or a
    type hint such as ``list[X]`` or ``X | None``. Embedded fields are searched
    recursively. Each returned field has ``tag_value`` set.
    """
    priority = list(priority or ())
    result: list[Field] = []
    for field in _field_values(obj):
        if not field.is_exported():
            continue
        tag_value = _priority_tag(field, priority)
        if tag_value:
            field.tag_value = tag_value
            result.append(field)
        if field.embedded:
            result.extend(tag_fields(_embedded_source(field), priority))
    return result


def tag_map_name(obj: Any, priority: Iterable[str] | None) -> dict[str, str]:
    """Return a mapping of tag value to field name; see :func:`tag_fields`."""
    return {field.tag_value: field.name for field in tag_fields(obj, priority)}


def tag_map_field(obj: Any, priority: Iterable[str] | None) -> dict[str, Field]:
    """Return a mapping of tag value to field; see :func:`tag_fields`."""
    return {field.tag_value: field for field in tag_fields(obj, priority)}


def field_map(
    obj: Any, priority: Iterable[str] | None, recursive: bool = False
) -> dict[str, Field]:
    """Return the public fields of ``obj`` keyed by tag value, or by name if untagged.

    With ``recursive``, untagged embedded fields are replaced by their own
    fields, which never override keys already present.
    """
    priority = list(priority or ())
    result: dict[str, Field] = {}
    for field in _field_values(obj):
        if not field.is_exported():
            continue
        tag_value = _priority_tag(field, priority)
        field.tag_value = tag_value
        if tag_value:
            result[tag_value] = field
        elif recursive and field.embedded:
            for key, sub in field_map(_embedded_source(field), priority, recursive).items():
                result.setdefault(key, sub)
        else:
            result[field.name] = field
    return result


def struct_type(obj: Any) -> StructType:
    """Return the dataclass type behind ``obj``.

    Raises TypeError when ``obj`` does not lead to a dataclass.
    """
    cls, _, kind = _resolve(obj)
    if cls is None:
        raise TypeError(f'invalid object kind "{kind}", kind of "struct" is required')
    return StructType(cls)