# gconvkit

Small helpers for working with loosely typed data in Python.

| Module | What it has |
| --- | --- |
| `gconvkit.strutil` | `is_letter_upper`, `is_letter_lower`, `is_letter`, `is_numeric`, `uc_first`, `replace_by_map`, `remove_symbols`, `equal_fold_without_chars`, `trim`, `split_and_trim`, `str_to_bytes`, `bytes_to_str`, and the `DEFAULT_TRIM_CHARS` constant |
| `gconvkit.empty` | `is_empty`, `is_nil` |
| `gconvkit.kinds` | `is_nil`, `is_empty`, `is_int`, `is_uint`, `is_float`, `is_slice`, `is_array`, `is_map`, `is_struct` |
| `gconvkit.locks` | `Mutex`, `RWMutex` |
| `gconvkit.readcloser` | `ReadCloser` |
| `gconvkit.structs` | `Field`, `StructType`, `parse_tag`, `tag_fields`, `tag_map_name`, `tag_map_field`, `field_map`, `struct_type` |

## Install

```
pip install .
```

## Strings

```python
from gconvkit.strutil import remove_symbols, equal_fold_without_chars, split_and_trim, is_numeric

remove_symbols("-a-b._a c1!@#$%^&*()_+:\";'.,'01")   # "abac101"
equal_fold_without_chars("User-Name", "user_name")   # True
split_and_trim(" a , b ,, c ", ",")                  # ["a", "b", "c"]
is_numeric("-123.456"), is_numeric("1.")             # True, False
```

`trim` strips tabs, newlines, spaces, NUL, `\x85` and `\xa0` from both ends, plus any
characters given as `character_mask`. `str_to_bytes` and `bytes_to_str` encode and
decode UTF-8.

## Empty and kind checks

`empty.is_empty` is true for `None`, `False`, numeric zero, zero-length strings and
containers, objects whose `is_zero()` method returns true, and dataclass instances
that declare no fields. `empty.is_nil` is true for `None`; with `trace_source=True` it
also follows weak references and is true when the chain ends in a dead reference.

In `gconvkit.kinds`, `is_int` excludes booleans, `is_uint` means a non-negative
integer, `is_slice` and `is_array` mean a sequence other than a string or bytes,
`is_map` means a mapping and `is_struct` means a dataclass instance.

```python
from gconvkit.empty import is_empty
from gconvkit.kinds import is_uint, is_slice

is_empty(0), is_empty([]), is_empty("x")   # True, True, False
is_uint(-1), is_slice("abc")               # False, False
```

## Locks

`Mutex(safe)` and `RWMutex(safe)` only lock when `safe` is true; otherwise every call
is a no-op, which keeps single-threaded code cheap. Both work as context managers
(the write lock for `RWMutex`), and `RWMutex.read_locked()` holds the read lock for a
`with` block. Waiting writers hold off new readers. Releasing a safe lock that is not
held raises `RuntimeError`.

```python
from gconvkit.locks import Mutex, RWMutex

mutex = Mutex(True)
with mutex:
    ...

lock = RWMutex(True)
with lock.read_locked():
    ...
```

## Replayable reader

`ReadCloser(content, repeatable)` reads from a fixed byte string. `read(size)` returns
up to `size` bytes, and an empty result marks the end. When `repeatable` is true,
reaching the end rewinds to the start. `close()` only sets `closed`, and the content
stays readable. `ReadCloser.from_reader(reader, repeatable)` reads a binary stream to
the end, closes it and wraps what it read.

```python
from gconvkit.readcloser import ReadCloser

body = ReadCloser(b"\x01\x02\x03\x04", True)
body.read(3)      # b"\x01\x02\x03"
body.read(3)      # b"\x04"
body.read_all()   # b"\x01\x02\x03\x04" again
```

## Dataclass field tags

Tags live in dataclass field metadata. A `"tag"` entry holds a tag string such as
`'json:"id" params:"uid"'`, which `parse_tag` splits into a dict. Any other string
entry counts as a tag of its own. A field with `"embedded": True` in its metadata
is searched as well. Fields whose names start with an underscore are skipped.

```python
from dataclasses import dataclass, field
from gconvkit.structs import tag_map_name, field_map, struct_type

@dataclass
class User:
    uid: int = 0
    name: str = field(default="", metadata={"tag": 'params:"name"'})
    nick_name: str = field(default="", metadata={"tag": 'my-tag1:"nick1" params:"nick"'})

tag_map_name(User, ["params"])             # {"name": "name", "nick": "nick_name"}
tag_map_name(User, ["my-tag1", "params"])  # {"name": "name", "nick1": "nick_name"}
sorted(field_map(User, ["params"]))        # ["name", "nick", "uid"]
struct_type(list[User]).field_keys()       # ["uid", "name", "nick_name"]
```

These functions accept a dataclass instance or class, a non-empty list of instances,
or a type hint such as `list[User]` or `User | None`. `struct_type` and the tag
functions raise `TypeError` when no dataclass can be found. `parse_tag` raises
`ValueError` when a quoted value has an escape it cannot decode.

## What it does not do

The package does not convert values between types, such as strings to numbers, and
it does not fill objects from mappings or JSON. It only provides the checks, string
helpers, locks, reader and tag inspection described above. It has no command-line
program.

## Running the tests

```
pip install .[test]
pytest
```