"""String helpers: letter checks, symbol stripping, trimming and splitting."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_TRIM_CHARS = "\t\v\n\r\f \x00\x85\xa0"
"""Characters stripped by :func:`trim` when no extra mask is given."""


def _code(b: int | str | bytes) -> int:
    """Return the numeric code of a single character or byte."""
    if isinstance(b, int):
        return b
    if isinstance(b, (str, bytes, bytearray)):
        if len(b) != 1:
            raise ValueError(f"expected a single character, got {b!r}")
        return ord(b) if isinstance(b, str) else b[0]
    raise TypeError(f"expected an int, str or bytes, got {type(b).__name__}")


def is_letter_upper(b: int | str | bytes) -> bool:
    """Tell whether ``b`` is an ASCII upper-case letter."""
    return ord("A") <= _code(b) <= ord("Z")


def is_letter_lower(b: int | str | bytes) -> bool:
    """Tell whether ``b`` is an ASCII lower-case letter."""
    return ord("a") <= _code(b) <= ord("z")


def is_letter(b: int | str | bytes) -> bool:
    """Tell whether ``b`` is an ASCII letter."""
    return is_letter_upper(b) or is_letter_lower(b)


def is_numeric(s: str) -> bool:
    """Tell whether ``s`` is a decimal number such as ``-12`` or ``123.456``."""
    if not s:
        return False
    last = len(s) - 1
    for position, char in enumerate(s):
        if char == "-" and position == 0:
            continue
        if char == ".":
            if 0 < position < last:
                continue
            return False
        if not "0" <= char <= "9":
            return False
    return True


def uc_first(s: str) -> str:
    """Return ``s`` with its first character upper-cased if it is an ASCII letter."""
    if s and is_letter_lower(s[0]):
        return s[0].upper() + s[1:]
    return s


def replace_by_map(origin: str, replaces: Mapping[str, str]) -> str:
    """Replace every key of ``replaces`` in ``origin`` by its value, case-sensitively."""
    for old, new in replaces.items():
        origin = origin.replace(old, new)
    return origin


def remove_symbols(s: str) -> str:
    """Keep only the ASCII digits and letters of ``s``."""
    return "".join(
        char
        for char in s
        if "0" <= char <= "9" or "A" <= char <= "Z" or "a" <= char <= "z"
    )


def equal_fold_without_chars(s1: str, s2: str) -> bool:
    """Compare two strings case-insensitively, ignoring every symbol."""
    return remove_symbols(s1).casefold() == remove_symbols(s2).casefold()


def trim(text: str, character_mask: str | None = None) -> str:
    """Strip whitespace, plus any characters of ``character_mask``, from both ends."""
    chars = DEFAULT_TRIM_CHARS + (character_mask or "")
    return text.strip(chars)


def split_and_trim(
    text: str, delimiter: str, character_mask: str | None = None
) -> list[str]:
    """Split ``text`` by ``delimiter``, trim every part and drop the empty ones."""
    parts = list(text) if delimiter == "" else text.split(delimiter)
    return [part for part in (trim(p, character_mask) for p in parts) if part]


def str_to_bytes(s: str) -> bytes:
    """Encode ``s`` as UTF-8 bytes."""
    return s.encode("utf-8")


def bytes_to_str(b: bytes | bytearray) -> str:
    """Decode UTF-8 bytes into a string."""
    return bytes(b).decode("utf-8")