"""An in-memory byte reader that can optionally be read over and over."""

from __future__ import annotations

from typing import Any, BinaryIO


class ReadCloser:
    """Reads from a fixed byte string; closing it does not stop reading.

    When ``repeatable`` is true, reaching the end rewinds to the start, so the
    content can be read again.
    """

    def __init__(self, content: bytes | bytearray | memoryview, repeatable: bool = False) -> None:
        self._content = bytes(content)
        self._index = 0
        self._repeatable = repeatable
        self._closed = False

    @classmethod
    def from_reader(cls, reader: BinaryIO, repeatable: bool = False) -> ReadCloser:
        """Read everything from ``reader``, close it and wrap the content."""
        content = reader.read()
        close = getattr(reader, "close", None)
        if callable(close):
            close()
        return cls(content, repeatable)

    @property
    def closed(self) -> bool:
        """Whether close() has been called; the content stays readable anyway."""
        return self._closed

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` bytes, or all that remain when ``size`` is negative.

        An empty result means the end was reached.
        """
        if size < 0:
            size = len(self._content) - self._index
        chunk = self._content[self._index : self._index + size]
        self._index += len(chunk)
        if self._index >= len(self._content) and self._repeatable:
            self._index = 0
        return chunk

    def read_all(self) -> bytes:
        """Return everything that remains."""
        return self.read()

    def close(self) -> None:
        """Mark the reader closed; the content stays readable."""
        self._closed = True

    def __enter__(self) -> ReadCloser:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()