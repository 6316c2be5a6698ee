"""Reader and writer over fixed byte buffers."""

from __future__ import annotations

__all__ = ["SliceReader", "SliceWriter"]


def _eof_error(available: int, requested: int) -> EOFError:
    return EOFError(
        f"buffer contains only {available} bytes but {requested} requested"
    )


class SliceReader:
    """Reads a fixed byte sequence while advancing a cursor."""

    def __init__(self, content: bytes = b"") -> None:
        self._content = bytes(content)
        self._pos = 0

    def __repr__(self) -> str:
        return f"SliceReader(pos={self._pos}, size={len(self._content)})"

    @property
    def content(self) -> bytes:
        """The whole underlying content."""
        return self._content

    @property
    def pos(self) -> int:
        """Cursor position."""
        return self._pos

    def num_remaining_bytes(self) -> int:
        """Number of bytes not yet read."""
        return len(self._content) - self._pos

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes.

        Raises :class:`EOFError` without moving the cursor if fewer
        bytes remain.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        remaining = self.num_remaining_bytes()
        if remaining < size:
            raise _eof_error(remaining, size)
        chunk = self._content[self._pos:self._pos + size]
        self._pos += size
        return chunk


class SliceWriter:
    """Writes into a fixed, mutable byte buffer while advancing a cursor.

    The buffer (a ``bytearray`` or a writable ``memoryview``) is modified
    in place.
    """

    def __init__(self, content: bytearray | memoryview | None = None) -> None:
        view = memoryview(bytearray() if content is None else content)
        if view.readonly:
            raise TypeError("buffer must be writable")
        self._view = view.cast("B") if view.format != "B" else view
        self._pos = 0

    def __repr__(self) -> str:
        return f"SliceWriter(pos={self._pos}, size={len(self._view)})"

    @property
    def content(self) -> bytes:
        """A copy of the whole underlying buffer."""
        return self._view.tobytes()

    @property
    def pos(self) -> int:
        """Cursor position."""
        return self._pos

    def num_remaining_bytes(self) -> int:
        """Number of bytes that can still be written."""
        return len(self._view) - self._pos

    def write_all(self, data: bytes) -> None:
        """Write all of ``data``.

        Raises :class:`EOFError` without writing anything if the buffer
        lacks space.
        """
        remaining = self.num_remaining_bytes()
        if remaining < len(data):
            raise _eof_error(remaining, len(data))
        end = self._pos + len(data)
        self._view[self._pos:end] = data
        self._pos = end

    def flush(self) -> int:
        """Writes go straight to the buffer; return the bytes written so far."""
        return self._pos