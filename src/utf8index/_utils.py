"""Internal shared utilities for utf8index."""

from __future__ import annotations

#: Width of one bulk-scan word, in bytes.  Words are plain Python integers,
#: so one word covers 64 bytes (512 bits) per bitwise operation.
WORD_SIZE: int = 64

#: Minimum buffer size, in bytes, before :func:`utf8_strlen` switches to
#: word-at-a-time scanning.
BULK_THRESHOLD: int = WORD_SIZE

BytesLike = bytes | bytearray | memoryview


def _coerce_bytes(value: BytesLike, name: str) -> bytes:
    """Return *value* as immutable ``bytes``, or raise TypeError."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    msg = f"{name} must be bytes-like, not {type(value).__name__}"
    raise TypeError(msg)


def _validate_index(value: int, name: str) -> None:
    """Raise TypeError if *value* is not a plain integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, not {type(value).__name__}"
        raise TypeError(msg)


def _content_end(data: bytes) -> int:
    """Return the offset of the terminating NUL, or ``len(data)`` if there is none."""
    end = data.find(0)
    return len(data) if end < 0 else end


def _terminated(data: bytes) -> bytes:
    """Return the content of *data* up to its first NUL."""
    end = data.find(0)
    return data if end < 0 else data[:end]


def _owned(*parts: BytesLike) -> bytes:
    """Concatenate *parts* into a new ``bytes`` object that is none of them.

    Slicing or joining ``bytes`` in CPython may hand back one of the operands
    unchanged; this always copies.  The only shared result is the interned
    empty ``b""``.
    """
    buf = bytearray()
    for part in parts:
        buf += part
    return bytes(buf)
