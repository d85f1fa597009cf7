"""Character-range extraction."""

from __future__ import annotations

import logging

from utf8index._utils import (
    BytesLike,
    _coerce_bytes,
    _content_end,
    _owned,
    _validate_index,
)
from utf8index.ops import CharWalker, walk

logger = logging.getLogger(__name__)


def utf8_substr(data: BytesLike, lower: int, upper: int) -> bytes:
    """Return characters *lower* through *upper* (1-based, inclusive) of *data*.

    Returns ``b""`` when *lower* lies past the last character or when
    *upper* is below *lower*.  A *lower* of 1 or less starts at the first
    byte.

    :param data: The source byte string.
    :param lower: Index of the first character to keep.
    :param upper: Index of the last character to keep.
    :returns: A new byte string holding the selected characters.  It is
        never the *data* object itself, even when the whole string is
        selected; an empty result is the shared ``b""``.
    """
    data = _coerce_bytes(data, "data")
    _validate_index(lower, "lower")
    _validate_index(upper, "upper")
    end = _content_end(data)
    walker = CharWalker()

    start = walk(data, 0, end, walker, lower - 1)
    if start >= end:
        logger.debug("substring start %d is past the end of a %d-byte string", lower, end)
        return b""

    stop = walk(data, start, end, walker, upper)
    return _owned(data[start:stop])


def utf8_index(data: BytesLike, index: int) -> bytes:
    """Return the single character at 1-based *index*, or ``b""`` if out of range."""
    return utf8_substr(data, index, index)
