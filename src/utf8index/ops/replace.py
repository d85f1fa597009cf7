"""Character-range replacement."""

from __future__ import annotations

import logging

from utf8index._utils import (
    BytesLike,
    _coerce_bytes,
    _content_end,
    _owned,
    _terminated,
    _validate_index,
)
from utf8index.ops import CharWalker, walk

logger = logging.getLogger(__name__)


def utf8_strrangeset(
    data: BytesLike, from_: int, to: int, replacement: BytesLike
) -> bytes:
    """Replace characters *from_* through *to* (1-based, inclusive) of *data*.

    The result is the bytes before character *from_*, then *replacement*,
    then the bytes after character *to*.  A range running past the end
    leaves an empty tail; ``to < from_`` inserts *replacement* before
    character *from_* without removing anything.

    :param data: The source byte string.
    :param from_: Index of the first character to replace.
    :param to: Index of the last character to replace.
    :param replacement: The bytes to put in place of the range.
    :returns: A new byte string, never *data* or
        *replacement* itself; an empty result is the shared ``b""``.
    """
    data = _coerce_bytes(data, "data")
    replacement = _terminated(_coerce_bytes(replacement, "replacement"))
    _validate_index(from_, "from_")
    _validate_index(to, "to")
    end = _content_end(data)
    walker = CharWalker()

    prefix_end = walk(data, 0, end, walker, from_ - 1)
    suffix_start = walk(data, prefix_end, end, walker, to)
    if suffix_start >= end:
        logger.debug("replacement range %d..%d reaches the end of the string", from_, to)
    return _owned(data[:prefix_end], replacement, data[suffix_start:end])


def utf8_copyandset(data: BytesLike, index: int, replacement: BytesLike) -> bytes:
    """Replace the single character at 1-based *index* with *replacement*."""
    return utf8_strrangeset(data, index, index, replacement)
