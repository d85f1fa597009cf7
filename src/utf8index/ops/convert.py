"""Byte position to character index conversion."""

from __future__ import annotations

from utf8index._utils import BytesLike, _coerce_bytes, _content_end, _validate_index
from utf8index.ops import CharWalker


def utf8_convert_index(data: BytesLike, byte_index: int) -> int:
    """Translate a 1-based byte position in *data* into a 1-based character index.

    Useful for turning an offset reported by a byte-oriented tool (a parser
    error column, say) into a position a user would count.  A byte inside a
    multi-byte character maps to that character; positions past the end map
    to one past the last character.

    :param data: The byte string the position refers to.
    :param byte_index: A 1-based byte position.
    :returns: The 1-based index of the character holding that byte.
    """
    data = _coerce_bytes(data, "data")
    _validate_index(byte_index, "byte_index")
    walker = CharWalker()
    for byte in data[: min(_content_end(data), max(byte_index - 1, 0))]:
        walker.step(byte)
    return walker.count + 1
