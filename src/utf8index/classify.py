"""Single-byte UTF-8 lead classification.

Widths follow the original (RFC 2279) lead-byte patterns, so the legacy
5- and 6-byte forms are recognised.  Nothing after the lead byte is
validated.
"""

from __future__ import annotations

#: Returned by :func:`utf8_numbytes` for bytes that cannot start a character.
INVALID: int = -1

# (mask, pattern, width), checked in order.
_LEAD_PATTERNS: tuple[tuple[int, int, int], ...] = (
    (0x80, 0x00, 1),
    (0xE0, 0xC0, 2),
    (0xF0, 0xE0, 3),
    (0xF8, 0xF0, 4),
    (0xFC, 0xF8, 5),
    (0xFE, 0xFC, 6),
)


def _width_of(byte: int) -> int:
    for mask, pattern, width in _LEAD_PATTERNS:
        if byte & mask == pattern:
            return width
    return INVALID


_WIDTHS: tuple[int, ...] = tuple(_width_of(b) for b in range(256))


def utf8_numbytes(byte: int) -> int:
    """Return the encoded width of the character led by *byte*.

    :param byte: A byte value.  Values outside 0-255 are reduced modulo 256.
    :returns: 1 to 6, or :data:`INVALID` for a continuation byte
        (``10xxxxxx``) or ``0xFE``/``0xFF``.
    """
    return _WIDTHS[byte & 0xFF]


def is_continuation(byte: int) -> bool:
    """Return True if *byte* matches ``10xxxxxx``."""
    return byte & 0xC0 == 0x80
