"""Character counting.

Long buffers are scanned one word at a time, where a word is ``WORD_SIZE``
bytes read as a little-endian integer.  Each byte's top bits are lined up
under a shared ``0x80`` lane mask, so a handful of shifts and ANDs find every
lead byte and continuation byte in the word at once.  A word is counted in
bulk when its continuation bytes sit exactly where its lead bytes (and any
character carried in from the previous word) say they should; its character
count is then the number of bytes that are not continuations.  Words holding
a terminator, a ``0xFE``/``0xFF`` byte, or a stray or missing continuation go
through :class:`CharWalker` instead, as do the trailing bytes, so both tiers
always agree.
"""

from __future__ import annotations

from utf8index._utils import BULK_THRESHOLD, WORD_SIZE, BytesLike, _coerce_bytes
from utf8index.ops import CharWalker

_ONES = int.from_bytes(b"\x01" * WORD_SIZE, "little")
_HIGHS = _ONES * 0x80
_WORD_BITS = WORD_SIZE * 8


def _scan_word(word: int, remaining: int) -> tuple[int, int] | None:
    """Count the characters completed in one word.

    :param word: The word, little-endian, with no zero byte.
    :param remaining: Bytes owed by a character begun in the previous word.
    :returns: ``(completed, remaining)`` after the word, or ``None`` if the
        word is not well formed enough to count in bulk.
    """
    # Bit 7 of each byte lane holds bit 7, 6, ... of that byte.
    top = word & _HIGHS
    ge2 = top & (word << 1)
    ge3 = ge2 & (word << 2)
    ge4 = ge3 & (word << 3)
    ge5 = ge4 & (word << 4)
    ge6 = ge5 & (word << 5)
    if ge6 & (word << 6):
        return None  # 0xFE or 0xFF

    continuations = top & ~(word << 1)
    expected = (
        (ge2 << 8)
        | (ge3 << 16)
        | (ge4 << 24)
        | (ge5 << 32)
        | (ge6 << 40)
        | (_HIGHS & ((1 << (remaining * 8)) - 1))
    )
    if continuations != expected & _HIGHS:
        return None

    carried = (expected >> _WORD_BITS).bit_length() // 8
    completed = WORD_SIZE - continuations.bit_count()
    if carried:
        completed -= 1
    if remaining:
        completed += 1
    return completed, carried


def _count_bulk(data: bytes, walker: CharWalker) -> int:
    """Scan whole words of *data*, returning the offset where scalar scanning resumes."""
    usable = len(data) - len(data) % WORD_SIZE
    for pos in range(0, usable, WORD_SIZE):
        chunk = data[pos : pos + WORD_SIZE]
        word = int.from_bytes(chunk, "little")
        # Stop at the word holding the terminator; the scalar tier finds it.
        if (word - _ONES) & ~word & _HIGHS:
            return pos
        if walker.remaining == 0 and not word & _HIGHS:
            walker.count += WORD_SIZE
            continue
        scanned = _scan_word(word, walker.remaining)
        if scanned is None:
            for byte in chunk:
                walker.step(byte)
        else:
            completed, walker.remaining = scanned
            walker.count += completed
    return usable


def utf8_strlen(data: BytesLike) -> int:
    """Return the number of characters in *data*.

    Content ends at the first NUL byte.  Bytes that cannot start a character
    are consumed without being counted, so ``utf8_strlen(b"A\\x80B") == 2``.

    :param data: The byte string to measure.
    :returns: The character count; 0 for an empty string.
    """
    data = _coerce_bytes(data, "data")
    walker = CharWalker()
    pos = _count_bulk(data, walker) if len(data) >= BULK_THRESHOLD else 0
    for byte in data[pos:]:
        if byte == 0:
            break
        walker.step(byte)
    return walker.count
