"""Character-position operations and the boundary walker they share."""

from __future__ import annotations

import dataclasses

from utf8index.classify import INVALID, utf8_numbytes


@dataclasses.dataclass(slots=True)
class CharWalker:
    """Byte-at-a-time character boundary tracker.

    ``remaining`` is the number of bytes still owed to the character being
    read; ``count`` is the number of characters fully consumed so far.  A
    byte that cannot start a character, met at a boundary, is consumed
    without touching ``count``.
    """

    remaining: int = 0
    count: int = 0

    @property
    def at_boundary(self) -> bool:
        return self.remaining == 0

    def step(self, byte: int) -> None:
        """Consume one byte."""
        if self.remaining:
            self.remaining -= 1
            if not self.remaining:
                self.count += 1
            return
        width = utf8_numbytes(byte)
        if width == 1:
            self.count += 1
        elif width != INVALID:
            self.remaining = width - 1


def walk(data: bytes, pos: int, end: int, walker: CharWalker, until: int) -> int:
    """Step *walker* through ``data[pos:end]`` until ``walker.count`` reaches *until*.

    :returns: The byte position just after the last byte consumed.
    """
    while pos < end and walker.count < until:
        walker.step(data[pos])
        pos += 1
    return pos
