"""Substring search by character position.

Matches only ever start on a character boundary.  When case does not
matter, ASCII letters are folded and every other byte compares by value.
"""

from __future__ import annotations

import logging

from utf8index._utils import BytesLike, _coerce_bytes, _content_end, _terminated
from utf8index.classify import is_continuation
from utf8index.ops import CharWalker
from utf8index.ops.length import utf8_strlen

logger = logging.getLogger(__name__)


def _prepare(
    haystack: BytesLike, needle: BytesLike, case_matters: bool
) -> tuple[bytes, int, bytes]:
    """Return the comparable haystack, its content end, and the comparable needle."""
    hay = _coerce_bytes(haystack, "haystack")
    pattern = _terminated(_coerce_bytes(needle, "needle"))
    if not case_matters:
        # bytes.lower() only touches A-Z.
        hay = hay.lower()
        pattern = pattern.lower()
    return hay, _content_end(hay), pattern


def utf8_strindex(
    haystack: BytesLike, needle: BytesLike, case_matters: bool = True
) -> int:
    """Return the 1-based character index of the first *needle* in *haystack*.

    An empty needle matches at the first character of a non-empty haystack.

    :param haystack: The byte string to search.
    :param needle: The byte string to look for.
    :param case_matters: If false, ASCII letters compare case-insensitively.
    :returns: The character index of the match, or 0 if there is none.
    """
    hay, end, pattern = _prepare(haystack, needle, case_matters)
    walker = CharWalker()
    for pos in range(end):
        if walker.at_boundary and hay.startswith(pattern, pos, end):
            return walker.count + 1
        walker.step(hay[pos])
    logger.debug("no forward match for %r", pattern)
    return 0


def utf8_strrindex(
    haystack: BytesLike, needle: BytesLike, case_matters: bool = True
) -> int:
    """Return the 1-based character index of the last *needle* in *haystack*.

    Candidates are scanned right to left; continuation bytes (``10xxxxxx``)
    are never tried as match starts.  A needle that itself begins with a
    continuation byte is therefore never found by this function, even where
    :func:`utf8_strindex` finds it after a skipped stray byte.  In well-formed
    text, any other needle that occurs once gets the same index from both.

    :param haystack: The byte string to search.
    :param needle: The byte string to look for.
    :param case_matters: If false, ASCII letters compare case-insensitively.
    :returns: The character index of the match, or 0 if there is none.
    """
    hay, end, pattern = _prepare(haystack, needle, case_matters)
    for pos in range(end - 1, -1, -1):
        if is_continuation(hay[pos]):
            continue
        if hay.startswith(pattern, pos, end):
            return utf8_strlen(hay[:pos]) + 1
    logger.debug("no backward match for %r", pattern)
    return 0
