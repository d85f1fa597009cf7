"""Character-position indexing over UTF-8 byte strings that may be malformed."""

from __future__ import annotations

import logging

from utf8index.classify import INVALID, utf8_numbytes
from utf8index.ops import CharWalker
from utf8index.ops.convert import utf8_convert_index
from utf8index.ops.length import utf8_strlen
from utf8index.ops.replace import utf8_copyandset, utf8_strrangeset
from utf8index.ops.search import utf8_strindex, utf8_strrindex
from utf8index.ops.substring import utf8_index, utf8_substr

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "INVALID",
    "CharWalker",
    "utf8_convert_index",
    "utf8_copyandset",
    "utf8_index",
    "utf8_numbytes",
    "utf8_strindex",
    "utf8_strlen",
    "utf8_strrangeset",
    "utf8_strrindex",
    "utf8_substr",
]
