"""Shared test fixtures."""

from __future__ import annotations

import pytest

from utf8index import CharWalker

# Valid UTF-8 samples covering every standard width.
_VALID_SAMPLES: list[str] = [
    "",
    "a",
    "Hello world",
    "héllo",
    "Größe des Gebäudes",
    "これはテストです。",
    "这是中文测试文本",
    "Hello 🌍🌎🌏",
    "mixed ascii, ñ, 中, and 🎉 at the end 🎉",
    "x" * 100 + "é" * 50 + "中" * 33 + "🌍" * 20,
]

# Byte strings that are not valid UTF-8.
_MALFORMED_SAMPLES: list[bytes] = [
    b"A\x80B",
    b"\x80\x80\x80",
    b"\xff\xfeabc",
    b"abc\xc3",
    b"\xc3A",
    b"\xe4\xb8",
    b"\xf8\x88\x80\x80\x80z",
    b"\xfc\x84\x80\x80\x80\x80z",
    b"a" * 40 + b"\xc3" + b"b" * 40,
    b"\x80" * 17 + b"tail",
]


@pytest.fixture(params=_VALID_SAMPLES, ids=repr)
def valid_text(request: pytest.FixtureRequest) -> bytes:
    """Each valid sample, encoded."""
    return request.param.encode()


@pytest.fixture(params=_MALFORMED_SAMPLES, ids=repr)
def malformed_bytes(request: pytest.FixtureRequest) -> bytes:
    """Each malformed sample."""
    return request.param


def _walker_count(data: bytes) -> int:
    """Reference character count: drive a walker over every byte up to NUL."""
    walker = CharWalker()
    for byte in data:
        if byte == 0:
            break
        walker.step(byte)
    return walker.count


@pytest.fixture
def walker_count():
    """The reference counter, for comparing against the bulk scanner."""
    return _walker_count
