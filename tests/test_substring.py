from __future__ import annotations

import pytest

from utf8index import utf8_index, utf8_strlen, utf8_substr

HELLO = "héllo".encode()


def test_single_multibyte_character():
    assert utf8_substr(HELLO, 2, 2) == "é".encode()


def test_range():
    assert utf8_substr(HELLO, 2, 4) == "éll".encode()


def test_whole_string():
    assert utf8_substr(HELLO, 1, 5) == HELLO


def test_upper_past_end_clamps():
    assert utf8_substr(HELLO, 3, 100) == b"llo"


def test_start_past_end_is_empty():
    assert utf8_substr(b"abc", 100, 100) == b""


def test_start_just_past_end_is_empty():
    assert utf8_substr(b"abc", 4, 4) == b""


def test_empty_source():
    assert utf8_substr(b"", 1, 1) == b""


def test_lower_below_one_starts_at_first_byte():
    assert utf8_substr(b"abc", 0, 2) == b"ab"
    assert utf8_substr(b"abc", -3, 1) == b"a"


def test_upper_below_lower_is_empty():
    assert utf8_substr(b"abcdef", 4, 2) == b""


def test_four_byte_characters():
    data = "a🌍b🌎".encode()
    assert utf8_substr(data, 2, 3) == "🌍b".encode()
    assert utf8_substr(data, 4, 4) == "🌎".encode()


def test_stops_at_nul():
    assert utf8_substr(b"ab\x00cd", 2, 4) == b"b"
    assert utf8_substr(b"ab\x00cd", 3, 3) == b""


def test_leading_stray_byte_included():
    assert utf8_substr(b"A\x80B", 2, 2) == b"\x80B"


def test_trailing_stray_byte_excluded():
    assert utf8_substr(b"A\x80B", 1, 1) == b"A"


def test_index_is_single_character_substr():
    assert utf8_index(HELLO, 2) == "é".encode()
    assert utf8_index(HELLO, 6) == b""


def test_returns_bytes_for_bytearray():
    result = utf8_substr(bytearray(b"abc"), 1, 2)
    assert result == b"ab"
    assert type(result) is bytes


def test_slices_rebuild_valid_text(valid_text: bytes):
    pieces = [utf8_substr(valid_text, i, i) for i in range(1, utf8_strlen(valid_text) + 1)]
    assert b"".join(pieces) == valid_text


@pytest.mark.parametrize("bad", [1.0, "1", None, True])
def test_rejects_non_integer_index(bad):
    with pytest.raises(TypeError, match="integer"):
        utf8_substr(b"abc", bad, 2)


def test_whole_string_is_a_new_object():
    source = b"abc"
    result = utf8_substr(source, 1, 3)
    assert result == source
    assert result is not source
