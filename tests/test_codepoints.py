import pytest

from punycode_codec import (
    MalformedInputError,
    code_point_at,
    code_point_to_utf8,
    iter_code_points,
    to_utf8,
)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"a", (0x61, 1)),
        (b"\xc3\xbc", (0xFC, 2)),
        (b"\xe4\xbe\x8b", (0x4F8B, 3)),
        (b"\xf0\x9f\x98\x80", (0x1F600, 4)),
        (b"\xf4\x8f\xbf\xbf", (0x10FFFF, 4)),
    ],
)
def test_code_point_at(data, expected):
    assert code_point_at(data) == expected


def test_code_point_at_offset():
    data = "aü例".encode("utf-8")
    assert code_point_at(data, 1) == (0xFC, 2)
    assert code_point_at(data, 3) == (0x4F8B, 3)


@pytest.mark.parametrize(
    "data",
    [
        b"\x80",  # continuation unit as lead
        b"\xc1\xbf",  # overlong two-unit form
        b"\xe0\x9f\xbf",  # overlong three-unit form
        b"\xf0\x8f\xbf\xbf",  # overlong four-unit form
        b"\xf4\x90\x80\x80",  # past U+10FFFF
        b"\xf5\x80\x80\x80",
        b"\xed\xb0\x80",  # surrogate
        b"\xe4\xbe",  # truncated
        b"\xc3\x41",  # bad continuation
    ],
)
def test_code_point_at_rejects(data):
    with pytest.raises(MalformedInputError):
        code_point_at(data)


@pytest.mark.parametrize("cp", [0, 0x7F, 0x80, 0x7FF, 0x800, 0xFFFF, 0x10000, 0x10FFFF])
def test_code_point_to_utf8_range_boundaries(cp):
    assert code_point_to_utf8(cp) == chr(cp).encode("utf-8", "surrogatepass")


@pytest.mark.parametrize("cp", [-1, 0x110000])
def test_code_point_to_utf8_rejects(cp):
    with pytest.raises(MalformedInputError):
        code_point_to_utf8(cp)


def test_iter_code_points_and_back():
    text = "bücher-例子-\U0001F600"
    data = text.encode("utf-8")
    assert list(iter_code_points(data)) == [ord(ch) for ch in text]
    assert to_utf8(ord(ch) for ch in text) == data
    assert list(iter_code_points(b"")) == []
