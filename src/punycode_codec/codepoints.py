"""UTF-8 <-> code point helpers.

ex) code_point_at(b"\xc3\xbc", 0) -> (0xFC, 2)
ex) code_point_to_utf8(0xFC) -> b"\xc3\xbc"
"""

from typing import Iterable, Iterator, Tuple

from .errors import MalformedInputError

__all__ = [
    "code_point_at",
    "code_point_to_utf8",
    "iter_code_points",
    "to_utf8",
]

MAX_CODE_POINT = 0x10FFFF


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    # 0x80-0xBF are continuation units, 0xC0/0xC1 only start overlong forms.
    if lead < 0xC2:
        return 0
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    # 0xF5 and above would encode past U+10FFFF.
    if lead < 0xF5:
        return 4
    return 0


def code_point_at(data: bytes, pos: int = 0) -> Tuple[int, int]:
    """Decode the UTF-8 sequence starting at ``data[pos]``.

    Returns ``(code_point, units_consumed)``. Raises ``MalformedInputError``
    for invalid lead units, missing or bad continuation units, overlong
    three/four unit forms, surrogates and values past U+10FFFF.
    """
    lead = data[pos]
    size = _sequence_length(lead)
    if size == 0:
        raise MalformedInputError(f"invalid UTF-8 lead unit 0x{lead:02X} at {pos}")
    if size == 1:
        return lead, 1
    if pos + size > len(data):
        raise MalformedInputError(f"truncated UTF-8 sequence at {pos}")

    tail = data[pos + 1 : pos + size]
    if any(unit & 0xC0 != 0x80 for unit in tail):
        raise MalformedInputError(f"invalid UTF-8 continuation unit at {pos}")

    cp = lead & (0xFF >> (size + 1))
    for unit in tail:
        cp = (cp << 6) | (unit & 0x3F)

    if (size == 3 and cp < 0x800) or (size == 4 and cp < 0x10000):
        raise MalformedInputError(f"overlong UTF-8 sequence at {pos}")
    if 0xD800 <= cp <= 0xDFFF or cp > MAX_CODE_POINT:
        raise MalformedInputError(f"invalid code point U+{cp:X} at {pos}")
    return cp, size


def code_point_to_utf8(cp: int) -> bytes:
    """Minimal UTF-8 form of ``cp``."""
    if cp < 0:
        raise MalformedInputError(f"negative code point {cp}")
    if cp < 0x80:
        return bytes((cp,))
    if cp < 0x800:
        return bytes((0xC0 | cp >> 6, 0x80 | cp & 0x3F))
    if cp < 0x10000:
        return bytes((0xE0 | cp >> 12, 0x80 | cp >> 6 & 0x3F, 0x80 | cp & 0x3F))
    if cp <= MAX_CODE_POINT:
        return bytes(
            (
                0xF0 | cp >> 18,
                0x80 | cp >> 12 & 0x3F,
                0x80 | cp >> 6 & 0x3F,
                0x80 | cp & 0x3F,
            )
        )
    raise MalformedInputError(f"code point U+{cp:X} is outside Unicode")


def iter_code_points(data: bytes) -> Iterator[int]:
    pos = 0
    while pos < len(data):
        cp, size = code_point_at(data, pos)
        yield cp
        pos += size


def to_utf8(code_points: Iterable[int]) -> bytes:
    return b"".join(code_point_to_utf8(cp) for cp in code_points)
