"""Punycode (RFC 3492) with the IDNA parameter set.

One call handles one label: no splitting on ``.``, no case folding and no
normalization happens here (see ``host`` for the dotted-name helpers).

ex) encode("bücher") -> "xn--bcher-kva"
ex) decode("xn--e1afmkfd") -> "пример"
ex) encode("example") -> "example"
"""

import logging
from typing import List, Mapping, Tuple, Union

from .charset import is_ace_label, is_basic, itos, stoi, stoi_any_case
from .codepoints import MAX_CODE_POINT, iter_code_points, to_utf8
from .config import IDNA as P
from .errors import InputTooLargeError, InvalidDigitError, MalformedInputError

__all__ = [
    "encode",
    "decode",
    "decode_to_utf8",
    "adapt",
    "encode_integer",
    "decode_integer",
]

log = logging.getLogger(__name__)


def _threshold(k: int, bias: int) -> int:
    return min(max(k - bias, P.tmin), P.tmax)


def _is_surrogate(cp: int) -> bool:
    return 0xD800 <= cp <= 0xDFFF


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation, RFC 3492 section 6.1.

    Floor division throughout; any rounding difference desynchronizes the
    encoder from the decoder.

    ex) adapt(0x67, 1, True) -> 0
    ex) adapt(745, 2, False) -> 46
    """
    delta = delta // P.damp if first_time else delta // 2
    delta += delta // num_points

    k = 0
    while delta > ((P.base - P.tmin) * P.tmax) // 2:
        delta //= P.base - P.tmin
        k += P.base

    return k + ((P.base - P.tmin + 1) * delta) // (delta + P.skew)


def encode_integer(q: int, bias: int) -> str:
    """Write ``q`` as a generalized variable-length integer.

    ex) encode_integer(0, 72) -> "a"
    ex) encode_integer(745, 72) -> "kva"
    """
    digits = []
    k = P.base
    while True:
        t = _threshold(k, bias)
        if q < t:
            digits.append(itos[q])
            return "".join(digits)
        digits.append(itos[t + (q - t) % (P.base - t)])
        q = (q - t) // (P.base - t)
        k += P.base


def decode_integer(
    text: str,
    pos: int,
    bias: int,
    start: int = 0,
    table: Mapping[str, int] = stoi,
) -> Tuple[int, int]:
    """Read one generalized variable-length integer from ``text[pos:]``.

    The digits are accumulated onto ``start``. Returns ``(value, next_pos)``.

    ex) decode_integer("kva", 0, 72) -> (745, 3)
    """
    value = start
    w = 1
    k = P.base
    while True:
        if pos >= len(text):
            raise MalformedInputError("digit sequence ends inside an integer")
        ch = text[pos]
        digit = table.get(ch)
        if digit is None:
            raise InvalidDigitError(ch, pos)
        pos += 1

        if digit > (P.max_int - value) // w:
            raise InputTooLargeError("encoded integer exceeds the supported range")
        value += digit * w

        t = _threshold(k, bias)
        if digit < t:
            return value, pos

        if w > P.max_int // (P.base - t):
            raise InputTooLargeError("digit weight exceeds the supported range")
        w *= P.base - t
        k += P.base


def _code_points(label: Union[str, bytes, bytearray]) -> List[int]:
    if isinstance(label, (bytes, bytearray)):
        return list(iter_code_points(bytes(label)))
    code_points = [ord(ch) for ch in label]
    for pos, cp in enumerate(code_points):
        if _is_surrogate(cp):
            raise MalformedInputError(f"lone surrogate U+{cp:X} at {pos}")
    return code_points


def encode(label: Union[str, bytes, bytearray]) -> str:
    """Encode one label, RFC 3492 section 6.3.

    ``label`` is a ``str`` or UTF-8 bytes. A label made only of basic code
    points comes back unchanged, without the ``xn--`` prefix.
    """
    code_points = _code_points(label)
    output = [chr(cp) for cp in code_points if is_basic(cp)]
    b = h = len(output)

    if h == len(code_points):
        return "".join(output)

    if b > 0:
        output.append(P.delimiter)

    n = P.initial_n
    bias = P.initial_bias
    delta = 0

    while h < len(code_points):
        # Smallest code point not handled yet.
        m = min(cp for cp in code_points if cp >= n)
        if m - n > (P.max_int - delta) // (h + 1):
            raise InputTooLargeError("label too long to encode")
        delta += (m - n) * (h + 1)
        n = m

        for cp in code_points:
            if cp < n:
                delta += 1
                if delta > P.max_int:
                    raise InputTooLargeError("label too long to encode")
            elif cp == n:
                output.append(encode_integer(delta, bias))
                bias = adapt(delta, h + 1, h == b)
                delta = 0
                h += 1

        delta += 1
        n += 1

    return P.prefix + "".join(output)


def decode(label: str, strict: bool = False) -> str:
    """Decode one label, RFC 3492 section 6.2.

    Labels without the ``xn--`` prefix are returned unchanged. So are
    prefixed labels containing anything outside ``{a-z, 0-9, -}``, unless
    ``strict`` is set. In that case, upper-case digits are accepted and any
    other bad character raises ``InvalidDigitError`` (or
    ``MalformedInputError`` for a non-basic literal).
    """
    if not label.startswith(P.prefix):
        log.debug("no ACE prefix, passing through %r", label)
        return label
    if not strict and not is_ace_label(label):
        log.debug("characters outside the ACE set, passing through %r", label)
        return label

    start = len(P.prefix)
    # The last delimiter splits literals from digits; earlier ones are literal.
    split = label.rfind(P.delimiter, start)
    if split == -1:
        output: List[str] = []
        pos = start
    else:
        output = list(label[start:split])
        pos = split + 1
        for offset, ch in enumerate(output):
            if not is_basic(ord(ch)):
                raise MalformedInputError(
                    f"non-basic code point {ch!r} at {start + offset}"
                )

    table = stoi_any_case if strict else stoi
    n = P.initial_n
    bias = P.initial_bias
    i = 0

    while pos < len(label):
        oldi = i
        i, pos = decode_integer(label, pos, bias, start=i, table=table)

        x = len(output) + 1
        bias = adapt(i - oldi, x, oldi == 0)

        if i // x > P.max_int - n:
            raise InputTooLargeError("decoded code point exceeds the supported range")
        n += i // x
        i %= x

        if n > MAX_CODE_POINT or _is_surrogate(n):
            raise MalformedInputError(f"decoded value 0x{n:X} is not a Unicode scalar")
        output.insert(i, chr(n))
        i += 1

    return "".join(output)


def decode_to_utf8(label: str, strict: bool = False) -> bytes:
    """``decode`` followed by UTF-8 serialization of the code points."""
    return to_utf8(ord(ch) for ch in decode(label, strict=strict))
