"""Punycode codec - RFC 3492 with the IDNA parameter set.
Maps Unicode domain labels to ``xn--`` ASCII labels and back.
"""

from .codec import (
    adapt,
    decode,
    decode_integer,
    decode_to_utf8,
    encode,
    encode_integer,
)
from .codepoints import (
    code_point_at,
    code_point_to_utf8,
    iter_code_points,
    to_utf8,
)
from .errors import (
    InputTooLargeError,
    InvalidDigitError,
    MalformedInputError,
    PunycodeError,
)
from .host import decode_host, encode_host
from .config import IDNA, Params

__all__ = [
    "encode",
    "decode",
    "decode_to_utf8",
    "adapt",
    "encode_integer",
    "decode_integer",
    "code_point_at",
    "code_point_to_utf8",
    "iter_code_points",
    "to_utf8",
    "PunycodeError",
    "InvalidDigitError",
    "MalformedInputError",
    "InputTooLargeError",
    "encode_host",
    "decode_host",
    "IDNA",
    "Params",
]
