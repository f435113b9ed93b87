from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Params:
    # Number of symbols in the digit alphabet.
    base: int = 36
    # Clamp range for the digit threshold t.
    tmin: int = 1
    tmax: int = 26
    # Bias adaptation shape; changing either breaks interop with every
    # other IDNA implementation.
    skew: int = 38
    damp: int = 700
    initial_bias: int = 72
    # First extended code point.
    initial_n: int = 0x80
    delimiter: str = "-"
    # ACE prefix marking a label as Punycode.
    prefix: str = "xn--"
    # Ceiling for delta, i, w and n (RFC 3492 section 6.4).
    max_int: int = 0x7FFFFFFF


# Parameter set for IDNA, the only one this package implements.
IDNA = Params()
