import string

from .config import IDNA

# Digit alphabet for generalized variable-length integers: a-z are 0-25,
# 0-9 are 26-35.

DIGITS = string.ascii_lowercase + string.digits

itos = dict(enumerate(DIGITS))
stoi = {c: i for i, c in itos.items()}
# Decoders must accept upper-case digits too (RFC 3492 section 5).
stoi_any_case = {**stoi, **{c.upper(): i for c, i in stoi.items() if c.isalpha()}}

# Everything an encoded label may contain: LDH without upper case.
ACE_CHARS = frozenset(DIGITS + IDNA.delimiter)

BASIC_LIMIT = 0x80


def is_basic(cp: int) -> bool:
    """ex) is_basic(ord("a")) -> True, is_basic(0xFC) -> False"""
    return cp < BASIC_LIMIT


def is_ace_label(label: str) -> bool:
    """Check that every character of ``label`` is in ``{a-z, 0-9, -}``.

    ex) is_ace_label("xn--bcher-kva") -> True
    ex) is_ace_label("xn--Bcher-kva") -> False
    """
    return all(ch in ACE_CHARS for ch in label)


def normalize_label(label: str) -> str:
    """ex) normalize_label("  Bücher ") -> "bücher"
    """
    return (label or "").strip().lower()
