"""Dotted host names, one codec call per label.

ex) encode_host("Пример.Испытание") -> "xn--e1afmkfd.xn--80akhbyknj4f"
ex) decode_host("xn--fsqu00a.xn--0zwm56d") -> "例子.测试"
"""

from .charset import normalize_label
from .codec import decode, encode

__all__ = ["encode_host", "decode_host"]

LABEL_SEPARATOR = "."


def encode_host(host: str) -> str:
    labels = normalize_label(host).split(LABEL_SEPARATOR)
    return LABEL_SEPARATOR.join(encode(label) for label in labels)


def decode_host(host: str, strict: bool = False) -> str:
    labels = normalize_label(host).split(LABEL_SEPARATOR)
    return LABEL_SEPARATOR.join(decode(label, strict=strict) for label in labels)
