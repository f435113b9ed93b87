"""Exceptions raised by the codec.

Labels that are simply not Punycode are never errors: ``decode`` hands
them back unchanged. These cover input that claims to be encoded (or to be
UTF-8) and is not.
"""

__all__ = [
    "PunycodeError",
    "InvalidDigitError",
    "MalformedInputError",
    "InputTooLargeError",
]


class PunycodeError(ValueError):
    """Base class for every codec failure."""


class InvalidDigitError(PunycodeError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid Punycode digit {char!r} at position {position}")


class MalformedInputError(PunycodeError):
    """Truncated digit stream, bad UTF-8, or a code point outside Unicode."""


class InputTooLargeError(PunycodeError):
    """An intermediate value would exceed ``Params.max_int``."""
