"""
RFC 1982 serial number arithmetic on plain unsigned integers.

* https://tools.ietf.org/html/rfc1982

Values and deltas are raw ints interpreted as unsigned integers of the
given width.  Note that when incrementing a serial number, one is allowed
to add up to ``2 ** (bits - 1) - 1``; :func:`serial_add` wraps larger
deltas anyway while :func:`serial_checked_add` rejects them.
"""

from typing import Final, Tuple

from .abc import SerialOrdering
from .exceptions import DeltaOutOfRangeError, SerialValueError, UnsupportedWidthError

SUPPORTED_BITS: Final[Tuple[int, ...]] = (8, 16, 32, 64)
DEFAULT_BITS: Final = 32


def _check_bits(bits: int) -> None:
    if bits not in SUPPORTED_BITS:
        raise UnsupportedWidthError(bits)


def check_value(value: int, bits: int, what: str = "value") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    if not (0 <= value < (1 << bits)):
        raise SerialValueError(
            f"{what} {value!r} is out of range for a {bits}-bit serial number"
        )


def serial_half(bits: int = DEFAULT_BITS) -> int:
    _check_bits(bits)
    return 1 << (bits - 1)


def serial_max_delta(bits: int = DEFAULT_BITS) -> int:
    return serial_half(bits) - 1


def serial_cmp(a: int, b: int, bits: int = DEFAULT_BITS) -> SerialOrdering:
    """
    Compares two serial numbers by their circular distances.

    Returns :attr:`SerialOrdering.UNORDERED` when the two values are exactly
    half the modulus apart, for which RFC 1982 defines no relation.
    """
    _check_bits(bits)
    check_value(a, bits)
    check_value(b, bits)
    if a == b:
        return SerialOrdering.EQUAL
    modulus = 1 << bits
    forward = (b - a) % modulus
    backward = (a - b) % modulus
    if forward == backward:
        return SerialOrdering.UNORDERED
    if forward < backward:
        return SerialOrdering.LESS
    return SerialOrdering.GREATER


def serial_lt(a: int, b: int, bits: int = DEFAULT_BITS) -> bool:
    return serial_cmp(a, b, bits) is SerialOrdering.LESS


def serial_gt(a: int, b: int, bits: int = DEFAULT_BITS) -> bool:
    return serial_cmp(a, b, bits) is SerialOrdering.GREATER


def serial_le(a: int, b: int, bits: int = DEFAULT_BITS) -> bool:
    return serial_cmp(a, b, bits) in (SerialOrdering.LESS, SerialOrdering.EQUAL)


def serial_ge(a: int, b: int, bits: int = DEFAULT_BITS) -> bool:
    return serial_cmp(a, b, bits) in (SerialOrdering.GREATER, SerialOrdering.EQUAL)


def serial_add(a: int, n: int, bits: int = DEFAULT_BITS) -> int:
    _check_bits(bits)
    check_value(a, bits)
    check_value(n, bits, "delta")
    return (a + n) & ((1 << bits) - 1)


def serial_checked_add(a: int, n: int, bits: int = DEFAULT_BITS) -> int:
    max_delta = serial_max_delta(bits)
    check_value(a, bits)
    check_value(n, bits, "delta")
    if n > max_delta:
        raise DeltaOutOfRangeError(n, max_delta)
    return serial_add(a, n, bits)
