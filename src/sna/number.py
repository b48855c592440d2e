from __future__ import annotations

import logging
from typing import ClassVar, Dict, Final, Optional, Type, Union

import attrs

from .abc import SerialOrdering
from .exceptions import UnsupportedWidthError
from .serial import (
    check_value,
    serial_add,
    serial_checked_add,
    serial_cmp,
    serial_max_delta,
)

log = logging.getLogger(__spec__.name)  # type: ignore[name-defined]


@attrs.define(frozen=True, slots=True, eq=False, order=False, repr=False)
class SerialNumber:
    """
    A serial number as defined by RFC 1982.

    There are only two operations:

    * ``+`` adds a non-negative integer modulo ``2 ** BITS`` (i.e., it wraps
      when overflowing).
    * The comparison operators follow section 3.2 of the RFC and only form a
      partial order: when two values are exactly half the modulus apart,
      ``<``, ``>``, ``<=``, ``>=`` and ``==`` are all false.  Use
      :meth:`partial_cmp` to tell that case apart explicitly.

    This class is abstract; use one of the fixed-width subclasses
    (:class:`SerialNumber8`, :class:`SerialNumber16`, :class:`SerialNumber32`,
    :class:`SerialNumber64`) or :func:`serial_number_type`.

    >>> zero = SerialNumber8(0)
    >>> one = SerialNumber8(1)
    >>> one + 255 == 0
    True
    >>> zero > 255
    True
    """

    BITS: ClassVar[int] = 0

    value: int = attrs.field()

    @value.validator
    def _check_value(self, attribute, value) -> None:
        if not self.BITS:
            raise TypeError(
                f"{type(self).__name__} has no fixed width; "
                "use one of SerialNumber8/16/32/64 instead"
            )
        check_value(value, self.BITS)

    @classmethod
    def from_int(cls, value: int) -> SerialNumber:
        return cls(value)

    @classmethod
    def modulus(cls) -> int:
        return 1 << cls.BITS

    @classmethod
    def max_delta(cls) -> int:
        return serial_max_delta(cls.BITS)

    def _operand(self, other: object) -> Optional[int]:
        if isinstance(other, SerialNumber):
            if other.BITS != self.BITS:
                return None
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _require_operand(self, other: object) -> int:
        n = self._operand(other)
        if n is None:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {other!r}"
            )
        return n

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __hash__(self) -> int:
        # Must agree with hash(int) since instances compare equal to ints.
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SerialNumber):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def partial_cmp(self, other: Union[SerialNumber, int]) -> SerialOrdering:
        """
        Returns the ordering of ``self`` relative to ``other``, which is
        :attr:`SerialOrdering.UNORDERED` when RFC 1982 leaves it undefined.
        """
        return serial_cmp(self.value, self._require_operand(other), self.BITS)

    def is_unordered(self, other: Union[SerialNumber, int]) -> bool:
        return self.partial_cmp(other) is SerialOrdering.UNORDERED

    def _compare(self, other: object) -> Optional[SerialOrdering]:
        rhs = self._operand(other)
        if rhs is None:
            return None
        return serial_cmp(self.value, rhs, self.BITS)

    def __lt__(self, other: object) -> bool:
        ordering = self._compare(other)
        if ordering is None:
            return NotImplemented
        return ordering is SerialOrdering.LESS

    def __gt__(self, other: object) -> bool:
        ordering = self._compare(other)
        if ordering is None:
            return NotImplemented
        return ordering is SerialOrdering.GREATER

    def __le__(self, other: object) -> bool:
        ordering = self._compare(other)
        if ordering is None:
            return NotImplemented
        return ordering in (SerialOrdering.LESS, SerialOrdering.EQUAL)

    def __ge__(self, other: object) -> bool:
        ordering = self._compare(other)
        if ordering is None:
            return NotImplemented
        return ordering in (SerialOrdering.GREATER, SerialOrdering.EQUAL)

    def wrapping_add(self, delta: Union[SerialNumber, int]) -> SerialNumber:
        """
        Adds ``delta`` modulo ``2 ** BITS``.

        Deltas larger than :meth:`max_delta` are outside what RFC 1982
        defines but still wrap numerically; use :meth:`checked_add` to
        reject them instead.
        """
        n = self._require_operand(delta)
        result = serial_add(self.value, n, self.BITS)
        if n > serial_max_delta(self.BITS):
            log.debug(
                "wrapping out-of-range delta %d on %d-bit serial number %d",
                n,
                self.BITS,
                self.value,
            )
        return type(self)(result)

    def checked_add(self, delta: Union[SerialNumber, int]) -> SerialNumber:
        """
        Adds ``delta`` like :meth:`wrapping_add` but raises
        :exc:`~sna.exceptions.DeltaOutOfRangeError` if it exceeds
        ``2 ** (BITS - 1) - 1``.
        """
        n = self._require_operand(delta)
        return type(self)(serial_checked_add(self.value, n, self.BITS))

    def __add__(self, other: object) -> SerialNumber:
        if self._operand(other) is None:
            return NotImplemented
        return self.wrapping_add(other)  # type: ignore[arg-type]

    __radd__ = __add__


@attrs.define(frozen=True, slots=True, eq=False, order=False, repr=False)
class SerialNumber8(SerialNumber):
    BITS: ClassVar[int] = 8


@attrs.define(frozen=True, slots=True, eq=False, order=False, repr=False)
class SerialNumber16(SerialNumber):
    BITS: ClassVar[int] = 16


@attrs.define(frozen=True, slots=True, eq=False, order=False, repr=False)
class SerialNumber32(SerialNumber):
    BITS: ClassVar[int] = 32


@attrs.define(frozen=True, slots=True, eq=False, order=False, repr=False)
class SerialNumber64(SerialNumber):
    BITS: ClassVar[int] = 64


_TYPES: Final[Dict[int, Type[SerialNumber]]] = {
    8: SerialNumber8,
    16: SerialNumber16,
    32: SerialNumber32,
    64: SerialNumber64,
}


def serial_number_type(bits: int) -> Type[SerialNumber]:
    try:
        return _TYPES[bits]
    except KeyError:
        raise UnsupportedWidthError(bits) from None
