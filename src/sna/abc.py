from __future__ import annotations

import enum


class SerialOrdering(enum.Enum):
    """
    The outcome of comparing two serial numbers.

    Serial number arithmetic only defines a partial order, so besides the
    usual three outcomes there is ``UNORDERED`` for pairs that are exactly
    half the modulus apart.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1
    UNORDERED = 2

    def reverse(self) -> SerialOrdering:
        if self is SerialOrdering.LESS:
            return SerialOrdering.GREATER
        if self is SerialOrdering.GREATER:
            return SerialOrdering.LESS
        return self
