class SNAError(Exception):
    pass


class ConfigurationError(SNAError):
    pass


class UnsupportedWidthError(ConfigurationError, ValueError):
    def __init__(self, bits: int, *args) -> None:
        super().__init__(bits, *args)
        self.bits = bits

    def __str__(self) -> str:
        return f"unsupported serial number width: {self.bits!r} bits"


class SerialValueError(SNAError, ValueError):
    """
    Raised when a raw integer is not representable as an unsigned value
    of the requested serial number width.
    """

    pass


class DeltaOutOfRangeError(SerialValueError):
    """
    Raised by checked additions when the delta exceeds ``2 ** (bits - 1) - 1``,
    the largest addend RFC 1982 section 3.1 defines.
    """

    delta: int
    max_delta: int

    def __init__(self, delta: int, max_delta: int, *args) -> None:
        super().__init__(delta, max_delta, *args)
        self.delta = delta
        self.max_delta = max_delta

    def __str__(self) -> str:
        return (
            f"cannot add {self.delta} to a serial number "
            f"(the maximum delta is {self.max_delta})"
        )
