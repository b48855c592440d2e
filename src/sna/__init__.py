from .abc import SerialOrdering
from .exceptions import (
    ConfigurationError,
    DeltaOutOfRangeError,
    SerialValueError,
    SNAError,
    UnsupportedWidthError,
)
from .number import (
    SerialNumber,
    SerialNumber8,
    SerialNumber16,
    SerialNumber32,
    SerialNumber64,
    serial_number_type,
)
from .serial import (
    DEFAULT_BITS,
    SUPPORTED_BITS,
    serial_add,
    serial_checked_add,
    serial_cmp,
    serial_ge,
    serial_gt,
    serial_half,
    serial_le,
    serial_lt,
    serial_max_delta,
)

__version__ = "0.1.0"

__all__ = (
    "SerialNumber",
    "SerialNumber8",
    "SerialNumber16",
    "SerialNumber32",
    "SerialNumber64",
    "SerialOrdering",
    "serial_number_type",
    "serial_cmp",
    "serial_lt",
    "serial_gt",
    "serial_le",
    "serial_ge",
    "serial_add",
    "serial_checked_add",
    "serial_half",
    "serial_max_delta",
    "SUPPORTED_BITS",
    "DEFAULT_BITS",
    "SNAError",
    "ConfigurationError",
    "UnsupportedWidthError",
    "SerialValueError",
    "DeltaOutOfRangeError",
)
