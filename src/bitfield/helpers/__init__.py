from .errors import BitFieldError, OutOfRange, InvalidOperation
from .ordering import (
    BitOrdering,
    LittleEndian,
    BigEndian,
    LITTLE_ENDIAN,
    BIG_ENDIAN,
    MAX_GROUP_BITS,
    get_ordering,
    default_ordering,
    resolve_ordering,
)
from .latch import LatchingBitField
from . import debug

__all__ = [
    "BitFieldError",
    "OutOfRange",
    "InvalidOperation",
    "BitOrdering",
    "LittleEndian",
    "BigEndian",
    "LITTLE_ENDIAN",
    "BIG_ENDIAN",
    "MAX_GROUP_BITS",
    "get_ordering",
    "default_ordering",
    "resolve_ordering",
    "LatchingBitField",
    "debug",
]
