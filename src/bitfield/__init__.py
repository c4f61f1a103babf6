"""Bit-level access to fixed-size byte buffers.

Classes:
    BitField - byte-backed field of bits with single-bit and uint group access
    LatchingBitField - fail-fast wrapper that latches the first mutating error
    BitOrdering - base class of the LSb-0 / MSb-0 ordering strategies

Singletons:
    LITTLE_ENDIAN, BIG_ENDIAN
"""
from .bitfield import BitField, new, from_bytes
from .helpers import (
    BitFieldError,
    OutOfRange,
    InvalidOperation,
    BitOrdering,
    LittleEndian,
    BigEndian,
    LITTLE_ENDIAN,
    BIG_ENDIAN,
    MAX_GROUP_BITS,
    get_ordering,
    LatchingBitField,
)

__all__ = [
    "BitField",
    "new",
    "from_bytes",
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
    "LatchingBitField",
]
