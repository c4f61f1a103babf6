from typing import Iterable, Union

import numpy as np

from .helpers.debug import get_logger
from .helpers.ordering import BitOrdering, resolve_ordering

logger = get_logger("bitfield")

OrderingLike = Union[BitOrdering, str, None]


class BitField:
    """
    Fixed-size, byte-backed field of bits.

    The field owns a ``bytearray`` of ``ceil(bit_count / 8)`` bytes and hands
    every positional operation to its ordering strategy. ``bit_count`` need
    not be a multiple of 8; padding bits in the last byte are never read or
    written.

    >>> bf = BitField(16, ordering='msb')
    >>> bf.set_bit(9)
    >>> bf.bytes()
    b'\\x00@'
    """

    def __init__(self, bit_count: int = 0, ordering: OrderingLike = None):
        if bit_count < 0:
            raise ValueError("bit_count must be non-negative")
        self.bit_count = bit_count
        self.ordering = resolve_ordering(ordering)
        self.data = bytearray(self.bittobyte(bit_count))
        logger.debug(f"[new] {self.ordering.name} bit_count={bit_count} bytes={len(self.data)}")

    @classmethod
    def new(cls, bit_count: int, ordering: OrderingLike = None) -> "BitField":
        return cls(bit_count, ordering=ordering)

    @classmethod
    def from_bytes(cls, data, bit_count: int, ordering: OrderingLike = None) -> "BitField":
        """
        Build a field over an independent copy of ``data``.

        ``bit_count`` is taken as given: it may be larger or smaller than
        ``8 * len(data)``. Nothing is validated here, a mismatch only shows
        up at the first access that runs past the buffer.
        """
        field = cls.__new__(cls)
        field.bit_count = bit_count
        field.ordering = resolve_ordering(ordering)
        field.data = bytearray(data)
        logger.debug(f"[from_bytes] {field.ordering.name} bit_count={bit_count} bytes={len(field.data)}")
        return field

    @classmethod
    def from_bits(cls, bits: Iterable[int], ordering: OrderingLike = None) -> "BitField":
        """Pack a sequence of 0/1 values (logical order) into a new field."""
        ordering = resolve_ordering(ordering)
        arr = np.asarray(list(bits), dtype=np.uint8)
        if arr.size and arr.max() > 1:
            raise ValueError("bits must contain only 0 and 1")
        packed = np.packbits(arr, bitorder=ordering.numpy_bitorder)
        return cls.from_bytes(packed.tobytes(), int(arr.size), ordering=ordering)

    # ------------------------------------------------------------------
    # buffer access
    # ------------------------------------------------------------------
    def bytes(self) -> bytes:
        """Return a copy of the backing buffer."""
        return bytes(self.data)

    def __bytes__(self):
        return self.bytes()

    def size(self) -> int:
        return self.bit_count

    def __len__(self):
        return self.bit_count

    def hex(self) -> str:
        return self.data.hex()

    def copy(self) -> "BitField":
        return type(self).from_bytes(self.data, self.bit_count, ordering=self.ordering)

    def to_bits(self) -> np.ndarray:
        """Unpack the field into a ``uint8`` array of 0/1 in logical bit order."""
        raw = np.frombuffer(bytes(self.data), dtype=np.uint8)
        return np.unpackbits(raw, bitorder=self.ordering.numpy_bitorder)[:self.bit_count]

    def to_bitstring(self) -> str:
        return ''.join(str(bit) for bit in self.to_bits())

    # ------------------------------------------------------------------
    # single bits
    # ------------------------------------------------------------------
    def set_bit(self, pos: int) -> None:
        self.ordering.set_bit(self, pos)

    def clear_bit(self, pos: int) -> None:
        self.ordering.clear_bit(self, pos)

    def toggle_bit(self, pos: int) -> None:
        self.ordering.toggle_bit(self, pos)

    def test_bit(self, pos: int) -> bool:
        return self.ordering.test_bit(self, pos)

    # ------------------------------------------------------------------
    # multi-bit groups
    # ------------------------------------------------------------------
    def insert_uint(self, offset: int, size: int, value: int) -> None:
        logger.debug(f"[insert_uint] ENTER: offset={offset}, size={size}, value={value:#x}")
        self.ordering.insert_uint(self, offset, size, value)

    def extract_uint(self, offset: int, size: int) -> int:
        value = self.ordering.extract_uint(self, offset, size)
        logger.debug(f"[extract_uint] offset={offset}, size={size} -> {value:#x}")
        return value

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _intceil(val, base=8):
        """Return the smallest multiple of `base` that is >= `val`."""
        return (val + base - 1) // base * base

    def bittobyte(self, bits):
        return self._intceil(bits) // 8

    def __eq__(self, other):
        if not isinstance(other, BitField):
            return NotImplemented
        return (self.ordering is other.ordering
                and self.bit_count == other.bit_count
                and self.data == other.data)

    __hash__ = None

    def __repr__(self):
        return f"<BitField {self.ordering.name} bits={self.bit_count} data={self.hex()}>"


def new(bit_count: int, ordering: OrderingLike = None) -> BitField:
    return BitField.new(bit_count, ordering=ordering)


def from_bytes(data, bit_count: int, ordering: OrderingLike = None) -> BitField:
    return BitField.from_bytes(data, bit_count, ordering=ordering)
