"""
Bit ordering strategies.

An ordering decides where logical bit ``pos`` of a field lives physically:
which byte, and which bit inside that byte. Everything else (single-bit
primitives, multi-bit insert/extract) is shared and written purely in terms
of that mapping, so the two canonical orderings differ in two small methods.

    LITTLE_ENDIAN  (LSb-0)  byte = pos // 8, bit = pos % 8
    BIG_ENDIAN     (MSb-0)  byte = pos // 8, bit = 7 - pos % 8

Multi-bit groups follow the same convention as the bytes: an LSb-0 group
keeps value bit 0 at the lowest offset, an MSb-0 group keeps the value's top
bit there.
"""
import os
from typing import Iterator, Tuple, Union

from .debug import get_logger, verbosity
from .errors import InvalidOperation, OutOfRange

logger = get_logger("ordering")

MAX_GROUP_BITS = 64


class BitOrdering:
    """
    Stateless position mapping plus the bit primitives built on it.

    Subclasses provide ``bit_index`` and ``group_positions``. Multi-bit
    operations call back into ``self.set_bit`` / ``self.clear_bit`` /
    ``self.test_bit`` for every bit, so overriding a primitive is enough to
    change (or break, for fault injection) the group operations too.
    """
    name = None
    numpy_bitorder = None

    # ------------------------------------------------------------------
    # position mapping
    # ------------------------------------------------------------------
    def bit_index(self, pos: int) -> int:
        raise NotImplementedError

    def group_positions(self, offset: int, size: int) -> Iterator[Tuple[int, int]]:
        """Yield ``(logical position, value bit)`` pairs in write order."""
        raise NotImplementedError

    def locate(self, field, pos: int) -> Tuple[int, int]:
        if pos < 0 or pos >= field.bit_count:
            logger.debug(f"[locate] pos={pos} outside [0,{field.bit_count})")
            raise OutOfRange(pos, field.bit_count)
        return pos // 8, self.bit_index(pos)

    # ------------------------------------------------------------------
    # single-bit primitives
    # ------------------------------------------------------------------
    def set_bit(self, field, pos: int) -> None:
        byte_i, bit_i = self.locate(field, pos)
        field.data[byte_i] |= 1 << bit_i
        if verbosity() > 1:
            logger.debug(f"[set_bit] {self.name} pos={pos} -> byte={byte_i} bit={bit_i}")

    def clear_bit(self, field, pos: int) -> None:
        byte_i, bit_i = self.locate(field, pos)
        field.data[byte_i] &= ~(1 << bit_i)
        if verbosity() > 1:
            logger.debug(f"[clear_bit] {self.name} pos={pos} -> byte={byte_i} bit={bit_i}")

    def toggle_bit(self, field, pos: int) -> None:
        byte_i, bit_i = self.locate(field, pos)
        field.data[byte_i] ^= 1 << bit_i
        if verbosity() > 1:
            logger.debug(f"[toggle_bit] {self.name} pos={pos} -> byte={byte_i} bit={bit_i}")

    def test_bit(self, field, pos: int) -> bool:
        byte_i, bit_i = self.locate(field, pos)
        return bool((field.data[byte_i] >> bit_i) & 1)

    # ------------------------------------------------------------------
    # multi-bit groups
    # ------------------------------------------------------------------
    def check_group(self, field, offset: int, size: int) -> None:
        if (offset < 0 or size < 0 or size > MAX_GROUP_BITS
                or offset + size > field.bit_count):
            logger.debug(f"[check_group] offset={offset} size={size} bit_count={field.bit_count}")
            raise InvalidOperation(offset, size, field.bit_count)

    def insert_uint(self, field, offset: int, size: int, value: int) -> None:
        """Write the low ``size`` bits of ``value`` at ``offset``.

        Bits are written one at a time; if a primitive raises partway
        through, the bits already written stay written.
        """
        self.check_group(field, offset, size)
        for pos, shift in self.group_positions(offset, size):
            if (value >> shift) & 1:
                self.set_bit(field, pos)
            else:
                self.clear_bit(field, pos)

    def extract_uint(self, field, offset: int, size: int) -> int:
        self.check_group(field, offset, size)
        group = 0
        for pos, shift in self.group_positions(offset, size):
            if self.test_bit(field, pos):
                group |= 1 << shift
        return group

    # ------------------------------------------------------------------
    # constructors bound to this ordering
    # ------------------------------------------------------------------
    def new(self, bit_count: int):
        from ..bitfield import BitField
        return BitField(bit_count, ordering=self)

    def from_bytes(self, data, bit_count: int):
        from ..bitfield import BitField
        return BitField.from_bytes(data, bit_count, ordering=self)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class LittleEndian(BitOrdering):
    """Least significant byte first, LSb-0 bit numbering."""
    name = "lsb"
    numpy_bitorder = "little"

    def bit_index(self, pos):
        return pos % 8

    def group_positions(self, offset, size):
        for i in range(size):
            yield offset + i, i


class BigEndian(BitOrdering):
    """Most significant byte first, MSb-0 bit numbering."""
    name = "msb"
    numpy_bitorder = "big"

    def bit_index(self, pos):
        return 7 - (pos % 8)

    def group_positions(self, offset, size):
        for i in range(size, 0, -1):
            yield offset + i - 1, size - i


LITTLE_ENDIAN = LittleEndian()
BIG_ENDIAN = BigEndian()

_ALIASES = {
    "lsb": LITTLE_ENDIAN,
    "little": LITTLE_ENDIAN,
    "le": LITTLE_ENDIAN,
    "msb": BIG_ENDIAN,
    "big": BIG_ENDIAN,
    "be": BIG_ENDIAN,
}


def get_ordering(name: str) -> BitOrdering:
    """Resolve an ordering by name (``'lsb'``/``'msb'`` and aliases)."""
    try:
        return _ALIASES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown bit order {name!r}; expected one of {sorted(_ALIASES)}") from None


def default_ordering() -> BitOrdering:
    return get_ordering(os.getenv("BITFIELD_BIT_ORDER", "lsb") or "lsb")


def resolve_ordering(ordering: Union[BitOrdering, str, None]) -> BitOrdering:
    if ordering is None:
        return default_ordering()
    if isinstance(ordering, str):
        return get_ordering(ordering)
    if not isinstance(ordering, BitOrdering):
        raise TypeError("ordering must be a BitOrdering instance or an ordering name")
    return ordering
