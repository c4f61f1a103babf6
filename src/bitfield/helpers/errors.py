class BitFieldError(Exception):
    """Base class for every error raised by a bit field operation."""


class OutOfRange(BitFieldError, IndexError):
    """A single-bit position lies outside ``[0, bit_count)``."""

    def __init__(self, pos, bit_count):
        super().__init__(f"bit position {pos} out of range [0,{bit_count})")
        self.pos = pos
        self.bit_count = bit_count


class InvalidOperation(BitFieldError, ValueError):
    """A multi-bit group does not fit the field or is wider than 64 bits."""

    def __init__(self, offset, size, bit_count):
        super().__init__(
            f"group [{offset},{offset + size}) out of bounds for {bit_count} bits "
            f"or size {size} is invalid"
        )
        self.offset = offset
        self.size = size
        self.bit_count = bit_count
