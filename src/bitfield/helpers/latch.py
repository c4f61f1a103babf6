from typing import Optional

from .debug import get_logger

logger = get_logger("latch")


class LatchingBitField:
    """
    Fail-fast wrapper around a ``BitField``.

    The first mutating call that raises is latched: from then on every
    mutating call (set/clear/toggle/insert) raises the stored error again
    without touching the buffer, until ``reset()``. Reads are never blocked.
    """

    def __init__(self, field):
        self.field = field
        self._error: Optional[Exception] = None

    @property
    def error(self) -> Optional[Exception]:
        """The latched error, or ``None``."""
        return self._error

    def reset(self) -> None:
        self._error = None

    def _mutate(self, op, *args):
        if self._error is not None:
            raise self._error
        try:
            op(*args)
        except Exception as exc:
            logger.debug(f"[latch] {op.__name__}{args} latched {exc!r}")
            self._error = exc
            raise

    # mutating
    def set_bit(self, pos: int) -> None:
        self._mutate(self.field.set_bit, pos)

    def clear_bit(self, pos: int) -> None:
        self._mutate(self.field.clear_bit, pos)

    def toggle_bit(self, pos: int) -> None:
        self._mutate(self.field.toggle_bit, pos)

    def insert_uint(self, offset: int, size: int, value: int) -> None:
        self._mutate(self.field.insert_uint, offset, size, value)

    # read-only, never latched
    def test_bit(self, pos: int) -> bool:
        return self.field.test_bit(pos)

    def extract_uint(self, offset: int, size: int) -> int:
        return self.field.extract_uint(offset, size)

    def bytes(self) -> bytes:
        return self.field.bytes()

    def size(self) -> int:
        return self.field.size()

    def __len__(self):
        return len(self.field)

    def __repr__(self):
        return f"<LatchingBitField {self.field!r} error={self._error!r}>"
