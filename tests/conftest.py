import os

import pytest

from src.bitfield import BIG_ENDIAN, LITTLE_ENDIAN, BitOrdering


def pytest_addoption(parser):
    parser.addoption(
        "--bitfield-debug",
        action="store_true",
        help="Enable bitfield debug logging during tests",
    )


def pytest_configure(config):
    if config.getoption("--bitfield-debug"):
        os.environ["BITFIELD_DEBUG"] = "1"
        from src.bitfield.helpers import debug
        debug.enable(True)


# ---------------------------------------------------------------------------
# Orderings
# ---------------------------------------------------------------------------


@pytest.fixture(params=[LITTLE_ENDIAN, BIG_ENDIAN], ids=["lsb", "msb"])
def ordering(request):
    """Run a test once per built-in ordering."""
    return request.param


class FaultyOrdering(BitOrdering):
    """
    Wrap a real ordering and raise from chosen primitives.

    ``fail_on`` maps a primitive name ('set_bit', 'clear_bit', 'test_bit',
    'toggle_bit') to the logical positions that should fail; ``None`` fails
    every call. Calls that do not fail are forwarded to ``base``.
    """

    def __init__(self, base, fail_on):
        self.base = base
        self.fail_on = fail_on
        self.name = f"faulty-{base.name}"
        self.numpy_bitorder = base.numpy_bitorder
        self.calls = []

    def bit_index(self, pos):
        return self.base.bit_index(pos)

    def group_positions(self, offset, size):
        return self.base.group_positions(offset, size)

    def _maybe_fail(self, op, pos):
        self.calls.append((op, pos))
        if op in self.fail_on:
            positions = self.fail_on[op]
            if positions is None or pos in positions:
                raise RuntimeError(f"injected {op} failure at {pos}")

    def set_bit(self, field, pos):
        self._maybe_fail("set_bit", pos)
        super().set_bit(field, pos)

    def clear_bit(self, field, pos):
        self._maybe_fail("clear_bit", pos)
        super().clear_bit(field, pos)

    def toggle_bit(self, field, pos):
        self._maybe_fail("toggle_bit", pos)
        super().toggle_bit(field, pos)

    def test_bit(self, field, pos):
        self._maybe_fail("test_bit", pos)
        return super().test_bit(field, pos)


@pytest.fixture
def faulty():
    """Factory for fault-injecting orderings."""
    return FaultyOrdering
