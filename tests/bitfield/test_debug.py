import logging

import pytest

from src.bitfield import BitField
from src.bitfield.helpers import debug


@pytest.fixture
def restore_debug():
    was_enabled = debug.is_enabled()
    was_verbosity = debug._VERBOSITY
    yield
    debug.configure(was_enabled, was_verbosity)
    if not was_enabled:
        logging.getLogger("bitfield").setLevel(logging.NOTSET)


def test_get_logger_namespace():
    assert debug.get_logger("ordering").name == "bitfield.ordering"


def test_enable_installs_single_handler(restore_debug):
    debug.enable(True)
    debug.enable(True)
    root = logging.getLogger("bitfield")
    streams = [h for h in root.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    assert debug.is_enabled()
    debug.enable(False)
    assert not debug.is_enabled()
    assert debug.verbosity() == 0


def test_operation_logging(restore_debug, caplog):
    debug.configure(True, verbosity=1)
    with caplog.at_level(logging.DEBUG, logger="bitfield"):
        bf = BitField(16, 'lsb')
        bf.insert_uint(0, 4, 0xf)
        bf.set_bit(9)
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("[new] lsb bit_count=16") for m in messages)
    assert any(m.startswith("[insert_uint] ENTER") for m in messages)
    assert not any(m.startswith("[set_bit]") for m in messages)


def test_bit_level_logging(restore_debug, caplog):
    debug.configure(True, verbosity=2)
    with caplog.at_level(logging.DEBUG, logger="bitfield"):
        BitField(16, 'msb').set_bit(9)
    assert "[set_bit] msb pos=9 -> byte=1 bit=6" in [r.getMessage() for r in caplog.records]
