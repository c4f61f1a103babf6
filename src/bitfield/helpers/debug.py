from __future__ import annotations

"""Debug logging switches for the bitfield package.

Use `enable(True)` (or set env BITFIELD_DEBUG=1) to log construction and
multi-bit operations. Raise the verbosity to 2 (env BITFIELD_VERBOSITY=2 or
`configure(verbosity=2)`) to also log every single-bit primitive.

Helpers:
- get_logger(name): namespaced logger under "bitfield.<name>"
- enable(flag): turn logging on/off globally
- is_enabled(): check global flag
- configure(enabled, verbosity): enable + set verbosity in one call
- verbosity(): current verbosity level

By default, logging is quiet; enabling debug will configure a stream handler
on the root "bitfield" logger with a timestamped format.
"""

import logging
import os
import threading

_ENABLED = bool(int(os.getenv("BITFIELD_DEBUG", "0") or "0"))
_VERBOSITY = int(os.getenv("BITFIELD_VERBOSITY", "1") or "1")
_LOCK = threading.Lock()

_ROOT = "bitfield"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def enable(flag: bool = True, *, level: int = logging.DEBUG) -> None:
    """Enable or disable debug logging for every bitfield logger."""
    global _ENABLED
    with _LOCK:
        _ENABLED = bool(flag)
        lg = logging.getLogger(_ROOT)
        if _ENABLED:
            # Idempotent handler setup
            if not any(type(h) is logging.StreamHandler for h in lg.handlers):
                h = logging.StreamHandler()
                h.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))
                lg.addHandler(h)
            lg.setLevel(level)
        else:
            lg.setLevel(logging.CRITICAL)


def configure(enabled: bool = True, verbosity: int = 1) -> None:
    """
    Turn on/off logging and set verbosity (1=operations, 2=bit-level).
    """
    global _VERBOSITY
    _VERBOSITY = int(verbosity)
    enable(enabled and _VERBOSITY > 0)
    logging.getLogger(_ROOT).debug(f"[configure] enabled={enabled}, verbosity={verbosity}")


def is_enabled() -> bool:
    return _ENABLED


def verbosity() -> int:
    return _VERBOSITY if _ENABLED else 0


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the bitfield namespace."""
    return logging.getLogger(f"{_ROOT}.{name}")


_root = logging.getLogger(_ROOT)
if not _root.handlers:
    _root.addHandler(logging.NullHandler())
if _ENABLED:
    enable(True)
