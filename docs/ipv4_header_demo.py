"""Decode and patch an IPv4 header with an MSb-0 bit field.

Network headers number bits from the most significant end, so the big-endian
ordering lets field offsets be copied straight from the RFC 791 diagram.
"""

from __future__ import annotations

from src.bitfield import BIG_ENDIAN, BitField

# (name, bit offset, bit width)
IPV4_FIELDS = [
    ("version", 0, 4),
    ("ihl", 4, 4),
    ("dscp", 8, 6),
    ("ecn", 14, 2),
    ("total_length", 16, 16),
    ("identification", 32, 16),
    ("flags", 48, 3),
    ("fragment_offset", 51, 13),
    ("ttl", 64, 8),
    ("protocol", 72, 8),
    ("checksum", 80, 16),
    ("src", 96, 32),
    ("dst", 128, 32),
]

SAMPLE = bytes.fromhex("4500003c1c4640004006b1e6ac100a63ac100a0c")


def parse_header(raw: bytes) -> dict:
    bf = BitField.from_bytes(raw[:20], 160, BIG_ENDIAN)
    return {name: bf.extract_uint(offset, size) for name, offset, size in IPV4_FIELDS}


def decrement_ttl(raw: bytes) -> bytes:
    bf = BitField.from_bytes(raw[:20], 160, BIG_ENDIAN)
    bf.insert_uint(64, 8, max(bf.extract_uint(64, 8) - 1, 0))
    return bf.bytes() + raw[20:]


def main() -> None:
    for name, value in parse_header(SAMPLE).items():
        print(f"{name:>16}: {value}")
    print(f"{'after hop ttl':>16}: {parse_header(decrement_ttl(SAMPLE))['ttl']}")


if __name__ == "__main__":
    main()
