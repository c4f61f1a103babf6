from docs.ipv4_header_demo import SAMPLE, decrement_ttl, parse_header


def test_parse_sample_header():
    header = parse_header(SAMPLE)
    assert header["version"] == 4
    assert header["ihl"] == 5
    assert header["dscp"] == 0
    assert header["total_length"] == 60
    assert header["identification"] == 0x1c46
    assert header["flags"] == 0b010
    assert header["fragment_offset"] == 0
    assert header["ttl"] == 64
    assert header["protocol"] == 6
    assert header["checksum"] == 0xb1e6
    assert header["src"] == 0xac100a63
    assert header["dst"] == 0xac100a0c


def test_decrement_ttl_touches_only_ttl():
    patched = decrement_ttl(SAMPLE)
    assert parse_header(patched)["ttl"] == 63
    assert patched[:8] == SAMPLE[:8]
    assert patched[8] == 63
    assert patched[9:] == SAMPLE[9:]
