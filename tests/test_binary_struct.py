import struct

import pytest

from gamesys.binary_struct import BinaryStruct
from gamesys.hashed_string import HashedString, jenkins_hash


def _build(entries):
    body = b"".join(
        struct.pack("<II", jenkins_hash(key), len(payload)) + payload
        for key, payload in entries
    )
    return struct.pack("<II", 1, 8 + len(body)) + body


@pytest.fixture
def blob():
    return _build([
        ("width", struct.pack("<i", 800)),
        ("title", b"Hello\0"),
        ("offset", struct.pack("<i", -42)),
    ])


def test_get_int32_reads_stored_values(blob):
    bs = BinaryStruct(blob)
    assert bs.get_int32("width") == 800
    assert bs.get_int32("offset") == -42


def test_get_string_stops_at_nul(blob):
    assert BinaryStruct(blob).get_string("title") == "Hello"


def test_get_raw_returns_payload(blob):
    assert BinaryStruct(blob).get_raw("title") == b"Hello\0"


def test_hashed_string_key(blob):
    assert BinaryStruct(blob).get_int32(HashedString("width")) == 800


def test_missing_key_raises(blob):
    with pytest.raises(KeyError):
        BinaryStruct(blob).get_raw("height")


def test_empty_struct_has_no_entries():
    with pytest.raises(KeyError):
        BinaryStruct().get_raw("anything")


def test_from_file_round_trip(tmp_path, blob):
    path = tmp_path / "data.bin"
    path.write_bytes(blob)
    bs = BinaryStruct.from_file(path)
    assert bs.get_string("title") == "Hello"
    assert bs.get_int32("width") == 800


def test_short_header_raises():
    with pytest.raises(ValueError):
        BinaryStruct(b"\x01\x02\x03").get_raw("x")


def test_declared_size_larger_than_data_raises(blob):
    with pytest.raises(ValueError):
        BinaryStruct(blob[:-4]).get_raw("width")


def test_int32_from_short_entry_raises():
    data = _build([("tiny", b"\x01\x02")])
    with pytest.raises(ValueError):
        BinaryStruct(data).get_int32("tiny")


def test_string_without_terminator_uses_whole_payload():
    data = _build([("name", b"abc")])
    assert BinaryStruct(data).get_string("name") == "abc"