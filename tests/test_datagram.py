"""
Tests for datagram construction, parsing and checksum attachment.
"""
import pytest

from rfc768 import (
    MAXIMUM_PAYLOAD,
    Checksum,
    Datagram,
    DatagramError,
    Header,
    HeaderError,
    Length,
    LengthError,
    Port,
    PseudoHeader,
)
from rfc768.exceptions import DatagramErrorKind


def _pseudo(datagram, src="10.0.0.1", dst="10.0.0.2"):
    return PseudoHeader.for_datagram(src, dst, datagram)


def test_create_computes_length():
    data = b"\x01\x02\x03\x04"
    datagram = Datagram.create(Port(12345), Port.DNS, data)
    assert datagram.header.length.raw_value == 12
    assert datagram.header.length.data == 4
    assert datagram.data == data
    assert datagram.checksum.is_absent


def test_create_accepts_ints_and_iterables():
    datagram = Datagram.create(8080, 514, [0xDE, 0xAD])
    assert datagram.source == Port(8080)
    assert datagram.destination == Port.SYSLOG
    assert datagram.data == b"\xde\xad"


def test_int_payload_is_rejected():
    # bytes(5) would be five zero octets
    with pytest.raises(TypeError):
        Datagram.create(8080, 514, 5)
    with pytest.raises(TypeError):
        Datagram.parse(8)
    with pytest.raises(TypeError):
        Datagram(Header(Port(1), Port(2), Length(9)), 1)


def test_create_keeps_given_checksum():
    datagram = Datagram.create(1, 2, b"", checksum=Checksum(0x1234))
    assert datagram.checksum == Checksum(0x1234)


def test_empty_payload():
    datagram = Datagram.create(1, 2)
    assert datagram.header.length == Length(8)
    assert datagram.serialize() == b"\x00\x01\x00\x02\x00\x08\x00\x00"


def test_maximum_payload():
    datagram = Datagram.create(1, 2, bytes(MAXIMUM_PAYLOAD))
    assert MAXIMUM_PAYLOAD == 65527
    assert datagram.header.length.raw_value == 0xFFFF
    assert len(datagram.serialize()) == 0xFFFF


def test_payload_too_large():
    with pytest.raises(DatagramError) as info:
        Datagram.create(1, 2, bytes(65528))
    assert info.value == DatagramError.data_too_large(65528)
    assert info.value.size == 65528


def test_serialize_parse_roundtrip():
    original = Datagram.create(8080, Port.SYSLOG, b"\xde\xad\xbe\xef")
    parsed = Datagram.parse(original.serialize())
    assert parsed.header.source == original.header.source
    assert parsed.header.destination == original.header.destination
    assert parsed.data == original.data
    assert parsed == original


@pytest.mark.parametrize("payload", [b"", b"x", b"hello world", bytes(range(256))])
def test_length_invariant(payload):
    datagram = Datagram.parse(Datagram.create(40000, 53, payload).serialize())
    assert datagram.header.length.raw_value == 8 + len(datagram.data)
    assert datagram.header.length.data == len(datagram.data)


def test_parse_ignores_trailing_bytes():
    original = Datagram.create(1, 2, b"abc")
    parsed = Datagram.parse(original.serialize() + b"\xff\xff\xff")
    assert parsed == original


def test_parse_insufficient_data():
    data = bytes([0x30, 0x39, 0x00, 0x35, 0x00, 0x14, 0x00, 0x00, 0xAA, 0xBB])
    with pytest.raises(DatagramError) as info:
        Datagram.parse(data)
    assert info.value == DatagramError.insufficient_data(12, 2)
    assert (info.value.expected, info.value.got) == (12, 2)
    assert str(info.value) == "Insufficient data: expected 12 bytes, got 2"


def test_parse_wraps_header_error():
    with pytest.raises(DatagramError) as info:
        Datagram.parse(bytes(7))
    assert info.value.kind is DatagramErrorKind.HEADER
    assert info.value.underlying == HeaderError.insufficient_bytes(7)


def test_parse_wraps_nested_length_error():
    with pytest.raises(DatagramError) as info:
        Datagram.parse(b"\x00\x01\x00\x02\x00\x04\x00\x00")
    assert info.value == DatagramError.header(HeaderError.length(LengthError.too_short(4)))


def test_direct_construction_checks_length():
    header = Header(Port(1), Port(2), Length(10))
    with pytest.raises(DatagramError) as info:
        Datagram(header, b"")
    assert info.value == DatagramError.length_mismatch(2, 0)
    assert Datagram(header, bytearray(b"ab")).data == b"ab"


def test_with_checksum_known_vector():
    datagram = Datagram.create(8080, Port.SYSLOG, b"\xde\xad\xbe\xef")
    signed = datagram.with_checksum(_pseudo(datagram))
    assert signed.checksum == Checksum(0x2CA4)
    assert signed.serialize().hex() == "1f900202000c2ca4deadbeef"


def test_with_checksum_does_not_mutate():
    datagram = Datagram.create(8080, 53, b"query")
    signed = datagram.with_checksum(_pseudo(datagram))
    assert datagram.checksum.is_absent
    assert not signed.checksum.is_absent
    assert signed.header.source == datagram.header.source
    assert signed.header.destination == datagram.header.destination
    assert signed.header.length == datagram.header.length
    assert signed.data == datagram.data


def test_with_checksum_ignores_existing_checksum():
    plain = Datagram.create(8080, 53, b"query")
    stale = Datagram.create(8080, 53, b"query", checksum=Checksum(0xBEEF))
    assert stale.with_checksum(_pseudo(stale)) == plain.with_checksum(_pseudo(plain))


def test_verify_checksum():
    datagram = Datagram.create(8080, 53, b"odd")
    signed = datagram.with_checksum(_pseudo(datagram))
    assert signed.verify_checksum(_pseudo(signed))
    assert not signed.verify_checksum(_pseudo(signed, src="10.0.0.9"))


def test_verify_checksum_after_roundtrip():
    datagram = Datagram.create(50000, 123, b"\x1b" + bytes(47))
    signed = datagram.with_checksum(_pseudo(datagram))
    parsed = Datagram.parse(signed.serialize())
    assert parsed.verify_checksum(_pseudo(parsed))


def test_absent_checksum_always_verifies():
    datagram = Datagram.create(1, 2, b"anything")
    assert datagram.verify_checksum(_pseudo(datagram))


def test_to_dict():
    datagram = Datagram.create(8080, 514, b"\xde\xad")
    assert datagram.to_dict() == {
        "source": 8080,
        "destination": 514,
        "length": 10,
        "checksum": 0,
        "data": "dead",
    }
