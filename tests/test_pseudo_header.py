import ipaddress
import unittest

from rfc768 import Datagram, PseudoHeader, PseudoHeaderError
from rfc768.constants import PSEUDO_HEADER_SIZE
from rfc768.exceptions import PseudoHeaderErrorKind


class PseudoHeaderTests(unittest.TestCase):
    def test_serialize_layout(self):
        pseudo = PseudoHeader("192.168.1.1", "192.168.1.2", 20)
        self.assertEqual(
            pseudo.serialize(),
            bytes([192, 168, 1, 1, 192, 168, 1, 2, 0x00, 17, 0x00, 0x14]),
        )
        self.assertEqual(len(bytes(pseudo)), PSEUDO_HEADER_SIZE)

    def test_address_forms(self):
        expected = ipaddress.IPv4Address("10.0.0.1")
        for value in ("10.0.0.1", 0x0A000001, b"\x0a\x00\x00\x01", expected):
            pseudo = PseudoHeader(value, "10.0.0.2", 8)
            self.assertEqual(pseudo.source, expected)

    def test_invalid_address(self):
        with self.assertRaises(PseudoHeaderError) as ctx:
            PseudoHeader("10.0.0.256", "10.0.0.2", 8)
        self.assertIs(ctx.exception.kind, PseudoHeaderErrorKind.INVALID_ADDRESS)

        with self.assertRaises(PseudoHeaderError):
            PseudoHeader(b"\x01\x02\x03", "10.0.0.2", 8)

    def test_length_out_of_range(self):
        with self.assertRaises(PseudoHeaderError) as ctx:
            PseudoHeader("10.0.0.1", "10.0.0.2", 0x10000)
        self.assertEqual(ctx.exception, PseudoHeaderError.out_of_range(0x10000))

    def test_length_is_not_validated_against_minimum(self):
        self.assertEqual(PseudoHeader("10.0.0.1", "10.0.0.2", 0).length, 0)

    def test_for_datagram(self):
        datagram = Datagram.create(5000, 6000, b"abc")
        pseudo = PseudoHeader.for_datagram("10.0.0.1", "10.0.0.2", datagram)
        self.assertEqual(pseudo.length, 11)
        self.assertEqual(pseudo.serialize()[-2:], b"\x00\x0b")


if __name__ == "__main__":
    unittest.main()
