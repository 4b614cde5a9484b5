import unittest

from rfc768 import Length, LengthError


class LengthTests(unittest.TestCase):
    def test_valid_length(self):
        length = Length(20)
        self.assertEqual(length.raw_value, 20)
        self.assertEqual(length.data, 12)

    def test_minimum_length(self):
        length = Length(8)
        self.assertEqual(length.raw_value, 8)
        self.assertEqual(length.data, 0)

    def test_maximum_length(self):
        self.assertEqual(Length(0xFFFF).data, 65527)

    def test_too_short(self):
        with self.assertRaises(LengthError) as ctx:
            Length(7)
        self.assertEqual(ctx.exception, LengthError.too_short(7))
        self.assertEqual(ctx.exception.value, 7)
        self.assertIn("less than minimum 8", str(ctx.exception))

    def test_out_of_range(self):
        with self.assertRaises(LengthError) as ctx:
            Length(0x10000)
        self.assertEqual(ctx.exception, LengthError.out_of_range(0x10000))
        with self.assertRaises(LengthError) as ctx:
            Length(-1)
        self.assertEqual(ctx.exception, LengthError.out_of_range(-1))

    def test_for_payload(self):
        self.assertEqual(Length.for_payload(4), Length(12))

    def test_from_bytes(self):
        self.assertEqual(Length.from_bytes(b"\x00\x14"), Length(20))

    def test_from_bytes_errors(self):
        with self.assertRaises(LengthError) as ctx:
            Length.from_bytes(b"")
        self.assertEqual(ctx.exception, LengthError.empty())

        with self.assertRaises(LengthError) as ctx:
            Length.from_bytes(b"\x00")
        self.assertEqual(ctx.exception, LengthError.insufficient_bytes())

    def test_from_bytes_range_checked_after_extraction(self):
        with self.assertRaises(LengthError) as ctx:
            Length.from_bytes(b"\x00\x07")
        self.assertEqual(ctx.exception, LengthError.too_short(7))

    def test_serialize(self):
        self.assertEqual(Length(20).serialize(), b"\x00\x14")
        self.assertEqual(Length(0xFFFF).serialize(), b"\xff\xff")


if __name__ == "__main__":
    unittest.main()
