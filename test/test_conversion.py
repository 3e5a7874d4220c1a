# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import random

from tagwright.conversion import *
from tagwright.errors import *

class BitPaddedIntTestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(BitPaddedInt(b"\x00\x00\x01\x01"), 129)
        self.assertEqual(BitPaddedInt(b"\x00\x00\x01\x01", bits=8), 257)
        self.assertEqual(BitPaddedInt(b"\x7F\x7F\x7F\x7F"), 0x0FFFFFFF)
        self.assertEqual(BitPaddedInt(b"\x01\x00", bigendian=False), 1)
        self.assertEqual(BitPaddedInt(b""), 0)
        # Integers are reinterpreted byte by byte
        self.assertEqual(BitPaddedInt(0x0101), 129)
        self.assertEqual(BitPaddedInt(0x0101, bits=8), 257)

    def testAttributes(self):
        n = BitPaddedInt(b"\x01\x01", bits=8, bigendian=False)
        self.assertEqual(n, 257)
        self.assertEqual(n.bits, 8)
        self.assertFalse(n.bigendian)
        self.assertRaises(TypeError, BitPaddedInt, "abc")

    def testEncode(self):
        self.assertEqual(BitPaddedInt.encode(129), b"\x00\x00\x01\x01")
        self.assertEqual(BitPaddedInt.encode(257, bits=8), b"\x00\x00\x01\x01")
        self.assertEqual(BitPaddedInt.encode(0), b"\x00\x00\x00\x00")
        self.assertEqual(BitPaddedInt.encode(1, bigendian=False), b"\x01\x00\x00\x00")
        self.assertEqual(BitPaddedInt.encode(1, width=3), b"\x00\x00\x01")

    def testTooWide(self):
        self.assertRaises(ValueTooWide, BitPaddedInt.encode, 1 << 28)
        self.assertRaises(ValueTooWide, BitPaddedInt.encode, 256, bits=8, width=1)
        self.assertRaises(ValueError, BitPaddedInt.encode, -1)

    def testGrowing(self):
        self.assertEqual(BitPaddedInt.encode(1, bits=8, width=-1), b"\x00\x00\x00\x01")
        self.assertEqual(BitPaddedInt.encode(1 << 32, bits=8, width=-1),
                         b"\x01\x00\x00\x00\x00")
        self.assertEqual(BitPaddedInt.encode(1, bits=8, width=-1, minwidth=1), b"\x01")

    def testAsBytes(self):
        self.assertEqual(BitPaddedInt(b"\x00\x00\x01\x01").as_bytes(), b"\x00\x00\x01\x01")
        self.assertEqual(BitPaddedInt(b"\x01\x01", bits=8).as_bytes(width=2), b"\x01\x01")

    def testValidPadding(self):
        has_valid_padding = BitPaddedInt.has_valid_padding
        self.assertTrue(has_valid_padding(b"\x7F\x7F"))
        self.assertFalse(has_valid_padding(b"\x00\x80"))
        self.assertTrue(has_valid_padding(b"\xFF", bits=8))
        self.assertTrue(has_valid_padding(0x7F7F))
        self.assertFalse(has_valid_padding(0x80))
        self.assertRaises(ValueError, has_valid_padding, b"\x00", bits=9)
        self.assertRaises(TypeError, has_valid_padding, "abc")

    def testRoundTrip(self):
        for n in (0, 1, 127, 128, 129, 1000, 0x0FFFFFFF):
            data = BitPaddedInt.encode(n)
            self.assertEqual(len(data), 4)
            self.assertEqual(BitPaddedInt(data), n)
            self.assertTrue(BitPaddedInt.has_valid_padding(data))

class UnsyncTestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(Unsync.decode(b"\xFF\x00\x61\x62"), b"\xFFab")
        self.assertEqual(Unsync.decode(b"abc"), b"abc")
        self.assertEqual(Unsync.decode(b"\xFF\x00\x00"), b"\xFF\x00")
        self.assertEqual(Unsync.decode(b"\xFF\x00\xE0"), b"\xFF\xE0")

    def testInvalid(self):
        self.assertRaises(InvalidSyncSequence, Unsync.decode, b"\xFF\xE0")
        self.assertRaises(InvalidSyncSequence, Unsync.decode, b"\xFF\xFF")
        self.assertRaises(TruncatedSyncSequence, Unsync.decode, b"ab\xFF")
        self.assertRaises(ValueError, Unsync.decode, b"\xFF")

    def testEncode(self):
        self.assertEqual(Unsync.encode(b"\xFF\xE0"), b"\xFF\x00\xE0")
        self.assertEqual(Unsync.encode(b"\xFF\x00"), b"\xFF\x00\x00")
        self.assertEqual(Unsync.encode(b"\xFFa"), b"\xFFa")
        self.assertEqual(Unsync.encode(b"a\xFF"), b"a\xFF\x00")
        self.assertEqual(Unsync.encode(b"abc"), b"abc")

    def testRoundTrip(self):
        for i in range(100):
            data = bytes(random.choice(b"\x00\xFF\xE0a") for j in range(random.randint(0, 20)))
            self.assertEqual(Unsync.decode(Unsync.encode(data)), data)

suite = unittest.TestSuite()
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(BitPaddedIntTestCase))
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(UnsyncTestCase))

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
