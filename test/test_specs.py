# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import struct
import warnings

from tagwright.specs import *
from tagwright.errors import *

class Frame:
    "Specs only look at a few attributes of their frames."
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)

class SpecTestCase(unittest.TestCase):
    def testByteSpec(self):
        frame = Frame()
        spec = ByteSpec("test")
        self.assertEqual(spec.read(frame, b"\x01\x02"), (1, b"\x02"))
        self.assertEqual(spec.write(frame, 255), b"\xFF")
        self.assertEqual(spec.validate(frame, 5), 5)
        self.assertEqual(spec.validate(frame, None), None)
        self.assertRaises(ValueError, spec.validate, frame, 256)
        self.assertRaises(ValueError, spec.validate, frame, -1)
        self.assertRaises(TypeError, spec.validate, frame, "a")
        self.assertRaises(EOFError, spec.read, frame, b"")

    def testSizedIntegerSpec(self):
        frame = Frame()
        spec = SizedIntegerSpec("test", 2)
        self.assertEqual(spec.read(frame, b"\x01\x02\x03"), (258, b"\x03"))
        self.assertEqual(spec.write(frame, 258), b"\x01\x02")
        self.assertEqual(spec.write(frame, 0), b"\x00\x00")
        self.assertEqual(spec.validate(frame, 65535), 65535)
        self.assertRaises(ValueError, spec.validate, frame, 65536)
        self.assertRaises(ValueError, spec.validate, frame, -1)
        self.assertRaises(TypeError, spec.validate, frame, "1")
        self.assertRaises(EOFError, spec.read, frame, b"\x01")

    def testIntegerSpec(self):
        frame = Frame()
        spec = IntegerSpec("test")
        self.assertEqual(spec.read(frame, b"\x01\x00\x00\x00\x00"), (1 << 32, b""))
        self.assertEqual(spec.read(frame, b"\x05"), (5, b""))
        self.assertEqual(spec.write(frame, 5), b"\x00\x00\x00\x05")
        self.assertEqual(spec.write(frame, 1 << 32), b"\x01\x00\x00\x00\x00")
        self.assertRaises(ValueError, spec.validate, frame, -1)

    def testEncodingSpec(self):
        frame = Frame()
        spec = EncodingSpec("encoding")
        self.assertEqual(spec.read(frame, b"\x03abc"), (3, b"abc"))
        # Text frames without an encoding byte
        self.assertEqual(spec.read(frame, b"abc"), (0, b"abc"))
        self.assertEqual(spec.validate(frame, 1), 1)
        self.assertEqual(spec.validate(frame, None), None)
        self.assertEqual(spec.validate(frame, "utf-8"), 3)
        self.assertEqual(spec.validate(frame, "UTF-16BE"), 2)
        self.assertEqual(spec.validate(frame, "latin-1"), 0)
        self.assertRaises(ValueError, spec.validate, frame, 4)
        self.assertRaises(TypeError, spec.validate, frame, 1.5)
        self.assertEqual(spec.downgrade23(frame, 3), 1)
        self.assertEqual(spec.downgrade23(frame, 2), 1)
        self.assertEqual(spec.downgrade23(frame, 0), 0)
        self.assertEqual(spec.downgrade23(frame, None), None)

    def testEncodedTextSpec(self):
        spec = EncodedTextSpec("text")
        frame = Frame(encoding=0)
        self.assertEqual(spec.read(frame, b"foo\x00bar"), ("foo", b"bar"))
        self.assertEqual(spec.read(frame, b"foo"), ("foo", b""))
        self.assertEqual(spec.write(frame, "foo"), b"foo\x00")
        self.assertRaises(UnicodeEncodeError, spec.write, frame, "€")

        frame = Frame(encoding=1)
        data = "ab".encode("utf-16") + b"\x00\x00x"
        self.assertEqual(spec.read(frame, data), ("ab", b"x"))

        # Double null terminators are only recognized at even offsets
        frame = Frame(encoding=2)
        data = "Āa".encode("utf-16-be") + b"\x00\x00"
        self.assertEqual(data, b"\x01\x00\x00\x61\x00\x00")
        self.assertEqual(spec.read(frame, data), ("Āa", b""))

        frame = Frame(encoding=3)
        self.assertEqual(spec.write(frame, "é"), b"\xC3\xA9\x00")
        self.assertEqual(spec.read(frame, b"\xC3\xA9\x00"), ("é", b""))

        self.assertEqual(spec.validate(frame, None), "")
        self.assertRaises(TypeError, spec.validate, frame, 1)

    def testLatin1TextSpec(self):
        frame = Frame()
        spec = Latin1TextSpec("test")
        self.assertEqual(spec.read(frame, b"abc\x00def"), ("abc", b"def"))
        self.assertEqual(spec.read(frame, b"abc"), ("abc", b""))
        self.assertEqual(spec.write(frame, "abc"), b"abc\x00")
        self.assertEqual(spec.validate(frame, None), "")
        self.assertRaises(UnicodeEncodeError, spec.validate, frame, "€")

    def testURLStringSpec(self):
        frame = Frame()
        spec = URLStringSpec("url")
        self.assertEqual(spec.read(frame, b"http://x\x00"), ("http://x", b""))
        # Stray null byte in front of the URL
        self.assertEqual(spec.read(frame, b"\x00http://x\x00"), ("http://x", b""))

    def testFixedWidthStringSpec(self):
        frame = Frame()
        spec = FixedWidthStringSpec("lang", 3)
        self.assertEqual(spec.read(frame, b"engfoo"), ("eng", b"foo"))
        self.assertEqual(spec.write(frame, "eng"), b"eng")
        self.assertEqual(spec.write(frame, None), b"\x00\x00\x00")
        self.assertRaises(ValueError, spec.validate, frame, "en")
        self.assertRaises(EOFError, spec.read, frame, b"en")

    def testBinaryDataSpec(self):
        frame = Frame()
        spec = BinaryDataSpec("data")
        self.assertEqual(spec.read(frame, b"abc"), (b"abc", b""))
        self.assertEqual(spec.write(frame, b"abc"), b"abc")
        self.assertEqual(spec.validate(frame, bytearray(b"abc")), b"abc")
        self.assertRaises(TypeError, spec.validate, frame, "abc")

    def testMultiSpec(self):
        frame = Frame(encoding=0)
        spec = MultiSpec("text", EncodedTextSpec("text"), sep="\x00")
        self.assertEqual(spec.read(frame, b"a\x00b\x00"), (["a", "b"], b""))
        self.assertEqual(spec.read(frame, b"a\x00b"), (["a", "b"], b""))
        self.assertEqual(spec.write(frame, ["a", "b"]), b"a\x00b\x00")
        self.assertEqual(spec.validate(frame, "a\x00b"), ["a", "b"])
        self.assertEqual(spec.validate(frame, ("a", "b")), ["a", "b"])
        self.assertEqual(spec.validate(frame, None), [])
        self.assertEqual(spec.downgrade23(frame, ["a", "b"], sep="/"), ["a/b"])
        self.assertEqual(spec.downgrade23(frame, ["a", "b"], sep=None), ["a", "b"])

    def testMultiSpecRecords(self):
        frame = Frame(encoding=0)
        spec = MultiSpec("people", EncodedTextSpec("involvement"), EncodedTextSpec("person"))
        self.assertEqual(spec.read(frame, b"x\x00y\x00z\x00w\x00"),
                         ([("x", "y"), ("z", "w")], b""))
        self.assertEqual(spec.write(frame, [("x", "y")]), b"x\x00y\x00")
        self.assertEqual(spec.validate(frame, [["x", "y"]]), [("x", "y")])
        self.assertRaises(ValueError, spec.validate, frame, [("x",)])
        self.assertRaises(TypeError, spec.validate, frame, ["xy"])
        # Records are never joined
        self.assertEqual(spec.downgrade23(frame, [("x", "y")], sep="/"), [("x", "y")])

    def testTimeStamp(self):
        stamp = ID3TimeStamp("2006-03-06T11:27:00")
        self.assertEqual(stamp.text, "2006-03-06 11:27:00")
        self.assertEqual((stamp.year, stamp.month, stamp.day), (2006, 3, 6))
        self.assertEqual((stamp.hour, stamp.minute, stamp.second), (11, 27, 0))

        stamp = ID3TimeStamp("2006")
        self.assertEqual(stamp.text, "2006")
        self.assertEqual(stamp.month, None)
        self.assertEqual(str(ID3TimeStamp("2006-03")), "2006-03")

        self.assertTrue(ID3TimeStamp("2006") < ID3TimeStamp("2006-01"))
        self.assertTrue(ID3TimeStamp("2006-12") < ID3TimeStamp("2007"))
        self.assertEqual(ID3TimeStamp("2006-03-06 11:27"), ID3TimeStamp("2006-03-06T11:27"))
        self.assertEqual(hash(ID3TimeStamp("2006-03")), hash(ID3TimeStamp("2006-03")))
        self.assertRaises(TypeError, ID3TimeStamp, 2006)

    def testTimeStampSpec(self):
        frame = Frame(encoding=0)
        spec = TimeStampSpec("stamp")
        self.assertEqual(spec.write(frame, ID3TimeStamp("2006-03-06 11:27")),
                         b"2006-03-06T11:27\x00")
        (value, rest) = spec.read(frame, b"2006-03-06T11:27\x00")
        self.assertEqual(value, ID3TimeStamp("2006-03-06 11:27"))
        self.assertEqual(spec.validate(frame, "2009"), ID3TimeStamp("2009"))
        self.assertRaises(ValueError, spec.validate, frame, 2009)

    def testVolumeAdjustmentSpec(self):
        frame = Frame()
        spec = VolumeAdjustmentSpec("gain")
        self.assertEqual(spec.read(frame, b"\x02\x00"), (1.0, b""))
        self.assertEqual(spec.write(frame, -1.0), b"\xFE\x00")
        self.assertEqual(spec.validate(frame, 63.5), 63.5)
        self.assertRaises(ValueError, spec.validate, frame, 100)

    def testVolumePeakSpec(self):
        frame = Frame()
        spec = VolumePeakSpec("peak")
        self.assertEqual(spec.write(frame, 1.0), b"\x10\x80\x00")
        (value, rest) = spec.read(frame, b"\x10\x80\x00")
        self.assertAlmostEqual(value, 1.0, places=6)
        self.assertEqual(rest, b"")
        self.assertRaises(JunkFrameError, spec.read, frame, b"\x10\x80")
        self.assertRaises(ValueError, spec.validate, frame, 2.5)

    def testSynchronizedTextSpec(self):
        frame = Frame(encoding=0)
        spec = SynchronizedTextSpec("text")
        data = b"foo\x00\x00\x00\x00\x10bar\x00\x00\x00\x00\x20"
        self.assertEqual(spec.read(frame, data), ([("foo", 16), ("bar", 32)], b""))
        self.assertEqual(spec.write(frame, [("foo", 16), ("bar", 32)]), data)
        self.assertRaises(JunkFrameError, spec.read, frame, b"foo\x00\x00")

    def testKeyEventSpec(self):
        frame = Frame()
        spec = KeyEventSpec("events")
        self.assertEqual(spec.read(frame, b"\x01\x00\x00\x00\x10"), ([(1, 16)], b""))
        self.assertEqual(spec.write(frame, [(1, 16)]), b"\x01\x00\x00\x00\x10")

    def testVolumeAdjustmentsSpec(self):
        frame = Frame()
        spec = VolumeAdjustmentsSpec("adjustments")
        data = spec.write(frame, [(1000.0, 1.0)])
        self.assertEqual(data, struct.pack(">Hh", 2000, 512))
        self.assertEqual(spec.read(frame, data), ([(1000.0, 1.0)], b""))

    def testASPIIndexSpec(self):
        spec = ASPIIndexSpec("Fi")
        self.assertEqual(spec.read(Frame(b=8, N=2), b"\x01\x02"), ([1, 2], b""))
        self.assertEqual(spec.write(Frame(b=16, N=1), [258]), b"\x01\x02")
        with warnings.catch_warnings():
            warnings.simplefilter("error", FrameWarning)
            self.assertRaises(FrameWarning, spec.read, Frame(b=4, N=1), b"\x01")
        self.assertRaises(ValueError, spec.write, Frame(b=4, N=1), [1])
        self.assertRaises(EOFError, spec.read, Frame(b=16, N=2), b"\x01\x02")

suite = unittest.TestLoader().loadTestsFromTestCase(SpecTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
