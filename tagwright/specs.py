# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import abc
import collections.abc
import re
import struct

from abc import abstractmethod
from warnings import warn

from tagwright.conversion import *
from tagwright.errors import *

# The idea for the Spec system comes from Mutagen.

def optionalspec(spec):
    spec._optional = True
    return spec

class Spec(metaclass=abc.ABCMeta):
    def __init__(self, name):
        self.name = name

    _optional = False

    @abstractmethod
    def read(self, frame, data): pass

    @abstractmethod
    def write(self, frame, value): pass

    def validate(self, frame, value):
        self.write(frame, value)
        return value

    def downgrade23(self, frame, value, **kwargs):
        "Return a version of value that is writable in an ID3v2.3 tag."
        return value

    def to_str(self, value):
        return "{0}={1}".format(self.name, repr(value))

class ByteSpec(Spec):
    def read(self, frame, data):
        if len(data) < 1:
            raise EOFError()
        return data[0], data[1:]
    def write(self, frame, value):
        return bytes([value])
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, int):
            raise TypeError("Not a byte")
        if value not in range(256):
            raise ValueError("Invalid byte value")
        return value

class ChannelSpec(ByteSpec):
    (OTHER, MASTER, FRONTRIGHT, FRONTLEFT, BACKRIGHT, BACKLEFT,
     FRONTCENTRE, BACKCENTRE, SUBWOOFER) = range(9)

class SizedIntegerSpec(Spec):
    "A big-endian unsigned integer of a fixed number of bytes."
    def __init__(self, name, size):
        super().__init__(name)
        self.size = size
    def read(self, frame, data):
        if len(data) < self.size:
            raise EOFError()
        return int(BitPaddedInt(data[:self.size], bits=8)), data[self.size:]
    def write(self, frame, value):
        return BitPaddedInt.encode(value, bits=8, width=self.size)
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, int):
            raise TypeError("Not an integer: {0}".format(repr(value)))
        if value < 0:
            raise ValueError("Value is negative")
        if value >= 1 << (self.size << 3):
            raise ValueError("Value is too large")
        return value

class IntegerSpec(Spec):
    "A big-endian unsigned integer taking up the rest of the frame."
    def read(self, frame, data):
        return int(BitPaddedInt(data, bits=8)), bytes()
    def write(self, frame, value):
        return BitPaddedInt.encode(value, bits=8, width=-1)
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, int):
            raise TypeError("Not an integer: {0}".format(repr(value)))
        if value < 0:
            raise ValueError("Value is negative")
        return value

class BinaryDataSpec(Spec):
    def read(self, frame, data):
        return bytes(data), bytes()
    def write(self, frame, value):
        if value is None:
            return bytes()
        return bytes(value)
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("Not a byte sequence")
        return bytes(value)
    def to_str(self, value):
        if value is None:
            return "{0}=None".format(self.name)
        return '{0}={1}{2}'.format(self.name, value[0:16], "..." if len(value) > 16 else "")

class FixedWidthStringSpec(Spec):
    "A Latin-1 string of exactly length characters."
    def __init__(self, name, length):
        super().__init__(name)
        self.length = length
    def read(self, frame, data):
        if len(data) < self.length:
            raise EOFError()
        return data[:self.length].decode('latin-1'), data[self.length:]
    def write(self, frame, value):
        if value is None:
            return b"\x00" * self.length
        return (value.encode('latin-1') + b"\x00" * self.length)[:self.length]
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError("Not a string")
        if len(value) != self.length:
            raise ValueError("String length mismatch: {0!r} is not {1} characters long"
                             .format(value, self.length))
        value.encode('latin-1')
        return value

class Latin1TextSpec(Spec):
    "A null-terminated Latin-1 string."
    def read(self, frame, data):
        rawstr, sep, data = data.partition(b"\x00")
        return rawstr.decode('latin-1'), data
    def write(self, frame, value):
        return value.encode('latin-1') + b"\x00"
    def validate(self, frame, value):
        if value is None:
            return ""
        if not isinstance(value, str):
            raise TypeError("Not a string")
        value.encode('latin-1')
        return value

class URLStringSpec(Latin1TextSpec):
    def read(self, frame, data):
        rawstr, sep, data = data.partition(b"\x00")
        if len(rawstr) == 0 and len(data) > 0:
            # iTunes prepends an extra null byte to WFED frames (encoding spec?)
            rawstr, sep, data = data.partition(b"\x00")
        return rawstr.decode('latin-1'), data

def _split_terminated(data, term):
    """Split data at the first occurrence of term.

    Two-byte terminators only match at even offsets.  Returns the
    string part, the rest of the data, and whether a terminator was found.
    """
    if len(term) == 1:
        rawstr, sep, rest = data.partition(term)
        return rawstr, rest, bool(sep)
    start = 0
    while True:
        index = data.find(term, start)
        if index < 0:
            return data, bytes(), False
        if index & 1:
            start = index + 1
            continue
        return data[:index], data[index + 2:], True

class EncodedTextSpec(Spec):
    """A null-terminated string in the encoding given by frame.encoding.

    The list of encodings is defined by the ID3v2 standard; encoding
    numbers are indices into _encodings.
    """
    _encodings = (('latin-1', b"\x00"),
                  ('utf-16', b"\x00\x00"),
                  ('utf-16-be', b"\x00\x00"),
                  ('utf-8', b"\x00"))
    preferred_encodings = (0, 1)

    def read(self, frame, data):
        enc, term = self._encodings[frame.encoding]
        rawstr, data, found = _split_terminated(data, term)
        if len(rawstr) < len(term):
            return "", data
        return rawstr.decode(enc), data

    def write(self, frame, value):
        enc, term = self._encodings[frame.encoding]
        return value.encode(enc) + term

    def validate(self, frame, value):
        if value is None:
            return ""
        if not isinstance(value, str):
            raise TypeError("Not a string")
        return value

class EncodedNumericTextSpec(EncodedTextSpec): pass
class EncodedNumericPartTextSpec(EncodedTextSpec): pass

class EncodingSpec(ByteSpec):
    "EncodingSpec must be the first spec."
    def read(self, frame, data):
        enc, rest = super().read(frame, data)
        if enc < 16:
            return enc, rest
        # Not an encoding byte; the frame starts with text.
        return 0, data
    def write(self, frame, value):
        return super().write(frame, value)
    def validate(self, frame, value):
        if value is None:
            return None
        if isinstance(value, str):
            name = value.lower().replace("-", "")
            for i in range(len(EncodedTextSpec._encodings)):
                if EncodedTextSpec._encodings[i][0].lower().replace("-", "") == name:
                    value = i
                    break
        if not isinstance(value, int):
            raise TypeError("Not an encoding")
        if 0 <= value <= 3:
            return value
        raise ValueError("Invalid encoding 0x{0:X}".format(value))
    def downgrade23(self, frame, value, **kwargs):
        # ID3v2.3 only knows Latin-1 and UTF-16
        if value is None:
            return None
        return min(1, value)
    def to_str(self, value):
        if value is None:
            return "<undef>"
        return EncodedTextSpec._encodings[value][0]

class MultiSpec(Spec):
    """Recognizes a repeated sequence of values until the data runs out.

    With a single subspec, values are a flat list; with several, values
    are a list of tuples, one element per subspec.
    """
    def __init__(self, name, *specs, sep=None):
        super().__init__(name)
        self.specs = specs
        self.sep = sep

    def read(self, frame, data):
        "Returns a list of values, eats all of data."
        seq = []
        while data:
            record = []
            for s in self.specs:
                elem, data = s.read(frame, data)
                record.append(elem)
            if len(self.specs) == 1:
                seq.append(record[0])
            else:
                seq.append(tuple(record))
        return seq, data

    def write(self, frame, values):
        data = bytearray()
        if len(self.specs) == 1:
            for v in values:
                data.extend(self.specs[0].write(frame, v))
        else:
            for record in values:
                for spec, v in zip(self.specs, record):
                    data.extend(spec.write(frame, v))
        return bytes(data)

    def validate(self, frame, values):
        if values is None:
            return []
        if isinstance(values, str):
            values = values.split(self.sep) if self.sep is not None else [values]
        if len(self.specs) == 1:
            if not isinstance(values, collections.abc.Iterable):
                values = [values]
            return [self.specs[0].validate(frame, v) for v in values]
        res = []
        for v in values:
            if not isinstance(v, collections.abc.Sequence) or isinstance(v, str):
                raise TypeError("Records must be sequences")
            if len(v) != len(self.specs):
                raise ValueError("Invalid record length")
            res.append(tuple(spec.validate(frame, e)
                             for spec, e in zip(self.specs, v)))
        return res

    def downgrade23(self, frame, values, **kwargs):
        if len(self.specs) != 1:
            return [tuple(spec.downgrade23(frame, e, **kwargs)
                          for spec, e in zip(self.specs, record))
                    for record in values]
        spec = self.specs[0]
        # Only plain text lists are merged
        if not isinstance(spec, EncodedTextSpec) or isinstance(spec, TimeStampSpec):
            return values
        values = [spec.downgrade23(frame, v, **kwargs) for v in values]
        sep = kwargs.get("sep")
        if sep is not None:
            return [spec.validate(frame, sep.join(values))]
        return values

class ID3TimeStamp:
    """A time stamp in ID3v2 format.

    This is a restricted form of the ISO 8601 standard; time stamps
    take the form of:
        YYYY-MM-DD HH:MM:SS
    Or some partial form (YYYY-MM-DD HH, YYYY, etc.).

    The 'text' attribute contains the raw text data of the time stamp.
    """
    _formats = ("%04d",) + ("%02d",) * 5
    _seps = ("-", "-", " ", ":", ":", "x")
    _split_re = re.compile(r"[-T:/.]|\s+")
    _fields = ("year", "month", "day", "hour", "minute", "second")

    def __init__(self, text):
        if isinstance(text, ID3TimeStamp):
            text = text.text
        elif not isinstance(text, str):
            raise TypeError("Not a string: {0!r}".format(text))
        self.text = text

    @property
    def text(self):
        pieces = []
        for fmt, sep, field in zip(self._formats, self._seps, self._fields):
            part = getattr(self, field)
            if part is None:
                break
            pieces.append((fmt % part) + sep)
        return "".join(pieces)[:-1]

    @text.setter
    def text(self, text):
        values = self._split_re.split(text + ":::::")[:6]
        for field, v in zip(self._fields, values):
            setattr(self, field, int(v) if re.fullmatch("[0-9]+", v) else None)

    def _key(self):
        return tuple(-1 if getattr(self, f) is None else getattr(self, f)
                     for f in self._fields)

    def __eq__(self, other):
        if not isinstance(other, ID3TimeStamp):
            return NotImplemented
        return self._key() == other._key()
    def __lt__(self, other):
        if not isinstance(other, ID3TimeStamp):
            return NotImplemented
        return self._key() < other._key()
    def __le__(self, other):
        if not isinstance(other, ID3TimeStamp):
            return NotImplemented
        return self._key() <= other._key()
    def __gt__(self, other):
        if not isinstance(other, ID3TimeStamp):
            return NotImplemented
        return self._key() > other._key()
    def __ge__(self, other):
        if not isinstance(other, ID3TimeStamp):
            return NotImplemented
        return self._key() >= other._key()
    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.text
    def __repr__(self):
        return "ID3TimeStamp({0!r})".format(self.text)

class TimeStampSpec(EncodedTextSpec):
    def read(self, frame, data):
        value, data = super().read(frame, data)
        return self.validate(frame, value), data
    def write(self, frame, value):
        return super().write(frame, value.text.replace(" ", "T"))
    def validate(self, frame, value):
        try:
            return ID3TimeStamp(value)
        except TypeError:
            raise ValueError("Invalid ID3TimeStamp: {0!r}".format(value))

class VolumeAdjustmentSpec(Spec):
    "A signed 16-bit fixed point gain in dB, in units of 1/512 dB."
    def read(self, frame, data):
        if len(data) < 2:
            raise EOFError()
        value = struct.unpack(">h", data[:2])[0]
        return value / 512.0, data[2:]
    def write(self, frame, value):
        number = int(round(value * 512))
        if not -32768 <= number <= 32767:
            raise ValueError("Volume adjustment out of range: {0}".format(value))
        return struct.pack(">h", number)
    def validate(self, frame, value):
        if value is not None:
            self.write(frame, value)
        return value

class VolumePeakSpec(Spec):
    "A bit count followed by a peak magnitude of up to 4 bytes."
    def read(self, frame, data):
        # http://bugs.xmms.org/attachment.cgi?id=113&action=view
        if len(data) < 1:
            raise EOFError()
        peak = 0
        bits = data[0]
        vol_bytes = min(4, (bits + 7) >> 3)
        # not enough frame data
        if vol_bytes + 1 > len(data):
            raise JunkFrameError("Truncated volume peak")
        shift = ((8 - (bits & 7)) & 7) + (4 - vol_bytes) * 8
        for i in range(1, vol_bytes + 1):
            peak *= 256
            peak += data[i]
        peak *= 2 ** shift
        return (float(peak) / (2 ** 31 - 1)), data[1 + vol_bytes:]
    def write(self, frame, value):
        number = int(round(value * 32768))
        if not 0 <= number <= 65535:
            raise ValueError("Volume peak out of range: {0}".format(value))
        # Always write as 16 bits for sanity
        return b"\x10" + struct.pack(">H", number)
    def validate(self, frame, value):
        if value is not None:
            self.write(frame, value)
        return value

def _validate_records(values, width):
    if values is None:
        return []
    res = []
    for v in values:
        if not isinstance(v, collections.abc.Sequence) or isinstance(v, str):
            raise TypeError("Records must be sequences")
        if len(v) != width:
            raise ValueError("Invalid record length")
        res.append(tuple(v))
    return res

class SynchronizedTextSpec(EncodedTextSpec):
    "A list of (text, timestamp) pairs."
    def read(self, frame, data):
        texts = []
        enc, term = self._encodings[frame.encoding]
        while data:
            rawstr, rest, found = _split_terminated(data, term)
            if not found or len(rest) < 4:
                raise JunkFrameError("Truncated synchronized text")
            time = struct.unpack(">I", rest[:4])[0]
            texts.append((rawstr.decode(enc), time))
            data = rest[4:]
        return texts, bytes()
    def write(self, frame, value):
        enc, term = self._encodings[frame.encoding]
        data = bytearray()
        for text, time in value:
            data.extend(text.encode(enc) + term)
            data.extend(struct.pack(">I", time))
        return bytes(data)
    def validate(self, frame, value):
        return _validate_records(value, 2)

class KeyEventSpec(Spec):
    "A list of (event type, timestamp) pairs."
    def read(self, frame, data):
        events = []
        while len(data) >= 5:
            events.append(struct.unpack(">bI", data[:5]))
            data = data[5:]
        return events, data
    def write(self, frame, value):
        return b"".join(struct.pack(">bI", *event) for event in value)
    def validate(self, frame, value):
        return _validate_records(value, 2)

class VolumeAdjustmentsSpec(Spec):
    "A sorted list of (frequency in Hz, adjustment in dB) pairs."
    # Not to be confused with VolumeAdjustmentSpec
    def read(self, frame, data):
        adjustments = {}
        while len(data) >= 4:
            freq, adj = struct.unpack(">Hh", data[:4])
            data = data[4:]
            adjustments[freq / 2.0] = adj / 512.0
        return sorted(adjustments.items()), data
    def write(self, frame, value):
        return b"".join(struct.pack(">Hh", int(freq * 2), int(adj * 512))
                        for (freq, adj) in sorted(value))
    def validate(self, frame, value):
        return _validate_records(value, 2)

class ASPIIndexSpec(Spec):
    "A list of frame.N integers whose width depends on frame.b."
    def _format(self, frame):
        if frame.b == 16:
            return "H", 2
        if frame.b == 8:
            return "B", 1
        return None, None

    def read(self, frame, data):
        fmt, width = self._format(frame)
        if fmt is None:
            warn("Invalid bit count in ASPI ({0})".format(frame.b), FrameWarning)
            return [], data
        if len(data) < width * frame.N:
            raise EOFError()
        values = struct.unpack(">" + fmt * frame.N, data[:width * frame.N])
        return list(values), data[width * frame.N:]

    def write(self, frame, values):
        fmt, width = self._format(frame)
        if fmt is None:
            raise ValueError("frame.b must be 8 or 16, not {0}".format(frame.b))
        return struct.pack(">" + fmt * frame.N, *values)

    def validate(self, frame, values):
        if values is None:
            return []
        if not isinstance(values, collections.abc.Sequence) or isinstance(values, str):
            raise TypeError("ASPIIndexSpec needs a sequence of integers")
        return list(values)
