# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Class definitions for ID3v2 frames."""

import abc
import collections.abc
import struct
from warnings import warn

from tagwright.errors import *
from tagwright.specs import *

class Frame(metaclass=abc.ABCMeta):
    """Base class of all ID3v2 frames.

    Subclasses list their fields in _framespec.  Field values may be
    supplied positionally (in _framespec order) or as keyword arguments;
    each value is validated by its spec, both here and on every later
    assignment.  Frame(other), where other is an instance of the same
    class, makes a validated copy of other.
    """
    _framespec = tuple()

    def __init__(self, *args, frameid=None, flags=0, **kwargs):
        if len(args) == 1 and not kwargs and isinstance(args[0], type(self)):
            other = args[0]
            args = tuple()
            kwargs = {spec.name: getattr(other, spec.name, None)
                      for spec in self._framespec
                      if not (spec._optional and getattr(other, spec.name, None) is None)}
            if frameid is None:
                frameid = other.frameid
        self.frameid = frameid if frameid else type(self).__name__
        self.flags = flags
        if len(args) > len(self._framespec):
            raise TypeError("{0} takes at most {1} field values ({2} given)"
                            .format(type(self).__name__, len(self._framespec), len(args)))
        values = dict(zip((spec.name for spec in self._framespec), args))
        for name in kwargs:
            if name in values:
                raise TypeError("Field {0} given more than once".format(name))
            if not any(spec.name == name for spec in self._framespec):
                raise TypeError("{0} has no field {1}".format(type(self).__name__, name))
        values.update(kwargs)
        for spec in self._framespec:
            if spec._optional and values.get(spec.name) is None:
                object.__setattr__(self, spec.name, None)
            else:
                setattr(self, spec.name, values.get(spec.name))

    def __setattr__(self, name, value):
        # Automatic validation on assignment
        for spec in self._framespec:
            if name == spec.name:
                if not (spec._optional and value is None):
                    value = spec.validate(self, value)
                break
        super().__setattr__(name, value)

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.frameid == other.frameid
                and self._framespec == other._framespec
                and all(getattr(self, spec.name, None) ==
                        getattr(other, spec.name, None)
                        for spec in self._framespec))

    __hash__ = None

    @property
    def hash_key(self):
        "The key identifying this frame in a tag; no two frames in a tag share it."
        return self.frameid

    @classmethod
    def _from_data(cls, frameid, data, flags=0):
        frame = cls(frameid=frameid, flags=flags)
        frame._read_data(data)
        return frame

    def _read_data(self, data):
        orig = data
        for spec in self._framespec:
            if not data:
                if spec._optional:
                    break
                raise JunkFrameError("{0}: frame data ends before field {1}"
                                     .format(self.frameid, spec.name))
            try:
                value, data = spec.read(self, data)
            except JunkFrameError:
                raise
            except (EOFError, ValueError, LookupError, struct.error) as e:
                raise JunkFrameError("{0}: invalid field {1} ({2})"
                                     .format(self.frameid, spec.name, e)) from e
            object.__setattr__(self, spec.name, value)
        if data.strip(b"\x00"):
            warn("Leftover data in {0} frame: {1!r} (from {2!r})".format(self.frameid, data, orig),
                 LeftoverDataWarning)

    @classmethod
    def _upgrade(cls, frame):
        """Convert a frame read from an ID3v2.2 tag to this class.

        Fields are copied by name; the result gets the class name as its
        frame id.
        """
        values = {}
        for spec in cls._framespec:
            value = getattr(frame, spec.name, None)
            if value is not None or not spec._optional:
                values[spec.name] = value
        return cls(flags=frame.flags, **values)

    def _get_v23_frame(self, **kwargs):
        "Return a copy of this frame that is suitable for writing into an ID3v2.3 tag."
        values = {}
        for spec in self._framespec:
            value = getattr(self, spec.name, None)
            if spec._optional and value is None:
                continue
            values[spec.name] = spec.downgrade23(self, value, **kwargs)
        return type(self)(frameid=self.frameid, flags=self.flags, **values)

    def _to_data(self):
        def encode_fields():
            data = bytearray()
            for spec in self._framespec:
                if spec._optional and getattr(self, spec.name) is None:
                    break
                data.extend(spec.write(self, getattr(self, spec.name)))
            return bytes(data)

        def try_preferred_encodings():
            orig_encoding = self.encoding
            try:
                for encoding in EncodedTextSpec.preferred_encodings:
                    try:
                        self.encoding = encoding
                        return encode_fields()
                    except UnicodeEncodeError:
                        pass
            finally:
                self.encoding = orig_encoding
            raise ValueError("Could not encode strings")

        if not isinstance(self._framespec[0], EncodingSpec):
            return encode_fields()
        elif self.encoding is None:
            return try_preferred_encodings()
        else:
            try:
                return encode_fields()
            except UnicodeEncodeError:
                return try_preferred_encodings()

    def __repr__(self):
        stype = type(self).__name__
        args = []
        if stype != self.frameid:
            args.append("frameid={0!r}".format(self.frameid))
        if self.flags:
            args.append("flags=0x{0:04X}".format(self.flags))
        for spec in self._framespec:
            if isinstance(spec, BinaryDataSpec):
                data = getattr(self, spec.name)
                if isinstance(data, (bytes, bytearray)):
                    args.append("{0}=<{1} bytes of binary data {2!r}{3}>".format(
                            spec.name, len(data),
                            data[:20], "..." if len(data) > 20 else ""))
                else:
                    args.append("{0}={1!r}".format(spec.name, data))
            else:
                args.append("{0}={1!r}".format(spec.name, getattr(self, spec.name)))
        return "{0}({1})".format(stype, ", ".join(args))

    def _str_fields(self):
        fields = []
        for spec in self._framespec:
            fields.append(spec.to_str(getattr(self, spec.name, None)))
        return ", ".join(fields)

    def __str__(self):
        flag = "!" if isinstance(self, ErrorFrame) else " "
        return "{0}{1}({2})".format(flag, self.frameid, self._str_fields())

    def _pprint(self):
        return self._str_fields()

    def pprint(self):
        "Return a human-readable one-line summary of the frame."
        return "{0}={1}".format(self.frameid, self._pprint())

class ErrorFrame(Frame):
    "A frame that could not be decoded."
    _framespec = (BinaryDataSpec("data"),)

    def __init__(self, frameid, data, exception, flags=0):
        super().__init__(frameid=frameid, flags=flags)
        self.data = data
        self.exception = exception

    def _str_fields(self):
        strs = ["ERROR"]
        if self.exception:
            strs.append(str(self.exception))
        strs.append(repr(self.data))
        return ", ".join(strs)


class TextFrame(Frame):
    """Text strings.

    Text frames have a 'text' attribute holding a list of strings, and an
    'encoding' attribute: 0 for Latin-1, 1 for UTF-16, 2 for UTF-16BE,
    and 3 for UTF-8, or None to pick the first encoding that works
    when the frame is written.  They also support list-like indexing,
    iteration, append and extend over their strings.

    >>> TIT2("Foo", "Bar").text
    ['Foo', 'Bar']
    """
    _framespec = (EncodingSpec("encoding"),
                  MultiSpec("text", EncodedTextSpec("text"), sep="\x00"))

    def __init__(self, *values, frameid=None, flags=0, **kwargs):
        if len(values) == 1 and not kwargs and isinstance(values[0], type(self)):
            super().__init__(values[0], frameid=frameid, flags=flags)
            return
        def extract_values(values):
            if values is None:
                return
            if isinstance(values, str) or not isinstance(values, collections.abc.Iterable):
                yield values
            else:
                for val in values:
                    yield from extract_values(val)
        super().__init__(frameid=frameid, flags=flags, **kwargs)
        if values:
            self.text = self.text + list(extract_values(values))

    def __len__(self):
        return len(self.text)
    def __getitem__(self, index):
        return self.text[index]
    def __iter__(self):
        return iter(self.text)
    def append(self, value):
        self.text = self.text + [value]
    def extend(self, values):
        self.text = self.text + list(values)

    def __eq__(self, other):
        if isinstance(other, str):
            return str(self) == other
        return super().__eq__(other)

    __hash__ = None

    def __str__(self):
        return "\x00".join(str(t) for t in self.text)

    def _pprint(self):
        return " / ".join(str(t) for t in self.text)

    def _merge(self, other):
        "Return a new frame holding the strings of both self and other."
        res = type(self)(self)
        res.text = self.text + other.text
        if self.encoding != other.encoding:
            res.encoding = None
        return res

class NumericTextFrame(TextFrame):
    """Numerical text strings.

    The numeric value of these frames can be gotten with unary plus, e.g.
        frame = TLEN('12345')
        length = +frame
    """
    _framespec = (EncodingSpec("encoding"),
                  MultiSpec("text", EncodedNumericTextSpec("text"), sep="\x00"))

    def __pos__(self):
        return int(self.text[0])

class NumericPartTextFrame(TextFrame):
    """Multivalue numerical text strings.

    These strings indicate 'part (e.g. track) X of Y', and unary plus
    returns the first value:
        frame = TRCK('4/15')
        track = +frame # track == 4
    """
    _framespec = (EncodingSpec("encoding"),
                  MultiSpec("text", EncodedNumericPartTextSpec("text"), sep="\x00"))

    def __pos__(self):
        return int(self.text[0].split("/")[0])

class TimeStampTextFrame(TextFrame):
    """A list of time stamps.

    The 'text' attribute in this frame is a list of ID3TimeStamp
    objects, not a list of strings.
    """
    _framespec = (EncodingSpec("encoding"),
                  MultiSpec("text", TimeStampSpec("stamp"), sep=","))

    def __str__(self):
        return ",".join(stamp.text for stamp in self.text)

    def _pprint(self):
        return " / ".join(stamp.text for stamp in self.text)

class URLFrame(Frame):
    """A frame containing a URL string.

    URLs are stored as Latin-1; the only sane way to handle URLs in ID3
    tags is to restrict them to ASCII.
    """
    _framespec = (URLStringSpec("url"), )

    def __str__(self):
        return self.url

    def _pprint(self):
        return self.url

class URLFrameU(URLFrame):
    "A URL frame that may appear several times in a tag, once per URL."
    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.url)

class PairedTextFrame(Frame):
    """Paired text strings.

    The 'people' attribute is a list of (involvement, person) pairs,
    like [("trumpet", "Miles Davis"), ("bass", "Paul Chambers")].
    """
    _framespec = (EncodingSpec("encoding"),
                  MultiSpec("people",
                            EncodedTextSpec("involvement"),
                            EncodedTextSpec("person")))

    def _pprint(self):
        return " / ".join("{0}={1}".format(*pair) for pair in self.people)

class BinaryFrame(Frame):
    "Binary data; the 'data' attribute contains the raw byte string."
    _framespec = (BinaryDataSpec("data"),)

    def _pprint(self):
        return "<{0} bytes>".format(len(self.data or b""))

def is_frame_class(cls):
    return (isinstance(cls, type)
            and issubclass(cls, Frame)
            and 3 <= len(cls.__name__) <= 4
            and cls.__name__ == cls.__name__.upper())
