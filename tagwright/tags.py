# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Reading, converting and writing ID3v2 tags."""

import collections.abc
import enum
import io
import os.path
import re
import struct
import zlib

from warnings import warn

from tagwright.errors import *
from tagwright.conversion import *
from tagwright.id3 import *
from tagwright.id3v1 import find_id3v1, parse_id3v1, make_id3v1

import tagwright.frames as Frames
import tagwright.id3 as id3
import tagwright.fileutil as fileutil

class Version(enum.IntEnum):
    "ID3v2 major versions."
    V22 = 2
    V23 = 3
    V24 = 4

_TAG_UNSYNCHRONISED = 0x80
_TAG_EXTENDED_HEADER = 0x40
_TAG_EXPERIMENTAL = 0x20
_TAG24_FOOTER = 0x10
_TAG24_UNKNOWN_MASK = 0x0F
_TAG23_UNKNOWN_MASK = 0x1F

_FRAME23_FORMAT_COMPRESSED = 0x0080
_FRAME23_FORMAT_ENCRYPTED = 0x0040
_FRAME23_FORMAT_GROUP = 0x0020

_FRAME24_FORMAT_GROUP = 0x0040
_FRAME24_FORMAT_COMPRESSED = 0x0008
_FRAME24_FORMAT_ENCRYPTED = 0x0004
_FRAME24_FORMAT_UNSYNCHRONISED = 0x0002
_FRAME24_FORMAT_DATA_LENGTH_INDICATOR = 0x0001

# Allow a single space at end of four-character ids
# Some programs (e.g. iTunes 8.2) generate such frames when converting
# from 2.2 to 2.3/2.4 tags.
_frame_id_re = re.compile(b"^[A-Z][A-Z0-9]{2}[A-Z0-9 ]?$")

def _is_frame_id(data):
    if isinstance(data, str):
        try:
            data = data.encode("ASCII")
        except UnicodeEncodeError:
            return False
    return _frame_id_re.match(data) is not None

def read_tag(filename, **load_args):
    "Read the ID3v2 tag of filename (a path or a binary file object)."
    return ID3Data(filename, **load_args)

def decode_tag(data, **load_args):
    "Decode an ID3v2 tag from a byte string."
    return read_tag(io.BytesIO(data), **load_args)

def detect_tag(filename):
    """Return version and position of ID3v2 tag in filename.
    Returns (version, offset, length), where version is a Version,
    and (offset, length) is the position of the tag in the file,
    including its header and footer.
    """
    with fileutil.opened(filename, "rb") as file:
        offset = file.tell()
        header = file.read(10)
        file.seek(offset)
        if len(header) < 10:
            raise NoHeaderError("File too small for an ID3v2 tag")
        if header[0:3] != b"ID3":
            raise NoHeaderError("ID3v2 tag not found")
        if header[3] not in (2, 3, 4):
            raise UnsupportedVersionError("Unknown ID3 version: 2.{0}.{1}"
                                          .format(*header[3:5]))
        version = Version(header[3])
        length = BitPaddedInt(header[6:10]) + 10
        if version == Version.V24 and header[5] & _TAG24_FOOTER:
            length += 10
        return (version, offset, length)

def _tag_region_size(file):
    """Return the size of the ID3v2 tag at the current position of file,
    not counting its 10-byte header; -10 if there is no tag."""
    header = file.read(10)
    if len(header) < 10 or header[0:3] != b"ID3":
        return -10
    size = BitPaddedInt(header[6:10])
    if header[3] == 4 and header[5] & _TAG24_FOOTER:
        size += 10
    return size

def delete(filename, delete_v1=True, delete_v2=True):
    """Remove tags from a file.

    delete_v1 -- delete any ID3v1 tag
    delete_v2 -- delete any ID3v2 tag
    """
    with fileutil.opened(filename, "rb+") as file:
        if delete_v1:
            (offset, data) = find_id3v1(file)
            if data is not None:
                file.seek(offset, 2)
                file.truncate()
        # Technically an empty tag is invalid, but we delete it anyway.
        if delete_v2:
            file.seek(0)
            size = _tag_region_size(file)
            if size >= 0:
                fileutil.shrink(file, size + 10, 0)


# Strategies for adding a frame whose hash key is already in the tag.
# They receive the frame already in the tag and the new one, and return
# the frame to keep.

def replace_duplicate(old, new):
    return new

def keep_duplicate(old, new):
    return old

def merge_duplicate(old, new):
    "Merge the strings of duplicate text frames; other frames are replaced."
    if isinstance(old, Frames.TextFrame) and type(old) is type(new):
        warn("Merging duplicate {0} frames".format(new.frameid), DuplicateFrameWarning)
        return old._merge(new)
    return new


class FrameOrder:
    """Order frames based on their position in a predefined list of patterns.

    A pattern may be a frame class, or a regular expression that is to be
    matched against the frame id.  Frames in the same position are
    ordered by their hash keys.

    >>> order = FrameOrder(TIT1, "T.*", TXXX)
    >>> order.key(TIT1())
    (0, 'TIT1')
    >>> order.key(TPE1())
    (1, 'TPE1')
    >>> order.key(TXXX(desc="foo"))
    (2, 'TXXX:foo')
    >>> order.key(APIC())
    (3, 'APIC:')
    """
    def __init__(self, *patterns):
        self.re_keys = []
        self.frame_keys = dict()
        for (i, pattern) in enumerate(patterns):
            if isinstance(pattern, str):
                self.re_keys.append((pattern, re.compile(pattern), i))
            else:
                assert Frames.is_frame_class(pattern)
                self.frame_keys[pattern.__name__] = i
        self.unknown_key = len(patterns)

    def key(self, frame):
        "Return the sort key for the given frame."
        return (self._position(frame), frame.hash_key)

    def _position(self, frame):
        # Look up frame by exact match
        if frame.frameid in self.frame_keys:
            return self.frame_keys[frame.frameid]

        # Try each pattern
        for (source, pattern, position) in self.re_keys:
            if pattern.match(frame.frameid):
                return position

        return self.unknown_key

    def __repr__(self):
        order = []
        order.extend((repr(source), position) for (source, pattern, position) in self.re_keys)
        order.extend(self.frame_keys.items())
        order.sort(key=lambda pair: pair[1])
        return "<FrameOrder: {0}>".format(", ".join(pair[0] for pair in order))


class ID3Data(collections.abc.MutableMapping):
    """An ID3v2 tag.

    ID3Data is a mapping from frame hash keys to frames; frame classes
    may be used in place of their ids.  Frames in tags read from ID3v2.2
    files are upgraded to their ID3v2.3/2.4 equivalents, and by default
    the whole tag is converted to ID3v2.4 on load.

    The attributes pedantic, padding_block, frame_order and on_duplicate
    control parsing strictness, the size increment of saved tags, frame
    order in saved tags and the handling of duplicate frames.  Their
    class-wide defaults can be overridden for a single tag by the
    constructor keywords of the same name.

    >>> tag = ID3Data()
    >>> tag[TIT2] = "Foobar"
    >>> tag["TIT2"].text
    ['Foobar']
    """
    pedantic = True
    padding_block = 1024
    frame_order = FrameOrder(TIT2, TPE1, TRCK, TALB, TPOS, TDRC, TCON)
    on_duplicate = staticmethod(replace_duplicate)

    def __init__(self, filename=None, *, pedantic=None, frame_order=None,
                 on_duplicate=None, padding_block=None, **load_args):
        if pedantic is not None:
            self.pedantic = pedantic
        if frame_order is not None:
            self.frame_order = frame_order
        if on_duplicate is not None:
            self.on_duplicate = on_duplicate
        if padding_block is not None:
            if padding_block <= 0:
                raise ValueError("padding_block must be positive")
            self.padding_block = padding_block
        self._frames = dict()
        self.version = Version.V24
        self.size = 0
        self.flags = 0
        self.extdata = bytes()
        self.unknown_frames = []
        self.unknown_version = Version.V24
        self.errors = []
        self.filename = None
        self.from_v1 = False
        if filename is not None:
            self.load(filename, **load_args)

    f_unsynch = property(lambda self: bool(self.flags & _TAG_UNSYNCHRONISED))
    f_extended = property(lambda self: bool(self.flags & _TAG_EXTENDED_HEADER))
    f_experimental = property(lambda self: bool(self.flags & _TAG_EXPERIMENTAL))
    f_footer = property(lambda self: bool(self.flags & _TAG24_FOOTER))

    # MutableMapping methods
    def _normalize_key(self, key):
        if Frames.is_frame_class(key):
            return key.__name__
        return key

    def __getitem__(self, key):
        return self._frames[self._normalize_key(key)]

    def __setitem__(self, key, value):
        key = self._normalize_key(key)
        if isinstance(value, Frames.Frame):
            # Frames are stored under their own hash key, like add()
            upgraded = upgrade_frame(value) if len(value.frameid) == 3 else value
            if key not in (value.frameid, upgraded.frameid, upgraded.hash_key):
                raise ValueError("Frame {0!r} can't be stored under {1!r}"
                                 .format(upgraded.hash_key, key))
            self.add(upgraded)
            return
        if key not in id3.known_frames:
            raise KeyError("Unknown frame id " + key)
        self._frames[key] = id3.known_frames[key](value)

    def __delitem__(self, key):
        del self._frames[self._normalize_key(key)]

    def __iter__(self):
        return iter(self._frames)

    def __len__(self):
        return len(self._frames)

    def clear(self):
        self._frames.clear()

    def __repr__(self):
        return "<{0}: ID3v2.{1} tag with {2} frames>".format(
            type(self).__name__, int(self.version), len(self._frames))

    def add(self, frame):
        """Add frame to the tag under its hash key.

        Frames with a three-character ID3v2.2 id are replaced with their
        ID3v2.3/2.4 equivalent.  If the tag already has a frame with the
        same hash key, on_duplicate decides which frame is kept.
        """
        if len(frame.frameid) == 3:
            frame = upgrade_frame(frame)
        key = frame.hash_key
        if key in self._frames:
            frame = self.on_duplicate(self._frames[key], frame)
        self._frames[key] = frame

    def get_all(self, key):
        """Return all frames with a given hash key or frame id (the list
        may be empty).

            tag.get_all("TIT2") == [tag["TIT2"]]
            tag.get_all("TXXX") == [TXXX(desc="woo", text="bar"), ...]

        Since hash keys are colon-separated, a prefix like "COMM:foo"
        returns all COMM frames with description "foo".
        """
        key = self._normalize_key(key)
        if key in self._frames:
            return [self._frames[key]]
        prefix = key + ":"
        return [frame for (k, frame) in self._frames.items() if k.startswith(prefix)]

    def delete_all(self, key):
        "Delete all frames matching key; see get_all."
        key = self._normalize_key(key)
        if key in self._frames:
            del self._frames[key]
        else:
            prefix = key + ":"
            for k in [k for k in self._frames if k.startswith(prefix)]:
                del self._frames[k]

    def set_all(self, key, frames):
        "Replace all frames matching key with frames."
        self.delete_all(key)
        for frame in frames:
            self._frames[frame.hash_key] = frame

    def pprint(self):
        """Return the frames of the tag in a human-readable format, one
        frame per line, like:
            TIT2=My Title
            POPM=user@example.org=3 128/255
        """
        return "\n".join(sorted(frame.pprint() for frame in self.values()))


    # Reading tags

    def load(self, filename, known_frames=None, translate=True, v2_version=4, offset=0):
        """Load the ID3v2 tag starting at offset in filename.

        filename may be a path or a binary file object.  known_frames
        overrides the registry of ID3v2.3/2.4 frames.  If the file has no
        ID3v2 tag, an ID3v1 tag at the end of the file is loaded
        instead.  If translate is true, the tag is converted to ID3v2.3
        or ID3v2.4, according to v2_version.
        """
        if v2_version not in (3, 4):
            raise ValueError("Only 3 and 4 possible for v2_version")
        if known_frames is None:
            known_frames = id3.known_frames
        self.clear()
        self.flags = 0
        self.extdata = bytes()
        self.unknown_frames = []
        self.errors = []
        self.from_v1 = False
        self.filename = filename
        with fileutil.opened(filename, "rb") as file:
            file.seek(offset)
            try:
                try:
                    self._read_header(file, known_frames)
                except EOFError:
                    raise NoHeaderError("{0!r}: too small for an ID3v2 tag".format(filename))
            except (NoHeaderError, UnsupportedVersionError):
                (v1offset, v1data) = find_id3v1(file)
                frames = parse_id3v1(v1data) if v1data is not None else None
                if frames is None:
                    raise
                self.version = Version.V24
                self.unknown_version = Version.V24
                self.from_v1 = True
                for frame in frames:
                    self.add(frame)
                data = None
            else:
                # Tags truncated by the end of the file are read as far as they go
                data = file.read(self.size - (file.tell() - offset))

        if data is not None:
            if self.version == Version.V22:
                known_frames = id3.known_frames22
            for frame in self._read_frames(data, known_frames):
                if isinstance(frame, Frames.ErrorFrame):
                    self.errors.append(frame)
                    warn("{0}: ignoring invalid frame ({1})".format(frame.frameid, frame.exception),
                         ErrorFrameWarning)
                elif isinstance(frame, Frames.Frame):
                    self.add(frame)
                else:
                    self.unknown_frames.append(frame)
            self.unknown_version = self.version

        if translate:
            if v2_version == 3:
                self.update_to_v23()
            else:
                self.update_to_v24()

    def _read_header(self, file, known_frames):
        header = fileutil.xread(file, 10)
        (magic, major, revision, flags, size) = struct.unpack(">3sBBB4s", header)
        if magic != b"ID3":
            raise NoHeaderError("ID3v2 tag not found")
        if major not in (2, 3, 4):
            raise UnsupportedVersionError("ID3v2.{0} is not supported".format(major))
        self.version = Version(major)
        self.flags = flags
        self.size = BitPaddedInt(size) + 10

        if self.pedantic:
            if not BitPaddedInt.has_valid_padding(size):
                raise HeaderError("Header size not synchsafe")
            if self.version == Version.V24 and flags & _TAG24_UNKNOWN_MASK:
                raise HeaderError("ID3v2.4 tag has invalid flags 0x{0:02X}".format(flags))
            if self.version == Version.V23 and flags & _TAG23_UNKNOWN_MASK:
                raise HeaderError("ID3v2.3 tag has invalid flags 0x{0:02X}".format(flags))

        if self.version >= Version.V23 and self.f_extended:
            extsize = fileutil.xread(file, 4)
            if extsize.decode("latin-1") in known_frames:
                # Some taggers set the extended header flag but don't
                # write an extended header; the first frame follows
                # immediately.
                self.flags ^= _TAG_EXTENDED_HEADER
                file.seek(-4, 1)
                return
            if self.version == Version.V24:
                # The size of the whole extended header, as a synchsafe integer.
                if self.pedantic and not BitPaddedInt.has_valid_padding(extsize):
                    raise HeaderError("Extended header size not synchsafe")
                extsize = BitPaddedInt(extsize) - 4
            else:
                # The size of the extended header, excluding itself.
                extsize = struct.unpack(">L", extsize)[0]
            if extsize > 0:
                self.extdata = fileutil.xread(file, extsize)

    def _determine_bpi(self, data, known_frames):
        """Return the function decoding frame sizes in data.

        ID3v2.4 frame sizes are synchsafe integers, but some encoders
        (notably iTunes) wrote plain integers instead.  Walk the frames
        both ways and pick the interpretation that finds more known
        frames and ends closer to the end of data.
        """
        if self.version < Version.V24:
            return int

        empty = bytes(10)

        # Count frames found with synchsafe sizes, and how far past the end we get
        o = 0
        asbpi = 0
        while o < len(data) - 10:
            part = data[o:o + 10]
            if part == empty:
                bpioff = -((len(data) - o) % 10)
                break
            (name, size, flags) = struct.unpack(">4sLH", part)
            size = BitPaddedInt(size)
            o += 10 + size
            if name.decode("latin-1") in known_frames:
                asbpi += 1
        else:
            bpioff = o - len(data)

        # Count frames found with raw sizes, and how far past the end we get
        o = 0
        asint = 0
        while o < len(data) - 10:
            part = data[o:o + 10]
            if part == empty:
                intoff = -((len(data) - o) % 10)
                break
            (name, size, flags) = struct.unpack(">4sLH", part)
            o += 10 + size
            if name.decode("latin-1") in known_frames:
                asint += 1
        else:
            intoff = o - len(data)

        # More frames as int, or the same number and synchsafe overshoots while int doesn't
        if asint > asbpi or (asint == asbpi and (bpioff >= 1 and intoff <= 1)):
            return int
        return BitPaddedInt

    def _read_frames(self, data, known_frames):
        """Generate the frames in data.

        Yields Frame instances for known frames, ErrorFrames for known
        frames that could not be decoded, and raw header + data byte
        strings for unknown frames.
        """
        if self.version < Version.V24 and self.f_unsynch:
            try:
                data = Unsync.decode(data)
            except ValueError:
                pass

        if self.version >= Version.V23:
            bpi = self._determine_bpi(data, known_frames)
            while data:
                header = data[:10]
                try:
                    (name, size, flags) = struct.unpack(">4sLH", header)
                except struct.error:
                    return # Not enough header
                if name.strip(b"\x00") == b"":
                    return # Padding
                size = bpi(size)
                framedata = data[10:10 + size]
                data = data[10 + size:]
                if size == 0:
                    continue
                frameid = name.decode("latin-1")
                if frameid in known_frames:
                    yield self._load_frame(known_frames[frameid], frameid, flags, framedata)
                elif _is_frame_id(name):
                    yield header + framedata
        else:
            while data:
                header = data[:6]
                if len(header) < 6:
                    return
                name = header[0:3]
                if name.strip(b"\x00") == b"":
                    return
                size = BitPaddedInt(header[3:6], bits=8)
                framedata = data[6:6 + size]
                data = data[6 + size:]
                if size == 0:
                    continue
                frameid = name.decode("latin-1")
                if frameid in known_frames:
                    yield self._load_frame(known_frames[frameid], frameid, 0, framedata)
                elif _is_frame_id(name):
                    yield header + framedata

    def _load_frame(self, cls, frameid, flags, data):
        data = self._interpret_frame_flags(frameid, flags, data)
        try:
            return cls._from_data(frameid, data, flags)
        except JunkFrameError as e:
            return Frames.ErrorFrame(frameid, data, e, flags)

    def _interpret_frame_flags(self, frameid, flags, data, version=None):
        if version is None:
            version = self.version
        if version == Version.V24:
            if flags & _FRAME24_FORMAT_GROUP:
                data = data[1:]
            datalen = bytes()
            if flags & (_FRAME24_FORMAT_COMPRESSED | _FRAME24_FORMAT_DATA_LENGTH_INDICATOR):
                datalen = data[:4]
                data = data[4:]
            if flags & _FRAME24_FORMAT_UNSYNCHRONISED or self.f_unsynch:
                try:
                    data = Unsync.decode(data)
                except ValueError as e:
                    # Only the frame flag makes bad sync data fatal
                    if self.pedantic and flags & _FRAME24_FORMAT_UNSYNCHRONISED:
                        raise BadUnsynchData("{0}: {1}".format(frameid, e)) from e
            if flags & _FRAME24_FORMAT_ENCRYPTED:
                raise EncryptionUnsupportedError("Can't read ID3v2.4 encrypted frame {0}"
                                                 .format(frameid))
            if flags & _FRAME24_FORMAT_COMPRESSED:
                try:
                    data = zlib.decompress(data)
                except zlib.error:
                    # Some encoders set the data length flag without
                    # writing the data length.
                    data = datalen + data
                    try:
                        data = zlib.decompress(data)
                    except zlib.error as e:
                        if self.pedantic:
                            raise BadCompressedData("{0}: {1}".format(frameid, e)) from e
        elif version == Version.V23:
            if flags & _FRAME23_FORMAT_COMPRESSED:
                data = data[4:] # Uncompressed size
            if flags & _FRAME23_FORMAT_ENCRYPTED:
                raise EncryptionUnsupportedError("Can't read ID3v2.3 encrypted frame {0}"
                                                 .format(frameid))
            if flags & _FRAME23_FORMAT_GROUP:
                data = data[1:]
            if flags & _FRAME23_FORMAT_COMPRESSED:
                try:
                    data = zlib.decompress(data)
                except zlib.error as e:
                    if self.pedantic:
                        raise BadCompressedData("{0}: {1}".format(frameid, e)) from e
        return data


    # Converting tags

    def _pop_text(self, key):
        frame = self.pop(key, None)
        if frame is None or not frame.text:
            return ""
        return str(frame.text[0])

    def _update_common(self):
        "Conversions done by both update_to_v23 and update_to_v24."
        if "TCON" in self:
            # Get rid of "(xx)Foobr" format.
            self["TCON"].genres = self["TCON"].genres

        if self.unknown_version < Version.V23:
            # Unknown ID3v2.2 frames can't be written.
            del self.unknown_frames[:]

        if self.version < Version.V23:
            # ID3v2.2 PIC frames have three-letter image formats.
            pics = self.get_all("APIC")
            mimes = {"PNG": "image/png", "JPG": "image/jpeg"}
            self.delete_all("APIC")
            for pic in pics:
                self.add(APIC(encoding=pic.encoding,
                              mime=mimes.get(pic.mime, pic.mime),
                              type=pic.type, desc=pic.desc, data=pic.data))

            # ID3v2.2 LNK frames are just way too different to upgrade.
            self.delete_all("LINK")

    def update_to_v24(self):
        """Convert older tags into an ID3v2.4 tag.

        This updates old ID3v2 frames to ID3v2.4 ones (e.g. TYER to
        TDRC).  It is called by default when loading the tag.
        """
        self._update_common()

        if self.unknown_version == Version.V23:
            # Convert unknown 2.3 frames (flags and size) to 2.4
            converted = []
            for blob in self.unknown_frames:
                try:
                    (name, size, flags) = struct.unpack(">4sLH", blob[:10])
                    name = name.decode("latin-1")
                    data = self._interpret_frame_flags(name, flags, blob[10:], Version.V23)
                except (struct.error, Error):
                    continue
                frame = Frames.BinaryFrame(data=data)
                converted.append(self._save_frame(frame, name=name))
            self.unknown_frames[:] = converted
            self.unknown_version = Version.V24

        # TDAT, TYER, and TIME have been turned into TDRC.
        year = self._pop_text("TYER")
        date = self._pop_text("TDAT")
        time = self._pop_text("TIME")
        if year:
            stamp = year
            if date:
                stamp += "-{0}-{1}".format(date[2:], date[:2])
                if time:
                    stamp += "T{0}:{1}:00".format(time[:2], time[2:])
            if "TDRC" not in self:
                self.add(TDRC(encoding=0, text=[stamp]))

        # TORY can be the first part of a TDOR.
        if "TORY" in self:
            year = self._pop_text("TORY")
            if year and "TDOR" not in self:
                self.add(TDOR(encoding=0, text=[year]))

        # IPLS is now TIPL.
        if "IPLS" in self:
            frame = self.pop("IPLS")
            if "TIPL" not in self:
                self.add(TIPL(encoding=frame.encoding, people=frame.people))

        # These can't be trivially translated to any ID3v2.4 frames, or
        # should have been removed already.
        for key in frames_v23_only:
            self.delete_all(key)

    def update_to_v23(self):
        """Convert older and newer tags into an ID3v2.3 tag.

        This updates incompatible ID3v2 frames to ID3v2.3 ones; frames
        introduced in ID3v2.4 with no ID3v2.3 equivalent are dropped.
        """
        self._update_common()

        # TMCL, TIPL -> IPLS
        if "TIPL" in self or "TMCL" in self:
            people = []
            encoding = None
            for key in ("TIPL", "TMCL"):
                if key in self:
                    frame = self.pop(key)
                    people.extend(frame.people)
                    encoding = frame.encoding
            if "IPLS" not in self:
                self.add(IPLS(encoding=encoding, people=people))

        # TDOR -> TORY
        if "TDOR" in self:
            frame = self.pop("TDOR")
            if frame.text:
                stamp = frame.text[0]
                if stamp.year and "TORY" not in self:
                    self.add(TORY(encoding=frame.encoding,
                                  text=["{0:04d}".format(stamp.year)]))

        # TDRC -> TYER, TDAT, TIME
        if "TDRC" in self:
            frame = self.pop("TDRC")
            if frame.text:
                stamp = frame.text[0]
                if stamp.year and "TYER" not in self:
                    self.add(TYER(encoding=frame.encoding,
                                  text=["{0:04d}".format(stamp.year)]))
                if (stamp.month is not None and stamp.day is not None
                    and "TDAT" not in self):
                    self.add(TDAT(encoding=frame.encoding,
                                  text=["{0:02d}{1:02d}".format(stamp.day, stamp.month)]))
                if (stamp.hour is not None and stamp.minute is not None
                    and "TIME" not in self):
                    self.add(TIME(encoding=frame.encoding,
                                  text=["{0:02d}{1:02d}".format(stamp.hour, stamp.minute)]))

        for key in frames_v24_only + ("CRM",):
            self.delete_all(key)


    # Writing tags

    @staticmethod
    def _check_version(v2_version):
        if v2_version not in (3, 4):
            raise ValueError("Only 3 or 4 allowed for v2_version")
        return Version(v2_version)

    def _save_frame(self, frame, name=None, version=Version.V24, v23_sep=None):
        if self.pedantic and isinstance(frame, Frames.TextFrame):
            if len(str(frame)) == 0:
                return bytes()

        if version == Version.V23:
            frame = frame._get_v23_frame(sep=v23_sep)
            bits = 8
        else:
            bits = 7

        framedata = frame._to_data()
        frameid = name or frame.frameid
        if len(frameid) != 4 or not _is_frame_id(frameid):
            raise ValueError("Invalid ID3v2.{0} frame id {1!r}".format(int(version), frameid))
        datasize = BitPaddedInt.encode(len(framedata), bits=bits, width=4)
        header = struct.pack(">4s4sH", frameid.encode("ASCII"), datasize, 0)
        return header + framedata

    def _prepare_framedata(self, v2_version, v23_sep):
        frames = sorted(self.values(), key=self.frame_order.key)
        framedata = [self._save_frame(frame, version=v2_version, v23_sep=v23_sep)
                     for frame in frames]
        if self.unknown_version == v2_version:
            framedata.extend(data for data in self.unknown_frames if len(data) > 10)
        return bytes().join(framedata)

    def _padded_size(self, framesize, insize=-10):
        "Return the size of a tag holding framesize bytes in place of a tag of insize bytes."
        if insize >= framesize:
            return insize
        block = self.padding_block
        return (framesize + block - 1) // block * block

    @staticmethod
    def _prepare_header(v2_version, size):
        return struct.pack(">3sBBB4s", b"ID3", int(v2_version), 0, 0,
                           BitPaddedInt.encode(size, width=4))

    def encode(self, v2_version=4, v23_sep="/"):
        """Return the binary representation of the tag, padded to a
        multiple of padding_block bytes."""
        v2_version = self._check_version(v2_version)
        framedata = self._prepare_framedata(v2_version, v23_sep)
        size = self._padded_size(len(framedata))
        return (self._prepare_header(v2_version, size) + framedata
                + bytes(size - len(framedata)))

    def save(self, filename=None, v1=1, v2_version=4, v23_sep="/"):
        """Save changes to a file.

        If no filename is given, the one most recently loaded is used.

        v1 -- if 0, ID3v1 tags will be removed
              if 1, ID3v1 tags will be updated but not added
              if 2, ID3v1 tags will be created and/or updated
        v2_version -- the ID3v2 version to write, 3 or 4
        v23_sep -- the separator used to join multiple strings in ID3v2.3
              text frames; if None, the strings are separated by nulls

        The tag is not converted to v2_version automatically; call
        update_to_v23 or update_to_v24 first.
        """
        v2_version = self._check_version(v2_version)
        if filename is None:
            filename = self.filename
        if filename is None:
            raise ValueError("No filename given")

        framedata = self._prepare_framedata(v2_version, v23_sep)
        framesize = len(framedata)
        if framesize == 0:
            try:
                delete(filename)
            except FileNotFoundError:
                pass
            return

        if isinstance(filename, str) and not os.path.exists(filename):
            open(filename, "wb").close()
        with fileutil.opened(filename, "rb+") as file:
            file.seek(0)
            insize = _tag_region_size(file)
            outsize = self._padded_size(framesize, insize)
            if insize < outsize:
                fileutil.grow(file, outsize - insize, insize + 10)
            file.seek(0)
            file.write(self._prepare_header(v2_version, outsize))
            file.write(framedata)
            file.write(bytes(outsize - framesize))
            self._write_v1(file, v1)
            file.seek(0)

    def _write_v1(self, file, v1):
        (offset, data) = find_id3v1(file)
        file.seek(offset, 2)
        if v1 == 1 and data is not None or v1 == 2:
            file.write(make_id3v1(self))
        else:
            file.truncate()
        file.flush()

    def delete_tags(self, filename=None, delete_v1=True, delete_v2=True):
        """Remove tags from a file and clear the tag.

        If no filename is given, the one most recently loaded is used.
        """
        if filename is None:
            filename = self.filename
        delete(filename, delete_v1, delete_v2)
        self.clear()
