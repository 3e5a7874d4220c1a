# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""ID3v1 and ID3v1.1 tags.

ID3v1 tags are 128-byte blocks at the very end of the file.  They are
only read when a file has no ID3v2 tag; their fields are converted into
the equivalent ID3v2.4 frames.
"""

import struct

from tagwright.id3 import *

def find_id3v1(file):
    """Look for an ID3v1 tag at the end of file.

    Returns (offset, data), where offset is the position of the
    ID3v1 block relative to the end of the file, and data is the raw
    block, or None if the file doesn't have one.
    """
    filesize = file.seek(0, 2)
    if filesize < 128:
        return 0, None
    file.seek(-128, 2)
    data = file.read(128)
    if data[:3] != b"TAG":
        return 0, None
    return -128, data

def parse_id3v1(data):
    """Parse an ID3v1 tag, returning a list of ID3v2.4 frames, or None
    if data doesn't contain an ID3v1 tag."""
    index = data.find(b"TAG")
    if index < 0:
        return None
    data = data[index:]
    if not 124 <= len(data) <= 128:
        return None

    # Short year fields were written by some buggy taggers; the
    # length of the year field absorbs the difference.
    fmt = "3s30s30s30s{0}s29sBB".format(len(data) - 124)
    try:
        (tag, title, artist, album, year,
         comment, track, genre) = struct.unpack(fmt, data)
    except struct.error:
        return None
    if tag != b"TAG":
        return None

    def fix(field):
        return field.split(b"\x00")[0].strip().decode("latin-1")

    title, artist, album, year, comment = map(fix, (title, artist, album,
                                                    year, comment))
    frames = []
    if title:
        frames.append(TIT2(encoding=0, text=[title]))
    if artist:
        frames.append(TPE1(encoding=0, text=[artist]))
    if album:
        frames.append(TALB(encoding=0, text=[album]))
    if year:
        frames.append(TDRC(encoding=0, text=[year]))
    if comment:
        frames.append(COMM(encoding=0, lang="eng", desc="ID3v1 Comment",
                           text=[comment]))
    # Winamp pads the comment with spaces; a space in the track
    # position is not a track number.
    if track and (track != 32 or data[-3] == 0):
        frames.append(TRCK(encoding=0, text=[str(track)]))
    if genre != 255:
        frames.append(TCON(encoding=0, text=[str(genre)]))
    return frames

def make_id3v1(tag):
    "Return an ID3v1.1 tag block from a tag containing ID3v2 frames."
    def field(frameid, width, frame=None):
        if frame is None:
            frame = tag.get(frameid)
        text = frame.text[0] if frame is not None and frame.text else ""
        data = str(text).encode("latin-1", "replace")[:width]
        return data + bytes(width - len(data))

    title = field("TIT2", 30)
    artist = field("TPE1", 30)
    album = field("TALB", 30)

    comments = tag.get_all("COMM")
    comment = field("COMM", 28, comments[0] if comments else None) + b"\x00"

    track = 0
    if "TRCK" in tag:
        try:
            track = +tag["TRCK"]
        except (ValueError, IndexError):
            pass
        if track not in range(256):
            track = 0

    genre = 255
    if "TCON" in tag:
        names = tag["TCON"].genres
        if names and names[0] in genres:
            genre = genres.index(names[0])

    if "TDRC" in tag:
        year = str(tag["TDRC"]).encode("latin-1", "replace")
    elif "TYER" in tag:
        year = str(tag["TYER"]).encode("latin-1", "replace")
    else:
        year = b""
    year = (year + b"\x00\x00\x00\x00")[:4]

    return (b"TAG" + title + artist + album + year + comment
            + bytes([track, genre]))
