# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""List of frames defined in the various ID3 versions.

known_frames maps ID3v2.3/2.4 frame ids to frame classes;
known_frames22 maps ID3v2.2 frame ids to the classes used to decode
them, and upgrades maps ID3v2.2 frame ids to their ID3v2.3/2.4
equivalents.
"""

import re

import tagwright.frames as Frames
from tagwright.specs import *


# ID3v2.4

# 4.2.1. Identification frames
class UFID(Frames.Frame):
    "Unique file identifier"
    _framespec = (Latin1TextSpec("owner"), BinaryDataSpec("data"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.owner)

    def _pprint(self):
        if self.data and max(self.data) < 128:
            return "{0}={1}".format(self.owner, self.data.decode("ascii"))
        return "{0} ({1} bytes)".format(self.owner, len(self.data or b""))

class TIT1(Frames.TextFrame):
    "Content group description"

class TIT2(Frames.TextFrame):
    "Title/songname/content description"

class TIT3(Frames.TextFrame):
    "Subtitle/Description refinement"

class TALB(Frames.TextFrame):
    "Album/Movie/Show title"

class TOAL(Frames.TextFrame):
    "Original album/movie/show title"

class TRCK(Frames.NumericPartTextFrame):
    "Track number/Position in set"
# #/#

class TPOS(Frames.NumericPartTextFrame):
    "Part of a set"
# #/#

class TSST(Frames.TextFrame):
    "Set subtitle"

class TSRC(Frames.TextFrame):
    "ISRC (international standard recording code)"


# 4.2.2. Involved persons frames
class TPE1(Frames.TextFrame):
    "Lead performer(s)/Soloist(s)"

class TPE2(Frames.TextFrame):
    "Band/orchestra/accompaniment"

class TPE3(Frames.TextFrame):
    "Conductor/performer refinement"

class TPE4(Frames.TextFrame):
    "Interpreted, remixed, or otherwise modified by"

class TOPE(Frames.TextFrame):
    "Original artist(s)/performer(s)"

class TEXT(Frames.TextFrame): "Lyricist/Text writer"
class TOLY(Frames.TextFrame): "Original lyricist(s)/text writer(s)"
class TCOM(Frames.TextFrame): "Composer"

class TMCL(Frames.PairedTextFrame):
    "Musician credits list"

class TIPL(Frames.PairedTextFrame):
    "Involved people list"

class TENC(Frames.TextFrame): "Encoded by"


# 4.2.3. Derived and subjective properties frames

class TBPM(Frames.NumericTextFrame): "BPM (beats per minute)"

class TLEN(Frames.NumericTextFrame): "Length"
# milliseconds in string format

class TKEY(Frames.TextFrame): "Initial key"
# /^([CDEFGAB][b#]?[m]?|o)$/

class TLAN(Frames.TextFrame): "Language(s)"
# /^...$/  ISO 639-2

class TCON(Frames.TextFrame):
    """Content type (genre)

    ID3 has several ways to represent genres: ID3v1 genre numbers,
    parenthesized references like "(17)", "(RX)" (Remix) or "(CR)"
    (Cover), and free text.  Use the 'genres' property rather than the
    'text' attribute to get a plain list of genre names.
    """
    _genre_re = re.compile(r"((?:\((?P<id>[0-9]+|RX|CR)\))*)(?P<str>.+)?")

    @property
    def genres(self):
        genres = []
        for value in self.text:
            # 255 possible entries in id3v1
            if value.isdigit() and int(value) < 256:
                try:
                    genres.append(genre_names[int(value)])
                except IndexError:
                    genres.append("Unknown")
            elif value == "CR":
                genres.append("Cover")
            elif value == "RX":
                genres.append("Remix")
            elif value:
                newgenres = []
                genreid, dummy, genrename = self._genre_re.match(value).groups()
                if genreid:
                    for gid in genreid[1:-1].split(")("):
                        if gid.isdigit() and int(gid) < len(genre_names):
                            newgenres.append(genre_names[int(gid)])
                        elif gid == "CR":
                            newgenres.append("Cover")
                        elif gid == "RX":
                            newgenres.append("Remix")
                        else:
                            newgenres.append("Unknown")
                if genrename:
                    # "Unescaping" the first parenthesis
                    if genrename.startswith("(("):
                        genrename = genrename[1:]
                    if genrename not in newgenres:
                        newgenres.append(genrename)
                genres.extend(newgenres)
        return genres

    @genres.setter
    def genres(self, values):
        if isinstance(values, str):
            values = [values]
        self.text = list(values)

    def _pprint(self):
        return " / ".join(self.genres)

class TFLT(Frames.TextFrame): "File type"
class TMED(Frames.TextFrame): "Media type"
class TMOO(Frames.TextFrame): "Mood"


# 4.2.4. Rights and license frames

class TCOP(Frames.TextFrame): "Copyright message"
class TPRO(Frames.TextFrame): "Produced notice"
class TPUB(Frames.TextFrame): "Publisher"
class TOWN(Frames.TextFrame): "File owner/licensee"
class TRSN(Frames.TextFrame): "Internet radio station name"
class TRSO(Frames.TextFrame): "Internet radio station owner"


# 4.2.5. Other text frames

class TOFN(Frames.TextFrame): "Original filename"
class TDLY(Frames.NumericTextFrame): "Playlist delay"
# milliseconds

class TDEN(Frames.TimeStampTextFrame): "Encoding time"
class TDOR(Frames.TimeStampTextFrame): "Original release time"
class TDRC(Frames.TimeStampTextFrame): "Recording time"
class TDRL(Frames.TimeStampTextFrame): "Release time"
class TDTG(Frames.TimeStampTextFrame): "Tagging time"

class TSSE(Frames.TextFrame):
    "Software/Hardware and settings used for encoding"

class TSOA(Frames.TextFrame): "Album sort order"
class TSOP(Frames.TextFrame): "Performer sort order"
class TSOT(Frames.TextFrame): "Title sort order"


# 4.2.6. User defined information frame

class TXXX(Frames.TextFrame):
    """User defined text information frame

    TXXX frames have a 'desc' attribute; many taggers use it to store
    freeform keys.
    """
    _framespec = (EncodingSpec("encoding"),
                  EncodedTextSpec("desc"),
                  MultiSpec("text", EncodedTextSpec("text"), sep="\x00"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)

    def _pprint(self):
        return "{0}={1}".format(self.desc, " / ".join(self.text))


# 4.3. URL link frames

class WCOM(Frames.URLFrameU): "Commercial information"
class WCOP(Frames.URLFrame): "Copyright/Legal information"
class WOAF(Frames.URLFrame): "Official audio file webpage"
class WOAR(Frames.URLFrameU): "Official artist/performer webpage"
class WOAS(Frames.URLFrame): "Official audio source webpage"
class WORS(Frames.URLFrame): "Official Internet radio station homepage"
class WPAY(Frames.URLFrame): "Payment"
class WPUB(Frames.URLFrame): "Publishers official webpage"

class WXXX(Frames.URLFrame):
    "User defined URL link frame"
    _framespec = (EncodingSpec("encoding"),
                  EncodedTextSpec("desc"),
                  URLStringSpec("url"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)


# 4.4.-4.30. Other frames

class MCDI(Frames.BinaryFrame):
    "Music CD identifier"

class ETCO(Frames.Frame):
    "Event timing codes"
    _framespec = (ByteSpec("format"), KeyEventSpec("events"))

class MLLT(Frames.Frame):
    "MPEG location lookup table"
    _framespec = (SizedIntegerSpec("frames", 2),
                  SizedIntegerSpec("bytes", 3),
                  SizedIntegerSpec("milliseconds", 3),
                  ByteSpec("bits_for_bytes"),
                  ByteSpec("bits_for_milliseconds"),
                  BinaryDataSpec("data"))

class SYTC(Frames.Frame):
    "Synchronised tempo codes"
    _framespec = (ByteSpec("format"), BinaryDataSpec("data"))

class USLT(Frames.Frame):
    "Unsynchronised lyric/text transcription"
    _framespec = (EncodingSpec("encoding"),
                  FixedWidthStringSpec("lang", 3),
                  EncodedTextSpec("desc"),
                  EncodedTextSpec("text"))

    @property
    def hash_key(self):
        return "{0}:{1}:{2}".format(self.frameid, self.desc, self.lang)

    def __str__(self):
        return self.text

    def _pprint(self):
        return "{0}={1}={2}".format(self.desc, self.lang, self.text)

class SYLT(Frames.Frame):
    "Synchronised lyric/text"
    _framespec = (EncodingSpec("encoding"),
                  FixedWidthStringSpec("lang", 3),
                  ByteSpec("format"),
                  ByteSpec("type"),
                  EncodedTextSpec("desc"),
                  SynchronizedTextSpec("text"))

    @property
    def hash_key(self):
        return "{0}:{1}:{2}".format(self.frameid, self.desc, self.lang)

    def __str__(self):
        return "".join(text for (text, time) in self.text)

class COMM(Frames.TextFrame):
    "Comments"
    _framespec = (EncodingSpec("encoding"),
                  FixedWidthStringSpec("lang", 3),
                  EncodedTextSpec("desc"),
                  MultiSpec("text", EncodedTextSpec("text"), sep="\x00"))

    @property
    def hash_key(self):
        return "{0}:{1}:{2}".format(self.frameid, self.desc, self.lang)

    def _pprint(self):
        return "{0}={1}={2}".format(self.desc, self.lang, " / ".join(self.text))

class RVA2(Frames.Frame):
    """Relative volume adjustment (2)

    Gain is in dB; peak is a fraction of full scale.
    """
    _framespec = (Latin1TextSpec("desc"),
                  ChannelSpec("channel"),
                  VolumeAdjustmentSpec("gain"),
                  VolumePeakSpec("peak"))

    _channels = ("Other", "Master volume", "Front right", "Front left",
                 "Back right", "Back left", "Front centre", "Back centre",
                 "Subwoofer")

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)

    def __str__(self):
        channel = (self._channels[self.channel]
                   if self.channel is not None and self.channel < len(self._channels)
                   else "Unknown")
        return "{0}: {1:+0.4f} dB/{2:0.4f}".format(channel, self.gain or 0.0, self.peak or 0.0)

    def _pprint(self):
        return str(self)

class EQU2(Frames.Frame):
    "Equalisation (2)"
    _framespec = (ByteSpec("method"),
                  Latin1TextSpec("desc"),
                  VolumeAdjustmentsSpec("adjustments"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)

class RVRB(Frames.Frame):
    "Reverb"
    _framespec = (SizedIntegerSpec("left", 2),
                  SizedIntegerSpec("right", 2),
                  ByteSpec("bounce_left"), ByteSpec("bounce_right"),
                  ByteSpec("feedback_ltl"), ByteSpec("feedback_ltr"),
                  ByteSpec("feedback_rtr"), ByteSpec("feedback_rtl"),
                  ByteSpec("premix_ltr"), ByteSpec("premix_rtl"))

class APIC(Frames.Frame):
    "Attached picture"
    _framespec = (EncodingSpec("encoding"),
                  Latin1TextSpec("mime"),
                  ByteSpec("type"),
                  EncodedTextSpec("desc"),
                  BinaryDataSpec("data"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)

    def _pprint(self):
        if self.type is not None and self.type < len(picture_types):
            kind = picture_types[self.type]
        else:
            kind = "Unknown"
        return "{0}: {1} ({2}, {3} bytes)".format(kind, self.desc, self.mime,
                                                  len(self.data or b""))

class GEOB(Frames.Frame):
    "General encapsulated object"
    _framespec = (EncodingSpec("encoding"),
                  Latin1TextSpec("mime"),
                  EncodedTextSpec("filename"),
                  EncodedTextSpec("desc"),
                  BinaryDataSpec("data"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)

    def _pprint(self):
        return "{0} ({1}, {2}, {3} bytes)".format(self.desc, self.filename, self.mime,
                                                  len(self.data or b""))

class PCNT(Frames.Frame):
    "Play counter"
    _framespec = (IntegerSpec("count"),)

    def __pos__(self):
        return self.count

    def _pprint(self):
        return str(self.count)

class POPM(Frames.Frame):
    "Popularimeter"
    _framespec = (Latin1TextSpec("email"),
                  ByteSpec("rating"),
                  optionalspec(IntegerSpec("count")))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.email)

    def __pos__(self):
        return self.rating

    def _pprint(self):
        return "{0}={1!r} {2!r}/255".format(self.email, self.count, self.rating)

class RBUF(Frames.Frame):
    "Recommended buffer size"
    _framespec = (SizedIntegerSpec("size", 3),
                  optionalspec(ByteSpec("info")),
                  optionalspec(SizedIntegerSpec("offset", 4)))

    def __pos__(self):
        return self.size

class AENC(Frames.Frame):
    "Audio encryption"
    _framespec = (Latin1TextSpec("owner"),
                  SizedIntegerSpec("preview_start", 2),
                  SizedIntegerSpec("preview_length", 2),
                  optionalspec(BinaryDataSpec("data")))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.owner)

    def __str__(self):
        return self.owner

class LINK(Frames.Frame):
    "Linked information"
    _framespec = (FixedWidthStringSpec("linked_frameid", 4),
                  Latin1TextSpec("url"),
                  optionalspec(BinaryDataSpec("data")))

    @property
    def hash_key(self):
        key = "{0}:{1}:{2}".format(self.frameid, self.linked_frameid, self.url)
        if self.data is not None:
            key += ":" + self.data.decode("latin-1")
        return key

    @classmethod
    def _upgrade(cls, frame):
        linked = frame.linked_frameid
        if linked is not None and len(linked) == 3:
            linked = upgrades.get(linked, linked + " ")
        return cls(flags=frame.flags, linked_frameid=linked, url=frame.url,
                   data=frame.data)

class POSS(Frames.Frame):
    "Position synchronisation frame"
    _framespec = (ByteSpec("format"), IntegerSpec("position"))

    def __pos__(self):
        return self.position

class USER(Frames.Frame):
    "Terms of use"
    _framespec = (EncodingSpec("encoding"),
                  FixedWidthStringSpec("lang", 3),
                  EncodedTextSpec("text"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.lang)

    def __str__(self):
        return self.text

    def _pprint(self):
        return "{0}={1}".format(self.lang, self.text)

class OWNE(Frames.Frame):
    "Ownership frame"
    _framespec = (EncodingSpec("encoding"),
                  Latin1TextSpec("price"),
                  FixedWidthStringSpec("date", 8),
                  EncodedTextSpec("seller"))

    def __str__(self):
        return self.seller

class COMR(Frames.Frame):
    "Commercial frame"
    _framespec = (EncodingSpec("encoding"),
                  Latin1TextSpec("price"),
                  FixedWidthStringSpec("valid_until", 8),
                  Latin1TextSpec("contact"),
                  ByteSpec("format"),
                  EncodedTextSpec("seller"),
                  EncodedTextSpec("desc"),
                  optionalspec(Latin1TextSpec("mime")),
                  optionalspec(BinaryDataSpec("logo")))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self._to_data().decode("latin-1"))

class ENCR(Frames.Frame):
    "Encryption method registration"
    _framespec = (Latin1TextSpec("owner"),
                  ByteSpec("method"),
                  BinaryDataSpec("data"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.owner)

class GRID(Frames.Frame):
    "Group identification registration"
    _framespec = (Latin1TextSpec("owner"),
                  ByteSpec("group"),
                  optionalspec(BinaryDataSpec("data")))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.group)

    def __pos__(self):
        return self.group

    def __str__(self):
        return self.owner

class PRIV(Frames.Frame):
    "Private frame"
    _framespec = (Latin1TextSpec("owner"), BinaryDataSpec("data"))

    @property
    def hash_key(self):
        return "{0}:{1}:{2}".format(self.frameid, self.owner,
                                    (self.data or b"").decode("latin-1"))

    def _pprint(self):
        if self.data and max(self.data) < 128:
            return "{0}:{1}".format(self.owner, self.data.decode("ascii"))
        return "{0} ({1} bytes)".format(self.owner, len(self.data or b""))

class SIGN(Frames.Frame):
    "Signature frame"
    _framespec = (ByteSpec("group"), BinaryDataSpec("sig"))

    @property
    def hash_key(self):
        return "{0}:{1}:{2}".format(self.frameid, self.group,
                                    (self.sig or b"").decode("latin-1"))

class SEEK(Frames.Frame):
    "Seek frame"
    _framespec = (IntegerSpec("offset"),)

    def __pos__(self):
        return self.offset

class ASPI(Frames.Frame):
    "Audio seek point index"
    _framespec = (SizedIntegerSpec("S", 4),
                  SizedIntegerSpec("L", 4),
                  SizedIntegerSpec("N", 2),
                  ByteSpec("b"),
                  ASPIIndexSpec("Fi"))

# ID3v2.3

class TYER(Frames.NumericTextFrame): "Year"
class TDAT(Frames.TextFrame): "Date"
class TIME(Frames.TextFrame): "Time"
class TORY(Frames.NumericTextFrame): "Original release year"
class TRDA(Frames.TextFrame): "Recording dates"
class TSIZ(Frames.NumericTextFrame): "Size"

class IPLS(Frames.PairedTextFrame):
    "Involved people list"

# Nonstandard frames
class TCMP(Frames.NumericTextFrame):
    "iTunes: Part of a compilation"

class TSO2(Frames.TextFrame): "iTunes: Album artist sort order"
class TSOC(Frames.TextFrame): "iTunes: Composer sort order"

class TDES(Frames.TextFrame):
    "iTunes: Podcast description"

class TGID(Frames.TextFrame):
    "iTunes: Podcast identifier"

class WFED(Frames.URLFrame):
    "iTunes: Podcast feed URL"

class TCAT(Frames.TextFrame):
    "iTunes: Podcast category"

class TKWD(Frames.TextFrame):
    """iTunes: Podcast keywords
    Comma-separated list of keywords.
    """

class PCST(Frames.Frame):
    """iTunes: Podcast flag.

    If this frame is present, iTunes considers the file to be a podcast.
    Value should be zero.
    """
    _framespec = (SizedIntegerSpec("value", 4),)


# ID3v2.2 frames whose layout differs from their ID3v2.3 counterpart

class PIC(Frames.Frame):
    """Attached picture (ID3v2.2)

    The 'mime' attribute of an ID3v2.2 attached picture is a three
    letter image format, usually 'PNG' or 'JPG'.
    """
    _framespec = (EncodingSpec("encoding"),
                  FixedWidthStringSpec("mime", 3),
                  ByteSpec("type"),
                  EncodedTextSpec("desc"),
                  BinaryDataSpec("data"))

    @property
    def hash_key(self):
        return "{0}:{1}".format(self.frameid, self.desc)

class LNK(Frames.Frame):
    "Linked information (ID3v2.2)"
    _framespec = (FixedWidthStringSpec("linked_frameid", 3),
                  Latin1TextSpec("url"),
                  optionalspec(BinaryDataSpec("data")))

class CRM(Frames.Frame):
    "Encrypted meta frame (ID3v2.2); it has no ID3v2.3/2.4 equivalent"
    _framespec = (Latin1TextSpec("owner"),
                  Latin1TextSpec("desc"),
                  BinaryDataSpec("data"))


# ID3v2.2 frame ids and their ID3v2.3/2.4 equivalents
upgrades = {
    "UFI": "UFID", "TT1": "TIT1", "TT2": "TIT2", "TT3": "TIT3",
    "TP1": "TPE1", "TP2": "TPE2", "TP3": "TPE3", "TP4": "TPE4",
    "TCM": "TCOM", "TXT": "TEXT", "TLA": "TLAN", "TCO": "TCON",
    "TAL": "TALB", "TPA": "TPOS", "TRK": "TRCK", "TRC": "TSRC",
    "TYE": "TYER", "TDA": "TDAT", "TIM": "TIME", "TRD": "TRDA",
    "TMT": "TMED", "TFT": "TFLT", "TBP": "TBPM", "TCP": "TCMP",
    "TCR": "TCOP", "TPB": "TPUB", "TEN": "TENC", "TSS": "TSSE",
    "TOF": "TOFN", "TLE": "TLEN", "TSI": "TSIZ", "TDY": "TDLY",
    "TKE": "TKEY", "TOT": "TOAL", "TOA": "TOPE", "TOL": "TOLY",
    "TOR": "TORY", "TXX": "TXXX",
    "WAF": "WOAF", "WAR": "WOAR", "WAS": "WOAS", "WCM": "WCOM",
    "WCP": "WCOP", "WPB": "WPUB", "WXX": "WXXX",
    "IPL": "IPLS", "MCI": "MCDI", "ETC": "ETCO", "MLL": "MLLT",
    "STC": "SYTC", "ULT": "USLT", "SLT": "SYLT", "COM": "COMM",
    "REV": "RVRB", "PIC": "APIC", "GEO": "GEOB", "CNT": "PCNT",
    "POP": "POPM", "BUF": "RBUF", "CRA": "AENC", "LNK": "LINK",
    # iTunes extensions
    "TS2": "TSO2", "TSA": "TSOA", "TSC": "TSOC", "TSP": "TSOP",
    "TST": "TSOT", "TDS": "TDES", "TID": "TGID", "WFD": "WFED",
    "TCT": "TCAT", "TKW": "TKWD", "PCS": "PCST",
    }

# Frames introduced in ID3v2.4; these are dropped when converting to ID3v2.3
frames_v24_only = ("ASPI", "EQU2", "RVA2", "SEEK", "SIGN", "TDEN", "TDOR",
                   "TDRC", "TDRL", "TDTG", "TIPL", "TMCL", "TMOO", "TPRO",
                   "TSOA", "TSOP", "TSOT", "TSST")

# Frames with no ID3v2.4 equivalent; these are dropped when converting to ID3v2.4
frames_v23_only = ("RVAD", "EQUA", "TRDA", "TSIZ", "TDAT", "TIME", "CRM")


# Attached picture (APIC & PIC) types
picture_types = (
    "Other", "32x32 icon", "Other icon", "Front Cover", "Back Cover",
    "Leaflet", "Media", "Lead artist", "Artist", "Conductor",
    "Band/Orchestra", "Composer", "Lyricist/text writer",
    "Recording Location", "Recording", "Performance", "Screen capture",
    "A bright coloured fish", "Illustration", "Band/artist",
    "Publisher/Studio")

# ID3v1 genre list
genres = (
    "Blues", "Classic Rock", "Country", "Dance", "Disco", "Funk", "Grunge",
    "Hip-Hop", "Jazz", "Metal", "New Age", "Oldies", "Other", "Pop", "R&B",
    "Rap", "Reggae", "Rock", "Techno", "Industrial", "Alternative", "Ska",
    "Death Metal", "Pranks", "Soundtrack", "Euro-Techno", "Ambient",
    "Trip-Hop", "Vocal", "Jazz+Funk", "Fusion", "Trance", "Classical",
    "Instrumental", "Acid", "House", "Game", "Sound Clip", "Gospel", "Noise",
    "AlternRock", "Bass", "Soul", "Punk", "Space", "Meditative",
    "Instrumental Pop", "Instrumental Rock", "Ethnic", "Gothic", "Darkwave",
    "Techno-Industrial", "Electronic", "Pop-Folk", "Eurodance", "Dream",
    "Southern Rock", "Comedy", "Cult", "Gangsta", "Top 40", "Christian Rap",
    "Pop/Funk", "Jungle", "Native American", "Cabaret", "New Wave",
    "Psychadelic", "Rave", "Showtunes", "Trailer", "Lo-Fi", "Tribal",
    "Acid Punk", "Acid Jazz", "Polka", "Retro", "Musical", "Rock & Roll",
    "Hard Rock",
    # 80-125: Winamp extensions
    "Folk", "Folk-Rock", "National Folk", "Swing", "Fast Fusion", "Bebob",
    "Latin", "Revival", "Celtic", "Bluegrass", "Avantgarde", "Gothic Rock",
    "Progressive Rock", "Psychedelic Rock", "Symphonic Rock", "Slow Rock",
    "Big Band", "Chorus", "Easy Listening", "Acoustic", "Humour", "Speech",
    "Chanson", "Opera", "Chamber Music", "Sonata", "Symphony", "Booty Bass",
    "Primus", "Porn Groove", "Satire", "Slow Jam", "Club", "Tango", "Samba",
    "Folklore", "Ballad", "Power Ballad", "Rhythmic Soul", "Freestyle",
    "Duet", "Punk Rock", "Drum Solo", "A capella", "Euro-House",
    "Dance Hall",
    # 126-147: Even more esoteric Winamp extensions
    "Goa", "Drum & Bass", "Club House", "Hardcore", "Terror", "Indie",
    "BritPop", "Negerpunk", "Polsk Punk", "Beat", "Christian Gangsta Rap",
    "Heavy Metal", "Black Metal", "Crossover", "Contemporary Christian",
    "Christian Rock", "Merengue", "Salsa", "Thrash Metal", "Anime", "JPop",
    "Synthpop",
    # 148-191: Later Winamp extensions
    "Abstract", "Art Rock", "Baroque", "Bhangra", "Big Beat", "Breakbeat",
    "Chillout", "Downtempo", "Dub", "EBM", "Eclectic", "Electro",
    "Electroclash", "Emo", "Experimental", "Garage", "Global", "IDM",
    "Illbient", "Industro-Goth", "Jam Band", "Krautrock", "Leftfield",
    "Lounge", "Math Rock", "New Romantic", "Nu-Breakz", "Post-Punk",
    "Post-Rock", "Psytrance", "Shoegaze", "Space Rock", "Trop Rock",
    "World Music", "Neoclassical", "Audiobook", "Audio Theatre",
    "Neue Deutsche Welle", "Podcast", "Indie Rock", "G-Funk", "Dubstep",
    "Garage Rock", "Psybient")

# TCON.genres uses a local variable named genres
genre_names = genres


known_frames = dict((obj.__name__, obj) for obj in list(globals().values())
                    if Frames.is_frame_class(obj) and len(obj.__name__) == 4)

known_frames22 = dict((short, known_frames[long])
                      for (short, long) in upgrades.items())
known_frames22.update(PIC=PIC, LNK=LNK, CRM=CRM)

def upgrade_frame(frame):
    """Convert a frame with a three-character ID3v2.2 frame id to its
    ID3v2.3/2.4 equivalent.  Frames without an equivalent are returned
    unchanged."""
    long = upgrades.get(frame.frameid)
    if long is None:
        return frame
    return known_frames[long]._upgrade(frame)


__all__ = [obj.__name__ for obj in list(globals().values())
           if Frames.is_frame_class(obj)]
__all__.extend(["known_frames", "known_frames22", "upgrades", "upgrade_frame",
                "frames_v24_only", "frames_v23_only",
                "picture_types", "genres"])
