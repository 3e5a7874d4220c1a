# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import tagwright.conversion
import tagwright.frames
import tagwright.id3
import tagwright.id3v1
import tagwright.tags

from tagwright.errors import *
from tagwright.conversion import BitPaddedInt, Unsync
from tagwright.frames import Frame, ErrorFrame, TextFrame, URLFrame
from tagwright.tags import (Version, ID3Data, FrameOrder, read_tag, decode_tag,
                            detect_tag, delete, replace_duplicate,
                            keep_duplicate, merge_duplicate)
from tagwright.id3v1 import find_id3v1, parse_id3v1, make_id3v1

version = (0, 1, 0)
versionstr = ".".join((str(v) for v in version))
