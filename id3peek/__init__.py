# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3peek.frames
import id3peek.tags
import id3peek.id3

from id3peek.errors import *
from id3peek.frames import Frame, TextFrame, PictureFrame
from id3peek.tags import read_tag, decode_tag, detect_tag, is_frame_id
from id3peek.tags import TagHeader, ParseResult, Reader22, Reader23, Reader24

version = (0, 1, 0)
versionstr = ".".join((str(v) for v in version))
