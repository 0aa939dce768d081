# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import abc
import collections
import io
import re
import types

from abc import abstractmethod
from warnings import warn

from id3peek.errors import *
from id3peek.conversion import *

import id3peek.frames as Frames
import id3peek.id3 as ID3
import id3peek.fileutil as fileutil

_TAG_UNSYNCHRONISED = 0x80
_TAG_EXTENDED_HEADER = 0x40
_TAG_EXPERIMENTAL = 0x20
_TAG24_FOOTER = 0x10

_FRAME23_FORMAT_COMPRESSED = 0x0080
_FRAME23_FORMAT_ENCRYPTED = 0x0040
_FRAME23_FORMAT_GROUP = 0x0020

_FRAME23_STATUS_DISCARD_ON_TAG_ALTER = 0x8000
_FRAME23_STATUS_DISCARD_ON_FILE_ALTER = 0x4000
_FRAME23_STATUS_READ_ONLY = 0x2000

_FRAME24_FORMAT_GROUP = 0x0040
_FRAME24_FORMAT_COMPRESSED = 0x0008
_FRAME24_FORMAT_ENCRYPTED = 0x0004
_FRAME24_FORMAT_UNSYNCHRONISED = 0x0002
_FRAME24_FORMAT_DATA_LENGTH_INDICATOR = 0x0001

_FRAME24_STATUS_DISCARD_ON_TAG_ALTER = 0x4000
_FRAME24_STATUS_DISCARD_ON_FILE_ALTER = 0x2000
_FRAME24_STATUS_READ_ONLY = 0x1000

_EMPTY_FLAGS = types.MappingProxyType({})

_frame_id_pattern = re.compile(b"[A-Z0-9]+")

def is_frame_id(data):
    """Return true if data looks like a frame id.

    Frame ids consist of uppercase latin letters and digits only; anything
    else (typically the NUL bytes of padding) means there are no more
    frames in the tag.

    >>> is_frame_id(b"TIT2"), is_frame_id(b"tit2"), is_frame_id(b"\\0\\0\\0\\0")
    (True, False, False)
    """
    if isinstance(data, str):
        data = data.encode("iso-8859-1", errors="replace")
    return _frame_id_pattern.fullmatch(data) is not None

def read_tag(filename):
    """Read the ID3v2 tag at the start of filename.

    filename may be a path or a binary file object positioned at the start
    of the tag; a file opened here is closed before returning.  Returns a
    ParseResult.  A file without a tag and a tag of an unknown version are
    reported in the result; a source that ends prematurely raises
    TruncatedTagError.
    """
    with fileutil.opened(filename, "rb") as file:
        try:
            header = detect_tag(file)
        except NoTagError:
            return ParseResult(None, False, (), (), _EMPTY_FLAGS)
        cls = _readers.get(header.major)
        if cls is None:
            warn("Unsupported ID3 version: {0}".format(header.version), TagWarning)
            return ParseResult(header, False, (), (), _EMPTY_FLAGS)
        if header.flags & cls.unknown_flags_mask:
            warn("Unknown ID3v2.{0} flags: 0x{1:02X}"
                 .format(header.major, header.flags & cls.unknown_flags_mask),
                 TagWarning)
        reader = cls(file, header.has_extended_header)
        reader.read(header.frame_area_length)
        return ParseResult(header, True, reader.tags, reader.images,
                           reader.frame_flags)

def decode_tag(data):
    return read_tag(io.BytesIO(data))

def detect_tag(filename):
    """Return the TagHeader of the ID3v2 tag at the start of filename.

    Raises NoTagError if the data there doesn't start with an ID3v2
    identifier.
    """
    with fileutil.opened(filename, "rb") as file:
        header = file.read(10)
        if header[0:3] != b"ID3":
            raise NoTagError("ID3v2 tag not found")
        if len(header) < 10:
            raise TruncatedTagError("ID3v2 header is truncated")
        return TagHeader.decode(header)


class TagHeader(collections.namedtuple("TagHeader",
                                       "major minor flags size")):
    """The 10-byte header that starts every ID3v2 tag.

    size is the declared size of the tag, excluding the header itself.
    frame_area_length is the extent of the frame area that may still hold
    the start of a frame.
    """
    __slots__ = ()

    @classmethod
    def decode(cls, data):
        if data[0:3] != b"ID3":
            raise NoTagError("ID3v2 tag not found")
        try:
            size = Syncsafe.decode(data[6:10])
        except ValueError:
            # Sizes of unknown versions are never used
            if data[3] in _readers:
                warn("Invalid ID3v2 tag size {0!r}; decoding it anyway"
                     .format(bytes(data[6:10])), TagWarning)
            size = Syncsafe.decode(data[6:10], strict=False)
        return cls(data[3], data[4], data[5], size)

    @property
    def version(self):
        return "ID3v2.{0}.{1}".format(self.major, self.minor)

    @property
    def unsynchronised(self):
        return bool(self.flags & _TAG_UNSYNCHRONISED)

    @property
    def has_extended_header(self):
        return bool(self.flags & _TAG_EXTENDED_HEADER)

    @property
    def experimental(self):
        return bool(self.flags & _TAG_EXPERIMENTAL)

    @property
    def has_footer(self):
        return self.major == 4 and bool(self.flags & _TAG24_FOOTER)

    @property
    def frame_area_length(self):
        return self.size - 10


class ParseResult(collections.namedtuple("ParseResult",
                                         "header version_supported tags "
                                         "images frame_flags")):
    """The outcome of reading a tag.

    tags is a tuple of TextFrames and images a tuple of PictureFrames, both
    in file order.  frame_flags maps frame ids to the flags of the last
    frame seen with that id.  header is None if the file has no tag.
    """
    __slots__ = ()

    @property
    def has_tag_data(self):
        return self.header is not None

    @property
    def version(self):
        return self.header.version if self.header is not None else "N/A"

    @property
    def unsynchronised(self):
        return self.header is not None and self.header.unsynchronised

    @property
    def has_extended_header(self):
        return self.header is not None and self.header.has_extended_header

    @property
    def experimental(self):
        return self.header is not None and self.header.experimental

    @property
    def has_footer(self):
        return self.header is not None and self.header.has_footer

    def __repr__(self):
        if self.header is None:
            return "<ParseResult: no ID3v2 tag>"
        flags = [name for name in ("unsynchronised", "has_extended_header",
                                   "experimental", "has_footer")
                 if getattr(self, name)]
        return "<ParseResult: {0} tag{1} with {2} frames{3}>".format(
            self.version,
            ("({0})".format(", ".join(flags)) if flags else ""),
            len(self.tags) + len(self.images),
            "" if self.version_supported else " (unsupported)")


class FrameReader(metaclass=abc.ABCMeta):
    """Reads the frames of one ID3v2 tag from file.

    The file must be positioned just after the tag header.  Subclasses
    define the version-specific frame layout.
    """
    version = None
    unknown_flags_mask = 0x00

    id_length = 4
    size_length = 4
    header_length = 10

    comment_frame = "COMM"
    private_frame = "PRIV"
    picture_frame = "APIC"
    picture_class = ID3.APIC

    def __init__(self, file, extended_header=False):
        self.file = file
        self.extended_header = extended_header
        self.start = None
        self.frame_flags = _EMPTY_FLAGS
        self._result = None

    @property
    def tags(self):
        return self._result[0] if self._result is not None else ()

    @property
    def images(self):
        return self._result[1] if self._result is not None else ()

    def read(self, length):
        """Scan the frame area and return (tags, images).

        length is the size of the frame area (extended header included)
        less 10 bytes, as in TagHeader.frame_area_length.  Scanning stops
        once the space left is too small for another frame.
        The file is scanned on the first call only; later calls return the
        same result without touching the file.
        """
        if self._result is None:
            tags = []
            images = []
            frame_flags = {}
            length -= self._read_extended_header()
            self.start = self.file.tell()
            for (frameid, flags, encoding, data) in self._read_frames(length):
                if flags is not None:
                    frame_flags[frameid] = flags
                frame = self._frame_from_data(frameid, flags, encoding, data)
                if isinstance(frame, Frames.PictureFrame):
                    images.append(frame)
                elif frame is not None:
                    tags.append(frame)
            self.frame_flags = types.MappingProxyType(frame_flags)
            self._result = (tuple(tags), tuple(images))
        return self._result

    def _frame_from_data(self, frameid, flags, encoding, data):
        if frameid != self.picture_frame:
            return Frames.TextFrame._from_data(frameid, encoding, data, flags)
        try:
            return self.picture_class._from_data(frameid, encoding, data, flags)
        except EOFError:
            warn("Truncated {0} frame ({1} bytes); skipping it"
                 .format(frameid, len(data)), FrameWarning)
            return None

    def _exhausted(self, length):
        # length leaves out one 10-byte frame header; stop when the space
        # left can hold nothing more than a frame header of this version
        remaining = length + 10 - (self.file.tell() - self.start)
        return remaining <= self.header_length

    def _skip_language(self, frameid, size):
        "Skip the language code of a comment frame; return the remaining size."
        if size < 4:
            warn("{0} frame too short ({1} bytes); ignoring rest of tag"
                 .format(frameid, size), FrameWarning)
            return None
        fileutil.skip(self.file, 4)
        return size - 4

    def _read_frames(self, length):
        file = self.file
        while not self._exhausted(length):
            rawid = fileutil.xread(file, self.id_length)
            if not is_frame_id(rawid):
                break
            frameid = rawid.decode("ASCII")
            size = self._read_frame_size(frameid,
                                         fileutil.xread(file, self.size_length))
            if size is None:
                break
            if frameid == self.comment_frame:
                size = self._skip_language(frameid, size)
                if size is None:
                    break
            if frameid == self.private_frame:
                fileutil.skip(file, size + 3)
            else:
                bflags = Int8.decode(fileutil.xread(file, 2))
                flags = self._interpret_frame_flags(bflags)
                encoding = fileutil.xread(file, 1)[0]
                data = fileutil.xread(file, size)
                yield (frameid, flags, encoding, data)

    def _read_frame_size(self, frameid, data):
        return frame_size(data)

    @abstractmethod
    def _read_extended_header(self):
        "Consume the extended header, if any; return its length in bytes."


class Reader22(FrameReader):
    version = 2
    unknown_flags_mask = 0x7F   # Compression bit is ill-defined in standard

    id_length = 3
    size_length = 3
    header_length = 6

    comment_frame = "COM"
    private_frame = None
    picture_frame = "PIC"
    picture_class = ID3.PIC

    def _read_extended_header(self):
        # No extended header in v2.2
        return 0

    def _read_frames(self, length):
        file = self.file
        while not self._exhausted(length):
            rawid = fileutil.xread(file, self.id_length)
            if not is_frame_id(rawid):
                break
            frameid = rawid.decode("ASCII")
            size = self._read_frame_size(frameid,
                                         fileutil.xread(file, self.size_length))
            if size is None:
                break
            encoding = fileutil.xread(file, 1)[0]
            if frameid == self.comment_frame:
                size = self._skip_language(frameid, size)
                if size is None:
                    break
            data = fileutil.xread(file, size)
            yield (frameid, None, encoding, data)


class Reader23(FrameReader):
    version = 3
    unknown_flags_mask = 0x1F

    def _read_extended_header(self):
        if not self.extended_header:
            return 0
        size = Int8.decode(fileutil.xread(self.file, 4))
        if size != 6 and size != 10:
            warn("Unexpected size of ID3v2.3 extended header: {0}".format(size),
                 TagWarning)
        fileutil.skip(self.file, size)
        return 4 + size

    def _interpret_frame_flags(self, bflags):
        flags = set()
        # Frame encoding flags
        if bflags & _FRAME23_FORMAT_COMPRESSED:
            flags.add("compressed")
        if bflags & _FRAME23_FORMAT_ENCRYPTED:
            flags.add("encrypted")
        if bflags & _FRAME23_FORMAT_GROUP:
            flags.add("grouped")
        # Frame status messages
        if bflags & _FRAME23_STATUS_DISCARD_ON_TAG_ALTER:
            flags.add("discard_on_tag_alter")
        if bflags & _FRAME23_STATUS_DISCARD_ON_FILE_ALTER:
            flags.add("discard_on_file_alter")
        if bflags & _FRAME23_STATUS_READ_ONLY:
            flags.add("read_only")
        return frozenset(flags)


class Reader24(FrameReader):
    ITUNES_WORKAROUND = False

    version = 4
    unknown_flags_mask = 0x0F

    def _read_extended_header(self):
        if not self.extended_header:
            return 0
        try:
            size = Syncsafe.decode(fileutil.xread(self.file, 4))
        except ValueError:
            raise TagError("Invalid size of ID3v2.4 extended header")
        if size < 6:
            warn("Unexpected size of ID3v2.4 extended header: {0}".format(size),
                 TagWarning)
        # The size includes the 4 bytes we have just read
        fileutil.skip(self.file, max(size - 4, 0))
        return max(size, 4)

    def _read_frame_size(self, frameid, data):
        if self.ITUNES_WORKAROUND:
            # Work around iTunes frame size encoding bug.
            # Older versions of iTunes stored frame sizes as
            # straight 8bit integers, not syncsafe.
            # (This is known to be fixed in iTunes 8.2.)
            return frame_size(data)
        try:
            return frame_size(data, syncsafe=True)
        except ValueError:
            warn("Frame {0} has a non-syncsafe size; reading it as a plain integer"
                 .format(frameid), FrameWarning)
            return frame_size(data)

    def _interpret_frame_flags(self, bflags):
        flags = set()
        # Frame format flags
        if bflags & _FRAME24_FORMAT_GROUP:
            flags.add("grouped")
        if bflags & _FRAME24_FORMAT_COMPRESSED:
            flags.add("compressed")
        if bflags & _FRAME24_FORMAT_ENCRYPTED:
            flags.add("encrypted")
        if bflags & _FRAME24_FORMAT_UNSYNCHRONISED:
            flags.add("unsynchronised")
        if bflags & _FRAME24_FORMAT_DATA_LENGTH_INDICATOR:
            flags.add("data_length_indicator")
        # Frame status flags
        if bflags & _FRAME24_STATUS_DISCARD_ON_TAG_ALTER:
            flags.add("discard_on_tag_alter")
        if bflags & _FRAME24_STATUS_DISCARD_ON_FILE_ALTER:
            flags.add("discard_on_file_alter")
        if bflags & _FRAME24_STATUS_READ_ONLY:
            flags.add("read_only")
        return frozenset(flags)


_readers = {
    2: Reader22,
    3: Reader23,
    4: Reader24,
    }
