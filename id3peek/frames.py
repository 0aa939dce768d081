# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Class definitions for ID3v2 frames."""

import abc
from abc import abstractmethod

from id3peek.errors import *
from id3peek.specs import *

class Frame(metaclass=abc.ABCMeta):
    _framespec = tuple()

    def __init__(self, frameid=None, encoding=None, flags=None, **kwargs):
        self.frameid = frameid if frameid else type(self).__name__
        self.encoding = encoding
        self.flags = frozenset(flags) if flags else frozenset()
        assert len(self._framespec) > 0
        for spec in self._framespec:
            setattr(self, spec.name, kwargs.get(spec.name, None))

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.frameid == other.frameid
                and self.encoding == other.encoding
                and self.flags == other.flags
                and all(getattr(self, spec.name, None) ==
                        getattr(other, spec.name, None)
                        for spec in self._framespec))

    __hash__ = None

    @classmethod
    def _from_data(cls, frameid, encoding, data, flags=None):
        """Decode a frame payload according to _framespec.

        Raises EOFError if data is too short for the fixed-width fields.
        """
        frame = cls(frameid=frameid, encoding=encoding, flags=flags)
        for spec in frame._framespec:
            val, data = spec.read(frame, data)
            setattr(frame, spec.name, val)
        return frame

    def __repr__(self):
        stype = type(self).__name__
        args = []
        if stype != self.frameid:
            args.append("frameid={0!r}".format(self.frameid))
        if self.encoding is not None:
            args.append("encoding={0!r}".format(self.encoding))
        if self.flags:
            args.append("flags={0!r}".format(set(self.flags)))
        for spec in self._framespec:
            if isinstance(spec, BinaryDataSpec):
                data = getattr(self, spec.name)
                if isinstance(data, (bytes, bytearray)):
                    args.append("{0}=<{1} bytes of binary data {2!r}{3}>".format(
                            spec.name, len(data),
                            data[:20], "..." if len(data) > 20 else ""))
                else:
                    args.append(repr(data))
            else:
                args.append("{0}={1!r}".format(spec.name, getattr(self, spec.name)))
        return "{0}({1})".format(stype, ", ".join(args))

    def _str_fields(self):
        fields = []
        for spec in self._framespec:
            fields.append(spec.to_str(getattr(self, spec.name, None)))
        return ", ".join(fields)

    def __str__(self):
        return "{0}({1})".format(self.frameid, self._str_fields())


class TextFrame(Frame):
    """A frame holding a single decoded string.

    Every frame that is not an attached picture is read as a text frame,
    whatever its id.
    """
    _framespec = (TextSpec("value"),)

    def __init__(self, value=None, frameid=None, encoding=None, flags=None):
        super().__init__(frameid=frameid, encoding=encoding, flags=flags,
                         value=value)

    @property
    def name(self):
        return self.frameid

    def _str_fields(self):
        return repr(self.value)


class PictureFrame(Frame):
    "Base class for attached picture frames (PIC and APIC)."

    @property
    @abstractmethod
    def mime_or_format(self): pass

    @property
    def mime(self):
        return self.mime_or_format

    @property
    def picture_type(self):
        return self.type

    @property
    def description(self):
        return self.desc

    @property
    def type_name(self):
        from id3peek.id3 import picture_types
        if self.type is not None and self.type < len(picture_types):
            return picture_types[self.type]
        return "Unknown"

    def _str_fields(self):
        img = "{0} bytes of {1} data".format(len(self.data or b""), self.mime)
        return "{0}({1}), desc={2}, {3}={4}: {5}".format(self.type,
                                                         self.type_name,
                                                         repr(self.desc),
                                                         self._framespec[0].name,
                                                         repr(self.mime_or_format),
                                                         img)
