# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import abc

from abc import abstractmethod
from warnings import warn

from id3peek.errors import *

# The idea for the Spec system comes from Mutagen.

_encodings = (('iso-8859-1', b"\x00"),
              ('utf-16', b"\x00\x00"),
              ('utf-16-be', b"\x00\x00"),
              ('utf-8', b"\x00"))

def lookup_encoding(encoding, frameid=None):
    "Return (codec, terminator) for an ID3v2 text encoding marker."
    if encoding in range(len(_encodings)):
        return _encodings[encoding]
    warn("Unknown text encoding 0x{0:02X}{1}; assuming ISO-8859-1"
         .format(encoding, " in frame " + frameid if frameid else ""),
         FrameWarning)
    return _encodings[0]

def decode_text(encoding, data, frameid=None):
    """Decode a text payload written with the given encoding marker.

    Embedded NUL characters (string separators in ID3v2.4) are replaced
    by spaces and the result is stripped of surrounding whitespace.

    >>> decode_text(0, b"TITLE\\x00")
    'TITLE'
    """
    enc, term = lookup_encoding(encoding, frameid)
    text = bytes(data).decode(enc, errors="replace")
    return text.replace("\ufeff", "").replace("\x00", " ").strip()


class Spec(metaclass=abc.ABCMeta):
    def __init__(self, name):
        self.name = name

    @abstractmethod
    def read(self, frame, data): pass

    def to_str(self, value):
        return "{0}={1}".format(self.name, repr(value))

class ByteSpec(Spec):
    def read(self, frame, data):
        if len(data) < 1:
            raise EOFError()
        return data[0], data[1:]

class BinaryDataSpec(Spec):
    def read(self, frame, data):
        return bytes(data), bytes()
    def to_str(self, value):
        return '{0}={1}{2}'.format(self.name, value[0:16], "..." if len(value) > 16 else "")

class SimpleStringSpec(Spec):
    def __init__(self, name, length):
        super().__init__(name)
        self.length = length
    def read(self, frame, data):
        if len(data) < self.length:
            raise EOFError()
        return bytes(data[:self.length]).decode('iso-8859-1'), data[self.length:]

class NullTerminatedStringSpec(Spec):
    def read(self, frame, data):
        rawstr, sep, data = bytes(data).partition(b"\x00")
        return rawstr.decode('iso-8859-1'), data

class EncodedStringSpec(Spec):
    "A string terminated according to the encoding of its frame."
    def read(self, frame, data):
        enc, term = lookup_encoding(frame.encoding, frame.frameid)
        data = bytes(data)
        if len(term) == 1:
            rawstr, sep, data = data.partition(term)
        else:
            index = len(data)
            for i in range(0, len(data), 2):
                if data[i:i+2] == term:
                    index = i
                    break
            rawstr = data[:index]
            data = data[index+2:]
        return rawstr.decode(enc, errors="replace"), data

class TextSpec(Spec):
    "Eats all of data as a single text value."
    def read(self, frame, data):
        return decode_text(frame.encoding, data, frame.frameid), bytes()
