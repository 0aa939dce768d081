# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Attached picture frames defined in the various ID3 versions.
"""

import id3peek.frames as Frames
from id3peek.specs import *


# ID3v2.3 & ID3v2.4

class APIC(Frames.PictureFrame):
    "Attached picture"
    _framespec = (NullTerminatedStringSpec("mime"),
                  ByteSpec("type"),
                  EncodedStringSpec("desc"),
                  BinaryDataSpec("data"))

    @property
    def mime_or_format(self):
        return self.mime


# ID3v2.2

class PIC(Frames.PictureFrame):
    "Attached picture"
    _framespec = (SimpleStringSpec("format", 3),
                  ByteSpec("type"),
                  EncodedStringSpec("desc"),
                  BinaryDataSpec("data"))

    @property
    def mime_or_format(self):
        return self.format

    @property
    def mime(self):
        if self.format.upper() == "PNG":
            return "image/png"
        elif self.format.upper() == "JPG":
            return "image/jpeg"
        return "image/" + self.format.strip().lower()


# Attached picture (APIC & PIC) types
picture_types = (
    "Other", "32x32 icon", "Other icon", "Front Cover", "Back Cover",
    "Leaflet", "Media", "Lead artist", "Artist", "Conductor",
    "Band/Orchestra", "Composer", "Lyricist/text writer",
    "Recording Location", "Recording", "Performance", "Screen capture",
    "A bright coloured fish", "Illustration", "Band/artist",
    "Publisher/Studio")
