# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Syncsafe:
    """Conversion from syncsafe integers.
    Syncsafe integers are big-endian 7-bit byte sequences.
    """
    @staticmethod
    def decode(data, strict=True):
        """Decodes a syncsafe integer.
        With strict=False, bytes above 127 are accumulated as they are
        instead of raising ValueError.
        """
        value = 0
        for b in data:
            if strict and b > 127:  # iTunes bug
                raise ValueError("Invalid syncsafe integer")
            value <<= 7
            value += b
        return value

class Int8:
    """Conversion from binary integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value

def frame_size(data, syncsafe=False):
    """Decode the size field of a frame header.

    Returns None if the field is all zeros, which marks the start of
    padding: there are no more frames in the tag.  Otherwise returns the
    number of payload bytes that follow the frame's encoding byte, i.e.
    the declared size minus one.  A frame holding nothing but an encoding
    byte has size 0.

    >>> frame_size(b"\\x00\\x00\\x00\\x0B")
    10
    >>> frame_size(b"\\x00\\x00\\x00\\x00") is None
    True
    """
    value = Syncsafe.decode(data) if syncsafe else Int8.decode(data)
    if value == 0:
        return None
    return value - 1
