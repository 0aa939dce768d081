# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Builders for synthetic ID3v2 tags used by the test suites.

Frame bodies passed to the frame builders include the encoding byte, so
the size field written is the length of the complete body.
"""

def syncsafe(value, width=4):
    data = bytearray()
    for i in range(width):
        data.insert(0, value & 0x7F)
        value >>= 7
    return bytes(data)

def int8(value, width):
    return value.to_bytes(width, "big")

def header(major, size, flags=0, minor=0):
    return b"ID3" + bytes([major, minor, flags]) + syncsafe(size)

def text(value, encoding=0):
    codec = ("iso-8859-1", "utf-16", "utf-16-be", "utf-8")[encoding]
    return bytes([encoding]) + value.encode(codec)

def frame22(frameid, body):
    return frameid.encode("ASCII") + int8(len(body), 3) + body

def frame23(frameid, body, flags=b"\x00\x00"):
    return frameid.encode("ASCII") + int8(len(body), 4) + flags + body

def frame24(frameid, body, flags=b"\x00\x00"):
    return frameid.encode("ASCII") + syncsafe(len(body)) + flags + body

def tag(major, frames, padding=0, flags=0, extended_header=b"", minor=0):
    "Return a complete tag holding frames, followed by padding NUL bytes."
    content = extended_header + b"".join(frames) + b"\x00" * padding
    return header(major, len(content), flags, minor) + content

def apic_body(mime, type, desc, data, encoding=0):
    codec, term = (("iso-8859-1", b"\x00"), ("utf-16", b"\x00\x00"),
                   ("utf-16-be", b"\x00\x00"), ("utf-8", b"\x00"))[encoding]
    return (bytes([encoding]) + mime.encode("ASCII") + b"\x00" + bytes([type])
            + desc.encode(codec) + term + data)

def pic_body(format, type, desc, data, encoding=0):
    return (bytes([encoding]) + format.encode("ASCII") + bytes([type])
            + desc.encode("iso-8859-1") + b"\x00" + data)

JPEG = b"\xFF\xD8\xFF\xE0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xFF\xD9"
PNG = b"\x89PNG\r\n\x1A\n\x00\x00\x00\x0DIHDR"
