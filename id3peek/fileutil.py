# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File reading utilities."""

import os

from contextlib import contextmanager

from id3peek.errors import TruncatedTagError

def xread(file, length):
    "Read exactly length bytes from file; raise TruncatedTagError if file ends sooner."
    if length < 0:
        raise ValueError("Negative read length: {0}".format(length))
    data = file.read(length)
    if len(data) != length:
        raise TruncatedTagError("Expected {0} bytes, got {1}"
                                .format(length, len(data)))
    return data

def skip(file, length):
    "Consume length bytes from file without interpreting them."
    xread(file, length)

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, (str, os.PathLike)):
        file = open(filename, mode)
        try:
            yield file
        finally:
            if not file.closed:
                file.close()
    else:
        yield filename
