#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3peek",
    version="0.1.0",
    packages=["id3peek"],
    python_requires=">=3.6",
    license="BSD",
    description="Read-only ID3v2.2/2.3/2.4 tag reader in pure Python 3",
    long_description="""
id3peek scans the ID3v2 tag at the start of an audio file and returns its
frames as a flat list of decoded text values, plus any attached pictures
as raw image data with their declared MIME type.  ID3v2.2, ID3v2.3 and
ID3v2.4 tags are supported.  Tags are never modified.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
