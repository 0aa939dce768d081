# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest

from id3peek.frames import *
from id3peek.id3 import *

from tagdata import JPEG, PNG

class TextFrameTestCase(unittest.TestCase):
    def testFromData(self):
        frame = TextFrame._from_data("TIT2", 0, b"TITLE\x00")
        self.assertEqual(frame.name, "TIT2")
        self.assertEqual(frame.frameid, "TIT2")
        self.assertEqual(frame.value, "TITLE")
        self.assertEqual(frame.encoding, 0)
        self.assertEqual(frame.flags, frozenset())

    def testFlags(self):
        frame = TextFrame._from_data("TPE1", 3, b"Artist", {"read_only"})
        self.assertEqual(frame.flags, frozenset(["read_only"]))

    def testEquality(self):
        self.assertEqual(TextFrame._from_data("TIT2", 0, b"Foo"),
                         TextFrame("Foo", frameid="TIT2", encoding=0))
        self.assertNotEqual(TextFrame._from_data("TIT2", 0, b"Foo"),
                            TextFrame._from_data("TIT1", 0, b"Foo"))
        self.assertNotEqual(TextFrame._from_data("TIT2", 0, b"Foo"),
                            TextFrame._from_data("TIT2", 0, b"Bar"))

    def testStr(self):
        frame = TextFrame._from_data("TALB", 0, b"Album")
        self.assertEqual(str(frame), "TALB('Album')")
        self.assertEqual(repr(frame),
                         "TextFrame(frameid='TALB', encoding=0, value='Album')")

class PictureFrameTestCase(unittest.TestCase):
    def testAPIC(self):
        data = b"image/jpeg\x00" + b"\x03" + b"Cover\x00" + JPEG
        frame = APIC._from_data("APIC", 0, data)
        self.assertEqual(frame.mime_or_format, "image/jpeg")
        self.assertEqual(frame.mime, "image/jpeg")
        self.assertEqual(frame.picture_type, 3)
        self.assertEqual(frame.type_name, "Front Cover")
        self.assertEqual(frame.description, "Cover")
        self.assertEqual(frame.data, JPEG)

    def testAPICUTF16Description(self):
        data = (b"image/png\x00" + b"\x04" + "Back".encode("utf-16")
                + b"\x00\x00" + PNG)
        frame = APIC._from_data("APIC", 1, data)
        self.assertEqual(frame.description, "Back")
        self.assertEqual(frame.picture_type, 4)
        self.assertEqual(frame.data, PNG)

    def testAPICEmptyDescription(self):
        frame = APIC._from_data("APIC", 0, b"image/png\x00\x00\x00" + PNG)
        self.assertEqual(frame.description, "")
        self.assertEqual(frame.type_name, "Other")
        self.assertEqual(frame.data, PNG)

    def testPIC(self):
        frame = PIC._from_data("PIC", 0, b"JPG" + b"\x03" + b"Cover\x00" + JPEG)
        self.assertEqual(frame.mime_or_format, "JPG")
        self.assertEqual(frame.mime, "image/jpeg")
        self.assertEqual(frame.picture_type, 3)
        self.assertEqual(frame.description, "Cover")
        self.assertEqual(frame.data, JPEG)

    def testPICFormats(self):
        self.assertEqual(PIC._from_data("PIC", 0, b"PNG\x00\x00").mime, "image/png")
        self.assertEqual(PIC._from_data("PIC", 0, b"GIF\x00\x00").mime, "image/gif")

    def testUnknownPictureType(self):
        frame = APIC._from_data("APIC", 0, b"image/png\x00\xF0\x00")
        self.assertEqual(frame.picture_type, 0xF0)
        self.assertEqual(frame.type_name, "Unknown")
        self.assertEqual(frame.data, b"")

    def testTruncated(self):
        self.assertRaises(EOFError, APIC._from_data, "APIC", 0, b"image/png\x00")
        self.assertRaises(EOFError, PIC._from_data, "PIC", 0, b"JP")
        self.assertRaises(EOFError, PIC._from_data, "PIC", 0, b"JPG")

    def testAbstract(self):
        self.assertRaises(TypeError, PictureFrame)

    def testStr(self):
        frame = APIC._from_data("APIC", 0, b"image/png\x00\x03Cover\x00" + PNG)
        self.assertEqual(str(frame),
                         "APIC(3(Front Cover), desc='Cover', mime='image/png': "
                         "{0} bytes of image/png data)".format(len(PNG)))

suite = unittest.TestSuite([
        unittest.TestLoader().loadTestsFromTestCase(TextFrameTestCase),
        unittest.TestLoader().loadTestsFromTestCase(PictureFrameTestCase),
        ])

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
