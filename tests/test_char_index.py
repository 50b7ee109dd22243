from unittest import TestCase

from utf8slice.char_index import CharOffsetIndex
from utf8slice.span import Span

MIXED = "\u0345ab\u0898xyz".encode("utf-8")


class TestCharOffsetIndex(TestCase):
    def test_slicing(self) -> None:
        index = CharOffsetIndex.index(MIXED)
        self.assertEqual(7, index.length())
        self.assertEqual(7, len(index))
        self.assertEqual("ab\u0898".encode("utf-8"), bytes(index.slice(1, 4)))
        self.assertEqual("\u0345ab\u0898".encode("utf-8"), bytes(index.slice(0, 4)))
        self.assertEqual(b"", bytes(index.slice(5, 4)))
        self.assertEqual("ab\u0898xyz".encode("utf-8"), bytes(index.slice(1, 7)))
        self.assertEqual("\u0898xyz".encode("utf-8"), bytes(index.from_(3)))
        self.assertEqual(b"", bytes(index.from_(10)))
        self.assertEqual("\u0345ab".encode("utf-8"), bytes(index.till(3)))
        self.assertEqual(b"", bytes(index.till(0)))
        self.assertEqual(MIXED, bytes(index.till(100)))

    def test_results_are_views(self) -> None:
        index = CharOffsetIndex.index(MIXED)
        self.assertIs(MIXED, index.slice(1, 4).obj)
        self.assertIs(MIXED, index.from_(10).obj)

    def test_offset_lookups(self) -> None:
        index = CharOffsetIndex.index(MIXED)
        self.assertEqual(Span(2, 7), index.byte_span(1, 4))
        self.assertEqual(Span(0, 0), index.byte_span(4, 4))
        self.assertEqual(4, index.byte_offset_of(3))
        self.assertIsNone(index.byte_offset_of(7))

        self.assertEqual(0, index.char_position_of(0))
        self.assertEqual(3, index.char_position_of(4))
        # inside the two-byte character
        self.assertIsNone(index.char_position_of(1))
        # the end of the text is a boundary
        self.assertEqual(7, index.char_position_of(10))
        self.assertIsNone(index.char_position_of(11))

        self.assertEqual(Span(1, 4), index.char_span_of(Span(2, 7)))
        self.assertEqual(Span(0, 7), index.char_span_of(Span(0, 10)))
        self.assertIsNone(index.char_span_of(Span(1, 7)))
        self.assertIsNone(index.char_span_of(Span(2, 6)))

    def test_empty_text(self) -> None:
        index = CharOffsetIndex.index(b"")
        self.assertEqual(0, index.length())
        self.assertEqual(b"", bytes(index.from_(0)))
        self.assertEqual(b"", bytes(index.slice(0, 3)))
        self.assertEqual(0, index.char_position_of(0))
        self.assertIsNone(index.byte_offset_of(0))

    def test_bad_arguments(self) -> None:
        index = CharOffsetIndex.index(MIXED)
        with self.assertRaises(ValueError):
            index.slice(-1, 2)
        with self.assertRaises(ValueError):
            index.byte_offset_of(-3)
        with self.assertRaises(TypeError):
            index.char_span_of((2, 7))  # type: ignore
        with self.assertRaises(TypeError):
            CharOffsetIndex.index("not bytes")  # type: ignore

    def test_repr(self) -> None:
        self.assertEqual(
            "CharOffsetIndex(7 characters, 10 bytes)", repr(CharOffsetIndex.index(MIXED))
        )
