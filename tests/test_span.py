from unittest import TestCase

from utf8slice.span import Span


class TestSpan(TestCase):
    def test_validation(self) -> None:
        Span(0, 0)
        Span(3, 3)
        with self.assertRaisesRegex(
            ValueError, r"Span offsets must satisfy 0 <= start <= end but got \[3,2\)"
        ):
            Span(3, 2)
        with self.assertRaises(ValueError):
            Span(-1, 2)
        with self.assertRaises(TypeError):
            Span("0", 2)  # type: ignore

    def test_length(self) -> None:
        self.assertEqual(4, len(Span(2, 6)))
        self.assertEqual(0, len(Span(2, 2)))

    def test_as_slice(self) -> None:
        self.assertEqual(b"cd", b"abcdef"[Span(2, 4).as_slice()])
        self.assertEqual(b"", b"abcdef"[Span(0, 0).as_slice()])
        self.assertEqual(b"ef", bytes(memoryview(b"abcdef")[Span(4, 6).as_slice()]))

    def test_equality_and_repr(self) -> None:
        self.assertEqual(Span(1, 4), Span(1, 4))
        self.assertNotEqual(Span(1, 4), Span(1, 5))
        self.assertEqual("[1:4)", repr(Span(1, 4)))
