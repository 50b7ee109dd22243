"""
Slicing of UTF-8 encoded text by character position rather than byte position.

A character here is a Unicode scalar value (code point), which occupies between one and four
bytes in UTF-8.  Grapheme clusters are not considered: a combining mark or each code point of an
emoji ZWJ sequence counts as its own character.

All slicing operations return a `memoryview` over the caller's buffer rather than a copy.
The view keeps the buffer alive, and a `bytearray` with live views cannot be resized, so a
view can never outlive or dangle past its source.  Every view starts and ends on a character
boundary.

Indices which fall outside the text, and inverted ranges, never raise: they produce an empty
view instead.  Callers who need to tell an empty slice apart from an invalid index should
compare against `length` themselves.

Input is expected to be valid UTF-8.  For malformed input, every byte which is not a
continuation byte is treated as the start of a character; results are still views within
the buffer but may not decode.  Continuation bytes at the very start of malformed input
belong to no character and appear in no slice, so ``bytes(till(t, k)) + bytes(from_(t, k))``
reassembles *t* only when *t* is valid UTF-8.

Positions must be non-negative `int`s; `bool` is not accepted as a position.
"""
from itertools import islice
from typing import Iterator, Optional

from utf8slice.preconditions import check_arg, check_character_position
from utf8slice.span import Span

from typing_extensions import Buffer

# UTF-8 continuation bytes, and only they, have the bit pattern 10xxxxxx
_CONTINUATION_MASK = 0xC0
_CONTINUATION_BITS = 0x80

_EMPTY_SPAN = Span(0, 0)


def as_byte_view(text: Buffer) -> memoryview:
    """
    Get a flat, unsigned-byte `memoryview` of *text* without copying it.

    *text* may be anything supporting the buffer protocol
    (`bytes`, `bytearray`, `memoryview`, `mmap.mmap`, `array.array`, ...).
    Buffers with other item formats are reinterpreted as raw bytes.
    """
    try:
        view = memoryview(text)
    except TypeError as e:
        raise TypeError(
            f"Expected a bytes-like object holding UTF-8 text but got type {type(text)}"
        ) from e
    if view.format != "B" or view.ndim != 1:
        check_arg(view.c_contiguous, "Text buffers must be C-contiguous")
        view = view.cast("B")
    return view


def char_start_offsets(text: Buffer) -> Iterator[int]:
    """
    Iterate over the byte offsets at which each character of *text* begins, in order.

    This is the decoding primitive all the other operations are built on.
    The iterator is lazy, so callers only pay for the prefix they consume.
    """
    return _char_starts(as_byte_view(text))


def length(text: Buffer) -> int:
    """
    Get the number of characters in *text*.

    This always scans the whole text.  Empty text has length zero.
    """
    return sum(1 for _ in _char_starts(as_byte_view(text)))


def byte_offset_of(text: Buffer, position: int) -> Optional[int]:
    """
    Get the byte offset at which the character at *position* begins.

    Returns `None` if *text* has no character at *position*.
    """
    check_character_position(position)
    return _nth(_char_starts(as_byte_view(text)), position)


def byte_span(text: Buffer, begin: int, end: int) -> Span:
    """
    Get the byte offsets bounding the characters of *text* in ``[begin, end)``.

    This is the offset translation behind `slice`: slicing the bytes of *text* with the
    returned span gives exactly what `slice` returns.
    Whenever the result would be empty, `Span(0, 0)` is returned.
    """
    return _translate(as_byte_view(text), begin, end)


def slice(text: Buffer, begin: int, end: int) -> memoryview:  # pylint:disable=redefined-builtin
    """
    Get the characters of *text* in the half-open range ``[begin, end)``.

    This behaves like ``text[begin:end]`` would if *text* were indexed by character.

    * If *end* is less than *begin*, the result is empty.
    * If there is no character at *begin*, the result is empty.
    * If *end* is at or past the end of *text*, the slice runs to the end of *text*.

    The result is a view into *text*, not a copy.
    """
    view = as_byte_view(text)
    return view[_translate(view, begin, end).as_slice()]


def from_(text: Buffer, begin: int) -> memoryview:
    """
    Get the characters of *text* from position *begin* to the end.

    Equivalent to ``slice(text, begin, length(text))``.
    Empty if there is no character at *begin*.
    """
    check_character_position(begin, "begin")
    view = as_byte_view(text)
    start = _nth(_char_starts(view), begin)
    if start is None:
        return view[0:0]
    return view[start:]


def till(text: Buffer, end: int) -> memoryview:
    """
    Get the characters of *text* from the start up to, but not including, position *end*.

    Equivalent to ``slice(text, 0, end)``.
    Empty if *end* is zero; all of *text* if *end* is at or past its length.
    """
    return slice(text, 0, end)


def _char_starts(view: memoryview) -> Iterator[int]:
    for (offset, byte) in enumerate(view):
        if byte & _CONTINUATION_MASK != _CONTINUATION_BITS:
            yield offset


def _nth(offsets: Iterator[int], n: int) -> Optional[int]:
    return next(islice(offsets, n, None), None)


def _translate(view: memoryview, begin: int, end: int) -> Span:
    check_character_position(begin, "begin")
    check_character_position(end, "end")
    if end < begin:
        return _EMPTY_SPAN

    char_starts = _char_starts(view)
    start = _nth(char_starts, begin)
    if start is None or end == begin:
        return _EMPTY_SPAN

    # the walk resumes just after `begin`.
    # Running off the end means `end` is at or past the length of the text.
    stop = _nth(char_starts, end - begin - 1)
    if stop is None:
        return Span(start, len(view))
    return Span(start, stop)
