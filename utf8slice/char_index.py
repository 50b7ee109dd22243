"""
Repeated character-indexed slicing of a single text.

The functions in `utf8slice.slicer` re-scan the text on every call.  When the same text is
sliced many times, `CharOffsetIndex` decodes it once and answers every later lookup in
constant time.
"""
import logging
from typing import Optional, Tuple

from attr import attrib, attrs

from immutablecollections import ImmutableDict, immutabledict

from utf8slice.preconditions import check_character_position, check_isinstance
from utf8slice.slicer import as_byte_view, char_start_offsets
from utf8slice.span import Span

from typing_extensions import Buffer

_log = logging.getLogger(__name__)  # pylint:disable=invalid-name


@attrs(frozen=True, slots=True, repr=False, eq=False)
class CharOffsetIndex:
    """
    A pre-decoded table of the character boundaries of a UTF-8 text.

    Every slicing operation gives the same result as its counterpart in `utf8slice.slicer`
    applied to the indexed text, including the empty results for out-of-range and inverted
    ranges.  Results are views into the indexed buffer.

    If the indexed buffer is mutable and is modified in place, the index is stale.

    Create these with `CharOffsetIndex.index`.
    """

    _text: memoryview = attrib()
    # byte offset of each character start, followed by the length of the text in bytes
    _boundaries: Tuple[int, ...] = attrib()
    _byte_offset_to_position: ImmutableDict[int, int] = attrib()

    @staticmethod
    def index(text: Buffer) -> "CharOffsetIndex":
        """
        Decodes *text* once and builds a `CharOffsetIndex` for it.
        """
        view = as_byte_view(text)
        boundaries = tuple(char_start_offsets(view)) + (len(view),)
        _log.debug(
            "Indexed %s characters over %s bytes", len(boundaries) - 1, len(view)
        )
        return CharOffsetIndex(
            view,
            boundaries,
            immutabledict(
                (offset, position) for (position, offset) in enumerate(boundaries)
            ),
        )

    def length(self) -> int:
        return len(self._boundaries) - 1

    def byte_offset_of(self, position: int) -> Optional[int]:
        """
        Get the byte offset at which the character at *position* begins.

        Returns `None` if there is no character at *position*.
        """
        check_character_position(position)
        if position < self.length():
            return self._boundaries[position]
        return None

    def char_position_of(self, byte_offset: int) -> Optional[int]:
        """
        Get the position of the character which begins at *byte_offset*.

        The byte length of the text maps to `length`.
        Returns `None` for offsets which are not character boundaries.
        """
        return self._byte_offset_to_position.get(byte_offset)

    def char_span_of(self, span: Span) -> Optional[Span]:
        """
        Translate a span of byte offsets into a span of character positions.

        Returns `None` unless both ends of *span* lie on character boundaries.
        """
        check_isinstance(span, Span)
        start = self.char_position_of(span.start)
        end = self.char_position_of(span.end)
        if start is None or end is None:
            return None
        return Span(start, end)

    def byte_span(self, begin: int, end: int) -> Span:
        """
        Get the byte offsets bounding the characters in ``[begin, end)``.

        See `utf8slice.slicer.byte_span`.
        """
        check_character_position(begin, "begin")
        check_character_position(end, "end")
        num_chars = self.length()
        if end <= begin or begin >= num_chars:
            return Span(0, 0)
        return Span(self._boundaries[begin], self._boundaries[min(end, num_chars)])

    def slice(self, begin: int, end: int) -> memoryview:
        return self._text[self.byte_span(begin, end).as_slice()]

    def from_(self, begin: int) -> memoryview:
        return self.slice(begin, self.length())

    def till(self, end: int) -> memoryview:
        return self.slice(0, end)

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        return f"CharOffsetIndex({self.length()} characters, {len(self._text)} bytes)"
