from utf8slice.char_index import CharOffsetIndex
from utf8slice.slicer import (
    as_byte_view,
    byte_offset_of,
    byte_span,
    char_start_offsets,
    from_,
    length,
    slice,
    till,
)
from utf8slice.span import Span
