#!/usr/bin/env python

"""
Print a range of characters from a UTF-8 text file.

*input_file* is read as raw bytes and is never decoded as a whole.
The characters from position *begin* (inclusive, default 0) to *end* (exclusive) are written
out unchanged.  If *end* is absent, the slice runs to the end of the file.
Character positions count Unicode code points.

The slice is written to *output_file* if it is specified and to stdout otherwise.

As with the library functions, out-of-range and inverted positions are not errors:
they produce empty output, and a warning is logged.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from utf8slice.parameters import Parameters
from utf8slice.parameters_only_entrypoint import parameters_only_entry_point
from utf8slice.slicer import byte_span, length

_INPUT_FILE_PARAM = "input_file"
_BEGIN_PARAM = "begin"
_END_PARAM = "end"
_OUTPUT_FILE_PARAM = "output_file"

_log = logging.getLogger(__name__)  # pylint:disable=invalid-name


def main(params: Parameters):
    input_file = params.existing_file(_INPUT_FILE_PARAM)
    begin = params.non_negative_integer(_BEGIN_PARAM, default=0)
    end = params.optional_non_negative_integer(_END_PARAM)
    output_file = params.optional_creatable_file(_OUTPUT_FILE_PARAM)

    text = input_file.read_bytes()
    num_chars = length(text)
    if end is None:
        end = num_chars

    if begin >= num_chars:
        _log.warning(
            "Start position %s is out of bounds for %s with %s characters",
            begin,
            input_file,
            num_chars,
        )
    elif end < begin:
        _log.warning("End position %s precedes start position %s", end, begin)

    span = byte_span(text, begin, end)
    _log.info(
        "Characters [%s:%s) of %s are the %s bytes at %s",
        begin,
        end,
        input_file,
        len(span),
        span,
    )
    _write(memoryview(text)[span.as_slice()], output_file)


def _write(data: memoryview, output_file: Optional[Path]) -> None:
    if output_file is not None:
        with open(output_file, "wb") as out:
            out.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


if __name__ == "__main__":
    parameters_only_entry_point(main)