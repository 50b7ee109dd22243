from typing import Sized

from attr import attrib, attrs, validators

from utf8slice.preconditions import check_arg


@attrs(frozen=True, slots=True, repr=False)  # pylint:disable=inherit-non-class
class Span(Sized):
    """
    A half-open range ``[start, end)`` of offsets into a buffer.

    Spans may be empty, since an empty slice of a text still has a position.
    `as_slice` turns a span into something a `bytes` or `memoryview` can be indexed with.
    """

    start: int = attrib(validator=validators.instance_of(int))
    end: int = attrib(validator=validators.instance_of(int))

    # noinspection PyUnusedLocal
    @end.validator
    def _check_ordered(self, attr, val):  # pylint:disable=unused-argument
        check_arg(
            0 <= self.start <= val,
            "Span offsets must satisfy 0 <= start <= end but got [%s,%s)",
            (self.start, val),
        )

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def __repr__(self):
        return f"[{self.start}:{self.end})"
