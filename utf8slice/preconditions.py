"""Argument checks in the style of Guava's `Preconditions`."""
from typing import Any, Tuple, TypeVar, Union

# pylint: disable=invalid-name
# what `isinstance` accepts as its second argument
_ClassInfo = Union[type, Tuple[Union[type, Tuple], ...]]

T = TypeVar("T")


def check_arg(result: Any, msg: str = None, msg_args: Tuple = None) -> None:
    """
    Raise a `ValueError` unless *result* is truthy.

    *msg* is %-interpolated with *msg_args* only on failure.
    """
    if not result:
        if msg:
            raise ValueError(msg % (msg_args or ()))
        raise ValueError()


def check_isinstance(item: T, classinfo: _ClassInfo) -> T:
    if not isinstance(item, classinfo):
        raise TypeError(f"Expected an instance of {classinfo} but got {type(item)}: {item!r}")
    return item


def check_character_position(position: int, name: str = "position") -> int:
    """
    Checks *position* is usable as a character position.

    Character positions are non-negative integers.  `bool` is rejected even though it is
    an `int` subclass.
    Positions past the end of a text are legal; only the sign and type are checked here.
    """
    if isinstance(position, bool):
        raise TypeError(f"Character {name} must be an integer but got boolean {position}")
    check_isinstance(position, int)
    check_arg(
        position >= 0,
        "Character %s must be non-negative but got %s",
        (name, position),
    )
    return position
