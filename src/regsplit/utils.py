from enum import Enum, auto
from typing import NamedTuple


class Span(NamedTuple):
    """
    A half-open range [start, end) of offsets into the text being split

    Examples
    --------
    >>> Span(2, 5).slice("abcdefg")
    'cde'
    """

    start: int
    end: int

    def is_empty(self) -> bool:
        return self.start == self.end

    def slice(self, text):
        return text[self.start : self.end]


class SplitState(Enum):
    """
    ACTIVE: the match source may still yield spans
    DRAINING: the match source is exhausted and the trailing substring was emitted
    DONE: terminal, nothing more is ever emitted
    """

    ACTIVE = auto()
    DRAINING = auto()
    DONE = auto()


class Inclusion(Enum):
    """Which side of a cut the delimiter text sticks to."""

    RIGHT = auto()
    LEFT = auto()


def as_span(item) -> Span:
    """
    Normalize what a match source yields into a Span

    Accepts plain (start, end) pairs and anything following the `re.Match` protocol

    >>> import re
    >>> as_span(re.search("b+", "abbc"))
    Span(start=1, end=3)
    >>> as_span((0, 2))
    Span(start=0, end=2)
    """
    if isinstance(item, tuple):
        return Span(*item)
    return Span(*item.span())
