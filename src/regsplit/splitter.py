import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from regsplit.utils import Inclusion, Span, SplitState, as_span

T = TypeVar("T", str, bytes, bytearray, memoryview)

logger = logging.getLogger(__name__)


class MatchContractViolation(AssertionError):
    ...


class Splitter(ABC, Generic[T]):
    """
    Walks the spans yielded by a match source and emits the text between cuts

    Attributes
    ----------
    finder: Iterator
        The match source, yielding (start, end) pairs or `re.Match`-like objects
        in increasing, non-overlapping order
    text: T
        The text being split; it is only ever sliced, never copied or mutated
    last: int
        Offset where the next emitted substring starts
    state: SplitState
        ACTIVE while the finder may yield, DRAINING once the trailing substring
        was emitted, DONE afterwards

    Notes
    -----
    Exactly one substring is emitted per match, plus one trailing substring
    covering text[last:] once the finder is exhausted, so the number of items
    is always one more than the number of matches.

    Subclasses only decide where a match cuts the text, see `cut_point`.
    """

    inclusion: Inclusion

    def __init__(self, finder: Iterable[Any], text: T):
        self.finder: Iterator[Any] = iter(finder)
        self.text: T = text
        self.length: int = len(text)
        self.last: int = 0
        self.previous_end: int = 0
        self.previous_empty: bool = False
        self.state: SplitState = SplitState.ACTIVE
        logger.debug(
            "created %s over a text of length %d", type(self).__name__, self.length
        )

    @abstractmethod
    def cut_point(self, span: Span) -> int:
        """
        The offset at which the current substring ends, given the next match

        Parameters
        ----------
        span: Span
            The span of the next match, already checked against the text bounds
        """
        pass

    def check(self, span: Span) -> Span:
        """
        Reject spans breaking the match source contract and terminate the splitter

        Spans must lie within the text and must not start before the previous
        match ended. A span may start right where the previous one ended, which
        `re` does for an empty match followed by a non-empty one, but two empty
        spans at the same offset may not.
        """
        start, end = span
        if (
            not (0 <= start <= end <= self.length)
            or start < self.previous_end
            or (span.is_empty() and self.previous_empty and start == self.previous_end)
        ):
            self.state = SplitState.DONE
            logger.error(
                "match source yielded %s after a match ending at %d (text length %d)",
                span,
                self.previous_end,
                self.length,
            )
            raise MatchContractViolation(
                f"span {tuple(span)} is out of order or out of bounds: "
                f"previous match ended at {self.previous_end}, text length is {self.length}"
            )
        self.previous_end = end
        self.previous_empty = span.is_empty()
        return span

    def next_span(self) -> Optional[Span]:
        """
        Advance by one match and return the bounds of the next substring,
        or None once the splitter is exhausted
        """
        match self.state:
            case SplitState.ACTIVE:
                item = next(self.finder, None)
                if item is not None:
                    cut = self.cut_point(self.check(as_span(item)))
                    span, self.last = Span(self.last, cut), cut
                    return span
                logger.debug(
                    "%s drained, trailing substring starts at %d",
                    type(self).__name__,
                    self.last,
                )
                self.state = SplitState.DRAINING
                return Span(self.last, self.length)
            case SplitState.DRAINING:
                self.state = SplitState.DONE
        return None

    def spans(self) -> Iterator[Span]:
        """
        Yield the bounds of the remaining substrings instead of the substrings

        This shares state with iteration: spans consumed here are not emitted by next()
        """
        while (span := self.next_span()) is not None:
            yield span

    def __iter__(self) -> "Splitter[T]":
        return self

    def __next__(self) -> T:
        span = self.next_span()
        if span is None:
            raise StopIteration
        return span.slice(self.text)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}"
            f"(inclusion={self.inclusion.name}, "
            f"last={self.last}, "
            f"state={self.state.name})"
        )


class SplitInclusive(Splitter[T]):
    """
    Yields substrings delimited by a match, each ending with the match that closed it

    Examples
    --------
    >>> list(SplitInclusive([(1, 2), (3, 4)], "a,b,c"))
    ['a,', 'b,', 'c']
    >>> list(SplitInclusive([], "abc"))
    ['abc']
    """

    inclusion = Inclusion.RIGHT

    def cut_point(self, span: Span) -> int:
        return span.end


class SplitInclusiveLeft(Splitter[T]):
    """
    Yields substrings delimited by a match, each starting with the match that opened it

    Examples
    --------
    >>> list(SplitInclusiveLeft([(1, 2), (3, 4)], "a,b,c"))
    ['a', ',b', ',c']
    """

    inclusion = Inclusion.LEFT

    def cut_point(self, span: Span) -> int:
        return span.start


SPLITTERS: dict[Inclusion, type[Splitter]] = {
    Inclusion.RIGHT: SplitInclusive,
    Inclusion.LEFT: SplitInclusiveLeft,
}


if __name__ == "__main__":
    import doctest

    doctest.testmod()
