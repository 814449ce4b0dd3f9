import re
from abc import ABC, abstractmethod
from typing import Any, AnyStr, Generic, Iterator, Pattern, Union

from more_itertools import islice_extended

from regsplit.splitter import SPLITTERS, SplitInclusive, SplitInclusiveLeft, Splitter
from regsplit.utils import Inclusion


class RegexSplitPattern(ABC):
    """
    Adds delimiter-inclusive splitting to anything that can find matches

    Notes
    -----
    Subclasses only have to implement `finditer`, following the protocol of
    `re.Pattern.finditer`: every call starts a fresh traversal yielding
    non-overlapping matches in increasing order.
    All the splitting operations are built on top of it.
    """

    @abstractmethod
    def finditer(self, text) -> Iterator[Any]:
        pass

    def find_matches(self, text, maxsplit: int = 0) -> Iterator[Any]:
        """
        The match source driving a splitter: at most `maxsplit` matches of `finditer`

        Parameters
        ----------
        text: str | bytes
            The text to search
        maxsplit: int
            Maximum number of matches to report, 0 means all of them

        Raises
        ------
        ValueError
            If maxsplit is negative
        """
        if maxsplit < 0:
            raise ValueError(f"maxsplit should be >= 0, got {maxsplit}")
        matches = self.finditer(text)
        if maxsplit:
            matches = islice_extended(matches, maxsplit)
        return matches

    def _split(self, inclusion: Inclusion, text, maxsplit: int) -> Splitter:
        return SPLITTERS[inclusion](self.find_matches(text, maxsplit), text)

    def split_inclusive(self, text, maxsplit: int = 0) -> SplitInclusive:
        """
        Returns an iterator of substrings of `text` separated by a match of this pattern.
        Unlike `re.split`, the matched part is kept as the terminator of each substring.

        The text is never copied: each item is a slice of `text`.
        """
        return self._split(Inclusion.RIGHT, text, maxsplit)

    def split_inclusive_left(self, text, maxsplit: int = 0) -> SplitInclusiveLeft:
        """
        Returns an iterator of substrings of `text` separated by a match of this pattern.
        The matched part is kept at the front of the substring that follows it.
        """
        return self._split(Inclusion.LEFT, text, maxsplit)


class CompiledRegex(RegexSplitPattern, Generic[AnyStr]):
    """
    A compiled `re` pattern extended with the inclusive split operations

    Every attribute not defined here is looked up on the compiled pattern,
    so `sub`, `split`, `pattern`, `flags` and friends work as they do on `re.Pattern`.
    """

    element_type: tuple[type, ...]

    def __init__(self, pattern: Union[AnyStr, Pattern[AnyStr]], flags: int = 0):
        # re.compile hands back compiled patterns as-is and rejects flags for them
        compiled = re.compile(pattern, flags)
        if not isinstance(compiled.pattern, self.element_type):
            raise TypeError(
                f"{self.__class__.__module__}.{self.__class__.__name__} expects a "
                f"{' or '.join(t.__name__ for t in self.element_type)} pattern, "
                f"got {type(compiled.pattern).__name__}"
            )
        self.compiled: Pattern[AnyStr] = compiled

    @classmethod
    def of(cls, pattern, flags: int = 0):
        """Use `pattern` if it already is one of ours, compile it otherwise"""
        if isinstance(pattern, cls):
            if flags:
                raise ValueError("cannot process flags argument with a compiled pattern")
            return pattern
        return cls(pattern, flags)

    def finditer(self, text) -> Iterator[re.Match]:
        return self.compiled.finditer(text)

    def __getattr__(self, name: str):
        if name == "compiled":
            raise AttributeError(name)
        return getattr(self.compiled, name)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.compiled.pattern!r})"
