from typing import Pattern, Union

from regsplit.matcher import CompiledRegex
from regsplit.splitter import SplitInclusive, SplitInclusiveLeft


class Regex(CompiledRegex[str]):
    """
    A text pattern with `split_inclusive` and `split_inclusive_left`

    Examples
    --------
    >>> newlines = Regex(r"\\r?\\n")
    >>> text = "Mary had a little lamb\\nlittle lamb\\r\\nlittle lamb."
    >>> list(newlines.split_inclusive(text))
    ['Mary had a little lamb\\n', 'little lamb\\r\\n', 'little lamb.']
    >>> list(newlines.split_inclusive_left(text))
    ['Mary had a little lamb', '\\nlittle lamb', '\\r\\nlittle lamb.']
    """

    element_type = (str,)


def split_inclusive(
    pattern: Union[str, Pattern[str], Regex],
    string: str,
    maxsplit: int = 0,
    flags: int = 0,
) -> SplitInclusive[str]:
    """
    Split `string` by the occurrences of `pattern`, keeping each match at the end
    of the substring it terminates

    >>> list(split_inclusive(r"\\r?\\n", "This is just\\na set of lines\\r\\nwith different newlines."))
    ['This is just\\n', 'a set of lines\\r\\n', 'with different newlines.']
    """
    return Regex.of(pattern, flags).split_inclusive(string, maxsplit)


def split_inclusive_left(
    pattern: Union[str, Pattern[str], Regex],
    string: str,
    maxsplit: int = 0,
    flags: int = 0,
) -> SplitInclusiveLeft[str]:
    """
    Split `string` by the occurrences of `pattern`, keeping each match at the start
    of the substring that follows it

    >>> list(split_inclusive_left(r"(?m)^-", "List of fruits:\\n-apple\\n-pear\\n-banana"))
    ['List of fruits:\\n', '-apple\\n', '-pear\\n', '-banana']
    """
    return Regex.of(pattern, flags).split_inclusive_left(string, maxsplit)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
