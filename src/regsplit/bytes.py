from typing import Pattern, Union

from regsplit.matcher import CompiledRegex
from regsplit.splitter import SplitInclusive, SplitInclusiveLeft

BytesLike = Union[bytes, bytearray, memoryview]


class Regex(CompiledRegex[bytes]):
    """
    A bytes pattern with `split_inclusive` and `split_inclusive_left`

    Offsets are plain byte positions, no encoding is assumed.
    The items are slices of the input, so a `memoryview` input yields
    `memoryview` items sharing its buffer.

    Examples
    --------
    >>> records = Regex(rb"\\x00")
    >>> list(records.split_inclusive(b"ab\\x00cd\\x00"))
    [b'ab\\x00', b'cd\\x00', b'']
    >>> list(records.split_inclusive_left(b"ab\\x00cd\\x00"))
    [b'ab', b'\\x00cd', b'\\x00']
    """

    element_type = (bytes,)


def split_inclusive(
    pattern: Union[bytes, Pattern[bytes], Regex],
    string: BytesLike,
    maxsplit: int = 0,
    flags: int = 0,
) -> SplitInclusive[bytes]:
    """
    Split `string` by the occurrences of `pattern`, keeping each match at the end
    of the substring it terminates

    >>> list(split_inclusive(rb"\\r?\\n", b"one\\r\\ntwo\\nthree"))
    [b'one\\r\\n', b'two\\n', b'three']
    """
    return Regex.of(pattern, flags).split_inclusive(string, maxsplit)


def split_inclusive_left(
    pattern: Union[bytes, Pattern[bytes], Regex],
    string: BytesLike,
    maxsplit: int = 0,
    flags: int = 0,
) -> SplitInclusiveLeft[bytes]:
    """
    Split `string` by the occurrences of `pattern`, keeping each match at the start
    of the substring that follows it

    >>> list(split_inclusive_left(rb"(?m)^#", b"#a\\n#b\\n"))
    [b'', b'#a\\n', b'#b\\n']
    """
    return Regex.of(pattern, flags).split_inclusive_left(string, maxsplit)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
