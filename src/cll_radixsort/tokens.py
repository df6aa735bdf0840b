"""Read whitespace-delimited tokens from radix sort input."""

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .errors import InvalidRadixError

MIN_RADIX = 2
MAX_RADIX = 36


def tokenize(text: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a string."""
    yield from text.split()


def _tokens_from_stream(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_tokens(source: Path | str | TextIO) -> Iterator[str]:
    """Yield tokens from a file path or an open text stream.

    The input is read lazily, one line at a time. A path is opened and closed
    by this generator; a stream is left open for the caller.

    Args:
        source: Path to the input file, or a readable text stream.

    Yields:
        Tokens in input order. The first token is the radix.
    """
    if isinstance(source, (str, Path)):
        with open(source) as f:
            yield from _tokens_from_stream(f)
    else:
        yield from _tokens_from_stream(source)


def parse_radix(token: str) -> int:
    """Parse the radix token.

    Args:
        token: First token of the input.

    Returns:
        The radix as an integer.

    Raises:
        InvalidRadixError: If the token is not an integer in 2..36.
    """
    try:
        radix = int(token)
    except ValueError as err:
        raise InvalidRadixError(token) from err
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadixError(token)
    return radix
