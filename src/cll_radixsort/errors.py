"""Exceptions raised while reading and sorting radix input."""


class RadixSortError(ValueError):
    """Base class for all cll-radixsort errors."""


class EmptyInputError(RadixSortError):
    """The token source did not contain a radix token."""

    def __init__(self, message: str = "Input is empty, expected a radix") -> None:
        super().__init__(message)


class InvalidRadixError(RadixSortError):
    """The radix token is not an integer base the digit mapping supports."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid radix {token!r}: expected an integer in 2..36")


class MalformedDigitError(RadixSortError):
    """A value contains a character that is not a digit in the radix."""

    def __init__(self, value: str, char: str, radix: int) -> None:
        self.value = value
        self.char = char
        self.radix = radix
        super().__init__(f"Character {char!r} in {value!r} is not a radix-{radix} digit")


class ListIntegrityError(RadixSortError):
    """The links of a circular list do not form the expected single cycle."""
