"""LSD radix sort over a circular linked list, by relinking nodes only.

The input is a token stream: a radix followed by the values to sort, each in
its textual form. Values are held in a master circular list referenced by its
rear node. Every pass scatters the master list into ``radix`` buckets by one
digit (rightmost first) and gathers the buckets back in index order. Buckets
are FIFO, so each pass is stable and the final master list is sorted.

No nodes are created after the master list is built; the same node objects
are moved between the master list and the buckets on every pass.
"""

from collections.abc import Callable, Iterable

from .cll import Node, append_to_rear, concat, iter_values
from .errors import EmptyInputError, MalformedDigitError
from .tokens import parse_radix

PassCallback = Callable[[int, Node], None]
LoadCallback = Callable[[Node | None], None]


def digit_value(char: str, radix: int, value: str | None = None) -> int:
    """Map a digit character to its value in the radix.

    '0'-'9' map to 0-9 and letters (either case) to 10-35. ``value`` is the
    string the character came from, used in the error message.

    Raises:
        MalformedDigitError: If the character is not a digit in the radix.
    """
    try:
        return int(char, radix)
    except ValueError as err:
        raise MalformedDigitError(value or char, char, radix) from err


def validate_value(value: str, radix: int) -> None:
    """Check that every character of a value is a digit in the radix."""
    for char in value:
        digit_value(char, radix, value)


class RadixSorter:
    """Sorts numeric strings with LSD radix sort on a circular linked list.

    Attributes:
        master_rear: Rear node of the master list, or None when empty or while
            its nodes are distributed over the buckets.
        buckets: One rear handle per digit value, filled by ``scatter``.
        radix: Numeral base of the values.
        passes: Number of passes run by the last ``sort``.
        on_load: Optional callback run with the master rear once the input is
            loaded, before the first pass.
        on_pass: Optional callback run after every gather with the pass index
            and the master rear.
    """

    def __init__(
        self,
        on_pass: PassCallback | None = None,
        on_load: LoadCallback | None = None,
    ) -> None:
        self.master_rear: Node | None = None
        self.buckets: list[Node | None] = []
        self.radix = 10
        self.passes = 0
        self.on_pass = on_pass
        self.on_load = on_load

    def sort(self, tokens: Iterable[str]) -> Node | None:
        """Sort the values in a token stream.

        Args:
            tokens: The radix token followed by the values to sort.

        Returns:
            Rear node of the sorted circular list, or None if there were no
            values after the radix.

        Raises:
            EmptyInputError: If there is no radix token.
            InvalidRadixError: If the radix token is not a usable base.
            MalformedDigitError: If a value has a character outside the radix.
        """
        tokens = iter(tokens)
        try:
            radix_token = next(tokens)
        except StopIteration:
            raise EmptyInputError() from None

        self.radix = parse_radix(radix_token)
        self.buckets = [None] * self.radix
        self.master_rear = None
        self.passes = 0

        self.create_master_list(tokens)
        if self.on_load is not None:
            self.on_load(self.master_rear)
        if self.master_rear is None:
            return None

        for pass_index in range(self.max_digits()):
            self.scatter(pass_index)
            self.gather()
            self.passes += 1
            if self.on_pass is not None:
                self.on_pass(pass_index, self.master_rear)

        return self.master_rear

    def create_master_list(self, tokens: Iterable[str]) -> None:
        """Append one node per token to the master list, in input order.

        Every value is checked against the radix before it is linked in, so a
        malformed input is rejected before any pass starts.
        """
        for token in tokens:
            validate_value(token, self.radix)
            self.master_rear = append_to_rear(self.master_rear, Node(token))

    def max_digits(self) -> int:
        """Return the longest value length in the master list.

        The master list must not be empty.
        """
        rear = self.master_rear
        longest = len(rear.value)
        node = rear.next
        while node is not rear:
            longest = max(longest, len(node.value))
            node = node.next
        return longest

    def bucket_index(self, value: str, pass_index: int) -> int:
        """Return the bucket for a value on a given pass.

        Values with no digit at this position count as having a leading zero.
        """
        if len(value) < pass_index + 1:
            return 0
        char = value[len(value) - 1 - pass_index]
        return digit_value(char, self.radix, value)

    def scatter(self, pass_index: int) -> None:
        """Move every master list node into the bucket for its digit.

        Pass 0 is the rightmost digit. The master list is consumed and stays
        empty until the next ``gather``, also when a malformed digit stops
        the pass part way.
        """
        self.buckets = [None] * self.radix
        rear = self.master_rear
        if rear is None:
            return

        self.master_rear = None
        node = rear.next
        while True:
            # Read the link before the node is spliced into a bucket
            following = node.next
            index = self.bucket_index(node.value, pass_index)
            self.buckets[index] = append_to_rear(self.buckets[index], node)
            if node is rear:
                break
            node = following

    def gather(self) -> None:
        """Concatenate the buckets, in index order, into the master list.

        The buckets are left empty.
        """
        master_rear = None
        for bucket_rear in self.buckets:
            master_rear = concat(master_rear, bucket_rear)
        self.master_rear = master_rear
        self.buckets = [None] * self.radix


def sort_values(values: Iterable[str], radix: int) -> list[str]:
    """Sort values given in a radix and return them as a list."""
    sorter = RadixSorter()
    rear = sorter.sort([str(radix), *values])
    return list(iter_values(rear))
