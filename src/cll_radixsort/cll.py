"""Circular singly linked lists referenced by their rear node."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A list node holding one value in its textual form.

    Nodes compare by identity. A list is handled through its rear node, and
    ``rear.next`` is the front; ``None`` is the empty list.
    """

    value: str
    next: "Node | None" = field(default=None, repr=False)


def append_to_rear(rear: Node | None, node: Node) -> Node:
    """Append a node at the rear of a circular list.

    Args:
        rear: Rear of the list, or None for an empty list.
        node: Node to append. Its current link is overwritten.

    Returns:
        The new rear, which is always ``node``.
    """
    if rear is None:
        node.next = node
    else:
        node.next = rear.next
        rear.next = node
    return node


def concat(rear_a: Node | None, rear_b: Node | None) -> Node | None:
    """Splice list b after list a and return the rear of the combined list.

    Both lists are consumed; no nodes are created.
    """
    if rear_a is None:
        return rear_b
    if rear_b is None:
        return rear_a
    front_a = rear_a.next
    rear_a.next = rear_b.next
    rear_b.next = front_a
    return rear_b


def front(rear: Node | None) -> Node | None:
    """Return the first node of the list."""
    return None if rear is None else rear.next


def iter_nodes(rear: Node | None) -> Iterator[Node]:
    """Yield the nodes front to rear, one lap."""
    if rear is None:
        return
    node = rear.next
    while True:
        yield node
        if node is rear:
            return
        node = node.next


def iter_values(rear: Node | None) -> Iterator[str]:
    """Yield the values front to rear."""
    for node in iter_nodes(rear):
        yield node.value


def count_nodes(rear: Node | None) -> int:
    """Count the nodes in the list."""
    return sum(1 for _ in iter_nodes(rear))


def from_values(values: Iterable[str]) -> Node | None:
    """Build a circular list holding the given values in order."""
    rear = None
    for value in values:
        rear = append_to_rear(rear, Node(value))
    return rear
