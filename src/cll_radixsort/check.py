"""Integrity checks for circular lists, using a graph view of the node links."""

from collections.abc import Iterable

import networkx as nx

from .cll import Node, iter_nodes
from .errors import ListIntegrityError


def build_link_graph(rear: Node | None) -> nx.DiGraph:
    """Build a directed graph of the nodes reachable from the rear.

    Each list node becomes a graph node keyed by ``id(node)`` with ``value``
    and ``node`` attributes; each ``next`` link becomes an edge. Links are
    followed until a node repeats, so a corrupted list that loops back into
    its middle still terminates.

    Args:
        rear: Rear node of the list, or None.

    Returns:
        NetworkX DiGraph of the link structure.
    """
    G = nx.DiGraph()
    if rear is None:
        return G

    seen: set[int] = set()
    node = rear
    while id(node) not in seen:
        seen.add(id(node))
        G.add_node(id(node), value=node.value, node=node)
        if node.next is None:
            break
        G.add_edge(id(node), id(node.next))
        node = node.next

    return G


def verify_circular(rear: Node | None, expected: Iterable[Node] | None = None) -> None:
    """Check that the list is a single unbroken cycle.

    Args:
        rear: Rear node of the list, or None for an empty list.
        expected: Optional node objects the list must hold, compared by
            identity.

    Raises:
        ListIntegrityError: If a link is missing, the links do not close into
            one cycle through the rear, or the node set differs from
            ``expected``.
    """
    G = build_link_graph(rear)

    if rear is not None:
        if G.number_of_edges() != G.number_of_nodes():
            raise ListIntegrityError(
                f"List has {G.number_of_nodes()} nodes but {G.number_of_edges()} links"
            )
        if any(degree != 1 for _, degree in G.in_degree()):
            raise ListIntegrityError("List does not loop back to its rear node")
        if not nx.is_strongly_connected(G):
            raise ListIntegrityError("List links do not form a single cycle")

    if expected is not None:
        expected_ids = {id(node) for node in expected}
        actual_ids = set(G.nodes)
        if actual_ids != expected_ids:
            missing = len(expected_ids - actual_ids)
            extra = len(actual_ids - expected_ids)
            raise ListIntegrityError(
                f"List node set changed: {missing} missing, {extra} unexpected"
            )


class PassChecker:
    """Verify the master list after every pass of a sort.

    Pass ``loaded`` as the sorter's ``on_load`` callback and the instance
    itself as ``on_pass``. The nodes seen at load time are the ones every
    later pass must hold.
    """

    def __init__(self) -> None:
        self.expected: list[Node] = []
        self.passes_checked = 0

    def loaded(self, rear: Node | None) -> None:
        verify_circular(rear)
        self.expected = list(iter_nodes(rear))

    def __call__(self, pass_index: int, rear: Node | None) -> None:
        try:
            verify_circular(rear, self.expected)
        except ListIntegrityError as err:
            raise ListIntegrityError(f"After pass {pass_index}: {err}") from err
        self.passes_checked += 1
