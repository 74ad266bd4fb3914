"""Control flow graphs over IL instruction nodes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from sortedcontainers import SortedDict, SortedSet

from reilgraph.edge import Edge, EdgeKind
from reilgraph.node import Node

NodeLike = Union[Node, int]

_NO_NEXT_BLOCK = Node(0xFFFFFFFFFFFFFFFF, 0xFFFE)
_OUTSIDE = Node(0)
_TERMINAL_KINDS = frozenset({EdgeKind.NATIVE_RETURN, EdgeKind.NATIVE_BREAK})


def _as_node(node: NodeLike) -> Node:
    """Accept a node, or a bare address meaning the first IL instruction there."""
    return node if isinstance(node, Node) else Node(node)


class FlowGraph:
    """A set of IL edges indexed by source and by target node.

    The node at address 0 stands for the outside world: the function entry is
    the single edge leaving it, and unresolved or external destinations lead
    to it.
    """

    def __init__(self) -> None:
        self._outgoing: SortedDict = SortedDict()
        self._incoming: SortedDict = SortedDict()

    def add(self, edge: Edge) -> None:
        self._outgoing.setdefault(edge.source, SortedSet()).add(edge)
        self._incoming.setdefault(edge.target, SortedSet()).add(edge)

    def add_edge(self, source: NodeLike, target: NodeLike, kind: EdgeKind) -> None:
        self.add(Edge(_as_node(source), _as_node(target), kind))

    def remove(self, edge: Edge) -> None:
        """Remove an edge if present, dropping nodes left with no edges."""
        for index, key in ((self._outgoing, edge.source), (self._incoming, edge.target)):
            edges = index.get(key)
            if edges is None:
                continue
            edges.discard(edge)
            if not edges:
                del index[key]

    def remove_edge(self, source: NodeLike, target: NodeLike, kind: EdgeKind) -> None:
        self.remove(Edge(_as_node(source), _as_node(target), kind))

    def resolved(self) -> bool:
        """True when every edge into the outside node is a return or a break."""
        return all(
            edge.kind in _TERMINAL_KINDS for edge in self._incoming.get(_OUTSIDE, ())
        )

    def outgoing_edge_map(self) -> Mapping[Node, SortedSet]:
        """A read-only view of edges keyed by source, in node order."""
        return MappingProxyType(self._outgoing)

    def incoming_edge_map(self) -> Mapping[Node, SortedSet]:
        """A read-only view of edges keyed by target, in node order."""
        return MappingProxyType(self._incoming)

    def outgoing_edges(self, node: NodeLike) -> tuple[Edge, ...]:
        return tuple(self._outgoing.get(_as_node(node), ()))

    def incoming_edges(self, node: NodeLike) -> tuple[Edge, ...]:
        return tuple(self._incoming.get(_as_node(node), ()))

    def entry(self) -> Node:
        """The target of the single edge leaving the outside node."""
        edges = self._outgoing.get(_OUTSIDE)
        if not edges:
            raise ValueError("flow graph has no entry edge")
        if len(edges) != 1:
            raise ValueError(f"flow graph has {len(edges)} entry edges")
        return edges[0].target

    def basic_block_start(self, node: NodeLike) -> Node:
        """First node of the complete basic block holding node, or Node(0)."""
        block = self._basic_block(_as_node(node))
        return block[0] if block else Node(0)

    def basic_block_end(self, node: NodeLike) -> Node:
        """Last node of the complete basic block holding node, or Node(0)."""
        block = self._basic_block(_as_node(node))
        return block[1] if block else Node(0)

    def _basic_block(self, node: Node) -> tuple[Node, Node] | None:
        incoming_keys = self._incoming.keys()
        index = self._incoming.bisect_right(node)
        if index == 0:
            return None
        start = incoming_keys[index - 1]
        next_start = (
            incoming_keys[index] if index < len(incoming_keys) else _NO_NEXT_BLOCK
        )

        out_index = self._outgoing.bisect_left(start)
        if out_index == len(self._outgoing):
            return None
        end = self._outgoing.keys()[out_index]
        # The block is incomplete if its first exit lies in the next block,
        # and does not hold node if that exit comes before node.
        if next_start <= end or end < node:
            return None
        return start, end