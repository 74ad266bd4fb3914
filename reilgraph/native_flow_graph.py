"""Control flow graphs over native instruction addresses."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from sortedcontainers import SortedDict, SortedSet

from reilgraph.native_edge import NativeEdge, NativeEdgeKind

_log = logging.getLogger(__name__)

_NO_NEXT_BLOCK = 0xFFFFFFFFFFFFFFFF
_TERMINAL_KINDS = frozenset({NativeEdgeKind.RETURN, NativeEdgeKind.BREAK})


class NativeFlowGraph:
    """A set of native edges indexed by source and by target address.

    Address 0 stands for the outside world: the function entry is the single
    edge leaving 0, and unresolved or external destinations lead to 0.
    """

    def __init__(self) -> None:
        self._outgoing: SortedDict = SortedDict()
        self._incoming: SortedDict = SortedDict()

    def add(self, edge: NativeEdge) -> None:
        _log.debug("add %s", edge)
        self._outgoing.setdefault(edge.source, SortedSet()).add(edge)
        self._incoming.setdefault(edge.target, SortedSet()).add(edge)

    def add_edge(self, source: int, target: int, kind: NativeEdgeKind) -> None:
        self.add(NativeEdge(source, target, kind))

    def remove(self, edge: NativeEdge) -> bool:
        """Remove an edge; return whether it was present."""
        _log.debug("remove %s", edge)
        found = False
        for index, key in ((self._outgoing, edge.source), (self._incoming, edge.target)):
            edges = index.get(key)
            if edges is None:
                continue
            if edge in edges:
                edges.remove(edge)
                found = True
            if not edges:
                del index[key]
        return found

    def remove_edge(self, source: int, target: int, kind: NativeEdgeKind) -> bool:
        return self.remove(NativeEdge(source, target, kind))

    def resolved(self) -> bool:
        """True when every edge into address 0 is a return or a break."""
        return all(
            edge.kind in _TERMINAL_KINDS for edge in self._incoming.get(0, ())
        )

    def outgoing_edge_map(self) -> Mapping[int, SortedSet]:
        """A read-only view of edges keyed by source, in address order."""
        return MappingProxyType(self._outgoing)

    def incoming_edge_map(self) -> Mapping[int, SortedSet]:
        """A read-only view of edges keyed by target, in address order."""
        return MappingProxyType(self._incoming)

    def outgoing_edges(self, node: int) -> tuple[NativeEdge, ...]:
        return tuple(self._outgoing.get(node, ()))

    def incoming_edges(self, node: int) -> tuple[NativeEdge, ...]:
        return tuple(self._incoming.get(node, ()))

    def entry(self) -> int:
        """The target of the single edge leaving address 0."""
        edges = self._outgoing.get(0)
        if not edges:
            raise ValueError("flow graph has no entry edge")
        if len(edges) != 1:
            raise ValueError(f"flow graph has {len(edges)} entry edges")
        return edges[0].target

    def basic_block_start(self, node: int) -> int:
        """Start of the complete basic block holding node, or 0."""
        block = self._basic_block(node)
        return block[0] if block else 0

    def basic_block_end(self, node: int) -> int:
        """Last instruction of the complete basic block holding node, or 0."""
        block = self._basic_block(node)
        return block[1] if block else 0

    def _basic_block(self, node: int) -> tuple[int, int] | None:
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