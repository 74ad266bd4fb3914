"""Edges between IL instruction nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from reilgraph.node import Node


class EdgeKind(IntEnum):
    """Kinds of control transfer, ordered as the analyses rely on."""

    INVALID = 0
    FLOW = 1
    JUMP = 2
    NATIVE_FLOW = 3
    NATIVE_JUMP = 4
    NATIVE_CALL = 5
    NATIVE_RETURN = 6
    NATIVE_BREAK = 7

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, order=True)
class Edge:
    """A directed edge between two nodes; ordered by source, target, kind."""

    source: Node = field(default_factory=Node)
    target: Node = field(default_factory=Node)
    kind: EdgeKind = EdgeKind.INVALID

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} [{self.kind.label}]"