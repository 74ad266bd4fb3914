"""Edges between native instruction addresses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class NativeEdgeKind(IntEnum):
    """Kinds of native control transfer."""

    INVALID = 0
    FLOW = 1
    JUMP = 2
    CALL = 3
    RETURN = 4
    BREAK = 5

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, order=True)
class NativeEdge:
    """A directed edge between native addresses; ordered by source, target, kind.

    A target of 0 stands for an unknown or external destination.
    """

    source: int = 0
    target: int = 0
    kind: NativeEdgeKind = NativeEdgeKind.INVALID

    def __str__(self) -> str:
        return f"{self.source:x} -> {self.target:x} [{self.kind.label}]"