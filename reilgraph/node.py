"""Positions of single IL instructions inside native code."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_ADDRESS = 0xFFFFFFFFFFFFFFFF
_RESERVED_OFFSET = 0xFFFF


@dataclass(frozen=True, order=True)
class Node:
    """An IL instruction: a native address and an index into its translation.

    Nodes order by address first and offset second.
    """

    address: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.address <= _MAX_ADDRESS:
            raise ValueError(f"address out of range: {self.address:#x}")
        if not 0 <= self.offset < _RESERVED_OFFSET:
            raise ValueError(f"invalid node offset: {self.offset:#x}")

    def __str__(self) -> str:
        return f"{self.address:x}.{self.offset:x}"