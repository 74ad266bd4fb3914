"""An address space built from mapped byte ranges with access permissions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Mapping:
    """A contiguous range of bytes mapped at an address."""

    address: int
    data: bytes
    readable: bool = False
    writable: bool = False
    executable: bool = False

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    @property
    def end(self) -> int:
        return self.address + len(self.data)

    def contains(self, address: int, size: int = 0) -> bool:
        return self.address <= address and address + size <= self.end


class MemoryImage:
    """The memory of a program for one architecture."""

    def __init__(self, architecture_name: str) -> None:
        self.architecture_name = architecture_name
        self._mappings: list[Mapping] = []

    def readable(self, address: int, size: int = 0) -> bool:
        return self.access_ok(address, size, True, False, False)

    def writable(self, address: int, size: int = 0) -> bool:
        return self.access_ok(address, size, False, True, False)

    def executable(self, address: int, size: int = 0) -> bool:
        return self.access_ok(address, size, False, False, True)

    def access_ok(
        self, address: int, size: int, read: bool, write: bool, execute: bool
    ) -> bool:
        """Whether every mapping holding the range grants the requested access.

        False if no mapping holds the whole range.
        """
        covering = [m for m in self._mappings if m.contains(address, size)]
        if not covering:
            return False
        readable = read and all(m.readable for m in covering)
        writable = write and all(m.writable for m in covering)
        executable = execute and all(m.executable for m in covering)
        return (read, write, execute) == (readable, writable, executable)

    def read(self, address: int) -> memoryview:
        """The bytes from address to the end of its mapping; empty if unmapped.

        Where mappings overlap, the one added last wins.
        """
        result = memoryview(b"")
        for mapping in self._mappings:
            offset = address - mapping.address
            if 0 <= offset < len(mapping.data):
                result = memoryview(mapping.data)[offset:]
        return result

    def add_mapping(self, mapping: Mapping) -> None:
        self._mappings.append(mapping)

    def mappings(self) -> tuple[Mapping, ...]:
        return tuple(self._mappings)