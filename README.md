# reilgraph

Building blocks for static binary analysis. The package provides memory
images, control flow graphs over native instructions and over REIL nodes, and
discovery of AArch64 function entry points from their prologues.

## Installation

```
pip install reilgraph
```

## Overview

- `reilgraph.node.Node`: a position in the program. It holds a native
  instruction address and the offset of a REIL instruction within that native
  instruction. Nodes order by address, then by offset. An offset of `0xffff`
  or more, or an address outside 64 bits, raises `ValueError`. A node prints
  as `address.offset` in hex, for example `400078.1`.
- `reilgraph.edge.Edge` and `reilgraph.edge.EdgeKind`: edges between nodes,
  ordered by source, then target, then kind. The kinds are `INVALID`, `FLOW`,
  `JUMP`, `NATIVE_FLOW`, `NATIVE_JUMP`, `NATIVE_CALL`, `NATIVE_RETURN` and
  `NATIVE_BREAK`.
- `reilgraph.native_edge.NativeEdge` and `reilgraph.native_edge.NativeEdgeKind`:
  edges between native addresses, with the kinds `INVALID`, `FLOW`, `JUMP`,
  `CALL`, `RETURN` and `BREAK`.
- `reilgraph.memory_image.MemoryImage` and `reilgraph.memory_image.Mapping`:
  an address space made of mappings with read, write and execute permissions.
  `readable`, `writable`, `executable` and `access_ok` check a range against
  every mapping that holds it. `read` returns the bytes from an address to the
  end of its mapping, or an empty view if the address is unmapped.
- `reilgraph.native_flow_graph.NativeFlowGraph`: a graph of `NativeEdge`s
  indexed by source and by target. It offers `add`/`add_edge`,
  `remove`/`remove_edge` (which report whether the edge was there),
  `outgoing_edges`, `incoming_edges`, read-only `outgoing_edge_map` and
  `incoming_edge_map`, `entry`, `resolved`, `basic_block_start` and
  `basic_block_end`.
- `reilgraph.flow_graph.FlowGraph`: the same operations over `Edge`s between
  `Node`s. Methods that take a node also accept a bare address, which means
  the node at offset 0.
- `reilgraph.find_functions`: `find_aarch64_functions` scans the executable
  mappings of an image for prologue patterns such as `paci[a|b]sp`,
  `sub sp, sp, #imm`, `stp ..., [sp, #imm]` and `add x29, sp, #imm`.
  `find_functions` dispatches on the image's architecture and raises
  `ValueError` for anything other than `"aarch64"`.

Address `0` stands for "outside the function". The single edge leaving `0`
marks the entry point, and `entry()` raises `ValueError` if there is none or
more than one. Edges into `0` mark returns, breaks, and branches whose target
is not known yet. A graph is `resolved()` when every edge into `0` is a return
or a break.

A basic block lookup returns `0` (or `Node(0)`) when the address is not inside
a complete block, that is, a block whose first exit is known and lies before
the next block's start.

## Example

```python
from reilgraph.edge import EdgeKind
from reilgraph.find_functions import find_functions
from reilgraph.flow_graph import FlowGraph
from reilgraph.memory_image import Mapping, MemoryImage
from reilgraph.native_edge import NativeEdgeKind
from reilgraph.native_flow_graph import NativeFlowGraph
from reilgraph.node import Node

# sub sp, sp, #0x20 ; stp x29, x30, [sp, #16] ; add x29, sp, #0x10 ; ret
code = bytes.fromhex("ff8300d1fd7b01a9fd430091c0035fd6")
image = MemoryImage("aarch64")
image.add_mapping(Mapping(address=0x400078, data=code,
                          readable=True, writable=False, executable=True))

print(sorted(find_functions(image)))         # [4194424]  (0x400078)

graph = NativeFlowGraph()
graph.add_edge(0, 0x1000, NativeEdgeKind.CALL)
graph.add_edge(0x1010, 0, NativeEdgeKind.RETURN)
print(hex(graph.entry()))                    # 0x1000
print(hex(graph.basic_block_start(0x1008)))  # 0x1000
print(hex(graph.basic_block_end(0x1008)))    # 0x1010
print(graph.resolved())                      # True

il_graph = FlowGraph()
il_graph.add_edge(0, 0x1000, EdgeKind.NATIVE_CALL)
il_graph.add_edge(Node(0x1000, 2), 0, EdgeKind.NATIVE_RETURN)
print(il_graph.entry())                      # 1000.0
print(il_graph.basic_block_end(Node(0x1000, 1)))  # 1000.2
```

## What the package does not do

The package holds graphs and images that you fill in yourself. It does not
decode or disassemble machine code, translate instructions to REIL, build a
`FlowGraph` from a `NativeFlowGraph`, resolve indirect branches, or run
constant propagation. It has no file formats: memory images and graphs cannot
be loaded from or saved to disk. It installs no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```