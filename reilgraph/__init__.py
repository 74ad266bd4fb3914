"""Memory images, native and REIL-level control flow graphs, and AArch64 function discovery."""

__version__ = "0.1.0"

__all__ = [
    "node",
    "edge",
    "native_edge",
    "memory_image",
    "native_flow_graph",
    "find_functions",
    "flow_graph",
]