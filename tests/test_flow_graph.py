import pytest

from reilgraph.edge import Edge, EdgeKind
from reilgraph.flow_graph import FlowGraph
from reilgraph.node import Node


def _function_graph():
    graph = FlowGraph()
    graph.add_edge(0, 0x1000, EdgeKind.NATIVE_CALL)
    graph.add_edge(Node(0x1010, 2), 0, EdgeKind.NATIVE_RETURN)
    return graph


def test_complete_basic_block():
    graph = _function_graph()
    assert graph.basic_block_start(0x1008) == Node(0x1000)
    assert graph.basic_block_end(0x1008) == Node(0x1010, 2)


def test_incomplete_basic_block():
    graph = FlowGraph()
    graph.add_edge(0, 0x1000, EdgeKind.NATIVE_CALL)
    assert graph.basic_block_start(0x1008) == Node(0)
    assert graph.basic_block_end(0x1008) == Node(0)


def test_node_after_block_end_has_no_block():
    graph = _function_graph()
    assert graph.basic_block_start(Node(0x1010, 3)) == Node(0)
    assert graph.basic_block_end(Node(0x1014)) == Node(0)


def test_edges_indexed_both_ways():
    graph = _function_graph()
    call = Edge(Node(0), Node(0x1000), EdgeKind.NATIVE_CALL)
    assert graph.outgoing_edges(0) == (call,)
    assert graph.incoming_edges(Node(0x1000)) == (call,)
    assert list(graph.outgoing_edge_map()) == [Node(0), Node(0x1010, 2)]
    assert list(graph.incoming_edge_map()) == [Node(0), Node(0x1000)]


def test_missing_node_has_no_edges():
    graph = _function_graph()
    assert graph.outgoing_edges(0x2000) == ()
    assert graph.incoming_edges(0x2000) == ()


def test_edge_maps_are_read_only():
    graph = _function_graph()
    with pytest.raises(TypeError):
        graph.outgoing_edge_map()[Node(5)] = None


def test_duplicate_edge_is_stored_once():
    graph = _function_graph()
    graph.add_edge(0, 0x1000, EdgeKind.NATIVE_CALL)
    assert len(graph.outgoing_edges(0)) == 1


def test_remove_drops_empty_nodes():
    graph = _function_graph()
    graph.remove_edge(Node(0x1010, 2), 0, EdgeKind.NATIVE_RETURN)
    assert Node(0x1010, 2) not in graph.outgoing_edge_map()
    assert graph.incoming_edges(0) == ()
    assert graph.outgoing_edges(0) == (
        Edge(Node(0), Node(0x1000), EdgeKind.NATIVE_CALL),
    )


def test_remove_missing_edge_leaves_graph_unchanged():
    graph = _function_graph()
    graph.remove(Edge(Node(0), Node(0x1000), EdgeKind.NATIVE_JUMP))
    assert graph.entry() == Node(0x1000)
    assert len(graph.outgoing_edge_map()) == 2


def test_entry():
    assert _function_graph().entry() == Node(0x1000)


def test_entry_missing_raises():
    with pytest.raises(ValueError):
        FlowGraph().entry()


def test_entry_ambiguous_raises():
    graph = _function_graph()
    graph.add_edge(0, 0x2000, EdgeKind.NATIVE_CALL)
    with pytest.raises(ValueError):
        graph.entry()


def test_resolved_with_returns_and_breaks():
    graph = _function_graph()
    graph.add_edge(Node(0x1020), 0, EdgeKind.NATIVE_BREAK)
    assert graph.resolved() is True


def test_unresolved_jump_to_outside():
    graph = _function_graph()
    graph.add_edge(Node(0x1004, 1), 0, EdgeKind.NATIVE_JUMP)
    assert graph.resolved() is False
    graph.remove_edge(Node(0x1004, 1), 0, EdgeKind.NATIVE_JUMP)
    assert graph.resolved() is True


def test_empty_graph_is_resolved():
    assert FlowGraph().resolved() is True