import io

from graphkeeper.graph import Graph
from graphkeeper.visualization import to_dot, write_dot

HEADER = 'digraph BST {\n    node [fontname="Arial"];\n'


def test_empty_graph():
    assert to_dot(Graph()) == HEADER + "}\n"


def test_isolated_vertex_is_bare_node():
    graph = Graph()
    graph.add_vertex("alone")
    assert to_dot(graph) == HEADER + "    alone;\n}\n"


def test_edge_line_carries_label():
    graph = Graph()
    graph.add_vertex("a")
    graph.add_vertex("b")
    graph.add_edge("a", "b", 3)
    text = to_dot(graph)
    assert "    a->b [label=3];\n" in text
    assert "    b;\n" in text
    assert "    a;\n" not in text
    assert text.startswith(HEADER)
    assert text.endswith("}\n")


def test_every_edge_listed():
    graph = Graph()
    for name in ("a", "b", "c"):
        graph.add_vertex(name)
    graph.add_edge("a", "b", 1)
    graph.add_edge("a", "c", -2)
    graph.add_edge("b", "c", 5)
    text = to_dot(graph)
    for start, end, relation in graph.edges():
        assert f"    {start}->{end} [label={relation}];\n" in text
    assert text.count("->") == 3


def test_write_dot_matches_to_dot():
    graph = Graph()
    graph.add_vertex("x")
    graph.add_vertex("y")
    graph.add_edge("y", "x", 7)
    stream = io.StringIO()
    write_dot(graph, stream)
    assert stream.getvalue() == to_dot(graph)