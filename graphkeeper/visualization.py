"""Rendering of a graph in the Graphviz dot language."""

from __future__ import annotations

from typing import TextIO

from .graph import Graph

_HEADER = 'digraph BST {\n    node [fontname="Arial"];\n'
_FOOTER = "}\n"


def _lines(graph: Graph) -> list[str]:
    outgoing: dict[str, list[tuple[str, int]]] = {}
    for start, end, relation in graph.edges():
        outgoing.setdefault(start, []).append((end, relation))
    lines = []
    for vertex in graph.vertices():
        targets = outgoing.get(vertex.key)
        if not targets:
            lines.append(f"    {vertex.key};\n")
            continue
        lines.extend(
            f"    {vertex.key}->{end} [label={relation}];\n" for end, relation in targets
        )
    return lines


def to_dot(graph: Graph) -> str:
    """Return the dot description of ``graph``.

    Vertices without outgoing edges appear as bare nodes.
    """
    return _HEADER + "".join(_lines(graph)) + _FOOTER


def write_dot(graph: Graph, stream: TextIO) -> None:
    """Write the dot description of ``graph`` to ``stream``."""
    stream.write(to_dot(graph))