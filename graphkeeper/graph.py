"""Directed weighted graph whose vertices live in an open-addressing table."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from .table import KeySpace, Table

_UNREACHED = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Color(Enum):
    """Traversal mark of a vertex."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


@dataclass(eq=False)
class Vertex:
    """A named vertex with the scratch state used by traversals."""

    key: str
    color: Color = Color.WHITE
    distance: int = 0
    previous: Vertex | None = None


@dataclass
class Edge:
    """An outgoing edge to ``vertex`` carrying ``relation`` as its weight."""

    vertex: Vertex
    relation: int = 0

    def __str__(self) -> str:
        return (
            f"{self.vertex.key} key: {self.relation} "
            f"relation distance: {self.vertex.distance}"
        )


class GraphError(Exception):
    """Raised when a graph operation cannot be carried out."""


def format_path(edges: Iterable[Edge]) -> str:
    """Render a sequence of edges as an arrow-separated chain."""
    return "".join(f"{edge} -> " for edge in edges)


def _tokens(line: str) -> list[str]:
    return [token for token in line.rstrip("\r\n").split(" ") if token]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _drop_edge_to(adjacency: list[Edge], key: str) -> bool:
    for position, edge in enumerate(adjacency):
        if edge.vertex.key == key:
            del adjacency[position]
            return True
    return False


class Graph:
    """Directed graph with integer edge weights, kept as adjacency lists."""

    def __init__(self, msize: int = 500) -> None:
        self._table = Table(msize)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def vertices(self) -> Iterator[Vertex]:
        """Vertices in table order."""
        return (slot.vertex for slot in self._table)

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Every edge as ``(start, end, relation)``, grouped by start vertex."""
        for slot in self._table:
            for edge in slot.adjacency:
                yield slot.key, edge.vertex.key, edge.relation

    def _slot(self, key: str) -> KeySpace:
        slot = self._table.find(key)
        if slot is None:
            raise GraphError(f"no vertex {key!r}")
        return slot

    def add_vertex(self, key: str) -> Vertex:
        """Add a vertex named ``key``; raises GraphError if it exists."""
        try:
            slot = self._table.insert(key)
        except KeyError:
            raise GraphError(f"vertex {key!r} already exists") from None
        slot.vertex = Vertex(key)
        return slot.vertex

    def rename_vertex(self, key: str, new_key: str) -> None:
        """Give vertex ``key`` the name ``new_key``, keeping all its edges."""
        self._slot(key)
        if new_key == key:
            return
        if new_key in self._table:
            raise GraphError(f"vertex {new_key!r} already exists")
        released = self._table.release(key)
        slot = self._table.insert(new_key)
        slot.vertex = released.vertex
        slot.adjacency = released.adjacency
        slot.vertex.key = new_key

    def add_edge(self, start: str, end: str, relation: int) -> None:
        """Add an edge from ``start`` to ``end``.

        Raises GraphError for a self-loop, a missing vertex or an existing edge.
        """
        if start == end:
            raise GraphError("an edge cannot join a vertex to itself")
        first = self._slot(start)
        second = self._slot(end)
        if any(edge.vertex.key == end for edge in first.adjacency):
            raise GraphError(f"edge {start!r} -> {end!r} already exists")
        first.adjacency.insert(0, Edge(second.vertex, relation))

    def change_edge(self, start: str, end: str, relation: int) -> None:
        """Set the relation of an existing edge; raises GraphError if absent."""
        if start == end:
            raise GraphError("an edge cannot join a vertex to itself")
        for edge in self._slot(start).adjacency:
            if edge.vertex.key == end:
                edge.relation = relation
                return
        raise GraphError(f"no edge {start!r} -> {end!r}")

    def remove_vertex(self, key: str) -> None:
        """Remove a vertex and every edge leading to it."""
        self._slot(key)
        for slot in self._table:
            _drop_edge_to(slot.adjacency, key)
        self._table.remove(key)

    def remove_edge(self, start: str, end: str) -> bool:
        """Remove the edge ``start`` -> ``end``; return whether one was there.

        Raises GraphError if ``start`` is not a vertex.
        """
        return _drop_edge_to(self._slot(start).adjacency, end)

    def reset(self) -> None:
        """Clear traversal state on every vertex reached by the table."""
        for slot in self._table:
            slot.vertex.distance = _UNREACHED
            slot.vertex.previous = None
            for edge in slot.adjacency:
                edge.vertex.color = Color.WHITE
                edge.vertex.previous = None
                edge.vertex.distance = _UNREACHED

    def breadth_first_search(self, start: str, depth: int) -> list[Edge]:
        """Vertices within ``depth`` hops of ``start``, latest found first.

        Each vertex comes wrapped in an Edge with relation 0.
        """
        self.reset()
        origin = self._slot(start).vertex
        origin.color = Color.GRAY
        origin.distance = 0
        queue = deque([origin])
        found: list[Edge] = []
        while queue:
            vertex = queue.popleft()
            slot = self._table.find(vertex.key)
            if slot is None:
                break
            for edge in slot.adjacency:
                target = edge.vertex
                if target.color is Color.WHITE:
                    target.color = Color.GRAY
                    target.distance = vertex.distance + 1
                    target.previous = vertex
                    if target.distance <= depth:
                        found.append(Edge(target))
                    queue.append(target)
            vertex.color = Color.BLACK
        found.reverse()
        return found

    def shortest_path(self, start: str, end: str) -> list[Edge]:
        """Cheapest path from ``start`` to ``end`` by Bellman-Ford relaxation.

        Relaxation runs ``len(self) - 2`` rounds. The path is returned from
        ``start`` to ``end``, each vertex wrapped in an Edge with relation 0.
        If the predecessor chain loops, the repeated vertex is placed at the
        front a second time. Raises GraphError for equal endpoints, a missing
        vertex, or an unreachable end.
        """
        if start == end:
            raise GraphError("start and end are the same vertex")
        origin = self._slot(start)
        target = self._slot(end)
        for slot in self._table:
            slot.vertex.distance = _UNREACHED
            slot.vertex.previous = None
        origin.vertex.distance = 0
        for _ in range(1, len(self._table) - 1):
            for slot in self._table:
                source = slot.vertex
                for edge in slot.adjacency:
                    if source.distance == _UNREACHED:
                        continue
                    candidate = source.distance + edge.relation
                    if edge.vertex.distance > candidate:
                        edge.vertex.distance = candidate
                        edge.vertex.previous = source
        if target.vertex.distance == _UNREACHED:
            raise GraphError("unreachable")
        chain = [target.vertex]
        seen = {target.vertex.key}
        node = target.vertex.previous
        while node is not None:
            chain.append(node)
            if node.key in seen:
                break
            seen.add(node.key)
            node = node.previous
        chain.reverse()
        return [Edge(vertex) for vertex in chain]

    def longest_path_target(self, start: str) -> Vertex | None:
        """Vertex at the end of the heaviest path leaving ``start``.

        Returns None when ``start`` is absent or has no outgoing path.
        Raises GraphError if the graph holds a cycle of positive weight.
        """
        slots = list(self._table)
        index = {slot.key: position for position, slot in enumerate(slots)}
        weights: list[list[int | None]] = [[None] * len(slots) for _ in slots]
        for row, slot in zip(weights, slots):
            for edge in slot.adjacency:
                column = index.get(edge.vertex.key)
                if column is not None:
                    row[column] = edge.relation
        for via, via_row in enumerate(weights):
            for row in weights:
                to_via = row[via]
                if to_via is None:
                    continue
                for column, onward in enumerate(via_row):
                    if onward is None:
                        continue
                    total = to_via + onward
                    if row[column] is None or total > row[column]:
                        row[column] = total
        if any(
            row[position] is not None and row[position] > 0
            for position, row in enumerate(weights)
        ):
            raise GraphError("There is loop in graph")
        origin = index.get(start)
        if origin is None:
            return None
        best: int | None = None
        found: Vertex | None = None
        for slot, value in zip(slots, weights[origin]):
            if value is not None and (best is None or value > best):
                best = value
                found = slot.vertex
        return found

    def import_file(self, path: str | Path) -> None:
        """Load vertices and edges from a file written by export_file.

        The first line lists vertex names; each following line holds
        ``start end relation``. Reading stops at the first short line, and
        duplicates or invalid edges are skipped.
        """
        with open(path, encoding="utf-8") as stream:
            header = stream.readline()
            for name in _tokens(header):
                try:
                    self.add_vertex(name)
                except GraphError:
                    pass
            for line in stream:
                parts = _tokens(line)
                if len(parts) < 3:
                    break
                start, end, relation = parts[:3]
                try:
                    self.add_edge(start, end, _leading_int(relation))
                except GraphError:
                    pass

    def export_file(self, path: str | Path) -> None:
        """Write the vertex names and edges in the format import_file reads."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(" ".join(slot.key for slot in self._table))
            stream.write("\n")
            for start, end, relation in self.edges():
                stream.write(f"{start} {end} {relation}\n")

    def format(self) -> str:
        """Adjacency listing of every vertex in table order."""
        return self._table.format()