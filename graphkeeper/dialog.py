"""Interactive menu for editing and querying a graph."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from .graph import Graph, GraphError, format_path
from .visualization import write_dot

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_QUIT = 0

_MENU = (
    "0. Quit",
    "1. Add vertex",
    "2. Add edge",
    "3. Remove vertex",
    "4. Remove edge",
    "5. Change vertext data",
    "6. Change edge data",
    "7. Print",
    "8. Visualization",
    "9. Graph traversal",
    "10. Find shortest way",
    "11. Special operation",
    "12. Import graph",
    "13. Export graph",
)


class _EndOfInput(Exception):
    """Input ran out while the session was waiting for it."""


def _valid_relation(value: int) -> bool:
    return -10 <= value <= 10


def _positive(value: int) -> bool:
    return value > 0


class Session:
    """A menu-driven session working on one graph."""

    def __init__(
        self,
        graph: Graph,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.graph = graph
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        actions: tuple[Callable[[], None], ...] = (
            self._add_vertex,
            self._add_edge,
            self._remove_vertex,
            self._remove_edge,
            self._rename_vertex,
            self._change_edge,
            self._print,
            self._visualize,
            self._traverse,
            self._shortest_path,
            self._longest_path,
            self._import,
            self._export,
        )
        self._handlers: dict[int, Callable[[], None]] = dict(
            enumerate(actions, start=_QUIT + 1)
        )

    def run(self) -> None:
        """Show the menu and carry out choices until quit or end of input."""
        try:
            while True:
                choice = self._choose()
                if choice == _QUIT:
                    return
                self._handlers[choice]()
        except _EndOfInput:
            return

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise _EndOfInput
        return line

    def _read_key(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line().rstrip("\n")

    def _read_int(self, prompt: str, accept: Callable[[int], bool]) -> int:
        while True:
            self._write(f"{prompt}: ")
            match = _LEADING_INT.match(self._read_line())
            if match is not None:
                value = int(match.group(1))
                if accept(value):
                    return value
            self._write("\n")

    def _read_filename(self) -> str:
        self._write("Input filename ")
        return self._read_line().rstrip()

    def _choose(self) -> int:
        self._write("\n")
        for label in _MENU:
            self._write(label + "\n")
        return self._read_int(
            "choose one option", lambda value: 0 <= value < len(_MENU)
        )

    def _report(self, error: Exception) -> None:
        self._write(f"{error}\n")

    def _add_vertex(self) -> None:
        key = self._read_key("Input name: ")
        try:
            self.graph.add_vertex(key)
        except GraphError as error:
            self._report(error)

    def _add_edge(self) -> None:
        start = self._read_key("Input start point: ")
        end = self._read_key("Input end point: ")
        relation = self._read_int("Input relation", _valid_relation)
        try:
            self.graph.add_edge(start, end, relation)
        except GraphError as error:
            self._report(error)

    def _remove_vertex(self) -> None:
        key = self._read_key("Input vertex for romove: ")
        try:
            self.graph.remove_vertex(key)
        except GraphError as error:
            self._report(error)

    def _remove_edge(self) -> None:
        start = self._read_key("Input start point: ")
        end = self._read_key("Input end point: ")
        try:
            self.graph.remove_edge(start, end)
        except GraphError as error:
            self._report(error)

    def _rename_vertex(self) -> None:
        key = self._read_key("Input name for changing: ")
        new_key = self._read_key("Input new name: ")
        try:
            self.graph.rename_vertex(key, new_key)
        except GraphError as error:
            self._report(error)

    def _change_edge(self) -> None:
        start = self._read_key("Input start point: ")
        end = self._read_key("Input end point: ")
        relation = self._read_int("Input relation", _valid_relation)
        try:
            self.graph.change_edge(start, end, relation)
        except GraphError as error:
            self._report(error)

    def _print(self) -> None:
        self._write(self.graph.format())

    def _visualize(self) -> None:
        filename = self._read_filename()
        try:
            with open(filename, "w", encoding="utf-8") as stream:
                write_dot(self.graph, stream)
        except OSError as error:
            self._report(error)

    def _traverse(self) -> None:
        name = self._read_key("Input name: ")
        depth = self._read_int("Input number of handshakes", _positive)
        try:
            found = self.graph.breadth_first_search(name, depth)
        except GraphError as error:
            self._report(error)
            return
        self._write(format_path(found))

    def _shortest_path(self) -> None:
        start = self._read_key("Input start node: ")
        end = self._read_key("Input end node: ")
        try:
            path = self.graph.shortest_path(start, end)
        except GraphError as error:
            self._report(error)
            return
        self._write(format_path(path))

    def _longest_path(self) -> None:
        start = self._read_key("Input start node: ")
        try:
            vertex = self.graph.longest_path_target(start)
        except GraphError as error:
            self._report(error)
            vertex = None
        if vertex is None:
            self._write("No longest way for this vertex\n")
            return
        self._write(f"longest way is way to vertex {vertex.key}\n")

    def _import(self) -> None:
        filename = self._read_filename()
        try:
            self.graph.import_file(filename)
        except OSError as error:
            self._report(error)

    def _export(self) -> None:
        filename = self._read_filename()
        try:
            self.graph.export_file(filename)
        except OSError as error:
            self._report(error)


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session on a new empty graph."""
    Session(Graph()).run()
    return 0