# graphkeeper

An interactive editor for directed graphs whose edges carry an integer
relation (weight). Vertices are named by strings and kept in an
open-addressing hash table with linear probing, which grows to the next
prime size when it is full.

## Installing

    pip install .

## Running

    graphkeeper

A numbered menu is shown on every turn:

    0. Quit
    1. Add vertex
    2. Add edge
    3. Remove vertex
    4. Remove edge
    5. Change vertext data
    6. Change edge data
    7. Print
    8. Visualization
    9. Graph traversal
    10. Find shortest way
    11. Special operation
    12. Import graph
    13. Export graph

- **Add edge** and **Change edge data** ask for a relation between -10 and
  10; other numbers are asked for again.
- **Change vertext data** renames a vertex and keeps its edges.
- **Print** lists every vertex with its outgoing edges.
- **Graph traversal** runs a breadth-first search from a vertex and lists
  the vertices within the given (positive) number of "handshakes".
- **Find shortest way** finds the path of least total relation between two
  different vertices by Bellman–Ford relaxation.
- **Special operation** reports which vertex lies at the end of the
  heaviest path from a vertex. If the graph holds a cycle of positive
  weight, "There is loop in graph" is printed instead.
- **Visualization** writes the graph to a file in Graphviz dot format.
- **Import / Export** read and write a plain-text file: the first line holds
  the vertex names separated by spaces, each following line holds one edge
  as `start end relation`. Import stops at the first line with fewer than
  three fields and skips duplicate vertices and invalid edges.

Errors, such as naming a vertex that does not exist, are printed and the
menu is shown again. Choosing 0 or reaching the end of input (Ctrl-D)
leaves the program.

## Using the library

```python
from graphkeeper.graph import Graph, GraphError, format_path
from graphkeeper.visualization import to_dot

graph = Graph(500)
for name in ("a", "b", "c"):
    graph.add_vertex(name)
graph.add_edge("a", "b", 3)
graph.add_edge("b", "c", -2)
graph.add_edge("a", "c", 4)

path = graph.shortest_path("a", "c")          # list of Edge, start to end
reachable = graph.breadth_first_search("a", 1)
target = graph.longest_path_target("a")       # Vertex or None
print(format_path(path))
print(to_dot(graph))
```

Modules:

- `graphkeeper.table` — `Table`, the hash table (`insert`, `find`,
  `remove`, `release`, `expand`, `format`), its slots `KeySpace` with
  `SlotState`, and the hash helpers `first_hash`, `second_hash`,
  `common_hash` and `is_prime`.
- `graphkeeper.graph` — `Graph` with `add_vertex`, `rename_vertex`,
  `add_edge`, `change_edge`, `remove_vertex`, `remove_edge`, `vertices`,
  `edges`, `breadth_first_search`, `shortest_path`, `longest_path_target`,
  `import_file`, `export_file` and `format`; also `Vertex`, `Edge`,
  `Color` and `format_path`.
- `graphkeeper.visualization` — `to_dot(graph)` and
  `write_dot(graph, stream)`.
- `graphkeeper.dialog` — `Session(graph, stdin, stdout)` with `run()`, and
  `main()`, which the `graphkeeper` command starts.

`Graph` raises `GraphError` where an operation cannot be carried out, such
as an edge between unknown vertices, an edge from a vertex to itself, or an
edge that already exists. The library itself accepts any integer relation;
the -10 to 10 limit is applied only by the menu.

## Tests

    pip install .[test]
    pytest