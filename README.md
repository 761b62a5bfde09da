# graphalgos

Five classic graph algorithms, each usable as a library function or as a
command-line tool that reads a graph from a text file.

| Command    | Module                  | Algorithm                         | Graph kind           |
|------------|-------------------------|-----------------------------------|----------------------|
| `dijkstra` | `graphalgos.dijkstra`   | single-source shortest distances  | undirected, weighted |
| `prim`     | `graphalgos.prim`       | minimum spanning tree (Prim)      | undirected, weighted |
| `kruskal`  | `graphalgos.kruskal`    | minimum spanning forest (Kruskal) | undirected, weighted |
| `kosaraju` | `graphalgos.kosaraju`   | strongly connected components     | directed             |
| `pagerank` | `graphalgos.pagerank`   | PageRank scores, highest first    | directed             |

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Input format

Vertices are numbered from 1. The first line gives the number of vertices
and the number of edges; each following line is one edge.

Weighted graphs (`dijkstra`, `prim`, `kruskal`), one `u v weight` per line:

```
4 5
1 2 3
1 3 1
2 3 7
2 4 2
3 4 5
```

Directed graphs (`kosaraju`, `pagerank`), one arc `u v` per line:

```
5 5
1 2
2 3
3 1
3 4
4 5
```

`dijkstra` and `prim` read the input line by line; `kruskal`, `kosaraju` and
`pagerank` read it as a stream of whitespace-separated integers. Missing
values, non-integer values and vertices outside `1..n` are reported as errors
and the command exits with status 1.

## Commands

### dijkstra

```
dijkstra -f graph.txt [-i 1] [-o out.txt] [-h]
```

Prints `vertex:distance` for every vertex, separated by spaces, measured
from the start vertex given with `-i` (default 1). Unreachable vertices get
`-1`. With `-o` the result is written to that file instead; if the file
cannot be opened the result goes to standard output. `-h` prints usage text
and the command carries on; unknown arguments are ignored.

### prim

```
prim -f graph.txt [-i 1] [-s] [-o out.txt] [-h]
```

Prints the total weight of the minimum spanning tree grown from the start
vertex, or with `-s` the tree's edges as `(parent, child)` pairs. Vertices
not reachable from the start are left out. `-o` and `-h` behave as for
`dijkstra`.

### kruskal

```
kruskal -f graph.txt [-s] [-o out.txt] [-h]
```

Prints the total weight of the minimum spanning forest, or with `-s` its
edges as `(u,v)` pairs in the order they were chosen (ascending weight).
Unknown options are an error.

### kosaraju

```
kosaraju -f graph.txt [-o out.txt] [-h]
```

Prints one strongly connected component per line, vertices in ascending
order, components ordered by their smallest vertex. `-h` prints a short
usage message.

### pagerank

```
pagerank -f graph.txt [-d 0.85] [-k 10] [-h]
```

Prints the `k` highest-ranked vertices as `Vértice v: rank` lines. `-d` sets
the damping factor (between 0 and 1, default 0.85); `-k` (default 10) must be
positive and no larger than the number of vertices. Iteration stops after
100 rounds or once the total change falls below `1e-8`; the ranks are
normalised to sum to 1. Output always goes to standard output.

## What the package does not provide

The `-h` option of `kruskal` and `pagerank` prints the contents of a help
file at `../helps/kruskal_help.txt` or `../helps/pagerank_help.txt`,
relative to the current directory. The package does not ship these files;
when they are missing, an error message is written to standard error
instead.

## Library use

```python
from graphalgos.dijkstra import read_weighted_graph, shortest_distances
from graphalgos.prim import load_graph
from graphalgos.kruskal import read_sorted_edges, kruskal
from graphalgos.kosaraju import read_digraph, strongly_connected_components
from graphalgos.pagerank import pagerank, top_ranked

with open("graph.txt") as f:
    graph = read_weighted_graph(f)
print(shortest_distances(graph, 0))   # 0-based source; None = unreachable

with open("graph.txt") as f:
    tree = load_graph(f).prim(1)      # SpanningTree(total_weight, edges)

with open("graph.txt") as f:
    n, edges = read_sorted_edges(f.read())
cost, forest = kruskal(n, edges)

with open("digraph.txt") as f:
    n, arcs = read_digraph(f.read())
print(strongly_connected_components(n, arcs))
print(top_ranked(pagerank(n, arcs, 0.85), 3))
```

Malformed input raises `graphalgos.dijkstra.GraphInputError`, a subclass of
`ValueError`. Each module also offers a `main(argv)` function that behaves
like its command and returns the exit status, so the tools can be driven
from Python code as well.