"""Minimum spanning trees of weighted undirected graphs with Kruskal's algorithm."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from graphalgos.dijkstra import GraphInputError

HELP_PATH = "../helps/kruskal_help.txt"


@dataclass(frozen=True, order=True)
class Edge:
    """Weighted undirected edge between 1-based vertices, ordered by weight first."""

    weight: int
    source: int
    target: int


class DisjointSet:
    """Union-find over the items 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already one set."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            self._parent[a] = b
        elif self._rank[b] < self._rank[a]:
            self._parent[b] = a
        else:
            self._parent[b] = a
            self._rank[a] += 1
        return True


def _int_tokens(text: str) -> list[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError as error:
        raise GraphInputError(f"Valor invalido na entrada: {error}") from None


def read_sorted_edges(text: str) -> tuple[int, list[Edge]]:
    """Parse "n m" followed by m triples "u v w"; return n and the edges sorted by weight."""
    values = _int_tokens(text)
    if len(values) < 2:
        raise GraphInputError("Falha ao ler definicoes do grafo")
    vertex_count, edge_count = values[0], values[1]
    if vertex_count < 0 or edge_count < 0:
        raise GraphInputError("Falha ao ler definicoes do grafo")
    body = values[2:2 + 3 * edge_count]
    if len(body) < 3 * edge_count:
        raise GraphInputError("O input tem dados faltando")

    triples = zip(body[0::3], body[1::3], body[2::3])
    edges = []
    for u, v, weight in triples:
        for vertex in (u, v):
            if not 1 <= vertex <= vertex_count:
                raise GraphInputError(f"Vertice fora do intervalo: {vertex}")
        edges.append(Edge(weight, u, v))
    edges.sort()
    return vertex_count, edges


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> tuple[int, list[Edge]]:
    """Return the total cost and the edges of a minimum spanning forest."""
    components = DisjointSet(vertex_count)
    tree = [
        edge
        for edge in sorted(edges)
        if components.union(edge.source - 1, edge.target - 1)
    ]
    return sum(edge.weight for edge in tree), tree


def format_result(cost: int, tree: Iterable[Edge], show_edges: bool) -> str:
    """Render the cost, or the tree edges as ``(u,v)`` pairs when ``show_edges`` is set."""
    if not show_edges:
        return f"{cost}\n"
    return "".join(f"({edge.source},{edge.target}) " for edge in tree) + "\n"


def _print_help(path: str) -> None:
    try:
        with open(path, encoding="utf-8") as handle:
            sys.stdout.write(handle.read())
    except OSError:
        print(f"Erro ao abrir ajuda: {path}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Kruskal command; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path = ""
    output_path = ""
    show_edges = False
    show_help = False

    position = 0
    while position < len(args):
        arg = args[position]
        has_value = position + 1 < len(args)
        if arg == "-f" and has_value:
            position += 1
            input_path = args[position]
        elif arg == "-o" and has_value:
            position += 1
            output_path = args[position]
        elif arg == "-s":
            show_edges = True
        elif arg == "-h":
            show_help = True
        else:
            print(f"Opção desconhecida: {arg}\nUse -h para ajuda.", file=sys.stderr)
            return 1
        position += 1

    if show_help:
        _print_help(HELP_PATH)
        return 0
    if not input_path:
        print("Erro: arquivo de entrada não especificado. Use -f <arquivo>.", file=sys.stderr)
        return 1

    try:
        with open(input_path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Não foi possível abrir entrada: {input_path}", file=sys.stderr)
        return 1

    try:
        vertex_count, edges = read_sorted_edges(text)
    except GraphInputError as error:
        print(error, file=sys.stderr)
        return 1

    cost, tree = kruskal(vertex_count, edges)
    result = format_result(cost, tree, show_edges)

    if not output_path:
        sys.stdout.write(result)
        return 0
    try:
        with open(output_path, "w", encoding="utf-8") as out:
            out.write(result)
    except OSError:
        print(f"Não foi possível abrir saída: {output_path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())