"""Minimum spanning trees of weighted undirected graphs with Prim's algorithm."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TextIO

from graphalgos.dijkstra import GraphInputError

_HELP = (
    "Esta aplicacao e destinada a resolver o problema da Arvore Geradora Minima "
    "utilizando o algoritmo de Prim!\n\n"
    "O usuario pode escolher as seguintes opcoes atraves do terminal:\n"
    "-f <arquivo> : Faz a leitura dos inputs utilizados a partir do arquivo informado\n"
    "-o <arquivo> : Redireciona a saida da aplicacao para o arquivo especificado\n"
    "-i <vertice> : Escolhe o vertice inicial a ser utilizado\n"
    "-s           : Retorna a solucao do algoritmo\n"
    "-h           : Exibe este helper\n\n"
    "Formatacao desejada do input:\n"
    "-vertices -arestas\n"
    "-v1 -v2 -peso\n"
    "-v1 -v2 -peso\n"
    "(...)\n\n"
)


@dataclass
class SpanningTree:
    """Total weight and (parent, child) edges of a spanning tree, 1-based."""

    total_weight: int
    edges: list[tuple[int, int]] = field(default_factory=list)


class Graph:
    """Weighted undirected graph with 1-based vertices."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative: {vertex_count}")
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 1 <= vertex <= self.vertex_count:
            raise ValueError(f"vertex out of range: {vertex}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect vertices ``u`` and ``v`` with an edge of the given weight."""
        self._check(u)
        self._check(v)
        self._adjacency[u - 1].append((v - 1, weight))
        self._adjacency[v - 1].append((u - 1, weight))

    def prim(self, start: int = 1) -> SpanningTree:
        """Grow a minimum spanning tree from ``start``; unreachable vertices are left out."""
        self._check(start)
        n = self.vertex_count
        origin = start - 1
        in_tree = [False] * n
        key: list[int | None] = [None] * n
        parent: list[int | None] = [None] * n

        key[origin] = 0
        heap = [(0, origin)]
        while heap:
            _, u = heapq.heappop(heap)
            if in_tree[u]:
                continue
            in_tree[u] = True
            for v, weight in self._adjacency[u]:
                current = key[v]
                if not in_tree[v] and (current is None or current > weight):
                    key[v] = weight
                    parent[v] = u
                    heapq.heappush(heap, (weight, v))

        total = sum(key[v] for v in range(n) if in_tree[v])
        edges = [
            (parent[v] + 1, v + 1)
            for v in range(n)
            if in_tree[v] and parent[v] is not None
        ]
        return SpanningTree(total, edges)


def _read_ints(line: str, count: int, message: str) -> list[int]:
    fields = line.split()[:count]
    if len(fields) < count:
        raise GraphInputError(message)
    try:
        return [int(item) for item in fields]
    except ValueError:
        raise GraphInputError(message) from None


def load_graph(lines: Iterable[str]) -> Graph:
    """Parse "n m" followed by m lines "u v w" (1-based) into a Graph."""
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise GraphInputError("Falha ao ler inputs do usuario")
    vertices, edge_count = _read_ints(header, 2, "Falha ao ler definicoes do grafo")
    if vertices < 0:
        raise GraphInputError("Falha ao ler definicoes do grafo")

    graph = Graph(vertices)
    for _ in range(edge_count):
        line = next(it, None)
        if line is None:
            raise GraphInputError("O input tem dados faltando")
        u, v, weight = _read_ints(line, 3, "Falha ao ler valores")
        try:
            graph.add_edge(u, v, weight)
        except ValueError as error:
            raise GraphInputError(str(error)) from None
    return graph


def format_tree(tree: SpanningTree, show_edges: bool) -> str:
    """Render the total weight, or the tree edges when ``show_edges`` is set."""
    if not show_edges:
        return f"{tree.total_weight}\n"
    return "".join(f"({u}, {v}) " for u, v in tree.edges) + "\n"


def help_text() -> str:
    """Usage text for the command."""
    return _HELP


@contextmanager
def _output(path: str) -> Iterator[TextIO]:
    if not path:
        yield sys.stdout
        return
    try:
        handle = open(path, "w", encoding="utf-8")
    except OSError:
        yield sys.stdout
        return
    with handle:
        yield handle


def main(argv: Sequence[str] | None = None) -> int:
    """Run the minimum spanning tree command; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path = ""
    output_path = ""
    initial = 1
    show_edges = False

    it = iter(args)
    for arg in it:
        if arg == "-f":
            value = next(it, None)
            if value is None:
                print("Um caminho para o arquivo precisa ser especificado apos '-f'")
                return 1
            input_path = value
        elif arg == "-o":
            value = next(it, None)
            if value is None:
                print("Um caminho para o arquivo de saida precisa ser especificado apos '-o'")
                return 1
            output_path = value
        elif arg == "-i":
            value = next(it, None)
            if value is None:
                print("Um valor precisa ser informado para o vertice inicial apos '-i'")
                return 1
            try:
                initial = int(value)
            except ValueError:
                print(f"Valor invalido para o vertice inicial: {value}")
                return 1
        elif arg == "-s":
            show_edges = True
        elif arg == "-h":
            print(help_text(), end="")

    try:
        if not input_path:
            raise FileNotFoundError(input_path)
        with open(input_path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print("O arquivo informado nao foi encontrado, verifique o caminho")
        return 1

    try:
        graph = load_graph(lines)
    except GraphInputError as error:
        print(error)
        return 1

    if not 1 <= initial <= graph.vertex_count:
        print(f"Vertice inicial fora do intervalo: {initial}")
        return 1

    tree = graph.prim(initial)
    with _output(output_path) as out:
        out.write(format_tree(tree, show_edges))
    return 0


if __name__ == "__main__":
    sys.exit(main())