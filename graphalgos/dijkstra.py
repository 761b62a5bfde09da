"""Single-source shortest distances on weighted undirected graphs."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import TextIO

Adjacency = list[list[tuple[int, int]]]

_HELP = (
    "Esta aplicacao e destinada a encontrar a distancia minima entre vertices "
    "utilizando o algoritmo de Dijkstra!\n\n"
    "O usuario pode escolher as seguintes opcoes atraves do terminal:\n"
    "-f <arquivo> : Faz a leitura dos inputs utilizados a partir do arquivo informado\n"
    "-o <arquivo> : Redireciona a saida da aplicacao para o arquivo especificado\n"
    "-i <vertice> : Escolhe o vertice inicial\n"
    "-h           : Exibe este helper\n\n"
    "Formatacao desejada do input:\n"
    "-vertices -arestas\n"
    "-v1 -v2 -peso\n"
    "-v1 -v2 -peso\n"
    "(...)\n\n"
)


class GraphInputError(ValueError):
    """Raised when graph input is malformed or incomplete."""


def _read_ints(line: str, count: int, message: str) -> list[int]:
    fields = line.split()[:count]
    if len(fields) < count:
        raise GraphInputError(message)
    try:
        return [int(field) for field in fields]
    except ValueError:
        raise GraphInputError(message) from None


def read_weighted_graph(lines: Iterable[str]) -> Adjacency:
    """Parse "n m" followed by m lines "u v w" (1-based) into an undirected adjacency list."""
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise GraphInputError("Falha ao ler inputs do usuario")
    size, edge_count = _read_ints(header, 2, "Falha ao ler definicoes do grafo")
    if size < 0:
        raise GraphInputError("Falha ao ler definicoes do grafo")

    graph: Adjacency = [[] for _ in range(size)]
    for _ in range(edge_count):
        line = next(it, None)
        if line is None:
            raise GraphInputError("O input tem dados faltando")
        source, target, weight = _read_ints(line, 3, "Falha ao ler valores")
        for vertex in (source, target):
            if not 1 <= vertex <= size:
                raise GraphInputError(f"Vertice fora do intervalo: {vertex}")
        graph[source - 1].append((target - 1, weight))
        graph[target - 1].append((source - 1, weight))
    return graph


def shortest_distances(graph: Sequence[Sequence[tuple[int, int]]], source: int) -> list[int | None]:
    """Distances from the 0-based vertex ``source``; ``None`` marks unreachable vertices."""
    if not 0 <= source < len(graph):
        raise ValueError(f"source vertex out of range: {source}")

    distances: list[int | None] = [None] * len(graph)
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, u = heapq.heappop(heap)
        current = distances[u]
        if current is not None and distance > current:
            continue
        for v, weight in graph[u]:
            candidate = distance + weight
            known = distances[v]
            if known is None or candidate < known:
                distances[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distances


def format_distances(distances: Iterable[int | None]) -> str:
    """Render distances as ``vertex:distance`` pairs, -1 for unreachable vertices."""
    body = "".join(
        f"{vertex}:{-1 if distance is None else distance} "
        for vertex, distance in enumerate(distances, start=1)
    )
    return body + "\n"


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
    """Run the shortest-distance command; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path = ""
    output_path = ""
    initial = 1

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
        elif arg == "-h":
            print(help_text(), end="")

    if not input_path:
        print("Por favor, informe um arquivo de entrada (-f <arquivo>)")
        return 1

    try:
        with open(input_path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print("O arquivo informado nao foi encontrado, verifique o caminho")
        return 1

    try:
        graph = read_weighted_graph(lines)
    except GraphInputError as error:
        print(error)
        return 1

    if not 1 <= initial <= len(graph):
        print(f"Vertice inicial fora do intervalo: {initial}")
        return 1

    distances = shortest_distances(graph, initial - 1)
    with _output(output_path) as out:
        out.write(format_distances(distances))
    return 0


if __name__ == "__main__":
    sys.exit(main())