"""Strongly connected components of directed graphs with Kosaraju's algorithm."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from graphalgos.dijkstra import GraphInputError

_HELP = (
    "Uso: kosaraju -f <arquivo_entrada> [-o <arquivo_saida>]\n"
    "Identifica componentes fortemente conexas em grafos direcionados.\n"
)


def read_digraph(text: str) -> tuple[int, list[tuple[int, int]]]:
    """Parse "n m" followed by m pairs "u v" (1-based) into n and the arc list."""
    try:
        values = [int(token) for token in text.split()]
    except ValueError as error:
        raise GraphInputError(f"Valor invalido na entrada: {error}") from None
    if len(values) < 2 or values[0] < 0 or values[1] < 0:
        raise GraphInputError("Falha ao ler definicoes do grafo")
    vertex_count, edge_count = values[0], values[1]
    body = values[2:2 + 2 * edge_count]
    if len(body) < 2 * edge_count:
        raise GraphInputError("O input tem dados faltando")
    edges = list(zip(body[0::2], body[1::2]))
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= vertex_count:
                raise GraphInputError(f"Vertice fora do intervalo: {vertex}")
    return vertex_count, edges


def _finish_order(adjacency: list[list[int]]) -> list[int]:
    visited = [False] * len(adjacency)
    order: list[int] = []
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                stack.pop()
                order.append(u)
    return order


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the components as sorted 1-based vertex lists, ordered by smallest vertex."""
    forward: list[list[int]] = [[] for _ in range(vertex_count)]
    backward: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        forward[u - 1].append(v - 1)
        backward[v - 1].append(u - 1)

    visited = [False] * vertex_count
    components = []
    for root in reversed(_finish_order(forward)):
        if visited[root]:
            continue
        visited[root] = True
        component = []
        pending = [root]
        while pending:
            u = pending.pop()
            component.append(u + 1)
            for v in backward[u]:
                if not visited[v]:
                    visited[v] = True
                    pending.append(v)
        components.append(sorted(component))

    components.sort(key=lambda component: component[0])
    return components


def format_components(components: Iterable[Iterable[int]]) -> str:
    """Render one component per line, each vertex followed by a space."""
    return "".join(
        "".join(f"{vertex} " for vertex in component) + "\n" for component in components
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the strongly-connected-components command; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path = ""
    output_path = ""
    show_help = False

    position = 0
    while position < len(args):
        arg = args[position]
        has_value = position + 1 < len(args)
        if arg == "-h":
            show_help = True
        elif arg == "-f" and has_value:
            position += 1
            input_path = args[position]
        elif arg == "-o" and has_value:
            position += 1
            output_path = args[position]
        else:
            print(f"Opção inválida: {arg}", file=sys.stderr)
            return 1
        position += 1

    if show_help:
        sys.stdout.write(_HELP)
        return 0
    if not input_path:
        print("Erro: arquivo de entrada não especificado. Use -f <arquivo>", file=sys.stderr)
        return 1

    try:
        with open(input_path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Erro ao abrir o arquivo de entrada: {input_path}", file=sys.stderr)
        return 1

    try:
        vertex_count, edges = read_digraph(text)
    except GraphInputError as error:
        print(error, file=sys.stderr)
        return 1

    result = format_components(strongly_connected_components(vertex_count, edges))
    if not output_path:
        sys.stdout.write(result)
        return 0
    try:
        with open(output_path, "w", encoding="utf-8") as out:
            out.write(result)
    except OSError:
        print(f"Erro ao abrir o arquivo de saída: {output_path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())