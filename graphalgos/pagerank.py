"""PageRank scores of directed graphs by power iteration."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from graphalgos.dijkstra import GraphInputError

DEFAULT_DAMPING = 0.85
EPS = 1e-8
MAX_ITER = 100
DEFAULT_TOP_K = 10
HELP_PATH = "../helps/pagerank_help.txt"


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


def pagerank(
    vertex_count: int,
    edges: Iterable[tuple[int, int]],
    damping: float = DEFAULT_DAMPING,
) -> list[float]:
    """Return normalised ranks, index i holding the rank of vertex i + 1."""
    if not 0.0 <= damping <= 1.0:
        raise ValueError("Fator de amortecimento deve estar entre 0 e 1.")
    if vertex_count <= 0:
        return []

    n = vertex_count
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u - 1].append(v - 1)

    ranks = [1.0 / n] * n
    base = (1.0 - damping) / n
    for _ in range(MAX_ITER):
        following = [base] * n
        dangling = 0.0
        for u, targets in enumerate(adjacency):
            if not targets:
                dangling += ranks[u]
                continue
            share = damping * ranks[u] / len(targets)
            for v in targets:
                following[v] += share
        spread = damping * dangling / n
        following = [value + spread for value in following]
        diff = sum(abs(new - old) for new, old in zip(following, ranks))
        ranks = following
        if diff < EPS:
            break

    total = sum(ranks)
    return [value / total for value in ranks]


def top_ranked(ranks: Sequence[float], k: int) -> list[tuple[int, float]]:
    """Return the ``k`` best (1-based vertex, rank) pairs in descending rank order."""
    if k <= 0:
        raise ValueError("O número de vértices a exibir deve ser positivo.")
    if k > len(ranks):
        raise ValueError(
            f"Erro: valor de -k excede o número de vértices no grafo ({len(ranks)})."
        )
    ordered = sorted(enumerate(ranks, start=1), key=lambda pair: pair[1], reverse=True)
    return ordered[:k]


def format_ranking(ranking: Iterable[tuple[int, float]]) -> str:
    """Render one ``Vértice v: rank`` line per entry."""
    return "".join(f"Vértice {vertex}: {rank:g}\n" for vertex, rank in ranking)


def _print_help(path: str) -> None:
    try:
        with open(path, encoding="utf-8") as handle:
            sys.stdout.write(handle.read())
    except OSError:
        print(f"Erro ao abrir arquivo de ajuda: {path}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the PageRank command; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path = ""
    top_k = DEFAULT_TOP_K
    damping = DEFAULT_DAMPING

    position = 0
    while position < len(args):
        arg = args[position]
        has_value = position + 1 < len(args)
        if arg == "-h":
            _print_help(HELP_PATH)
            return 0
        if arg == "-f" and has_value:
            position += 1
            input_path = args[position]
        elif arg == "-d" and has_value:
            position += 1
            try:
                damping = float(args[position])
            except ValueError:
                print(f"Argumento inválido: {args[position]}", file=sys.stderr)
                return 1
            if not 0.0 <= damping <= 1.0:
                print("Fator de amortecimento deve estar entre 0 e 1.", file=sys.stderr)
                return 1
        elif arg == "-k" and has_value:
            position += 1
            try:
                top_k = int(args[position])
            except ValueError:
                print(f"Argumento inválido: {args[position]}", file=sys.stderr)
                return 1
            if top_k <= 0:
                print("O número de vértices a exibir deve ser positivo.", file=sys.stderr)
                return 1
        else:
            print(f"Argumento inválido: {arg}\nUse -h para ajuda.", file=sys.stderr)
            return 1
        position += 1

    if not input_path:
        print("Erro: arquivo de entrada não especificado. Use -f <arquivo>", file=sys.stderr)
        return 1

    try:
        with open(input_path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Erro ao abrir arquivo: {input_path}", file=sys.stderr)
        return 1

    try:
        vertex_count, edges = read_digraph(text)
    except GraphInputError as error:
        print(error, file=sys.stderr)
        return 1

    if top_k > vertex_count:
        print(
            f"Erro: valor de -k excede o número de vértices no grafo ({vertex_count}).",
            file=sys.stderr,
        )
        return 1

    ranks = pagerank(vertex_count, edges, damping)
    sys.stdout.write(format_ranking(top_ranked(ranks, top_k)))
    return 0


if __name__ == "__main__":
    sys.exit(main())