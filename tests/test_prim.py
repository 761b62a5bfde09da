import pytest

from graphalgos.dijkstra import GraphInputError
from graphalgos.prim import Graph, SpanningTree, format_tree, help_text, load_graph, main

SAMPLE = ["5 7", "1 2 4", "1 3 1", "3 2 2", "2 4 5", "3 4 8", "4 5 3", "1 5 9"]


def _weights(lines):
    table = {}
    for line in lines[1:]:
        u, v, w = (int(x) for x in line.split())
        table[frozenset((u, v))] = w
    return table


def test_triangle_tree():
    graph = Graph(3)
    graph.add_edge(1, 2, 1)
    graph.add_edge(2, 3, 2)
    graph.add_edge(1, 3, 5)
    tree = graph.prim(1)
    assert tree.total_weight == 3
    assert tree.edges == [(1, 2), (2, 3)]


def test_tree_spans_all_vertices_and_uses_input_edges():
    graph = load_graph(SAMPLE)
    tree = graph.prim(1)
    weights = _weights(SAMPLE)
    assert len(tree.edges) == graph.vertex_count - 1
    covered = {v for edge in tree.edges for v in edge}
    assert covered == set(range(1, graph.vertex_count + 1))
    assert tree.total_weight == sum(weights[frozenset(e)] for e in tree.edges)


@pytest.mark.parametrize("start", [2, 3, 4, 5])
def test_total_weight_independent_of_start(start):
    graph = load_graph(SAMPLE)
    assert graph.prim(start).total_weight == graph.prim(1).total_weight


def test_disconnected_vertex_left_out():
    graph = load_graph(["3 1", "1 2 6"])
    tree = graph.prim(1)
    assert tree.edges == [(1, 2)]
    assert tree.total_weight == 6


def test_add_edge_rejects_out_of_range():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(1, 3, 1)


def test_prim_rejects_bad_start():
    with pytest.raises(ValueError):
        Graph(2).prim(0)


@pytest.mark.parametrize(
    "lines, message",
    [
        ([], "Falha ao ler inputs do usuario"),
        (["a b"], "Falha ao ler definicoes do grafo"),
        (["2 2", "1 2 3"], "O input tem dados faltando"),
        (["2 1", "1 2"], "Falha ao ler valores"),
    ],
)
def test_load_graph_errors(lines, message):
    with pytest.raises(GraphInputError, match=message):
        load_graph(lines)


def test_format_tree_total():
    tree = SpanningTree(total_weight=3, edges=[(1, 2), (2, 3)])
    assert format_tree(tree, False) == "3\n"


def test_format_tree_edges():
    tree = SpanningTree(total_weight=3, edges=[(1, 2), (2, 3)])
    assert format_tree(tree, True) == "(1, 2) (2, 3) \n"


def test_help_text_mentions_solution_flag():
    assert "-s           : Retorna a solucao do algoritmo" in help_text()


def test_main_prints_total(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 0
    expected = format_tree(load_graph(SAMPLE).prim(1), False)
    assert capsys.readouterr().out == expected


def test_main_writes_edges_to_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    assert main(["-f", str(path), "-o", str(out), "-s", "-i", "3"]) == 0
    expected = format_tree(load_graph(SAMPLE).prim(3), True)
    assert out.read_text(encoding="utf-8") == expected


def test_main_without_input_reports_missing_file(capsys):
    assert main([]) == 1
    assert "nao foi encontrado" in capsys.readouterr().out


def test_main_missing_output_value(capsys):
    assert main(["-o"]) == 1
    assert "'-o'" in capsys.readouterr().out


def test_main_bad_header(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("oops\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 1
    assert "Falha ao ler definicoes do grafo" in capsys.readouterr().out