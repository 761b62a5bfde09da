import pytest

from graphalgos.dijkstra import (
    GraphInputError,
    format_distances,
    help_text,
    main,
    read_weighted_graph,
    shortest_distances,
)

SAMPLE = ["5 6", "1 2 4", "1 3 1", "3 2 2", "2 4 5", "3 4 8", "4 5 3"]


def test_read_builds_undirected_adjacency():
    graph = read_weighted_graph(["3 2", "1 2 4", "2 3 5"])
    assert graph == [[(1, 4)], [(0, 4), (2, 5)], [(1, 5)]]


@pytest.mark.parametrize(
    "lines, message",
    [
        ([], "Falha ao ler inputs do usuario"),
        (["x y"], "Falha ao ler definicoes do grafo"),
        (["3"], "Falha ao ler definicoes do grafo"),
        (["2 2", "1 2 3"], "O input tem dados faltando"),
        (["2 1", "1 two 3"], "Falha ao ler valores"),
    ],
)
def test_read_errors(lines, message):
    with pytest.raises(GraphInputError, match=message):
        read_weighted_graph(lines)


def test_read_rejects_vertex_out_of_range():
    with pytest.raises(GraphInputError):
        read_weighted_graph(["2 1", "1 3 4"])


def test_single_edge_distance_is_weight():
    graph = read_weighted_graph(["2 1", "1 2 7"])
    assert shortest_distances(graph, 0) == [0, 7]
    assert shortest_distances(graph, 1) == [7, 0]


def test_prefers_cheaper_indirect_path():
    graph = read_weighted_graph(["3 3", "1 2 10", "1 3 1", "3 2 2"])
    assert shortest_distances(graph, 0) == [0, 3, 1]


def test_unreachable_vertex_is_none():
    graph = read_weighted_graph(["3 1", "1 2 4"])
    distances = shortest_distances(graph, 0)
    assert distances[2] is None
    assert distances[:2] == [0, 4]


def test_distances_satisfy_edge_relaxation():
    graph = read_weighted_graph(SAMPLE)
    distances = shortest_distances(graph, 0)
    assert distances[0] == 0
    for u, neighbours in enumerate(graph):
        for v, weight in neighbours:
            assert distances[v] <= distances[u] + weight


def test_distances_are_symmetric():
    graph = read_weighted_graph(SAMPLE)
    table = [shortest_distances(graph, s) for s in range(len(graph))]
    for a in range(len(graph)):
        for b in range(len(graph)):
            assert table[a][b] == table[b][a]


def test_source_out_of_range():
    graph = read_weighted_graph(["2 1", "1 2 1"])
    with pytest.raises(ValueError):
        shortest_distances(graph, 2)


def test_format_distances():
    assert format_distances([0, 5, None]) == "1:0 2:5 3:-1 \n"


def test_help_text_lists_options():
    text = help_text()
    assert "-f <arquivo>" in text
    assert "-i <vertice>" in text


def test_main_writes_stdout(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 0
    expected = format_distances(shortest_distances(read_weighted_graph(SAMPLE), 0))
    assert capsys.readouterr().out == expected


def test_main_writes_output_file_with_initial_vertex(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    assert main(["-f", str(path), "-o", str(out), "-i", "4"]) == 0
    expected = format_distances(shortest_distances(read_weighted_graph(SAMPLE), 3))
    assert out.read_text(encoding="utf-8") == expected


def test_main_requires_input(capsys):
    assert main([]) == 1
    assert "-f <arquivo>" in capsys.readouterr().out


def test_main_missing_flag_value(capsys):
    assert main(["-f"]) == 1
    assert "'-f'" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "absent.txt")]) == 1
    assert "nao foi encontrado" in capsys.readouterr().out


def test_main_bad_graph(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("3 2\n1 2 4\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 1
    assert "O input tem dados faltando" in capsys.readouterr().out


def test_main_initial_vertex_out_of_range(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("2 1\n1 2 4\n", encoding="utf-8")
    assert main(["-f", str(path), "-i", "9"]) == 1