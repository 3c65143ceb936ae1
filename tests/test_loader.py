import networkx as nx
import pytest

from graph.loader import load_adjacency_csv, iter_graph_files, load_demo_graph, MalformedGraph


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_matrix(tmp_path):
    p = write(tmp_path / "path.csv", ",A,B,C\nA,0,1,0\nB,1,0,1\nC,0,1,0\n")
    G = load_adjacency_csv(p)
    assert sorted(G.nodes()) == [0, 1, 2]
    assert sorted(tuple(sorted(e)) for e in G.edges()) == [(0, 1), (1, 2)]
    assert G.graph["labels"] == ["A", "B", "C"]


def test_one_sided_entry_is_an_edge(tmp_path):
    p = write(tmp_path / "g.csv", " ,x, y,z\nx, 0, 0, 1\ny, 0, 0, 0\nz, 0, 0, 0\n")
    G = load_adjacency_csv(p)
    assert list(G.edges()) == [(0, 2)]
    assert G.number_of_nodes() == 3


@pytest.mark.parametrize("text", [
    ",A,B\nA,0,2\nB,1,0\n",
    ",A,B\nA,1,1\nB,1,0\n",
    ",A,B,C\nA,0,1,0\nB,1,0,1\n",
    "",
    ",A,A\nA,0,1\nA,1,0\n",
    ",A,\nA,0,1\nB,1,0\n",
])
def test_rejects_malformed(tmp_path, text):
    p = write(tmp_path / "bad.csv", text)
    with pytest.raises(MalformedGraph):
        load_adjacency_csv(p)


def test_iter_graph_files(tmp_path):
    for name in ["b.csv", "a.csv", "notes.txt"]:
        write(tmp_path / name, ",A\nA,0\n")
    assert [p.name for p in iter_graph_files(tmp_path)] == ["a.csv", "b.csv"]
    assert [p.name for p in iter_graph_files(tmp_path / "b.csv")] == ["b.csv"]
    with pytest.raises(FileNotFoundError):
        list(iter_graph_files(tmp_path / "missing"))


def test_demo_graph_is_connected():
    assert nx.is_connected(load_demo_graph(seed=3))


def test_rejects_invalid_utf8(tmp_path):
    p = tmp_path / "binary.csv"
    p.write_bytes(b",A,B\nA,0,1\nB,1,\xff\xfe0\n")
    with pytest.raises(MalformedGraph):
        load_adjacency_csv(p)


def test_labels_kept_as_written(tmp_path):
    p = write(tmp_path / "g.csv", ",A.1,A\nA.1,0,1\nA,1,0\n")
    assert load_adjacency_csv(p).graph["labels"] == ["A.1", "A"]
