"""Tests for CSV and graph6 serialization."""
import os

import pytest

from cospectraltools.graph import SimpleGraph
from cospectraltools.io.csv_matrix import (
    csv_to_graph,
    graph_to_csv,
    load_csv,
    load_csv_dir,
    save_csv,
    save_csv_many,
)
from cospectraltools.io.graph6 import g6_to_graph, graph_to_g6


def test_csv_format_p3():
    G = SimpleGraph.from_edges([(0, 1), (1, 2)], 3)
    assert graph_to_csv(G) == "0,1,0\n1,0,1\n0,1,0"


def test_save_csv_no_trailing_newline(tmp_path):
    path = tmp_path / "k3.csv"
    save_csv(SimpleGraph.complete(3), str(path))
    assert path.read_text() == "0,1,1\n1,0,1\n1,1,0"


def test_load_csv(tmp_path):
    path = tmp_path / "g.csv"
    path.write_text("0,1,0,0\n1,0,1,1\n0,1,0,0\n0,1,0,0")
    G = load_csv(str(path))
    assert G.edges() == [(0, 1), (1, 2), (1, 3)]


def test_load_csv_tolerates_trailing_newline():
    assert csv_to_graph("0,1\n1,0\n") == SimpleGraph.complete(2)


def test_csv_rejects_asymmetric():
    with pytest.raises(ValueError):
        csv_to_graph("0,1\n0,0")


def test_csv_rejects_non_binary():
    with pytest.raises(ValueError):
        csv_to_graph("0,2\n2,0")


def test_csv_rejects_garbage():
    with pytest.raises(ValueError):
        csv_to_graph("0,x\n1,0")


def test_csv_rejects_ragged():
    with pytest.raises(ValueError):
        csv_to_graph("0,1,0\n1,0")


def test_save_many_and_load_dir(tmp_path):
    graphs = [SimpleGraph.cycle(k) for k in range(3, 15)]
    paths = save_csv_many(graphs, str(tmp_path / "out"), "cyc")
    assert os.path.basename(paths[0]) == "cyc1.csv"
    assert os.path.basename(paths[-1]) == "cyc12.csv"
    # cyc10.csv must sort after cyc9.csv
    assert load_csv_dir(str(tmp_path / "out"), "cyc") == graphs


def test_load_dir_ignores_other_prefixes(tmp_path):
    save_csv_many([SimpleGraph.complete(2)], str(tmp_path), "a")
    save_csv_many([SimpleGraph.complete(3)], str(tmp_path), "b")
    assert load_csv_dir(str(tmp_path), "b") == [SimpleGraph.complete(3)]


def test_graph6_triangle():
    assert graph_to_g6(SimpleGraph.complete(3)) == "Bw"
    assert g6_to_graph("Bw") == SimpleGraph.complete(3)


def test_graph6_header_and_newline():
    assert g6_to_graph(">>graph6<<Bw\n") == SimpleGraph.complete(3)
    assert g6_to_graph("Bw\n") == SimpleGraph.complete(3)


def test_graph6_path_roundtrip_keeps_labels():
    P = SimpleGraph.from_edges([(0, 1), (1, 2), (2, 3)], 4)
    assert g6_to_graph(graph_to_g6(P)) == P
