import pytest

from netcentral.loader.edgelist_loader import load_edge_list, load_identity_mapping
from netcentral.utils.errors import GraphInputError

SNAP_HEADER = (
    "# Directed graph (each unordered pair of nodes is saved once): Email-Enron.txt\n"
    "# Enron email network\n"
    "# Nodes: 4 Edges: 6\n"
    "# FromNodeId\tToNodeId\n"
)


def test_load_snap_edge_list(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text(SNAP_HEADER + "0\t1\n1\t0\n\n1 2\n  2\t3  \n", encoding="utf-8")

    assert load_edge_list(path) == [(0, 1), (1, 0), (1, 2), (2, 3)]


def test_edge_list_bad_line_reports_location(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("0\t1\n1\t2\t3\n", encoding="utf-8")

    with pytest.raises(GraphInputError, match=r"edges.txt:2"):
        load_edge_list(path)


def test_edge_list_non_integer(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("0\tx\n", encoding="utf-8")

    with pytest.raises(GraphInputError, match="non-integer"):
        load_edge_list(path)


def test_edge_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_edge_list(tmp_path / "nope.txt")


def test_identity_mapping(tmp_path, capsys):
    path = tmp_path / "email_to_node.csv"
    path.write_text(
        "node_id,email,folder\n"
        "0,phillip.allen@enron.com,allen-p\n"
        "1,john.arnold@enron.com,arnold-j\n"
        "bad,someone@enron.com,x\n"
        "2,short\n",
        encoding="utf-8",
    )

    mapping = load_identity_mapping(path)

    assert mapping == {
        0: ("phillip.allen@enron.com", "allen-p"),
        1: ("john.arnold@enron.com", "arnold-j"),
    }
    assert capsys.readouterr().out.count("[WARN]") == 2
