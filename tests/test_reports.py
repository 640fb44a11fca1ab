import csv
import itertools

import pytest

from netcentral.analytics.connectivity import connectivity_summary
from netcentral.analytics.statistics import summary_statistics
from netcentral.pipeline import run_pipeline
from netcentral.report.csv_export import (
    export_centrality_csv,
    export_components_csv,
    export_kmeans_csv,
)
from netcentral.report.report_basic import node_label, ranked, render_report


@pytest.fixture
def result():
    edges = list(itertools.combinations(range(6), 2)) + [(5, 6), (6, 7), (7, 8), (10, 11)]
    return run_pipeline(edges, top_k=8, k=2)


@pytest.fixture
def identities():
    return {0: ("kenneth.lay@enron.com", "lay-k"), 5: ("jeff.skilling@enron.com", "skilling-j")}


def _read(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def test_node_label(identities):
    assert node_label(0, identities) == "Node 0 (kenneth.lay@enron.com) [lay-k]"
    assert node_label(3, identities) == "Node 3"
    assert node_label(3) == "Node 3"


def test_ranked_breaks_ties_by_id():
    assert ranked({3: 1.0, 1: 1.0, 2: 2.0}, 2) == [(2, 2.0), (1, 1.0)]


def test_centrality_csv(result, identities, tmp_path):
    path = tmp_path / "out" / "centrality.csv"
    export_centrality_csv(result, path, identities)
    rows = _read(path)

    assert [int(r["node"]) for r in rows] == result.subset
    first = rows[0]
    assert int(first["node"]) == 5
    assert first["email"] == "jeff.skilling@enron.com"
    assert int(first["degree"]) == 6
    assert 0 <= int(first["kmeans_cluster"]) < 2


def test_components_csv(result, tmp_path):
    path = tmp_path / "components.csv"
    export_components_csv(result.components, path)
    rows = _read(path)

    assert [int(r["size"]) for r in rows] == [9, 2]
    assert int(rows[0]["leader"]) == 5
    assert rows[0]["email"] == ""


def test_kmeans_csv(result, tmp_path):
    path = tmp_path / "kmeans.csv"
    export_kmeans_csv(result.assignments, path)
    rows = _read(path)

    assert len(rows) == len(result.subset)
    clusters = [int(r["cluster"]) for r in rows]
    assert clusters == sorted(clusters)


def test_render_report(result, identities):
    conn = connectivity_summary(result.components, result.build_stats.n_nodes)
    stats = summary_statistics(
        result.degree,
        result.build_stats.n_edges,
        result.subset,
        result.closeness,
        result.betweenness,
        cluster_sizes=result.kmeans.cluster_sizes(),
    )
    md = render_report(result, conn, stats, identities, title="Test Report", top_n=3)

    assert md.startswith("# Test Report\n")
    assert "## Top Nodes by Betweenness" in md
    assert "1. Node 5 (jeff.skilling@enron.com) [skilling-j]: 6 connections" in md
    assert "Component 1 (9 nodes)" in md
    assert "## K-Means Clusters (k = 2)" in md
    assert "Spearman degree vs betweenness" in md
