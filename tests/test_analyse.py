import itertools

import pytest

from netcentral.analyse import main


@pytest.fixture
def dataset(tmp_path):
    base = tmp_path / "enron"
    (base / "config").mkdir(parents=True)
    edges = list(itertools.combinations(range(6), 2)) + [(5, 6), (6, 7), (7, 8), (10, 11)]
    lines = ["# FromNodeId\tToNodeId"] + [f"{u}\t{v}" for u, v in edges]
    (base / "edges.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")
    (base / "email_to_node.csv").write_text(
        "node_id,email,folder\n5,jeff.skilling@enron.com,skilling-j\n", encoding="utf-8"
    )
    (base / "config" / "analysis.ini").write_text("top_k: 8\nclusters: 2\n", encoding="utf-8")
    return base


def test_cli_writes_outputs(dataset, capsys):
    main(["--data-location", str(dataset), "--report-top", "3"])

    out = capsys.readouterr().out
    assert "Top 3 by Degree Centrality" in out
    assert "Node 5 (jeff.skilling@enron.com) [skilling-j]: 6 connections" in out
    assert "K-Means Clustering (2 clusters" in out

    analysis = dataset / "analysis"
    for name in ("centrality.csv", "components.csv", "kmeans_clusters.csv", "report.md"):
        assert (analysis / name).exists()
    assert "enron Network Centrality Report" in (analysis / "report.md").read_text(encoding="utf-8")


def test_cli_flags_override_config(dataset, tmp_path):
    outdir = tmp_path / "out"
    main(["--data-location", str(dataset), "--outdir", str(outdir), "--top-k", "4"])

    lines = (outdir / "centrality.csv").read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1 + 4


def test_cli_reports_configuration_errors(dataset):
    with pytest.raises(SystemExit, match="exceeds"):
        main(["--data-location", str(dataset), "--top-k", "2", "--clusters", "3"])


def test_cli_missing_edges(tmp_path):
    with pytest.raises(SystemExit):
        main(["--edges", str(tmp_path / "missing.txt"), "--outdir", str(tmp_path / "out")])
    assert not (tmp_path / "out").exists()


def test_cli_failed_pipeline_leaves_no_outdir(dataset, tmp_path):
    outdir = tmp_path / "out"
    with pytest.raises(SystemExit, match="exceeds"):
        main(["--data-location", str(dataset), "--outdir", str(outdir), "--top-k", "2", "--clusters", "3"])
    assert not outdir.exists()
