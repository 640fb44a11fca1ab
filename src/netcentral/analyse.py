#!/usr/bin/env python3
"""
Network Centrality & Clustering
-------------------------------------------------------
Loads an undirected edge list (SNAP format), computes degree centrality for
every node, closeness and betweenness for the top-k nodes by degree,
connected components with their leaders, and k-means clusters over the
normalized (degree, closeness, betweenness) features. Prints top-N rankings
and exports CSVs plus a Markdown report. Configurable via CLI and an
optional data/{graph}/config/analysis.ini.
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Dict, Optional

from .analytics.connectivity import connectivity_summary
from .analytics.statistics import summary_statistics
from .loader.edgelist_loader import Identity, load_edge_list, load_identity_mapping
from .pipeline import run_pipeline
from .report.csv_export import export_centrality_csv, export_components_csv, export_kmeans_csv
from .report.report_basic import node_label, ranked, render_report
from .utils.config_loader import load_analysis_config
from .utils.constants import KMEANS_INITS
from .utils.errors import NetcentralError
from .utils.paths import resolve_base_dir, resolve_edges_path, resolve_mapping_path


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Centrality and clustering analysis of an undirected graph.")
    p.add_argument(
        "--edges",
        help="Edge list file. If omitted, defaults to {base}/edges.txt when --graph-name/--data-location is provided.",
    )
    p.add_argument(
        "--mapping",
        help="Optional CSV mapping node_id,email,folder used to label nodes (default: {base}/email_to_node.csv if present).",
    )
    p.add_argument(
        "--graph-name",
        help="Graph/dataset name (uses data/{graph-name} as base).",
    )
    p.add_argument(
        "--data-location",
        help="Explicit data directory (overrides --graph-name).",
    )
    p.add_argument(
        "--outdir",
        help="Output directory (default: {base}/analysis when graph/data specified, else data/analysis)",
    )
    p.add_argument(
        "--n-nodes",
        type=int,
        default=None,
        help="Size of the node universe; ids must lie in [0, n). Default: ids seen in the edge list.",
    )
    p.add_argument("--top-k", type=int, help="Nodes (by degree) that get closeness/betweenness/k-means")
    p.add_argument("--clusters", type=int, help="Number of k-means clusters")
    p.add_argument("--max-iters", type=int, help="k-means iteration cap")
    p.add_argument("--report-top", type=int, help="Rows per ranking in console output and report")
    p.add_argument("--jobs", type=int, help="Worker processes for closeness/betweenness")
    p.add_argument("--init", choices=KMEANS_INITS, help="k-means seeding strategy")
    p.add_argument(
        "--drop-self-loops",
        action="store_true",
        default=None,
        help="Skip self-loop edges instead of rejecting the input",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return p.parse_args(argv)


def _print_top(title: str, rows, identities: Optional[Dict[int, Identity]], fmt: str) -> None:
    print(f"\n🏆 {title}:")
    for i, (node, score) in enumerate(rows, start=1):
        print(f"{i:>2}. {node_label(node, identities)}: {fmt.format(score)}")


# ──────────────────────────────────────────────────────────────────────────────
# Main orchestration
# ──────────────────────────────────────────────────────────────────────────────


def run(args: argparse.Namespace) -> None:
    base_dir = resolve_base_dir(args.graph_name, args.data_location)
    edges_path = resolve_edges_path(args.edges, base_dir)
    mapping_path = resolve_mapping_path(args.mapping, base_dir)

    outdir = Path(args.outdir) if args.outdir else (base_dir / "analysis" if base_dir else Path("data/analysis"))

    cfg = load_analysis_config(base_dir).with_overrides(
        top_k=args.top_k,
        clusters=args.clusters,
        max_iters=args.max_iters,
        report_top=args.report_top,
        jobs=args.jobs,
        init=args.init,
        drop_self_loops=args.drop_self_loops,
    )

    start_time = time.time()

    print(f"📥 Loading edges from {edges_path}")
    edges = load_edge_list(edges_path)
    identities: Dict[int, Identity] = {}
    if mapping_path is not None:
        print(f"📥 Loading identity mapping from {mapping_path}")
        identities = load_identity_mapping(mapping_path)

    print("🧱 Building graph and computing centralities …")
    result = run_pipeline(
        edges,
        n_nodes=args.n_nodes,
        top_k=cfg.top_k,
        k=cfg.clusters,
        max_iters=cfg.max_iters,
        n_jobs=cfg.jobs,
        drop_self_loops=cfg.drop_self_loops,
        init=cfg.init,
    )
    stats = result.build_stats
    print(f"✅ Graph built: {stats.n_nodes} nodes, {stats.n_edges} edges ({stats.n_duplicates} duplicate lines)")

    top = cfg.report_top
    print(f"\n🏆 Top {top} by Degree Centrality:")
    for i, (node, deg) in enumerate(ranked(result.degree, top), start=1):
        print(f"{i:>2}. {node_label(node, identities)}: {deg} connections")

    _print_top(f"Top {top} by Closeness Centrality", ranked(result.closeness, top), identities, "{:.5f}")
    _print_top(
        f"Top {top} by Betweenness Centrality (top {len(result.subset)} nodes only)",
        ranked(result.betweenness, top),
        identities,
        "{:.5f}",
    )

    conn = connectivity_summary(result.components, stats.n_nodes)
    print(
        f"\n🔗 Components: {conn['n_components']} | "
        f"Giant: {conn['giant_nodes']} ({conn['giant_fraction']:.2%}) | "
        f"Isolates: {conn['n_isolates']}"
    )
    print("\n🏆 Cluster Leaders by Degree:")
    for comp in result.components[:top]:
        print(
            f"🧩 Cluster {comp.cid + 1} ({comp.size} nodes) → "
            f"{node_label(comp.leader, identities)}, Degree: {comp.leader_degree}"
        )

    km = result.kmeans
    sizes = km.cluster_sizes()
    print(f"\n🕸️ K-Means Clustering ({cfg.clusters} clusters, {km.n_iter} iterations):")
    for cid, size in enumerate(sizes):
        print(f"   Cluster {cid}: {size} nodes")

    statistics = summary_statistics(
        result.degree,
        stats.n_edges,
        result.subset,
        result.closeness,
        result.betweenness,
        cluster_sizes=sizes,
    )

    # CSV exports
    outdir.mkdir(parents=True, exist_ok=True)
    export_centrality_csv(result, outdir / "centrality.csv", identities)
    export_components_csv(result.components, outdir / "components.csv", identities)
    export_kmeans_csv(result.assignments, outdir / "kmeans_clusters.csv", identities)

    # Markdown report
    print("📝 Rendering report …")
    label = base_dir.name if base_dir else edges_path.stem
    report_md = render_report(
        result,
        connectivity=conn,
        statistics=statistics,
        identities=identities,
        title=f"{label} Network Centrality Report",
        top_n=top,
    )
    report_path = outdir / "report.md"
    report_path.write_text(report_md, encoding="utf-8")
    print(f"📄 Saved report → {report_path}")

    elapsed = time.time() - start_time
    print(f"⏱️ Total execution time: {elapsed:.1f}s")


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        run(args)
    except (NetcentralError, FileNotFoundError) as e:
        raise SystemExit(f"❌ {e}") from e


if __name__ == "__main__":
    main()
