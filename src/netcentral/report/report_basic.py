# src/netcentral/report/report_basic.py

"""
Markdown report generation.

The report contains:
  - Graph size stats
  - Connectivity summary and component leaders
  - Top-N rankings by degree, closeness and betweenness
  - k-means clusters (sizes, centroids, members preview)
  - Summary statistics

The output is a Markdown-formatted string; no files are written here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..loader.edgelist_loader import Identity
from ..pipeline import AnalysisResult
from ..utils.constants import FEATURE_NAMES


def node_label(node: int, identities: Optional[Dict[int, Identity]] = None) -> str:
    """'Node 42 (alice@enron.com) [alice-a]', or 'Node 42' without a mapping entry."""
    ident = (identities or {}).get(node)
    if ident is None:
        return f"Node {node}"
    email, folder = ident
    return f"Node {node} ({email}) [{folder}]"


def ranked(scores: Dict[int, float], top_n: int) -> List[tuple]:
    """Highest scores first, ties by smallest node id."""
    return sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))[:top_n]


def render_report(
    result: AnalysisResult,
    connectivity: Dict[str, Any],
    statistics: Dict[str, Any],
    identities: Optional[Dict[int, Identity]] = None,
    title: str = "Network Centrality Report",
    top_n: int = 10,
) -> str:
    """
    Produce a Markdown report for one pipeline run.

    Parameters
    ----------
    result : AnalysisResult
        Output of run_pipeline()
    connectivity : Dict[str, Any]
        Output of connectivity_summary()
    statistics : Dict[str, Any]
        Output of summary_statistics()
    identities : Dict[int, Identity], optional
        node → (email, folder) for labelling
    title : str
        Report title
    top_n : int
        Rows per ranking table

    Returns
    -------
    md : str
        Markdown-formatted report
    """
    stats = result.build_stats

    md = f"# {title}\n\n"

    # ---------------------------------------------------------------------
    # Graph build statistics
    # ---------------------------------------------------------------------
    md += "## Graph Statistics\n"
    md += f"- **Nodes**: {stats.n_nodes}\n"
    md += f"- **Edges**: {stats.n_edges}\n"
    md += f"- Input edge lines: {stats.n_input_edges} ({stats.n_duplicates} duplicates)\n"
    if stats.n_self_loops_dropped:
        md += f"- Self-loops dropped: {stats.n_self_loops_dropped}\n"
    md += f"- Centrality subset: {len(result.subset)} nodes (top by degree)\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Connectivity
    # ---------------------------------------------------------------------
    md += "## Connectivity\n"
    md += f"- Connected components: **{connectivity['n_components']}**\n"
    md += f"- Giant component nodes: **{connectivity['giant_nodes']}**\n"
    md += f"- Fraction in giant component: **{connectivity['giant_fraction']:.3f}**\n"
    md += f"- Isolates: {connectivity['n_isolates']}\n"
    md += "\n"

    md += "### Component Leaders by Degree\n"
    for comp in result.components[:top_n]:
        md += (
            f"- Component {comp.cid + 1} ({comp.size} nodes) → "
            f"{node_label(comp.leader, identities)}, degree {comp.leader_degree}\n"
        )
    md += "\n"

    # ---------------------------------------------------------------------
    # Rankings
    # ---------------------------------------------------------------------
    md += "## Top Nodes by Degree\n"
    for i, (node, deg) in enumerate(ranked(result.degree, top_n), start=1):
        md += f"{i}. {node_label(node, identities)}: {deg} connections\n"
    md += "\n"

    md += "## Top Nodes by Closeness\n"
    for i, (node, score) in enumerate(ranked(result.closeness, top_n), start=1):
        md += f"{i}. {node_label(node, identities)}: {score:.5f}\n"
    md += "\n"

    md += "## Top Nodes by Betweenness\n"
    for i, (node, score) in enumerate(ranked(result.betweenness, top_n), start=1):
        md += f"{i}. {node_label(node, identities)}: {score:.5f}\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # k-means
    # ---------------------------------------------------------------------
    km = result.kmeans
    md += f"## K-Means Clusters (k = {len(km.centroids)})\n"
    md += f"- Iterations: {km.n_iter} (converged: {'yes' if km.converged else 'no'})\n"
    md += f"- Inertia: {km.inertia:.5f}\n\n"

    md += "| Cluster | Size | " + " | ".join(FEATURE_NAMES) + " |\n"
    md += "|---|---|" + "---|" * len(FEATURE_NAMES) + "\n"
    sizes = km.cluster_sizes()
    for cid, centroid in enumerate(km.centroids):
        cells = " | ".join(f"{x:.3f}" for x in centroid)
        md += f"| {cid} | {sizes[cid]} | {cells} |\n"
    md += "\n"

    for cid in range(len(km.centroids)):
        members = sorted(
            (n for n, c in km.assignments.items() if c == cid),
            key=lambda n: (-result.degree[n], n),
        )
        md += f"### Cluster {cid}\n"
        if not members:
            md += "_Empty._\n\n"
            continue
        for node in members[:top_n]:
            md += f"- {node_label(node, identities)}\n"
        if len(members) > top_n:
            md += f"- … {len(members) - top_n} more\n"
        md += "\n"

    # ---------------------------------------------------------------------
    # Statistics
    # ---------------------------------------------------------------------
    md += "## Statistics\n"
    dd = statistics.get("degree_distribution", {})
    if "mean" in dd:
        md += (
            f"- Degree mean / median / max: {dd['mean']:.2f} / {dd['median']:.1f} / {dd['max']}\n"
        )
    for name, corr in statistics.get("centrality_correlations", {}).items():
        if isinstance(corr, dict) and "correlation" in corr:
            label = name.replace("_", " vs ")
            md += f"- Spearman {label}: {corr['correlation']:.3f} (p = {corr['p_value']:.2g})\n"
    md += "\n"

    return md
