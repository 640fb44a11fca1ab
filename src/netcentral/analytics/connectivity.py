# src/netcentral/analytics/connectivity.py

"""
Connectivity analysis utilities.

This module provides tools for:
  - partitioning the graph into connected components
  - choosing a leader (max-degree member) for each component
  - summarizing graph connectivity statistics

Purely analytical: no visualization, no CLI, no file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Set, Tuple, Union

import networkx as nx

from ..build.graph_builder import build_graph


@dataclass(frozen=True)
class Component:
    cid: int
    members: FrozenSet[int]
    leader: int
    leader_degree: int

    @property
    def size(self) -> int:
        return len(self.members)


def find_clusters(G: Union[nx.Graph, Iterable[Tuple[int, int]]]) -> List[Set[int]]:
    """
    Partition G into connected components.

    Isolated nodes become singleton components, so the components cover
    every node exactly once.

    Parameters
    ----------
    G : nx.Graph or Iterable[Tuple[int, int]]
        A graph from build_graph(), or a raw edge list that is built first.

    Returns
    -------
    List[Set[int]]
        Components ordered by smallest member.
    """
    if not isinstance(G, nx.Graph):
        G, _ = build_graph(G)

    return sorted((set(c) for c in nx.connected_components(G)), key=min)


def cluster_leaders(
    clusters: List[Set[int]],
    degree: Dict[int, int],
) -> List[Component]:
    """
    Attach a leader to each component and number them.

    The leader is the member with the highest degree, ties broken by the
    smallest id. Components are numbered by descending size, then by
    smallest member.
    """
    ordered = sorted(clusters, key=lambda c: (-len(c), min(c)))

    components: List[Component] = []
    for cid, members in enumerate(ordered):
        leader = min(members, key=lambda n: (-degree.get(n, 0), n))
        components.append(
            Component(
                cid=cid,
                members=frozenset(members),
                leader=leader,
                leader_degree=degree.get(leader, 0),
            )
        )

    return components


def connectivity_summary(components: List[Component], n_nodes: int) -> Dict[str, Any]:
    """
    Compute high-level connectivity statistics.

    Parameters
    ----------
    components : List[Component]
        Output of cluster_leaders(), largest first.
    n_nodes : int
        Size of the node universe.

    Returns
    -------
    Dict[str, Any]
        {
            "n_components"   : int,
            "giant_nodes"    : int,
            "giant_fraction" : float,
            "giant_leader"   : int | None,
            "n_isolates"     : int,
            "isolates"       : List[int]   (preview only)
        }
    """
    if not components or n_nodes == 0:
        return {
            "n_components": 0,
            "giant_nodes": 0,
            "giant_fraction": 0.0,
            "giant_leader": None,
            "n_isolates": 0,
            "isolates": [],
        }

    giant = max(components, key=lambda c: (c.size, -c.cid))
    isolates = sorted(c.leader for c in components if c.size == 1)

    return {
        "n_components": len(components),
        "giant_nodes": giant.size,
        "giant_fraction": giant.size / n_nodes,
        "giant_leader": giant.leader,
        "n_isolates": len(isolates),
        "isolates": isolates[:50],
    }
