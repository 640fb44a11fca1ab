# src/netcentral/utils/constants.py

"""
Shared defaults for the analysis pipeline and the CLI.
"""

from __future__ import annotations

# Nodes (by degree) that receive closeness / betweenness
TOP_K_DEFAULT = 1000

# k-means
N_CLUSTERS_DEFAULT = 5
MAX_ITERS_DEFAULT = 100
KMEANS_INITS = ("farthest", "first")
KMEANS_INIT_DEFAULT = "farthest"

# Rows per ranking in console output and reports
REPORT_TOP_DEFAULT = 10

# Worker processes for the per-source BFS passes (1 = inline)
N_JOBS_DEFAULT = 1

# Names of the feature dimensions, in vector order
FEATURE_NAMES = ("degree", "closeness", "betweenness")

# Default file names under data/{graph}/
EDGES_FILENAME = "edges.txt"
MAPPING_FILENAME = "email_to_node.csv"
CONFIG_FILENAME = "analysis.ini"
