"""
Resolution of dataset directories and default input files.

The CLI accepts either:
  - --graph-name    (e.g., "enron" -> data/enron)
  - --data-location (e.g., "datasets/enron")

or explicit --edges / --mapping paths, which take precedence over the
defaults under the base directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .constants import EDGES_FILENAME, MAPPING_FILENAME


def resolve_base_dir(graph_name: Optional[str], data_location: Optional[str]) -> Optional[Path]:
    """
    Resolve the base directory from either data_location or graph_name.

    Priority:
        1) data_location (explicit path)
        2) graph_name    (joined under data/{graph_name})

    Returns None when neither is given.
    """
    if data_location:
        return Path(data_location).resolve()
    if graph_name:
        return (Path("data") / graph_name).resolve()
    return None


def resolve_edges_path(explicit: Optional[str], base_dir: Optional[Path]) -> Path:
    if explicit:
        return Path(explicit)
    if base_dir is None:
        raise SystemExit("Please provide --edges or --graph-name/--data-location to locate the edge list.")
    return base_dir / EDGES_FILENAME


def resolve_mapping_path(explicit: Optional[str], base_dir: Optional[Path]) -> Optional[Path]:
    """The identity mapping is optional; a missing default file yields None."""
    if explicit:
        return Path(explicit)
    if base_dir is None:
        return None
    candidate = base_dir / MAPPING_FILENAME
    return candidate if candidate.exists() else None
