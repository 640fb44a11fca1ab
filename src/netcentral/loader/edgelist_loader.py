# src/netcentral/loader/edgelist_loader.py

"""
Input loading utilities.

This module loads:
1. A SNAP-style edge list: "# ..." comment header, then one
   "<FromNodeId><TAB><ToNodeId>" pair per line (any whitespace accepted).
2. An optional identity mapping CSV with a header row:
       node_id,email,folder
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Tuple

from ..utils.errors import GraphInputError

Identity = Tuple[str, str]


def load_edge_list(path: Path) -> List[Tuple[int, int]]:
    """
    Read integer edge pairs; comment (#) and blank lines are skipped.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    GraphInputError
        On a line that is not exactly two integers.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            if len(parts) != 2:
                raise GraphInputError(f"{path}:{lineno}: expected 2 node ids, got {len(parts)}")
            try:
                edges.append((int(parts[0]), int(parts[1])))
            except ValueError:
                raise GraphInputError(f"{path}:{lineno}: non-integer node id in {line!r}") from None

    return edges


def load_identity_mapping(path: Path) -> Dict[int, Identity]:
    """
    Read node id -> (email, folder).

    Rows with fewer than three columns or a non-integer id are skipped
    with a warning.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    mapping: Dict[int, Identity] = {}
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row in reader:
            if len(row) < 3:
                if row:
                    print(f"[WARN] Skipping short mapping row: {row}")
                continue
            try:
                node = int(row[0].strip())
            except ValueError:
                print(f"[WARN] Skipping mapping row with invalid id: {row}")
                continue
            mapping[node] = (row[1].strip(), row[2].strip())

    return mapping
