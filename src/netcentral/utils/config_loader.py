from __future__ import annotations

"""
Config loading utilities for per-dataset analysis runs.

This module reads an optional configuration file from:

    data/{graph}/config/analysis.ini

and exposes an AnalysisConfig with defaults from utils.constants. The format
is intentionally lightweight, one "key: value" pair per line:

    # analysis.ini
    top_k: 1000
    clusters: 5
    max_iters: 100
    report_top: 10
    jobs: 4
    init: farthest
    drop_self_loops: false

Command-line flags override values read from the file.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    CONFIG_FILENAME,
    KMEANS_INIT_DEFAULT,
    KMEANS_INITS,
    MAX_ITERS_DEFAULT,
    N_CLUSTERS_DEFAULT,
    N_JOBS_DEFAULT,
    REPORT_TOP_DEFAULT,
    TOP_K_DEFAULT,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters of one pipeline run."""

    top_k: int = TOP_K_DEFAULT
    clusters: int = N_CLUSTERS_DEFAULT
    max_iters: int = MAX_ITERS_DEFAULT
    report_top: int = REPORT_TOP_DEFAULT
    jobs: int = N_JOBS_DEFAULT
    init: str = KMEANS_INIT_DEFAULT
    drop_self_loops: bool = False

    def with_overrides(self, **overrides: Any) -> "AnalysisConfig":
        """Return a copy with every non-None override applied, then validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return validate_config(replace(self, **changes))


_INT_KEYS = {"top_k", "clusters", "max_iters", "report_top", "jobs"}
_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}


def _coerce(key: str, raw: str) -> Any:
    if key in _INT_KEYS:
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None
    if key == "drop_self_loops":
        low = raw.lower()
        if low in _BOOL_TRUE:
            return True
        if low in _BOOL_FALSE:
            return False
        raise ConfigurationError(f"drop_self_loops must be a boolean, got {raw!r}")
    return raw


def validate_config(cfg: AnalysisConfig) -> AnalysisConfig:
    """Reject values no pipeline run can use."""
    for key in ("top_k", "clusters", "max_iters", "report_top", "jobs"):
        if getattr(cfg, key) < 1:
            raise ConfigurationError(f"{key} must be >= 1, got {getattr(cfg, key)}")
    if cfg.init not in KMEANS_INITS:
        raise ConfigurationError(f"init must be one of {KMEANS_INITS}, got {cfg.init!r}")
    return cfg


def parse_config_text(text: str, source: str = "<string>") -> Dict[str, Any]:
    """
    Parse "key: value" lines into a dict of typed values.
    Lines support comments (#); unknown keys are skipped with a warning.
    """
    known = {f.name for f in fields(AnalysisConfig)}
    values: Dict[str, Any] = {}

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if ":" not in line:
            print(f"[WARN] Skipping invalid {source} line (missing ':'): {raw}")
            continue

        left, right = line.split(":", 1)
        key = left.strip().replace("-", "_")
        value = right.split("#", 1)[0].strip()

        if key not in known:
            print(f"[WARN] Skipping unknown {source} key: {key}")
            continue
        if not value:
            print(f"[WARN] Skipping {source} line with empty value: {raw}")
            continue

        values[key] = _coerce(key, value)

    return values


def load_analysis_config(base_dir: Optional[Path]) -> AnalysisConfig:
    """
    Load the analysis configuration for a dataset base directory.

    Parameters
    ----------
    base_dir : Path or None
        Typically data/{graph-name}. None (or a missing file) yields defaults.
    """
    if base_dir is None:
        return AnalysisConfig()

    path = base_dir / "config" / CONFIG_FILENAME
    if not path.exists():
        print(f"[INFO] No {CONFIG_FILENAME} found at {path} – using defaults.")
        return AnalysisConfig()

    values = parse_config_text(path.read_text(encoding="utf-8"), source=CONFIG_FILENAME)
    return validate_config(AnalysisConfig(**values))
