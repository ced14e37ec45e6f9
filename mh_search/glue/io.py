"""Configuration and population loading for the command-line glue layer.

Configuration files are YAML (or JSON); initial DE populations are tables with
one row per individual and one numeric column per dimension, read from CSV or
Parquet with pandas.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import numpy as np
import pandas as pd
import yaml


def load_config(path_yaml: Path) -> Dict:
    """Read a YAML (or JSON) configuration file.

    Parameters
    ----------
    path_yaml:
        Path to the configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Empty files resolve to ``{}``.
    """

    path = Path(path_yaml)
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    if path.suffix.lower() == ".json":
        cfg = json.loads(text)
    else:
        cfg = yaml.safe_load(text)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"configuration root must be a mapping: {path}")
    return cfg


def _read_frame(path_like: Path):
    """Return a Pandas ``DataFrame`` from CSV or Parquet input."""

    path = Path(path_like)
    if path.suffix.lower() in {".parquet", ".pq"}:
        return pd.read_parquet(path)
    return pd.read_csv(path)


def load_population(path_table: Path) -> List[List[float]]:
    """Load an initial population, one individual per row."""

    df = _read_frame(path_table)
    if df.empty:
        raise ValueError(f"empty population table: {path_table}")
    arr = df.to_numpy(dtype=np.float64, copy=True)
    validate_population(arr)
    return arr.tolist()


def validate_population(arr) -> None:
    """Run lightweight shape checks on an initial population."""

    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError("population must have shape (n, dim)")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError("population must have at least one individual and one dimension")
    if not np.all(np.isfinite(arr)):
        raise ValueError("population contains non-finite values")


__all__ = [
    "load_config",
    "load_population",
    "validate_population",
]
