import json
from pathlib import Path

import numpy as np
import pytest

from mh_search.glue.io import load_config, load_population, validate_population


def test_load_config_yaml(tmp_path):
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("seed: 7\nparams:\n  sa_temp0: 12.5\n", encoding="utf-8")

    cfg = load_config(cfg_path)
    assert cfg["seed"] == 7
    assert cfg["params"]["sa_temp0"] == 12.5


def test_load_config_json(tmp_path):
    cfg_path = tmp_path / "cfg.json"
    cfg = {"seed": 5, "algorithm": "tabu_search"}
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")

    loaded = load_config(cfg_path)
    assert loaded == cfg


def test_load_config_empty_and_missing(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == {}

    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_rejects_non_mapping(tmp_path):
    cfg_path = tmp_path / "list.yaml"
    cfg_path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def _write_population(tmp_path: Path):
    path = tmp_path / "population.csv"
    path.write_text(
        """x0,x1,x2
0.5,1.0,-2.0
3.0,0.0,1.5
-1.0,-1.0,4.0
""",
        encoding="utf-8",
    )
    return path


def test_load_population(tmp_path):
    pop = load_population(_write_population(tmp_path))

    assert len(pop) == 3
    assert all(len(ind) == 3 for ind in pop)
    assert pop[1] == pytest.approx([3.0, 0.0, 1.5])
    assert isinstance(pop[0], list)


def test_validate_population_failure():
    with pytest.raises(ValueError):
        validate_population(np.zeros(3))
    with pytest.raises(ValueError):
        validate_population(np.array([[1.0, np.nan]]))
    with pytest.raises(ValueError):
        validate_population(np.zeros((0, 2)))
