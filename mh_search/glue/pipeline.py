"""Command line pipeline running a configured strategy on a benchmark problem."""

from __future__ import annotations

import json
from functools import partial
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..config.config import DEFAULTS
from ..config.enums import (
    ALG_BEST_IMPROVING,
    ALG_DE,
    ALG_FIRST_IMPROVING,
    ALG_RANDOM,
    ALG_SA,
    ALG_STOCHASTIC,
    ALG_TABU,
    CX_BINOMIAL,
    CX_EXPONENTIAL,
    CX_NONE,
    SEL_BEST,
    SEL_CURRENT_TO_BEST,
    SEL_CURRENT_TO_RANDOM,
    SEL_RANDOM,
    TRAJECTORY_ALGS,
)
from ..data.benchmarks import (
    bitstring_problem,
    continuous_problem,
    identity_trait,
    parabola_problem,
    random_population,
)
from ..engine.acceptance import geometric_cooling
from ..engine.evolution import DifferentialEvolution, evolution
from ..engine.trajectory import search
from ..logging.metrics import Metrics, save_metrics_json, save_solution_csv
from ..operators.evolution import (
    Best,
    Binomial,
    CurrentToBest,
    CurrentToRandom,
    Exponential,
    NoCrossover,
    Random,
)
from ..operators.trajectory import (
    BestImproving,
    FirstImproving,
    IterativeImprovement,
    RandomSearch,
    SimulatedAnnealing,
    Stochastic,
    TabuSearch,
)
from .io import load_config, load_population

SELECTIONS = {
    SEL_RANDOM: Random,
    SEL_BEST: Best,
    SEL_CURRENT_TO_RANDOM: CurrentToRandom,
    SEL_CURRENT_TO_BEST: CurrentToBest,
}

CROSSOVERS = {
    CX_NONE: NoCrossover,
    CX_BINOMIAL: Binomial,
    CX_EXPONENTIAL: Exponential,
}


def _resolve(base: Path, maybe_path: Optional[str]) -> Optional[Path]:
    if maybe_path is None:
        return None
    return (base / maybe_path).resolve()


def build_params(cfg: Dict[str, Any]) -> Dict[str, Any]:
    params = DEFAULTS.copy()
    params.update(cfg.get("params", {}))
    for key in ("algorithm", "problem"):
        if key in cfg:
            params[key] = cfg[key]
    if "iters" in cfg:
        params["generation_limit"] = int(cfg["iters"])
    if "log_period" in cfg:
        params["log_period"] = int(cfg["log_period"])
    return params


def build_strategy(params: Dict[str, Any]):
    """Instantiate the trajectory strategy or DE config named in ``params``."""

    alg = params["algorithm"]
    if alg == ALG_BEST_IMPROVING:
        return IterativeImprovement(BestImproving())
    if alg == ALG_FIRST_IMPROVING:
        return IterativeImprovement(FirstImproving())
    if alg == ALG_STOCHASTIC:
        return IterativeImprovement(Stochastic())
    if alg == ALG_SA:
        return SimulatedAnnealing(
            float(params["sa_temp0"]),
            int(params["sa_epoch_length"]),
            partial(geometric_cooling, rate=float(params["sa_cooling"])),
        )
    if alg == ALG_TABU:
        return TabuSearch(
            int(params["tabu_length"]),
            identity_trait,
            on_exhaustion=params["tabu_on_exhaustion"],
        )
    if alg == ALG_RANDOM:
        return RandomSearch()
    if alg == ALG_DE:
        sel = params["de_selection"]
        cx = params["de_crossover"]
        if sel not in SELECTIONS:
            raise ValueError(f"unknown DE selection {sel!r}; expected one of {sorted(SELECTIONS)}")
        if cx not in CROSSOVERS:
            raise ValueError(f"unknown DE crossover {cx!r}; expected one of {sorted(CROSSOVERS)}")
        return DifferentialEvolution(
            crossover_rate=float(params["de_crossover_rate"]),
            current_factor=float(params["de_current_factor"]),
            scaling_factor=float(params["de_scaling_factor"]),
            num_of_diff_vectors=int(params["de_diff_vectors"]),
            selection_strategy=SELECTIONS[sel](),
            crossover_strategy=CROSSOVERS[cx](),
            max_retries=int(params["de_max_retries"]),
            discard_trial=bool(params["de_discard_trial"]),
        )
    raise ValueError(f"unknown algorithm {alg!r}")


def _trajectory_start(params, rng):
    name = params["problem"]
    limit = int(params["generation_limit"])
    if name == "parabola":
        return parabola_problem(limit), int(params["start"])
    if name == "bitstring":
        target = tuple(int(b) for b in rng.integers(0, 2, size=int(params["dim"])))
        return bitstring_problem(limit, target), tuple([0] * len(target))
    problem = continuous_problem(
        name, limit, rng=rng, sigma=float(params["sigma"]), k=int(params["neighbors"])
    )
    start = rng.uniform(float(params["low"]), float(params["high"]), size=int(params["dim"]))
    return problem, start


def run_pipeline(
    cfg: Dict[str, Any],
    *,
    base_dir: Path,
    outdir: Path,
    echo=None,
) -> Dict[str, Any]:
    """Run the configured strategy and write ``metrics.json``, ``metrics_log.csv``
    and ``best.csv`` into ``outdir``."""

    outdir.mkdir(parents=True, exist_ok=True)

    seed = int(cfg.get("seed", 0))
    rng = np.random.default_rng(seed)

    params = build_params(cfg)
    strategy = build_strategy(params)
    metrics = Metrics(echo=echo)
    log_period = int(params["log_period"])

    if params["algorithm"] == ALG_DE:
        problem = continuous_problem(params["problem"], int(params["generation_limit"]))
        pop_path = _resolve(base_dir, cfg.get("population"))
        if pop_path is not None:
            init = load_population(pop_path)
        else:
            init = random_population(
                int(params["de_population_size"]),
                int(params["dim"]),
                float(params["low"]),
                float(params["high"]),
                seed=seed,
            )
        best = evolution(problem, strategy, init, rng=rng, metrics=metrics, log_period=log_period)
    elif params["algorithm"] in TRAJECTORY_ALGS:
        problem, start = _trajectory_start(params, rng)
        best = search(problem, strategy, start, rng=rng, metrics=metrics, log_period=log_period)
    else:
        raise ValueError(f"unknown algorithm {params['algorithm']!r}")

    meta = {
        "seed": seed,
        "config_version": cfg.get("version", "dev"),
        "algorithm": params["algorithm"],
        "problem": params["problem"],
    }

    save_metrics_json(outdir / "metrics.json", metrics, best, params, extra=meta)
    save_solution_csv(outdir / "best.csv", best.encoding)
    metrics.save_csv(outdir / "metrics_log.csv")

    return {
        "best": best,
        "metrics": metrics,
        "params": params,
        "meta": meta,
    }


def load_and_run(
    config_path: Path,
    outdir: Path,
    *,
    seed_override: Optional[int] = None,
    echo=None,
) -> Dict[str, Any]:
    """Convenience wrapper combining ``load_config`` and :func:`run_pipeline`."""

    cfg = load_config(config_path)
    if seed_override is not None:
        cfg["seed"] = int(seed_override)

    base_dir = Path(config_path).resolve().parent
    return run_pipeline(cfg, base_dir=base_dir, outdir=outdir, echo=echo)


def build_arg_parser():
    import argparse

    ap = argparse.ArgumentParser(description="Metaheuristic search runner")
    ap.add_argument("--config", required=True, help="Path to YAML/JSON configuration")
    ap.add_argument("--outdir", required=True, help="Output directory")
    ap.add_argument("--seed", type=int, default=None, help="Optional RNG seed override")
    ap.add_argument("--quiet", action="store_true", help="Do not print start/finish lines")
    return ap


def main(argv: Optional[list[str]] = None) -> Dict[str, Any]:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir).resolve()
    cfg_path = Path(args.config).resolve()

    result = load_and_run(
        cfg_path,
        outdir,
        seed_override=args.seed,
        echo=None if args.quiet else print,
    )

    best = result["best"]
    summary = {
        "algorithm": result["meta"]["algorithm"],
        "problem": result["meta"]["problem"],
        "best_score": float(best.score),
        "generations": int(result["params"]["generation_limit"]),
        "iters_logged": len(result["metrics"].rows),
    }

    print("\n[DONE]")
    print(json.dumps(summary, indent=2))
    return result


__all__ = [
    "build_arg_parser",
    "build_params",
    "build_strategy",
    "load_and_run",
    "main",
    "run_pipeline",
]
