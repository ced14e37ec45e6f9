"""Glue helpers exposed for CLI and integration harnesses."""

from .io import load_config, load_population, validate_population
from .pipeline import (
    build_arg_parser,
    build_params,
    build_strategy,
    load_and_run,
    main,
    run_pipeline,
)

__all__ = [
    "build_arg_parser",
    "build_params",
    "build_strategy",
    "load_and_run",
    "load_config",
    "load_population",
    "main",
    "run_pipeline",
    "validate_population",
]
