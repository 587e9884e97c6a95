# Reexport job entry points

from .optimize import build_pipeline, main, run_job

__all__ = [
    "build_pipeline",
    "main",
    "run_job",
]
