"""Processing pipeline for agivocab."""

from .pipeline import run_pipeline

__all__ = ["run_pipeline"]
