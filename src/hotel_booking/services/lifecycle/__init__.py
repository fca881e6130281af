"""Startup and shutdown pipeline infrastructure."""

from .base_step import LifecycleStep
from .context import LifecycleContext
from .pipeline import Pipeline
from .pipelines import build_shutdown_pipeline, build_startup_pipeline

__all__ = [
    "LifecycleStep",
    "LifecycleContext",
    "Pipeline",
    "build_startup_pipeline",
    "build_shutdown_pipeline",
]
