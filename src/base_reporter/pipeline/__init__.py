"""Sequential file pipeline for driving reporter middleware."""

from base_reporter.pipeline.runner import Pipeline
from base_reporter.pipeline.source import FileItem, iter_files

__all__ = ["FileItem", "Pipeline", "iter_files"]
