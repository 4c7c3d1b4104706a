"""Path value models for pathvalue."""

from pathvalue.models.path import PathValue, infer_separator, sort_paths

__all__ = ["PathValue", "infer_separator", "sort_paths"]
