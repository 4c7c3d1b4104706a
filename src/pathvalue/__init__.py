"""pathvalue: decompose, compare and traverse path strings."""

from pathvalue.errors import InvalidArgumentError, PathValueError
from pathvalue.models.path import PathValue, infer_separator, sort_paths

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "PathValue",
    "PathValueError",
    "__version__",
    "infer_separator",
    "sort_paths",
]
