"""pathvalue utility modules."""

from pathvalue.utils.logging import configure_logging

__all__ = ["configure_logging"]
