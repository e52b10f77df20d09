"""Search result models."""

from routegraph.model.path import Path

__all__ = ["Path"]
