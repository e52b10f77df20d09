"""Exceptions raised by the graph container."""

from __future__ import annotations

from typing import Hashable, Optional


class InvariantViolation(ValueError):
    """An edge endpoint collides with a different vertex registered under its key.

    Attributes:
        vertex_id: The colliding key.
    """

    def __init__(self, vertex_id: Hashable, message: Optional[str] = None) -> None:
        self.vertex_id = vertex_id
        super().__init__(
            message
            or (
                f"Vertex '{vertex_id}' is already registered as a different "
                "instance; reuse the instance returned by add_or_get_vertex()."
            )
        )
