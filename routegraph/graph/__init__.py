"""Graph primitives.

``Vertex`` and ``Edge`` are the elements, ``DirectedGraph`` the container
enforcing key uniqueness and endpoint identity. NetworkX conversion lives in
``routegraph.graph.convert``.
"""

from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex, VertexID
from routegraph.graph.errors import InvariantViolation

__all__ = [
    "DirectedGraph",
    "Edge",
    "InvariantViolation",
    "Vertex",
    "VertexID",
]
