"""Configuration classes for routegraph searches."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routegraph.graph.elements import Edge


@dataclass
class SearchConfig:
    """Defaults used when a weighted search is called without a weight function.

    Attributes:
        weight_attr: Key (or attribute name) holding the weight in an edge payload.
        default_weight: Weight of an edge whose payload carries none.
    """

    weight_attr: str = "weight"
    default_weight: float = 1.0

    def edge_weight(self, edge: Edge) -> float:
        """Derive a weight from ``edge.data``.

        Numeric payloads are used directly. Mappings are looked up by
        ``weight_attr``, other objects by attribute of the same name. Anything
        else weighs ``default_weight``.
        """
        data = edge.data
        if isinstance(data, bool):
            return self.default_weight
        if isinstance(data, Real):
            return float(data)
        if isinstance(data, Mapping):
            return float(data.get(self.weight_attr, self.default_weight))
        return float(getattr(data, self.weight_attr, self.default_weight))


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
