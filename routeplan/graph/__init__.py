"""Graph primitives and helpers.

This package provides the `LocationRegistry` name/index mapping, the undirected
multigraph `WeightedGraph` built on top of it, and conversion helpers to and
from NetworkX (`convert`).
"""

from routeplan.graph.registry import LocationRegistry
from routeplan.graph.weighted_graph import WeightedGraph

__all__ = ["LocationRegistry", "WeightedGraph"]
