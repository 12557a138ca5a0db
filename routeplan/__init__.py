"""routeplan: delivery route finding and multi-stop planning.

routeplan computes optimal and alternative routes over a small undirected
weighted network of named locations, and orders multi-stop deliveries with a
nearest-neighbor heuristic.

Primary API:
    RouteEngine - Name-based network construction and route queries
    WeightedGraph, LocationRegistry - Index-based graph primitives
    RankedAlternative, RouteSegment, SequencedRoute - Query results

Example:
    from routeplan import RouteEngine

    engine = RouteEngine()
    engine.add_route("A", "B", 5.2)
    engine.add_route("B", "D", 2.1)

    path = engine.shortest_path("A", "D")
    engine.path_names(path)            # ['A', 'B', 'D']
    engine.sequence("A", ["D", "B"])   # visits B, then D
"""

from __future__ import annotations

from routeplan import cli, logging
from routeplan._version import __version__
from routeplan.config import DISPLAY_CONFIG, SEARCH_CONFIG, DisplayConfig, SearchConfig
from routeplan.engine import RouteEngine
from routeplan.graph import LocationRegistry, WeightedGraph
from routeplan.types.dto import RankedAlternative, RouteSegment, SequencedRoute

__all__ = [
    # Version
    "__version__",
    # Engine
    "RouteEngine",
    # Graph
    "LocationRegistry",
    "WeightedGraph",
    # Results
    "RankedAlternative",
    "RouteSegment",
    "SequencedRoute",
    # Configuration
    "SearchConfig",
    "DisplayConfig",
    "SEARCH_CONFIG",
    "DISPLAY_CONFIG",
    # Utilities
    "cli",
    "logging",
]
