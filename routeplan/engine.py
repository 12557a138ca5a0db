"""Name-based routing engine.

`RouteEngine` is the entry point for callers that think in location names
rather than indices. It owns a `WeightedGraph`, resolves names on the way in
and leaves index paths for the caller to translate with `path_names()`.

Example:
    >>> engine = RouteEngine()
    >>> engine.add_route("Warehouse", "Downtown", 5.2)
    >>> engine.add_route("Downtown", "University", 2.1)
    >>> path = engine.shortest_path("Warehouse", "University")
    >>> engine.path_names(path)
    ['Warehouse', 'Downtown', 'University']
    >>> round(engine.path_distance(path), 1)
    7.3

Outcomes such as "no route" or "no alternatives" are returned as empty lists,
and an infeasible stop sequence is flagged on the returned `SequencedRoute`;
none of them raise.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from routeplan.algorithms.alternatives import alternatives as _alternatives
from routeplan.algorithms.sequencing import nearest_neighbor_sequence
from routeplan.algorithms.spf import shortest_path as _shortest_path
from routeplan.config import SEARCH_CONFIG, SearchConfig
from routeplan.graph.weighted_graph import WeightedGraph
from routeplan.logging import get_logger
from routeplan.types.base import Cost, IndexPath, NodeIndex
from routeplan.types.dto import RankedAlternative, SequencedRoute

logger = get_logger(__name__)


class RouteEngine:
    """Delivery network plus the queries that run over it.

    Attributes:
        graph: Underlying undirected multigraph.
        search_config: Bounds used for alternative-route enumeration.
    """

    def __init__(
        self,
        graph: Optional[WeightedGraph] = None,
        search_config: Optional[SearchConfig] = None,
    ) -> None:
        self.graph = graph if graph is not None else WeightedGraph()
        self.search_config = search_config or SEARCH_CONFIG

    #
    # Construction
    #
    def register_location(self, name: str) -> NodeIndex:
        """Register a location; known names return their existing index."""
        return self.graph.add_location(name)

    def add_route(self, name_a: str, name_b: str, distance: Cost) -> None:
        """Connect two locations, registering either one if it is new."""
        self.graph.add_edge(name_a, name_b, distance)

    #
    # Queries
    #
    def shortest_path(self, start: str, end: str) -> IndexPath:
        """Return the optimal path between two locations.

        Unknown names are registered as isolated locations first, so the query
        always runs. An empty list means no route exists.
        """
        src = self.graph.add_location(start)
        dst = self.graph.add_location(end)
        path = _shortest_path(self.graph, src, dst)
        if not path:
            logger.debug("No route found between '%s' and '%s'", start, end)
        return path

    def path_distance(self, path: Sequence[NodeIndex]) -> float:
        """Return the total distance of ``path`` (0 for empty or trivial paths)."""
        return self.graph.path_distance(path)

    def alternatives(
        self,
        start: str,
        end: str,
        exclude_path: Sequence[NodeIndex] = (),
        top_k: Optional[int] = None,
    ) -> List[RankedAlternative]:
        """Return up to ``top_k`` simple paths other than ``exclude_path``.

        Args:
            start: Start location name.
            end: End location name.
            exclude_path: Path to leave out, normally the shortest path.
            top_k: Number of alternatives; defaults to the configured count.

        Returns:
            List[RankedAlternative]: Sorted by ascending distance; empty when
            there are no alternatives.
        """
        src = self.graph.add_location(start)
        dst = self.graph.add_location(end)
        return _alternatives(
            self.graph,
            src,
            dst,
            exclude_path=exclude_path,
            top_k=top_k,
            config=self.search_config,
        )

    def sequence(
        self,
        depot: str,
        stops: Iterable[str],
        return_to_depot: bool = False,
    ) -> SequencedRoute:
        """Plan a multi-stop route with the nearest-neighbor heuristic.

        Check `SequencedRoute.feasible` before presenting the result.
        """
        return nearest_neighbor_sequence(
            self.graph, depot, stops, return_to_depot=return_to_depot
        )

    #
    # Name translation and inspection
    #
    def name_of(self, index: NodeIndex) -> str:
        return self.graph.registry.name_of(index)

    def path_names(self, path: Sequence[NodeIndex]) -> List[str]:
        """Translate an index path into location names."""
        return [self.graph.registry.name_of(index) for index in path]

    def locations(self) -> List[str]:
        """Return all location names in registration order."""
        return self.graph.registry.names()

    def routes(self) -> Iterator[Tuple[str, str, float]]:
        """Iterate over ``(name_a, name_b, distance)`` in insertion order."""
        registry = self.graph.registry
        for u, v, weight in self.graph.edges():
            yield registry.name_of(u), registry.name_of(v), weight

    def __repr__(self) -> str:
        return f"RouteEngine({self.graph!r})"
