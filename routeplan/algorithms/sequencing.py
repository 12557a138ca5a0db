"""Greedy nearest-neighbor sequencing of delivery stops.

Starting at the depot, the sequencer repeatedly runs SPF from the current
location to every remaining stop and moves to the closest one. This is a cheap
approximation of the travelling-salesman order with no optimality guarantee;
it costs O(k^2) shortest-path queries for k stops.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from routeplan.algorithms.spf import shortest_path
from routeplan.graph.weighted_graph import WeightedGraph
from routeplan.logging import get_logger
from routeplan.types.base import INF, Cost, IndexPath, NodeIndex
from routeplan.types.dto import RouteSegment, SequencedRoute

logger = get_logger(__name__)


def _unique_stops(stops: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for stop in stops:
        if stop not in seen:
            seen.add(stop)
            unique.append(stop)
    return unique


def nearest_neighbor_sequence(
    graph: WeightedGraph,
    depot: str,
    stops: Iterable[str],
    return_to_depot: bool = False,
) -> SequencedRoute:
    """Order ``stops`` by repeatedly visiting the nearest unvisited one.

    Unseen location names (depot or stops) are registered as isolated
    locations before the search runs. Repeated stops are visited once. Among
    equally near stops the one listed first wins.

    If no remaining stop can be reached from the current location, sequencing
    stops there and the remaining stops are reported in
    ``SequencedRoute.unreachable``; the partial order and segments are kept
    for diagnostics but the plan is not feasible.

    Args:
        graph: Graph to route over.
        depot: Start location name.
        stops: Stop names to visit.
        return_to_depot: Append a final leg back to the depot once every stop
            has been visited.

    Returns:
        SequencedRoute: Visit order, per-leg paths and distances, and total.
    """
    depot_idx = graph.add_location(depot)
    remaining: List[Tuple[str, NodeIndex]] = [
        (stop, graph.add_location(stop)) for stop in _unique_stops(stops)
    ]

    route = SequencedRoute(order=[depot])
    current_name, current_idx = depot, depot_idx

    while remaining:
        best_pos: Optional[int] = None
        best_distance: Cost = INF
        best_path: IndexPath = []

        for pos, (_stop, stop_idx) in enumerate(remaining):
            path = shortest_path(graph, current_idx, stop_idx)
            if not path:
                continue
            distance = graph.path_distance(path)
            if distance < best_distance:
                best_pos, best_distance, best_path = pos, distance, path

        if best_pos is None:
            route.unreachable = [stop for stop, _ in remaining]
            logger.warning(
                "No remaining stop is reachable from '%s': %s",
                current_name,
                ", ".join(route.unreachable),
            )
            return route

        stop_name, stop_idx = remaining.pop(best_pos)
        logger.debug(
            "Nearest stop from '%s' is '%s' (%s)", current_name, stop_name, best_distance
        )
        _append_segment(route, current_name, stop_name, best_path, best_distance)
        current_name, current_idx = stop_name, stop_idx

    if return_to_depot and route.segments:
        # Edges are undirected, so the depot is reachable from every visited stop
        path = shortest_path(graph, current_idx, depot_idx)
        _append_segment(route, current_name, depot, path, graph.path_distance(path))

    return route


def _append_segment(
    route: SequencedRoute,
    source: str,
    target: str,
    path: IndexPath,
    distance: Cost,
) -> None:
    route.segments.append(
        RouteSegment(source=source, target=target, path=path, distance=distance)
    )
    route.order.append(target)
    route.total_distance += distance
