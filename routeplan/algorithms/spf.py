"""Shortest-path-first (SPF) search.

Implements Dijkstra's algorithm over a `WeightedGraph` with a binary heap.
Heap entries are ``(distance, node_index)`` tuples, so ties between equally
distant nodes are broken by the smaller index and results are reproducible
for identical input.

When a destination is given, the search stops as soon as the destination is
popped from the heap: with non-negative weights its distance is final then.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from routeplan.graph.weighted_graph import WeightedGraph
from routeplan.logging import get_logger
from routeplan.types.base import INF, Cost, IndexPath, NodeIndex

logger = get_logger(__name__)


def spf(
    graph: WeightedGraph,
    src_node: NodeIndex,
    dst_node: Optional[NodeIndex] = None,
) -> Tuple[Dict[NodeIndex, Cost], Dict[NodeIndex, NodeIndex]]:
    """Run Dijkstra from ``src_node``.

    Args:
        graph: Graph to search.
        src_node: Source location index.
        dst_node: Optional destination. If provided, the search terminates once
            the destination is settled.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached node to its tentative (final, for settled
            nodes) distance from ``src_node``.
          - pred: Maps each reached node except the source to its predecessor
            on the shortest path.

    Raises:
        IndexError: If ``src_node`` is not a registered location.
    """
    # Validates the source index
    graph.neighbors(src_node)

    costs: Dict[NodeIndex, Cost] = {src_node: 0.0}
    pred: Dict[NodeIndex, NodeIndex] = {}
    visited: Set[NodeIndex] = set()
    min_pq: List[Tuple[Cost, NodeIndex]] = [(0.0, src_node)]

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        if node_id in visited:
            continue
        visited.add(node_id)

        if node_id == dst_node:
            break

        for neighbor_id, weight in graph.neighbors(node_id):
            new_cost = current_cost + weight
            if new_cost < costs.get(neighbor_id, INF):
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                heappush(min_pq, (new_cost, neighbor_id))

    return costs, pred


def resolve_path(
    src_node: NodeIndex,
    dst_node: NodeIndex,
    pred: Dict[NodeIndex, NodeIndex],
) -> IndexPath:
    """Follow predecessor links from ``dst_node`` back to ``src_node``.

    Returns:
        IndexPath: The path from source to destination, or an empty list when
        the destination was never reached.
    """
    if src_node == dst_node:
        return [src_node]
    if dst_node not in pred:
        return []

    path = [dst_node]
    node_id = dst_node
    while node_id != src_node:
        node_id = pred[node_id]
        path.append(node_id)
    path.reverse()
    return path


def shortest_path(
    graph: WeightedGraph,
    src_node: NodeIndex,
    dst_node: NodeIndex,
) -> IndexPath:
    """Return the minimum-distance path between two locations.

    Args:
        graph: Graph to search.
        src_node: Source location index.
        dst_node: Destination location index.

    Returns:
        IndexPath: Location indices from source to destination. ``[src_node]``
        when both are the same location, and an empty list when the
        destination is unreachable.
    """
    if src_node == dst_node:
        # Still validates the index
        graph.neighbors(src_node)
        return [src_node]

    costs, pred = spf(graph, src_node, dst_node)
    path = resolve_path(src_node, dst_node, pred)
    if path:
        logger.debug(
            "Shortest path %s -> %s: %d hops, distance %s",
            src_node,
            dst_node,
            len(path) - 1,
            costs[dst_node],
        )
    else:
        logger.debug("No route from %s to %s", src_node, dst_node)
    return path
