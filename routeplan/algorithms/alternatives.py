"""Bounded enumeration of alternative simple paths.

The number of simple paths in a cyclic graph grows combinatorially, so the
depth-first search here is cut off by two bounds taken from `SearchConfig`:

- a path never grows beyond ``max_path_nodes`` locations;
- no further descent happens once ``max_paths`` complete paths are recorded.

The result is therefore a sample of short alternatives, not an exhaustive list.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Set

from routeplan.config import SEARCH_CONFIG, SearchConfig
from routeplan.graph.weighted_graph import WeightedGraph
from routeplan.logging import get_logger
from routeplan.types.base import Adjacency, IndexPath, NodeIndex
from routeplan.types.dto import RankedAlternative

logger = get_logger(__name__)


def enumerate_simple_paths(
    graph: WeightedGraph,
    src_node: NodeIndex,
    dst_node: NodeIndex,
    max_path_nodes: int = SEARCH_CONFIG.max_path_nodes,
    max_paths: int = SEARCH_CONFIG.max_paths,
) -> List[IndexPath]:
    """Collect simple paths from ``src_node`` to ``dst_node`` depth-first.

    The traversal keeps an explicit stack of neighbor iterators alongside the
    current path and the set of nodes on it. A node leaves ``on_path`` exactly
    when it is popped from ``path``. Neighbors are visited in adjacency order,
    once per adjacency entry, so parallel edges can yield repeated node
    sequences.

    Args:
        graph: Graph to search.
        src_node: Start location index.
        dst_node: End location index.
        max_path_nodes: Longest path to report, counted in locations.
        max_paths: Stop after this many paths have been recorded.

    Returns:
        List[IndexPath]: Paths in discovery order.
    """
    if max_paths <= 0 or max_path_nodes <= 0:
        return []
    if src_node == dst_node:
        graph.neighbors(src_node)
        return [[src_node]]

    found: List[IndexPath] = []
    path: List[NodeIndex] = [src_node]
    on_path: Set[NodeIndex] = {src_node}
    stack: List[Iterator[Adjacency]] = [iter(graph.neighbors(src_node))]

    while stack and len(found) < max_paths:
        descended = False
        if len(path) < max_path_nodes:
            for neighbor_id, _weight in stack[-1]:
                if neighbor_id in on_path:
                    continue
                if neighbor_id == dst_node:
                    found.append(path + [neighbor_id])
                    if len(found) >= max_paths:
                        break
                    continue
                path.append(neighbor_id)
                on_path.add(neighbor_id)
                stack.append(iter(graph.neighbors(neighbor_id)))
                descended = True
                break

        if not descended:
            stack.pop()
            on_path.discard(path.pop())

    if len(found) >= max_paths:
        logger.debug(
            "Path enumeration %s -> %s stopped at the %d-path cap",
            src_node,
            dst_node,
            max_paths,
        )
    return found


def alternatives(
    graph: WeightedGraph,
    src_node: NodeIndex,
    dst_node: NodeIndex,
    exclude_path: Sequence[NodeIndex] = (),
    top_k: Optional[int] = None,
    config: Optional[SearchConfig] = None,
) -> List[RankedAlternative]:
    """Return up to ``top_k`` alternative routes ranked by distance.

    Any enumerated path equal to ``exclude_path`` (normally the shortest path
    already reported to the user) is dropped. Ties keep discovery order.

    Args:
        graph: Graph to search.
        src_node: Start location index.
        dst_node: End location index.
        exclude_path: Path to leave out of the result.
        top_k: Maximum number of alternatives; defaults to
            ``config.default_top_k``.
        config: Search bounds; defaults to the global `SEARCH_CONFIG`.

    Returns:
        List[RankedAlternative]: Alternatives sorted by ascending distance.
        Empty when none exist.
    """
    config = config or SEARCH_CONFIG
    if top_k is None:
        top_k = config.default_top_k
    if top_k <= 0:
        return []

    excluded = list(exclude_path)
    ranked = [
        RankedAlternative(path=path, distance=graph.path_distance(path))
        for path in enumerate_simple_paths(
            graph,
            src_node,
            dst_node,
            max_path_nodes=config.max_path_nodes,
            max_paths=config.max_paths,
        )
        if path != excluded
    ]
    ranked.sort(key=lambda alt: alt.distance)
    return ranked[:top_k]
