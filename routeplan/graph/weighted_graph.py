"""Undirected weighted multigraph keyed by location indices.

`WeightedGraph` stores one adjacency list per location. Every edge is stored
twice, once in each endpoint's list, so traversal never needs to look at
incoming edges. Self-loops and parallel edges are kept as separate entries.
Weights are expected to be non-negative; this is not checked.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from routeplan.graph.registry import LocationRegistry
from routeplan.types.base import INF, Adjacency, Cost, NodeIndex


class WeightedGraph:
    """Append-only undirected multigraph of named locations.

    Attributes:
        registry: Name/index mapping shared by every component that queries
            this graph.
        _adj: Adjacency lists indexed by location index; entries are
            ``(destination, weight)`` in insertion order.
        _edges: Undirected edges ``(u, v, weight)`` in insertion order.
    """

    def __init__(self, registry: Optional[LocationRegistry] = None) -> None:
        self.registry = registry if registry is not None else LocationRegistry()
        self._adj: List[List[Adjacency]] = [[] for _ in range(len(self.registry))]
        self._edges: List[Tuple[NodeIndex, NodeIndex, float]] = []

    #
    # Construction
    #
    def add_location(self, name: str) -> NodeIndex:
        """Register a location and make room for its adjacency list.

        Registering a known name is a no-op.

        Args:
            name: Location name.

        Returns:
            NodeIndex: Index of the location.
        """
        index = self.registry.resolve(name)
        while len(self._adj) < len(self.registry):
            self._adj.append([])
        return index

    def add_edge(self, from_name: str, to_name: str, weight: Cost) -> None:
        """Add an undirected edge, registering unseen endpoints.

        Both endpoints are resolved through `add_location()`, so a name that
        has not been seen yet becomes a new location. The edge is appended to
        both adjacency lists (twice to the same list for a self-loop).

        Args:
            from_name: First endpoint.
            to_name: Second endpoint.
            weight: Non-negative edge weight.
        """
        u = self.add_location(from_name)
        v = self.add_location(to_name)
        weight = float(weight)
        self._adj[u].append((v, weight))
        self._adj[v].append((u, weight))
        self._edges.append((u, v, weight))

    #
    # Queries
    #
    def neighbors(self, u: NodeIndex) -> Sequence[Adjacency]:
        """Return the adjacency entries of ``u`` in insertion order.

        Raises:
            IndexError: If ``u`` is not a registered location.
        """
        self._check_index(u)
        return tuple(self._adj[u])

    def edge_weight(self, u: NodeIndex, v: NodeIndex) -> Optional[float]:
        """Return the weight of the first edge from ``u`` to ``v``, if any."""
        self._check_index(u)
        for destination, weight in self._adj[u]:
            if destination == v:
                return weight
        return None

    def path_distance(self, path: Sequence[NodeIndex]) -> float:
        """Sum the edge weights between consecutive locations of ``path``.

        The first matching edge is used for each pair. Empty and single-node
        paths have distance 0. A pair with no connecting edge makes the whole
        path infinitely long.
        """
        total = 0.0
        for u, v in zip(path, path[1:]):
            weight = self.edge_weight(u, v)
            if weight is None:
                return INF
            total += weight
        return total

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex, float]]:
        """Iterate over undirected edges ``(u, v, weight)`` in insertion order."""
        return iter(self._edges)

    @property
    def location_count(self) -> int:
        return len(self.registry)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _check_index(self, u: NodeIndex) -> None:
        if not 0 <= u < len(self._adj):
            raise IndexError(f"Location index {u} is not registered.")

    def __len__(self) -> int:
        return len(self.registry)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(locations={self.location_count}, "
            f"edges={self.edge_count})"
        )
