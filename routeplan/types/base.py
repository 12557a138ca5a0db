"""Base type aliases for the routing engine."""

from __future__ import annotations

from typing import List, Tuple, Union

#: Represents numeric distance between locations (e.g. kilometres).
Cost = Union[int, float]

#: Dense integer key of a registered location.
NodeIndex = int

#: Ordered sequence of location indices. An empty list means "no route found".
IndexPath = List[NodeIndex]

#: Immutable location path stored on result objects so they stay hashable.
FrozenPath = Tuple[NodeIndex, ...]

#: One adjacency entry: (destination index, edge weight).
Adjacency = Tuple[NodeIndex, float]

#: Distance assigned to unreachable locations.
INF: float = float("inf")
