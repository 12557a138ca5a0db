"""Result containers returned by the routing engine.

These are plain dataclasses so the presentation layer can render them or dump
them to JSON via ``to_dict()`` without knowing anything about the graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from routeplan.types.base import Cost, FrozenPath


@dataclass(frozen=True)
class RankedAlternative:
    """A simple path between two locations together with its total distance.

    Attributes:
        path: Location indices from source to target. Lists are stored as
            tuples.
        distance: Sum of edge weights along ``path``.
    """

    path: FrozenPath
    distance: Cost

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, RankedAlternative):
            return NotImplemented
        return self.distance < other.distance


@dataclass(frozen=True)
class RouteSegment:
    """One leg of a sequenced route.

    Attributes:
        source: Location name the leg starts from.
        target: Location name the leg ends at.
        path: Location indices of the leg, endpoints included. Stored as a
            tuple.
        distance: Total distance of the leg.
    """

    source: str
    target: str
    path: FrozenPath
    distance: Cost

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "path": list(self.path),
            "distance": self.distance,
        }


@dataclass
class SequencedRoute:
    """Stop order and concrete legs produced by nearest-neighbor sequencing.

    Attributes:
        order: Visited location names, starting with the depot. When the route
            returns to the depot, the depot is repeated at the end.
        segments: One leg per consecutive pair in ``order``.
        total_distance: Sum of all segment distances.
        unreachable: Stops that could not be reached from the last visited
            location. Non-empty means the plan is infeasible.
    """

    order: List[str] = field(default_factory=list)
    segments: List[RouteSegment] = field(default_factory=list)
    total_distance: Cost = 0.0
    unreachable: List[str] = field(default_factory=list)

    @property
    def feasible(self) -> bool:
        """True when every requested stop was reached."""
        return not self.unreachable

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order": list(self.order),
            "segments": [segment.to_dict() for segment in self.segments],
            "total_distance": self.total_distance,
            "unreachable": list(self.unreachable),
            "feasible": self.feasible,
        }
