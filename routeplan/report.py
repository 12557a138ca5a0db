"""Text rendering of networks, routes and delivery plans."""

from __future__ import annotations

from typing import List, Optional, Sequence

from routeplan.config import DISPLAY_CONFIG, DisplayConfig
from routeplan.engine import RouteEngine
from routeplan.types.base import NodeIndex
from routeplan.types.dto import RankedAlternative, SequencedRoute

ARROW = " -> "


def format_path(engine: RouteEngine, path: Sequence[NodeIndex]) -> str:
    """Return location names joined by arrows."""
    return ARROW.join(engine.path_names(path))


def format_distance(distance: float, config: Optional[DisplayConfig] = None) -> str:
    """Return a distance with fixed precision and unit, e.g. ``7.3 km``."""
    config = config or DISPLAY_CONFIG
    return f"{distance:.{config.precision}f} {config.distance_unit}"


def format_minutes(distance: float, config: Optional[DisplayConfig] = None) -> str:
    config = config or DISPLAY_CONFIG
    return f"{config.estimate_minutes(distance):.{config.precision}f} min"


def render_network(engine: RouteEngine, config: Optional[DisplayConfig] = None) -> str:
    """Render every location with its outgoing routes."""
    graph = engine.graph
    lines: List[str] = ["DELIVERY NETWORK", "=" * 16]
    for index, name in enumerate(engine.locations()):
        lines.append(f"{name}:")
        neighbors = graph.neighbors(index)
        if not neighbors:
            lines.append("  (no routes)")
        for destination, weight in neighbors:
            lines.append(
                f"  -> {engine.name_of(destination)} ({format_distance(weight, config)})"
            )
    return "\n".join(lines)


def render_route_report(
    engine: RouteEngine,
    start: str,
    end: str,
    path: Sequence[NodeIndex],
    alternatives: Sequence[RankedAlternative],
    config: Optional[DisplayConfig] = None,
) -> str:
    """Render the optimal route and its ranked alternatives."""
    lines = ["ROUTE OPTIMIZATION", f"From: {start}  To: {end}", ""]
    if not path:
        lines.append(f"No route found between {start} and {end}")
        return "\n".join(lines)

    distance = engine.path_distance(path)
    lines.extend(
        [
            "OPTIMAL ROUTE:",
            format_path(engine, path),
            f"Total distance: {format_distance(distance, config)}",
            f"Estimated time: {format_minutes(distance, config)}",
            "",
        ]
    )
    if not alternatives:
        lines.append("No alternative routes found.")
        return "\n".join(lines)

    lines.append("ALTERNATIVE ROUTES:")
    for rank, alternative in enumerate(alternatives, start=1):
        lines.append(f"Alternative {rank}: {format_path(engine, alternative.path)}")
        lines.append(
            f"  Total distance: {format_distance(alternative.distance, config)}"
        )
    return "\n".join(lines)


def render_plan_report(
    engine: RouteEngine,
    route: SequencedRoute,
    config: Optional[DisplayConfig] = None,
) -> str:
    """Render a sequenced multi-stop route segment by segment."""
    lines = ["MULTI-STOP DELIVERY PLAN", f"Depot: {route.order[0]}", ""]
    if not route.feasible:
        lines.append(
            "Delivery plan failed: cannot reach "
            + ", ".join(route.unreachable)
            + f" from {route.order[-1]}"
        )
        return "\n".join(lines)

    lines.append("Stop order: " + ARROW.join(route.order))
    for number, segment in enumerate(route.segments, start=1):
        lines.append("")
        lines.append(f"Segment {number} ({segment.source} to {segment.target}):")
        lines.append(format_path(engine, segment.path))
        lines.append(f"Distance: {format_distance(segment.distance, config)}")
    lines.append("")
    lines.append(f"TOTAL ROUTE DISTANCE: {format_distance(route.total_distance, config)}")
    lines.append(f"Estimated time: {format_minutes(route.total_distance, config)}")
    return "\n".join(lines)
