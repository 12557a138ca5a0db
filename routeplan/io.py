"""Loading delivery networks from YAML and exporting them as node-link data.

A network file has two optional top-level keys::

    locations:
      - Warehouse
      - Depot B
    routes:
      - {source: Warehouse, target: Downtown, distance: 5.2}
      - [Downtown, University, 2.1]

``locations`` registers names up front (useful for isolated locations and for
fixing index order). ``routes`` entries are either mappings with ``source``,
``target`` and ``distance`` keys or ``[source, target, distance]`` triples.
Endpoints missing from ``locations`` are registered when first used.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from routeplan.engine import RouteEngine
from routeplan.logging import get_logger
from routeplan.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)

_TOP_LEVEL_KEYS = {"locations", "routes"}
_ROUTE_KEYS = {"source", "target", "distance"}


def _parse_route(entry: Any, position: int) -> Tuple[str, str, float]:
    if isinstance(entry, dict):
        entry = normalize_yaml_dict_keys(entry)
        missing = _ROUTE_KEYS - set(entry)
        if missing:
            raise ValueError(
                f"Route #{position} is missing key(s): {', '.join(sorted(missing))}"
            )
        extra = set(entry) - _ROUTE_KEYS
        if extra:
            raise ValueError(
                f"Route #{position} has unrecognized key(s): {', '.join(sorted(extra))}"
            )
        source, target, distance = entry["source"], entry["target"], entry["distance"]
    elif isinstance(entry, (list, tuple)) and len(entry) == 3:
        source, target, distance = entry
    else:
        raise ValueError(
            f"Route #{position} must be a mapping or a [source, target, distance] "
            f"list, got {entry!r}"
        )

    if isinstance(distance, bool) or not isinstance(distance, (int, float)):
        raise ValueError(f"Route #{position} distance must be a number, got {distance!r}")
    if not math.isfinite(distance):
        raise ValueError(f"Route #{position} distance must be finite, got {distance}")
    if distance < 0:
        raise ValueError(f"Route #{position} distance must be non-negative, got {distance}")
    return str(source), str(target), float(distance)


def engine_from_dict(
    data: Dict[str, Any], engine: Optional[RouteEngine] = None
) -> RouteEngine:
    """Populate an engine from a parsed network mapping.

    Args:
        data: Mapping with optional ``locations`` and ``routes`` keys.
        engine: Engine to extend; a new one is created when omitted.

    Returns:
        RouteEngine: The populated engine.

    Raises:
        ValueError: If the mapping has unknown keys or malformed entries.
    """
    if not isinstance(data, dict):
        raise ValueError("Network definition must be a mapping at the top level.")
    data = normalize_yaml_dict_keys(data)

    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ValueError(
            f"Unrecognized top-level key(s) in network: {', '.join(sorted(unknown))}. "
            f"Allowed keys are {sorted(_TOP_LEVEL_KEYS)}"
        )

    locations = data.get("locations") or []
    routes = data.get("routes") or []
    if not isinstance(locations, list):
        raise ValueError("'locations' must be a list of names.")
    if not isinstance(routes, list):
        raise ValueError("'routes' must be a list.")

    engine = engine if engine is not None else RouteEngine()
    for name in locations:
        engine.register_location(str(name))
    for position, entry in enumerate(routes, start=1):
        engine.add_route(*_parse_route(entry, position))

    logger.debug(
        "Loaded network with %d locations and %d routes",
        engine.graph.location_count,
        engine.graph.edge_count,
    )
    return engine


def load_network_yaml(yaml_str: str) -> RouteEngine:
    """Build an engine from a YAML network definition.

    Raises:
        ValueError: If the YAML cannot be parsed or is not a valid network.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid network YAML: {e}") from e
    if data is None:
        data = {}
    return engine_from_dict(data)


def load_network_file(path: Union[str, Path]) -> RouteEngine:
    """Read and parse a YAML network file."""
    return load_network_yaml(Path(path).read_text(encoding="utf-8"))


def engine_to_node_link(engine: RouteEngine) -> Dict[str, Any]:
    """
    Return a node-link representation suitable for direct JSON serialization.

    {"nodes": [{"id": index, "name": name}, ...],
     "links": [{"source": index, "target": index, "distance": d}, ...]}
    """
    registry = engine.graph.registry
    return {
        "nodes": [
            {"id": index, "name": name} for index, name in enumerate(registry.names())
        ],
        "links": [
            {"source": u, "target": v, "distance": weight}
            for u, v, weight in engine.graph.edges()
        ],
    }
