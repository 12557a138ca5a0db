"""Built-in sample delivery network.

Eight city locations connected by eleven roads; distances are in kilometres.
Used by the CLI when no network file is given.
"""

from __future__ import annotations

from typing import List, Tuple

from routeplan.engine import RouteEngine

SAMPLE_LOCATIONS: List[str] = [
    "Warehouse",
    "Downtown",
    "University",
    "Shopping Mall",
    "Residential Area",
    "Industrial Park",
    "Airport",
    "Hospital",
]

SAMPLE_ROUTES: List[Tuple[str, str, float]] = [
    ("Warehouse", "Downtown", 5.2),
    ("Warehouse", "Industrial Park", 3.8),
    ("Downtown", "University", 2.1),
    ("Downtown", "Shopping Mall", 4.3),
    ("University", "Hospital", 3.5),
    ("Shopping Mall", "Residential Area", 2.8),
    ("Industrial Park", "Airport", 6.7),
    ("Residential Area", "Hospital", 3.2),
    ("Airport", "Hospital", 8.1),
    ("Shopping Mall", "Hospital", 4.0),
    ("University", "Residential Area", 2.9),
]


def build_sample_engine() -> RouteEngine:
    """Return a new engine loaded with the sample delivery network."""
    engine = RouteEngine()
    for name in SAMPLE_LOCATIONS:
        engine.register_location(name)
    for name_a, name_b, distance in SAMPLE_ROUTES:
        engine.add_route(name_a, name_b, distance)
    return engine
