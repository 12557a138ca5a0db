"""Configuration classes for routeplan components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Bounds for alternative-route enumeration."""

    # Longest alternative path, counted in locations (endpoints included)
    max_path_nodes: int = 10

    # Number of complete paths after which the search stops descending
    max_paths: int = 20

    # Alternatives reported when the caller does not ask for a count
    default_top_k: int = 3


@dataclass
class DisplayConfig:
    """Formatting of distances and travel-time estimates in reports."""

    distance_unit: str = "km"

    # Estimated travel minutes per distance unit
    minutes_per_unit: float = 2.5

    # Decimal places for distances and times
    precision: int = 1

    def estimate_minutes(self, distance: float) -> float:
        """Return the estimated travel time for a distance."""
        return distance * self.minutes_per_unit


# Global configuration instances
SEARCH_CONFIG = SearchConfig()
DISPLAY_CONFIG = DisplayConfig()
