"""Command-line interface for routeplan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from routeplan.engine import RouteEngine
from routeplan.io import engine_to_node_link, load_network_file
from routeplan.logging import get_logger, set_global_log_level
from routeplan.report import render_network, render_plan_report, render_route_report
from routeplan.sample import build_sample_engine

logger = get_logger(__name__)


def _load_engine(network: Optional[Path]) -> RouteEngine:
    if network is None:
        logger.debug("No network file given, using the sample network")
        return build_sample_engine()
    logger.info("Loading network from %s", network)
    return load_network_file(network)


def _check_known(engine: RouteEngine, *names: str) -> None:
    """Warn about names that would be registered as isolated locations."""
    known = set(engine.locations())
    for name in names:
        if name not in known:
            logger.warning("Location '%s' is not in the network", name)


def _show(engine: RouteEngine) -> None:
    print(render_network(engine))


def _route(engine: RouteEngine, start: str, end: str, top_k: int, as_json: bool) -> None:
    _check_known(engine, start, end)
    path = engine.shortest_path(start, end)
    alternatives = engine.alternatives(start, end, path, top_k) if path else []

    if as_json:
        payload = {
            "start": start,
            "end": end,
            "path": engine.path_names(path),
            "distance": engine.path_distance(path) if path else None,
            "alternatives": [
                {"path": engine.path_names(alt.path), "distance": alt.distance}
                for alt in alternatives
            ],
        }
        print(json.dumps(payload, indent=2))
    else:
        print(render_route_report(engine, start, end, path, alternatives))

    if not path:
        sys.exit(1)


def _plan(
    engine: RouteEngine,
    depot: str,
    stops: List[str],
    return_to_depot: bool,
    as_json: bool,
) -> None:
    _check_known(engine, depot, *stops)
    route = engine.sequence(depot, stops, return_to_depot=return_to_depot)

    if as_json:
        payload = route.to_dict()
        for segment in payload["segments"]:
            segment["path"] = engine.path_names(segment["path"])
        print(json.dumps(payload, indent=2))
    else:
        print(render_plan_report(engine, route))

    if not route.feasible:
        sys.exit(1)


def _export(engine: RouteEngine, output: Optional[Path]) -> None:
    text = json.dumps(engine_to_node_link(engine), indent=2)
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    logger.info("Network exported to %s", output)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routeplan`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routeplan",
        description="Find delivery routes and plan multi-stop deliveries.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--network",
        "-n",
        type=Path,
        default=None,
        help="Path to network YAML (default: built-in sample network)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{show,route,plan,export}",
        help="Available commands",
    )

    subparsers.add_parser("show", help="Display the delivery network")

    route_parser = subparsers.add_parser(
        "route", help="Find the optimal route and alternatives between two locations"
    )
    route_parser.add_argument("start", help="Starting location")
    route_parser.add_argument("end", help="Destination")
    route_parser.add_argument(
        "--alternatives",
        "-a",
        type=int,
        default=3,
        help="Number of alternative routes to show (default: 3)",
    )
    route_parser.add_argument("--json", action="store_true", help="Print JSON")

    plan_parser = subparsers.add_parser(
        "plan", help="Plan a multi-stop delivery from a pick-up location"
    )
    plan_parser.add_argument("depot", help="Pick-up location")
    plan_parser.add_argument("stops", nargs="+", help="Delivery stops")
    plan_parser.add_argument(
        "--return",
        dest="return_to_depot",
        action="store_true",
        help="Return to the pick-up location after the last stop",
    )
    plan_parser.add_argument("--json", action="store_true", help="Print JSON")

    export_parser = subparsers.add_parser(
        "export", help="Export the network as node-link JSON"
    )
    export_parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Output file (default: stdout)"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.command == "route" and args.alternatives < 0:
        parser.error("--alternatives must be 0 or greater")

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        engine = _load_engine(args.network)
    except (OSError, ValueError) as e:
        logger.error("Failed to load network: %s", e)
        sys.exit(1)

    if args.command == "show":
        _show(engine)
    elif args.command == "route":
        _route(engine, args.start, args.end, args.alternatives, args.json)
    elif args.command == "plan":
        _plan(engine, args.depot, args.stops, args.return_to_depot, args.json)
    elif args.command == "export":
        _export(engine, args.output)


if __name__ == "__main__":
    main()
