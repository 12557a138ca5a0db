from routeplan.config import DisplayConfig
from routeplan.report import (
    format_distance,
    format_minutes,
    format_path,
    render_network,
    render_plan_report,
    render_route_report,
)


def test_format_distance():
    assert format_distance(7.3) == "7.3 km"
    assert format_distance(7.25, DisplayConfig(precision=2, distance_unit="mi")) == (
        "7.25 mi"
    )


def test_format_minutes():
    assert format_minutes(10.8) == "27.0 min"
    assert format_minutes(2, DisplayConfig(minutes_per_unit=3)) == "6.0 min"


def test_format_path(line_engine):
    path = line_engine.shortest_path("C", "D")
    assert format_path(line_engine, path) == "C -> A -> B -> D"


def test_render_route_report(sample_engine):
    path = sample_engine.shortest_path("Warehouse", "Hospital")
    alts = sample_engine.alternatives("Warehouse", "Hospital", path, 3)
    text = render_route_report(sample_engine, "Warehouse", "Hospital", path, alts)

    assert "Warehouse -> Downtown -> University -> Hospital" in text
    assert "Total distance: 10.8 km" in text
    assert "Estimated time: 27.0 min" in text
    assert "Alternative 1: Warehouse -> Downtown -> University -> Residential Area" in text
    assert "Alternative 3:" in text
    assert "Alternative 4:" not in text


def test_render_route_report_without_alternatives(line_engine):
    path = line_engine.shortest_path("A", "D")
    text = render_route_report(line_engine, "A", "D", path, [])
    assert "No alternative routes found." in text


def test_render_route_report_no_route(isolated_engine):
    text = render_route_report(isolated_engine, "X", "Y", [], [])
    assert "No route found between X and Y" in text
    assert "OPTIMAL ROUTE" not in text


def test_render_plan_report(line_engine):
    route = line_engine.sequence("A", ["B", "D"])
    text = render_plan_report(line_engine, route)

    assert "Stop order: A -> B -> D" in text
    assert "Segment 1 (A to B):" in text
    assert "Segment 2 (B to D):" in text
    assert "TOTAL ROUTE DISTANCE: 7.3 km" in text


def test_render_plan_report_infeasible(isolated_engine):
    route = isolated_engine.sequence("A", ["X"])
    text = render_plan_report(isolated_engine, route)
    assert "Delivery plan failed: cannot reach X from A" in text
    assert "TOTAL ROUTE DISTANCE" not in text


def test_render_network(isolated_engine):
    text = render_network(isolated_engine)
    assert "X:\n  (no routes)" in text
    assert "A:\n  -> B (1.0 km)" in text
