import json

import pytest

from routeplan.engine import RouteEngine
from routeplan.io import (
    engine_from_dict,
    engine_to_node_link,
    load_network_file,
    load_network_yaml,
)

NETWORK_YAML = """
locations:
  - Warehouse
  - Depot B
routes:
  - {source: Warehouse, target: Downtown, distance: 5.2}
  - [Downtown, University, 2.1]
"""


def test_load_network_yaml():
    engine = load_network_yaml(NETWORK_YAML)
    assert engine.locations() == ["Warehouse", "Depot B", "Downtown", "University"]
    assert list(engine.routes()) == [
        ("Warehouse", "Downtown", 5.2),
        ("Downtown", "University", 2.1),
    ]
    path = engine.shortest_path("Warehouse", "University")
    assert engine.path_distance(path) == pytest.approx(7.3)


def test_load_empty_yaml():
    engine = load_network_yaml("")
    assert engine.locations() == []


def test_load_network_file(tmp_path):
    path = tmp_path / "network.yaml"
    path.write_text(NETWORK_YAML, encoding="utf-8")
    engine = load_network_file(path)
    assert len(engine.locations()) == 4


def test_unknown_top_level_key():
    with pytest.raises(ValueError, match="Unrecognized top-level key"):
        load_network_yaml("locations: [A]\nroads: []\n")


def test_invalid_yaml():
    with pytest.raises(ValueError, match="Invalid network YAML"):
        load_network_yaml("routes: [A, B\n")


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="mapping"):
        load_network_yaml("- A\n- B\n")


@pytest.mark.parametrize(
    "routes, message",
    [
        ([{"source": "A", "target": "B"}], "missing key"),
        ([{"source": "A", "target": "B", "distance": 1, "speed": 3}], "unrecognized"),
        ([["A", "B"]], "must be a mapping"),
        ([["A", "B", "far"]], "must be a number"),
        ([["A", "B", True]], "must be a number"),
        ([["A", "B", -1]], "non-negative"),
        ([["A", "B", float("nan")]], "must be finite"),
        ([["A", "B", float("inf")]], "must be finite"),
    ],
)
def test_malformed_routes(routes, message):
    with pytest.raises(ValueError, match=message):
        engine_from_dict({"routes": routes})


@pytest.mark.parametrize("literal", [".nan", ".inf", "-.inf"])
def test_yaml_non_finite_distance_rejected(literal):
    with pytest.raises(ValueError, match="Route #1 distance must be finite"):
        load_network_yaml(f"routes:\n  - [A, B, {literal}]\n  - [A, C, 1]\n")


def test_locations_must_be_list():
    with pytest.raises(ValueError, match="'locations' must be a list"):
        engine_from_dict({"locations": "A"})


def test_yaml_boolean_and_numeric_names():
    engine = load_network_yaml("routes:\n  - [1, yes, 3]\n")
    assert engine.locations() == ["1", "True"]


def test_engine_from_dict_extends_engine():
    engine = RouteEngine()
    engine.add_route("A", "B", 1)
    engine_from_dict({"routes": [["B", "C", 2]]}, engine)
    assert engine.path_distance(engine.shortest_path("A", "C")) == 3


def test_engine_to_node_link(line_engine):
    data = engine_to_node_link(line_engine)
    assert data["nodes"] == [
        {"id": 0, "name": "A"},
        {"id": 1, "name": "B"},
        {"id": 2, "name": "C"},
        {"id": 3, "name": "D"},
    ]
    assert data["links"][0] == {"source": 0, "target": 1, "distance": 5.2}
    assert len(data["links"]) == 3
    json.dumps(data)
