import itertools

import networkx as nx
import pytest

from routeplan.algorithms.spf import resolve_path, shortest_path, spf
from routeplan.engine import RouteEngine
from routeplan.graph.convert import to_networkx


class TestSPF:
    def test_spf_costs_and_pred(self, line_engine):
        graph = line_engine.graph
        idx = graph.registry.index_of
        costs, pred = spf(graph, idx("A"))

        assert costs[idx("A")] == 0
        assert costs[idx("B")] == pytest.approx(5.2)
        assert costs[idx("C")] == pytest.approx(3.8)
        assert costs[idx("D")] == pytest.approx(7.3)
        assert pred == {idx("B"): idx("A"), idx("C"): idx("A"), idx("D"): idx("B")}

    def test_spf_stops_at_destination(self, line_engine):
        graph = line_engine.graph
        idx = graph.registry.index_of
        costs, _ = spf(graph, idx("C"), idx("A"))

        # A is settled before B and D are expanded
        assert costs[idx("A")] == pytest.approx(3.8)
        assert idx("D") not in costs

    def test_spf_unknown_source(self, line_engine):
        with pytest.raises(IndexError):
            spf(line_engine.graph, 42)

    def test_resolve_path(self):
        pred = {1: 0, 2: 1, 3: 0}
        assert resolve_path(0, 2, pred) == [0, 1, 2]
        assert resolve_path(0, 3, pred) == [0, 3]
        assert resolve_path(0, 0, pred) == [0]
        assert resolve_path(0, 9, pred) == []


class TestShortestPath:
    def test_line_a_to_d(self, line_engine):
        path = line_engine.shortest_path("A", "D")
        assert line_engine.path_names(path) == ["A", "B", "D"]
        assert line_engine.path_distance(path) == pytest.approx(7.3)

    def test_same_start_and_end(self, line_engine):
        path = line_engine.shortest_path("B", "B")
        assert line_engine.path_names(path) == ["B"]
        assert line_engine.path_distance(path) == 0

    def test_disconnected_pair(self, isolated_engine):
        assert isolated_engine.shortest_path("X", "Y") == []
        assert isolated_engine.shortest_path("X", "A") == []

    def test_square_prefers_short_side(self, square_engine):
        path = square_engine.shortest_path("A", "C")
        assert square_engine.path_names(path) == ["A", "B", "C"]
        assert square_engine.path_distance(path) == 2

    def test_ties_broken_by_location_index(self):
        engine = RouteEngine()
        engine.add_route("A", "B", 1)
        engine.add_route("B", "C", 1)
        engine.add_route("A", "D", 1)
        engine.add_route("D", "C", 1)
        assert engine.path_names(engine.shortest_path("A", "C")) == ["A", "B", "C"]

        engine = RouteEngine()
        engine.add_route("A", "D", 1)
        engine.add_route("D", "C", 1)
        engine.add_route("A", "B", 1)
        engine.add_route("B", "C", 1)
        assert engine.path_names(engine.shortest_path("A", "C")) == ["A", "D", "C"]

    def test_repeated_queries_are_deterministic(self, sample_engine):
        first = sample_engine.shortest_path("Airport", "Shopping Mall")
        for _ in range(5):
            assert sample_engine.shortest_path("Airport", "Shopping Mall") == first

    def test_parallel_edges_use_lighter_edge(self, parallel_engine):
        graph = parallel_engine.graph
        idx = graph.registry.index_of
        costs, _ = spf(graph, idx("A"))
        assert costs[idx("C")] == 2
        assert parallel_engine.path_names(
            parallel_engine.shortest_path("A", "C")
        ) == ["A", "B", "C"]

    def test_self_loop_is_ignored(self):
        engine = RouteEngine()
        engine.add_route("A", "A", 0)
        engine.add_route("A", "B", 4)
        assert engine.path_names(engine.shortest_path("A", "B")) == ["A", "B"]

    def test_sample_warehouse_to_hospital(self, sample_engine):
        path = sample_engine.shortest_path("Warehouse", "Hospital")
        assert sample_engine.path_names(path) == [
            "Warehouse",
            "Downtown",
            "University",
            "Hospital",
        ]
        assert sample_engine.path_distance(path) == pytest.approx(10.8)

    def test_index_level_call(self, line_engine):
        graph = line_engine.graph
        idx = graph.registry.index_of
        assert shortest_path(graph, idx("C"), idx("D")) == [
            idx("C"),
            idx("A"),
            idx("B"),
            idx("D"),
        ]


class TestShortestPathProperties:
    def test_matches_exhaustive_search(self, sample_engine):
        nx_graph = to_networkx(sample_engine.graph)
        for start, end in itertools.permutations(sample_engine.locations(), 2):
            path = sample_engine.shortest_path(start, end)
            names = sample_engine.path_names(path)
            assert names[0] == start and names[-1] == end

            best = min(
                nx.path_weight(nx_graph, p, weight="weight")
                for p in nx.all_simple_paths(nx_graph, start, end)
            )
            assert sample_engine.path_distance(path) == pytest.approx(best)

    def test_matches_networkx_dijkstra(self, sample_engine):
        nx_graph = to_networkx(sample_engine.graph)
        for start, end in itertools.combinations(sample_engine.locations(), 2):
            expected = nx.dijkstra_path_length(nx_graph, start, end, weight="weight")
            path = sample_engine.shortest_path(start, end)
            assert sample_engine.path_distance(path) == pytest.approx(expected)

    def test_undirected_symmetry(self, sample_engine):
        for start, end in itertools.combinations(sample_engine.locations(), 2):
            forward = sample_engine.shortest_path(start, end)
            backward = sample_engine.shortest_path(end, start)
            assert sample_engine.path_distance(forward) == pytest.approx(
                sample_engine.path_distance(backward)
            )
            assert forward[0] == backward[-1] and forward[-1] == backward[0]
