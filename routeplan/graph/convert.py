"""Conversion utilities between WeightedGraph and NetworkX graphs.

Example:
    >>> import networkx as nx
    >>> from routeplan.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("Warehouse", "Downtown", weight=5.2)
    >>> graph = from_networkx(G)
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

import networkx as nx

from routeplan.graph.weighted_graph import WeightedGraph

if TYPE_CHECKING:
    NxGraph = Union[nx.Graph, nx.MultiGraph, nx.DiGraph, nx.MultiDiGraph]
else:
    NxGraph = Any


def to_networkx(graph: WeightedGraph, weight_attr: str = "weight") -> nx.MultiGraph:
    """Convert a WeightedGraph to a NetworkX MultiGraph keyed by location name.

    Every location becomes a node (isolated ones included) and every
    undirected edge becomes one MultiGraph edge, so parallel edges and
    self-loops survive the conversion.

    Args:
        graph: The graph to convert.
        weight_attr: Edge attribute name that receives the weight.

    Returns:
        nx.MultiGraph: Graph with string nodes and weighted edges.
    """
    registry = graph.registry
    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(registry.names())
    for u, v, weight in graph.edges():
        nx_graph.add_edge(
            registry.name_of(u), registry.name_of(v), **{weight_attr: weight}
        )
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
) -> WeightedGraph:
    """Build a WeightedGraph from any NetworkX graph.

    Node labels are converted to ``str`` and registered in node iteration
    order. Directed graphs are treated as undirected: each directed edge
    becomes one undirected edge.

    Args:
        nx_graph: Source graph.
        weight_attr: Edge attribute holding the distance.
        default_weight: Distance used when the attribute is missing.

    Returns:
        WeightedGraph: A new graph with the same locations and edges.
    """
    graph = WeightedGraph()
    for node in nx_graph.nodes:
        graph.add_location(str(node))
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(str(u), str(v), data.get(weight_attr, default_weight))
    return graph
