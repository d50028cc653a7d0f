"""Graph-level summaries of a levelling result, built on networkx."""

from __future__ import annotations

__all__ = ["GraphSummary", "layering_dag", "summarize"]

from collections.abc import Hashable
from dataclasses import dataclass, field

import networkx as nx

from cfg_levels.layout.levels import LevelResult
from cfg_levels.parser.model import CfgGraph


@dataclass
class GraphSummary:
    """Counts reported by ``cfg-levels info``."""

    nodes: int
    edges: int
    invalid_edges: int
    back_edges: int
    cycles: int
    max_level: int
    roots: list[Hashable] = field(default_factory=list)


def layering_dag(graph: CfgGraph, result: LevelResult) -> nx.DiGraph:
    """Build the DAG of layering edges, with each node's level as an attribute."""
    G = nx.DiGraph()
    for node in graph.nodes:
        G.add_node(node.id, level=result.levels[node.id])
    G.add_edges_from(result.layering_edges)
    return G


def _full_graph(graph: CfgGraph) -> nx.DiGraph:
    G = nx.DiGraph()
    G.add_nodes_from(node.id for node in graph.nodes)
    for edge in graph.edges:
        if edge.source in G and edge.target in G:
            G.add_edge(edge.source, edge.target)
    return G


def count_cycles(graph: CfgGraph) -> int:
    """Count loops: non-trivial strongly connected components plus self-loops."""
    G = _full_graph(graph)
    components = sum(1 for c in nx.strongly_connected_components(G) if len(c) > 1)
    return components + nx.number_of_selfloops(G)


def summarize(graph: CfgGraph, result: LevelResult) -> GraphSummary:
    return GraphSummary(
        nodes=len(graph.nodes),
        edges=len(graph.edges),
        invalid_edges=len(result.invalid_edges),
        back_edges=len(result.back_edges),
        cycles=count_cycles(graph),
        max_level=max(result.levels.values(), default=0),
        roots=list(result.roots),
    )
