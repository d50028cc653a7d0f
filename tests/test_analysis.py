"""Tests for networkx-based summaries."""

import networkx as nx

from cfg_levels.layout.analysis import count_cycles, layering_dag, summarize
from cfg_levels.layout.levels import compute_levels
from cfg_levels.parser.model import CfgEdge, CfgGraph, CfgNode


def _graph(node_ids, edges):
    return CfgGraph(
        nodes=[CfgNode(id=nid) for nid in node_ids],
        edges=[CfgEdge(source=s, target=t) for s, t in edges],
    )


def test_layering_dag_levels():
    graph = _graph(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "a")])
    G = layering_dag(graph, compute_levels(graph))
    assert nx.is_directed_acyclic_graph(G)
    assert set(G.edges) == {("a", "b"), ("b", "c")}
    assert nx.get_node_attributes(G, "level") == {"a": 1, "b": 2, "c": 3}


def test_count_cycles():
    graph = _graph(
        ["a", "b", "c", "d", "e"],
        [("a", "b"), ("b", "a"), ("b", "c"), ("c", "c"), ("c", "d"), ("d", "e"), ("e", "d")],
    )
    assert count_cycles(graph) == 3


def test_count_cycles_ignores_dangling_edges():
    graph = _graph(["a"], [("a", "x"), ("x", "a")])
    assert count_cycles(graph) == 0


def test_summarize():
    graph = _graph(
        ["bb0", "bb1", "bb2", "bb3"],
        [("bb0", "bb1"), ("bb1", "bb2"), ("bb2", "bb1"), ("bb1", "bb3"), ("bb3", "ghost")],
    )
    summary = summarize(graph, compute_levels(graph))
    assert summary.nodes == 4
    assert summary.edges == 5
    assert summary.invalid_edges == 1
    assert summary.back_edges == 1
    assert summary.cycles == 1
    assert summary.max_level == 3
    assert summary.roots == ["bb0"]


def test_summarize_empty():
    summary = summarize(CfgGraph(), compute_levels(CfgGraph()))
    assert summary.max_level == 0
    assert summary.roots == []
