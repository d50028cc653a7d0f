"""Level assignment for control-flow graphs that may contain cycles.

A depth-first pass splits the valid edges into layering edges and back
edges (edges into a node still on the DFS path). The layering edges form
a DAG, and longest-path layering over that DAG gives each node its level:
1 + the maximum level of its layering predecessors.

The DFS uses an explicit stack so deep graphs do not hit the recursion
limit, and visits nodes in the same order a recursive walk would.
"""

from __future__ import annotations

__all__ = ["LevelResult", "assign_levels", "compute_levels", "edge_length"]

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field, replace
from enum import Enum

import networkx as nx

from cfg_levels.layout.constants import (
    BASE_EDGE_LENGTH,
    EDGE_LENGTH_DECAY,
    EDGE_LENGTH_DECAY_CAP,
    ROOT_LEVEL,
)
from cfg_levels.parser.model import CfgEdge, CfgGraph

logger = logging.getLogger(__name__)


class _State(Enum):
    UNVISITED = 0
    ACTIVE = 1
    DONE = 2


@dataclass
class _WorkingNode:
    index: int
    edges: list[int] = field(default_factory=list)
    targets: set[int] = field(default_factory=set)
    state: _State = _State.UNVISITED
    layering_edges: list[int] = field(default_factory=list)


@dataclass
class LevelResult:
    """Outcome of levelling one graph.

    Edge pairs are (source id, target id) in the order the DFS found them.
    ``invalid_edges`` holds indices into the graph's edge list.
    """

    levels: dict[Hashable, int] = field(default_factory=dict)
    roots: list[Hashable] = field(default_factory=list)
    layering_edges: list[tuple[Hashable, Hashable]] = field(default_factory=list)
    back_edges: list[tuple[Hashable, Hashable]] = field(default_factory=list)
    invalid_edges: list[int] = field(default_factory=list)


def _build_index(graph: CfgGraph) -> tuple[dict[Hashable, int], list[_WorkingNode]]:
    index: dict[Hashable, int] = {}
    records: list[_WorkingNode] = []
    for i, node in enumerate(graph.nodes):
        index[node.id] = i
        records.append(_WorkingNode(index=i))

    for edge in graph.edges:
        if _is_valid(edge, index):
            source = records[index[edge.source]]
            target_idx = index[edge.target]
            # Parallel edges share one adjacency entry
            if target_idx not in source.targets:
                source.targets.add(target_idx)
                source.edges.append(target_idx)
    return index, records


def _is_valid(edge: CfgEdge, index: dict[Hashable, int]) -> bool:
    return edge.source in index and edge.target in index


def _classify(
    records: list[_WorkingNode],
) -> tuple[list[int], list[tuple[int, int]]]:
    """Run the three-colour DFS over every node, in input order.

    Returns the DFS roots and the back edges as index pairs. Layering
    edges are written onto the records.
    """
    roots: list[int] = []
    back_edges: list[tuple[int, int]] = []

    for start in records:
        if start.state is not _State.UNVISITED:
            continue
        roots.append(start.index)
        start.state = _State.ACTIVE
        stack = [(start, iter(start.edges))]
        while stack:
            node, targets = stack[-1]
            for target_idx in targets:
                target = records[target_idx]
                if target.state is _State.ACTIVE:
                    back_edges.append((node.index, target_idx))
                    continue
                node.layering_edges.append(target_idx)
                if target.state is _State.UNVISITED:
                    target.state = _State.ACTIVE
                    stack.append((target, iter(target.edges)))
                    break
            else:
                node.state = _State.DONE
                stack.pop()

    return roots, back_edges


def _propagate(records: list[_WorkingNode]) -> list[int]:
    """Assign longest-path levels over the layering edges.

    Every source of the layering DAG is a DFS root, so sources get
    ROOT_LEVEL and every other node 1 + its deepest layering predecessor.
    """
    G = nx.DiGraph()
    G.add_nodes_from(r.index for r in records)
    for record in records:
        G.add_edges_from((record.index, t) for t in record.layering_edges)

    levels = [ROOT_LEVEL] * len(records)
    for node in nx.topological_sort(G):
        preds = list(G.predecessors(node))
        if preds:
            levels[node] = max(levels[p] for p in preds) + 1
    return levels


def edge_length(diff: int) -> int:
    """Return the rendering length for an edge spanning ``diff`` levels.

    The per-level length shrinks as the span grows, then saturates:
    1 -> 195, 2 -> 380, 5 -> 875, 6 -> 1050.
    """
    return diff * (BASE_EDGE_LENGTH - EDGE_LENGTH_DECAY * min(EDGE_LENGTH_DECAY_CAP, diff))


def compute_levels(graph: CfgGraph) -> LevelResult:
    """Classify edges and compute a level for every node of ``graph``.

    The graph itself is left untouched. Which edges count as back edges
    (and so the final levels) depends on node order: each DFS tree starts
    at the first node in ``graph.nodes`` not yet visited.
    """
    index, records = _build_index(graph)
    roots, back_edges = _classify(records)
    levels = _propagate(records)

    ids = [node.id for node in graph.nodes]
    result = LevelResult(
        levels={ids[i]: level for i, level in enumerate(levels)},
        roots=[ids[i] for i in roots],
        layering_edges=[
            (ids[r.index], ids[t]) for r in records for t in r.layering_edges
        ],
        back_edges=[(ids[s], ids[t]) for s, t in back_edges],
        invalid_edges=[
            i for i, edge in enumerate(graph.edges) if not _is_valid(edge, index)
        ],
    )
    logger.debug(
        "Levelled %d nodes, %d edges: %d roots, %d back edges, %d invalid edges",
        len(graph.nodes),
        len(graph.edges),
        len(result.roots),
        len(result.back_edges),
        len(result.invalid_edges),
    )
    return result


def _annotate(edge: CfgEdge, levels: dict[Hashable, int]) -> CfgEdge:
    if edge.source not in levels or edge.target not in levels:
        return replace(edge, physics=False, length=None)
    source_level = levels[edge.source]
    target_level = levels[edge.target]
    if source_level >= target_level:
        return replace(edge, physics=False, length=None)
    return replace(edge, physics=True, length=edge_length(target_level - source_level))


def assign_levels(graph: CfgGraph) -> CfgGraph:
    """Return a copy of ``graph`` with node levels and edge layout hints.

    Every node gets ``level >= 1``. An edge going strictly down the levels
    gets ``physics=True`` and a ``length``; every other edge, including back
    edges and edges with an unknown endpoint, gets ``physics=False``.
    """
    result = compute_levels(graph)
    nodes = [replace(node, level=result.levels[node.id]) for node in graph.nodes]
    edges = [_annotate(edge, result.levels) for edge in graph.edges]
    return CfgGraph(nodes=nodes, edges=edges)
