"""Reader for compiler CFG output.

A compiler result carries one control-flow graph per function, each in
the node/edge shape a vis-network dataset uses::

    {"rustMirOutput": {"cfg": {"main": {"nodes": [...], "edges": [...]}}}}

A bare ``{function: graph}`` mapping and a single ``{"nodes", "edges"}``
graph are accepted too.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cfg_levels.parser.model import CfgEdge, CfgGraph, CfgNode

SINGLE_GRAPH_NAME = "<graph>"
"""Function name used for input that is a single graph."""

PLACEHOLDER_LABEL = "No Output"

# Keys computed by assign_levels; dropped on input so output can be re-read
_COMPUTED_NODE_KEYS = {"level"}
_COMPUTED_EDGE_KEYS = {"physics", "length"}


def _parse_node(raw: Any, position: int) -> CfgNode:
    if not isinstance(raw, Mapping) or "id" not in raw:
        raise ValueError(f"Node #{position} must be an object with an 'id' key, got {raw!r}")
    attrs = {
        k: v for k, v in raw.items()
        if k not in ("id", "label") and k not in _COMPUTED_NODE_KEYS
    }
    label = raw.get("label")
    return CfgNode(id=raw["id"], label="" if label is None else str(label), attrs=attrs)


def _parse_edge(raw: Any, position: int) -> CfgEdge:
    if not isinstance(raw, Mapping) or "from" not in raw or "to" not in raw:
        raise ValueError(
            f"Edge #{position} must be an object with 'from' and 'to' keys, got {raw!r}"
        )
    attrs = {
        k: v for k, v in raw.items()
        if k not in ("from", "to") and k not in _COMPUTED_EDGE_KEYS
    }
    return CfgEdge(source=raw["from"], target=raw["to"], attrs=attrs)


def parse_cfg(data: Any) -> CfgGraph:
    """Parse one ``{"nodes": [...], "edges": [...]}`` graph.

    Edges are not checked against the node list; edges with an unknown
    endpoint are kept and end up outside the layered layout.

    Compilers are not consistent about numeric ids, so an edge endpoint
    that matches no node id but whose string form matches one (``"1"``
    for node ``1``) is rewritten to that node's id.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a graph object with 'nodes' and 'edges', got {type(data).__name__}")
    nodes = data.get("nodes", [])
    edges = data.get("edges", [])
    if not isinstance(nodes, list) or not isinstance(edges, list):
        raise ValueError("Graph 'nodes' and 'edges' must both be lists")

    graph = CfgGraph()
    for i, raw in enumerate(nodes):
        graph.add_node(_parse_node(raw, i))
    ids = graph.node_ids()
    by_key = {str(node.id): node.id for node in graph.nodes}
    for i, raw in enumerate(edges):
        edge = _parse_edge(raw, i)
        if edge.source not in ids:
            edge.source = by_key.get(str(edge.source), edge.source)
        if edge.target not in ids:
            edge.target = by_key.get(str(edge.target), edge.target)
        graph.add_edge(edge)
    return graph


def _is_single_graph(data: Mapping) -> bool:
    return isinstance(data.get("nodes"), list) and isinstance(data.get("edges"), list)


def parse_compile_output(data: Any) -> dict[str, CfgGraph]:
    """Parse every function's graph, keyed by function name in input order."""
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    # Keys of a compiler result's cfg mapping are always function names
    if "rustMirOutput" in data:
        output = data["rustMirOutput"] or {}
        if not isinstance(output, Mapping):
            raise ValueError("'rustMirOutput' must be an object")
        data = output.get("cfg") or {}
        if not isinstance(data, Mapping):
            raise ValueError("'rustMirOutput.cfg' must be an object")
    elif _is_single_graph(data):
        return {SINGLE_GRAPH_NAME: parse_cfg(data)}

    cfgs: dict[str, CfgGraph] = {}
    for name, raw in data.items():
        try:
            cfgs[str(name)] = parse_cfg(raw)
        except ValueError as e:
            raise ValueError(f"Function '{name}': {e}") from e
    return cfgs


def load_compile_output(path: Path) -> dict[str, CfgGraph]:
    """Read and parse a JSON compile-output file."""
    return parse_compile_output(json.loads(path.read_text()))


def select_function(cfgs: Mapping[str, CfgGraph], current: str | None = None) -> str | None:
    """Pick the function to show: ``current`` if present, else the first one."""
    if current is not None and current in cfgs:
        return current
    return next(iter(cfgs), None)


def placeholder_graph() -> CfgGraph:
    """Graph shown when there is no CFG output to display."""
    return CfgGraph(nodes=[CfgNode(id=0, label=PLACEHOLDER_LABEL, attrs={"shape": "box"})])
