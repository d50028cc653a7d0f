"""Data model for control-flow graphs."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CfgNode:
    """A basic block (or any other node) of a control-flow graph."""

    id: Hashable
    label: str = ""
    # Display attributes passed through to the renderer untouched
    attrs: dict[str, Any] = field(default_factory=dict)
    # Populated by assign_levels
    level: int | None = None


@dataclass
class CfgEdge:
    """A directed edge between two node identifiers."""

    source: Hashable
    target: Hashable
    attrs: dict[str, Any] = field(default_factory=dict)
    # Populated by assign_levels
    physics: bool | None = None
    length: int | None = None


@dataclass
class CfgGraph:
    """Nodes and edges of one function's control-flow graph.

    Node order matters: it decides which nodes start a DFS tree and so
    which edges end up classified as back edges.
    """

    nodes: list[CfgNode] = field(default_factory=list)
    edges: list[CfgEdge] = field(default_factory=list)

    def add_node(self, node: CfgNode) -> None:
        self.nodes.append(node)

    def add_edge(self, edge: CfgEdge) -> None:
        self.edges.append(edge)

    def node_ids(self) -> set[Hashable]:
        return {node.id for node in self.nodes}

    def dangling_edges(self) -> list[CfgEdge]:
        """Return edges whose source or target is not a node of this graph."""
        ids = self.node_ids()
        return [e for e in self.edges if e.source not in ids or e.target not in ids]

    def duplicate_ids(self) -> list[Hashable]:
        """Return node ids that occur more than once, in first-repeat order."""
        seen: set[Hashable] = set()
        dupes: list[Hashable] = []
        for node in self.nodes:
            if node.id in seen and node.id not in dupes:
                dupes.append(node.id)
            seen.add(node.id)
        return dupes

    def levels(self) -> dict[Hashable, int | None]:
        """Return node id -> level (None until levels are assigned)."""
        return {node.id: node.level for node in self.nodes}
