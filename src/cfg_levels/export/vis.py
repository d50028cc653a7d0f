"""vis-network data and options for a levelled CFG.

The levels feed vis-network's hierarchical layout; ``physics`` and
``length`` on each edge decide which edges pull on the layout.
"""

from __future__ import annotations

from typing import Any

from cfg_levels.export.style import NetworkStyle
from cfg_levels.parser.model import CfgEdge, CfgGraph, CfgNode


def _node_to_dict(node: CfgNode) -> dict[str, Any]:
    data: dict[str, Any] = {"id": node.id, "label": node.label, **node.attrs}
    if node.level is not None:
        data["level"] = node.level
    return data


def _edge_to_dict(edge: CfgEdge) -> dict[str, Any]:
    data: dict[str, Any] = {"from": edge.source, "to": edge.target, **edge.attrs}
    if edge.physics is not None:
        data["physics"] = edge.physics
    if edge.length is not None:
        data["length"] = edge.length
    return data


def to_vis_data(graph: CfgGraph) -> dict[str, list[dict[str, Any]]]:
    """Convert a graph to a vis-network ``{"nodes", "edges"}`` dataset."""
    return {
        "nodes": [_node_to_dict(n) for n in graph.nodes],
        "edges": [_edge_to_dict(e) for e in graph.edges],
    }


def network_options(style: NetworkStyle) -> dict[str, Any]:
    """Build the vis-network options object for a hierarchical CFG view.

    Edge physics is off by default; levelled edges that go down the
    hierarchy switch it back on individually.
    """
    return {
        "autoResize": True,
        "locale": "en",
        "edges": {
            "arrows": {"to": {"enabled": True}},
            "smooth": {
                "enabled": True,
                "type": style.smooth_type,
                "roundness": style.smooth_roundness,
            },
            "physics": False,
            "font": {
                "face": style.font_face,
                "strokeWidth": 0,
                "color": style.edge_font_color,
            },
        },
        "nodes": {
            "font": {"face": style.font_face, "align": style.node_font_align},
        },
        "layout": {
            "hierarchical": {
                "enabled": True,
                "direction": style.direction,
                "nodeSpacing": style.node_spacing,
                "levelSeparation": style.level_separation,
            },
        },
        "physics": {
            "enabled": False,
            "hierarchicalRepulsion": {"nodeDistance": style.node_distance},
        },
        "interaction": {
            "navigationButtons": False,
            "keyboard": {
                "enabled": True,
                "speed": {
                    "x": style.keyboard_speed_x,
                    "y": style.keyboard_speed_y,
                    "zoom": style.keyboard_speed_zoom,
                },
                "bindToWindow": False,
            },
        },
    }


def build_bundle(name: str | None, graph: CfgGraph, style: NetworkStyle) -> dict[str, Any]:
    """Bundle one function's dataset with the options to display it."""
    return {
        "function": name,
        "data": to_vis_data(graph),
        "options": network_options(style),
    }
