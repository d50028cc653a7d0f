"""Style settings for the vis-network options bundle."""

from __future__ import annotations

from dataclasses import dataclass

DIRECTIONS = ("UD", "DU", "LR", "RL")
"""Hierarchical layout directions understood by vis-network."""


@dataclass
class NetworkStyle:
    """Visual settings for a hierarchical CFG view."""

    name: str
    font_face: str
    edge_font_color: str
    node_font_align: str = "left"
    direction: str = "UD"
    node_spacing: float = 800.0
    level_separation: float = 150.0
    node_distance: float = 160.0
    smooth_type: str = "dynamic"
    smooth_roundness: float = 1.0
    # Keyboard navigation
    keyboard_speed_x: float = 10.0
    keyboard_speed_y: float = 10.0
    keyboard_speed_zoom: float = 0.03
