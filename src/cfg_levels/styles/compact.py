"""Compact style for small screens and short functions."""

from cfg_levels.export.style import NetworkStyle

COMPACT_STYLE = NetworkStyle(
    name="compact",
    font_face='Consolas, "Liberation Mono", Courier, monospace',
    edge_font_color="#ffffff",
    node_spacing=300.0,
    level_separation=100.0,
    node_distance=120.0,
)
