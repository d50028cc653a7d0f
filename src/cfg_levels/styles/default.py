"""Default style, matching the Compiler Explorer CFG pane."""

from cfg_levels.export.style import NetworkStyle

DEFAULT_STYLE = NetworkStyle(
    name="default",
    font_face='Consolas, "Liberation Mono", Courier, monospace',
    edge_font_color="#ffffff",
)
