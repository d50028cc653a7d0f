"""Export levelled graphs for vis-network."""

from cfg_levels.export.style import DIRECTIONS, NetworkStyle
from cfg_levels.export.vis import build_bundle, network_options, to_vis_data

__all__ = ["DIRECTIONS", "NetworkStyle", "build_bundle", "network_options", "to_vis_data"]
