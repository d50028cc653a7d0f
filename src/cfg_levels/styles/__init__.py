"""Style presets for exported CFG views."""

from cfg_levels.styles.compact import COMPACT_STYLE
from cfg_levels.styles.default import DEFAULT_STYLE

STYLES = {
    "default": DEFAULT_STYLE,
    "compact": COMPACT_STYLE,
}

__all__ = ["STYLES", "DEFAULT_STYLE", "COMPACT_STYLE"]
