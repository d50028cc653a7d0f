"""Layout constants used across layout modules."""

# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------
ROOT_LEVEL: int = 1
"""Level given to the node that starts each DFS tree."""

# ---------------------------------------------------------------------------
# Edge length
# ---------------------------------------------------------------------------
BASE_EDGE_LENGTH: int = 200
"""Per-level length of an edge spanning a single level, before decay."""

EDGE_LENGTH_DECAY: int = 5
"""Amount the per-level length shrinks for each level spanned."""

EDGE_LENGTH_DECAY_CAP: int = 5
"""Level span after which the per-level length stops shrinking.

With the defaults the per-level length bottoms out at 200 - 5 * 5 = 175.
"""
