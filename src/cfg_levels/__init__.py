"""cfg-levels: hierarchical levels and edge hints for control-flow graphs."""

__version__ = "0.1.0"
