"""Levelling pipeline for control-flow graphs."""

from cfg_levels.layout.analysis import GraphSummary, layering_dag, summarize
from cfg_levels.layout.levels import LevelResult, assign_levels, compute_levels, edge_length

__all__ = [
    "GraphSummary",
    "LevelResult",
    "assign_levels",
    "compute_levels",
    "edge_length",
    "layering_dag",
    "summarize",
]
