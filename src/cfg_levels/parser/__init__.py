"""Graph model and compile-output reader."""

from cfg_levels.parser.compile_output import (
    load_compile_output,
    parse_cfg,
    parse_compile_output,
    placeholder_graph,
    select_function,
)
from cfg_levels.parser.model import CfgEdge, CfgGraph, CfgNode

__all__ = [
    "CfgEdge",
    "CfgGraph",
    "CfgNode",
    "load_compile_output",
    "parse_cfg",
    "parse_compile_output",
    "placeholder_graph",
    "select_function",
]
