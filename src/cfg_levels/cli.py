"""CLI for cfg-levels."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import click

from cfg_levels import __version__
from cfg_levels.export import DIRECTIONS, build_bundle, to_vis_data
from cfg_levels.layout import assign_levels, compute_levels, summarize
from cfg_levels.parser import (
    CfgGraph,
    load_compile_output,
    placeholder_graph,
    select_function,
)
from cfg_levels.styles import STYLES

logger = logging.getLogger(__name__)


def _load(input_file: Path) -> dict[str, CfgGraph]:
    try:
        return load_compile_output(input_file)
    except (ValueError, json.JSONDecodeError) as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cfg-levels: Assign hierarchical levels to control-flow graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Defaults to <input>.levels.json")
def level(input_file: Path, output: Path | None) -> None:
    """Level every function's CFG and write the annotated graphs."""
    cfgs = _load(input_file)

    result = {}
    for name, graph in cfgs.items():
        logger.debug("Levelling function %s", name)
        result[name] = to_vis_data(assign_levels(graph))

    if output is None:
        output = input_file.with_name(input_file.stem + ".levels.json")

    _write_json(output, result)
    click.echo(f"Levelled {len(cfgs)} functions -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Defaults to <input>.vis.json")
@click.option("-f", "--function", "function_name", default=None,
              help="Function to export (default: first function)")
@click.option("--style", type=click.Choice(list(STYLES.keys())), default="default",
              help="Network style preset (default: default)")
@click.option("--direction", type=click.Choice(DIRECTIONS), default=None,
              help="Hierarchy direction, overriding the style preset")
def export(
    input_file: Path,
    output: Path | None,
    function_name: str | None,
    style: str,
    direction: str | None,
) -> None:
    """Export one function as a vis-network data and options bundle."""
    cfgs = _load(input_file)

    name = select_function(cfgs, function_name)
    if function_name is not None and name != function_name:
        fallback = f"'{name}'" if name is not None else "placeholder graph"
        click.echo(f"Function '{function_name}' not found, using {fallback}", err=True)
    graph = cfgs[name] if name is not None else placeholder_graph()

    style_obj = STYLES[style]
    if direction is not None:
        style_obj = dataclasses.replace(style_obj, direction=direction)

    if output is None:
        output = input_file.with_name(input_file.stem + ".vis.json")

    _write_json(output, build_bundle(name, assign_levels(graph), style_obj))
    click.echo(f"Exported {name or 'placeholder graph'} "
               f"({len(graph.nodes)} nodes, {len(graph.edges)} edges) -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show level and cycle information for each function."""
    cfgs = _load(input_file)

    click.echo(f"Functions: {len(cfgs)}")
    for name, graph in cfgs.items():
        summary = summarize(graph, compute_levels(graph))
        click.echo(f"  {name}: {summary.nodes} nodes, {summary.edges} edges, "
                   f"{summary.max_level} levels")
        click.echo(f"    back edges: {summary.back_edges}, "
                   f"cycles: {summary.cycles}, "
                   f"invalid edges: {summary.invalid_edges}, "
                   f"roots: {len(summary.roots)}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Check that every edge endpoint and node id is well defined."""
    cfgs = _load(input_file)

    errors = []
    for name, graph in cfgs.items():
        for edge in graph.dangling_edges():
            errors.append(f"{name}: edge {edge.source!r} -> {edge.target!r} "
                          f"references an unknown node")
        for node_id in graph.duplicate_ids():
            errors.append(f"{name}: duplicate node id {node_id!r}")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    total_nodes = sum(len(g.nodes) for g in cfgs.values())
    total_edges = sum(len(g.edges) for g in cfgs.values())
    click.echo(f"Valid: {len(cfgs)} functions, {total_nodes} nodes, {total_edges} edges")
