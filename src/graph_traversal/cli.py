"""Command line entry points for the project."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from graph_traversal import __version__
from graph_traversal.analysis.adapters import export_graphml
from graph_traversal.analysis.traversal import UnknownStartError
from graph_traversal.analysis.visualization import plot_traversal
from graph_traversal.config import ProjectPaths, ServiceConfig
from graph_traversal.io.request_codec import (
    AnalysisRequest,
    RequestValidationError,
    dump_result,
    load_request,
    write_result,
)
from graph_traversal.pipelines.analyse import AnalysisResult, analyse
from graph_traversal.service.api import serve as serve_api
from graph_traversal.ui.app import create_app

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_input(path: Path) -> Path:
    candidate = path.expanduser().resolve()
    if not candidate.exists():
        raise typer.BadParameter(f"Request file not found: {candidate}")
    return candidate


def _load(path: Path) -> AnalysisRequest:
    try:
        return load_request(_resolve_input(path))
    except RequestValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _analyse(request: AnalysisRequest, strict_start: bool) -> AnalysisResult:
    try:
        return analyse(request, strict_start=strict_start)
    except UnknownStartError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _service_config(
    ctx: typer.Context,
    host: Optional[str] = None,
    port: Optional[int] = None,
    strict_start: Optional[bool] = None,
) -> ServiceConfig:
    overrides = {"host": host, "port": port, "strict_start": strict_start}
    if (ctx.obj or {}).get("verbose"):
        overrides["log_level"] = "DEBUG"
    try:
        config = ServiceConfig.from_env()
        return dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


app = typer.Typer(help="Breadth-first and depth-first traversal of edge-mapping graphs.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    display_version: bool = typer.Option(False, "--version", "-V", help="Show version and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print the package version when requested and configure logging."""

    if display_version:
        typer.echo(__version__)
        raise typer.Exit()
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)
    ctx.obj = {"verbose": verbose}
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("analyse")
def analyse_command(
    input: Path = typer.Option(..., "--input", "-i", help="Request JSON with graph_type, edges and start."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the response JSON here instead of stdout."),
    strict_start: bool = typer.Option(False, help="Fail when the start vertex is not part of the graph."),
) -> None:
    """Build the graph of a request file and print its BFS and DFS orders."""

    result = _analyse(_load(input), strict_start)

    if output:
        destination = write_result(result, output.expanduser().resolve())
        typer.echo(f"BFS: {' -> '.join(result.bfs_result)}")
        typer.echo(f"DFS: {' -> '.join(result.dfs_result)}")
        typer.echo(f"Result written to {destination}")
    else:
        typer.echo(json.dumps(dump_result(result), indent=2))


@app.command("plot")
def plot_command(
    input: Path = typer.Option(..., "--input", "-i", help="Request JSON with graph_type, edges and start."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination PNG (defaults to data/figures/<name>-<method>.png)."),
    method: str = typer.Option("bfs", help="Traversal order to highlight: bfs or dfs."),
    layout: str = typer.Option("spring", help="Layout algorithm: spring, shell or kamada-kawai."),
) -> None:
    """Render the request graph with its traversal order highlighted."""

    method = method.lower()
    if method not in ("bfs", "dfs"):
        raise typer.BadParameter(f"Unsupported method: {method}")

    input_path = _resolve_input(input)
    result = _analyse(_load(input_path), strict_start=False)
    order = result.bfs_result if method == "bfs" else result.dfs_result

    default_output = ProjectPaths().figures / f"{input_path.stem}-{method}.png"
    output_path = (output or default_output).expanduser().resolve()
    try:
        png_path = plot_traversal(result.graph, output_path, order=order, layout=layout)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo(f"Vertices: {len(result.graph.vertices)}  Edges: {result.graph.edge_count}")
    typer.echo(f"Visualization saved to {png_path}")


@app.command("export")
def export_command(
    input: Path = typer.Option(..., "--input", "-i", help="Request JSON with graph_type, edges and start."),
    output: Path = typer.Option(..., "--output", "-o", help="Destination GraphML file."),
) -> None:
    """Write the normalized graph of a request file to GraphML."""

    request = _load(input)
    result = _analyse(request, strict_start=False)
    destination = export_graphml(result.graph, output.expanduser().resolve())
    typer.echo(f"Graph written to {destination}")


@app.command("serve")
def serve_command(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, help="Host interface (defaults to GRAPH_TRAVERSAL_HOST or 0.0.0.0)."),
    port: Optional[int] = typer.Option(None, help="Port (defaults to GRAPH_TRAVERSAL_PORT or 4000)."),
    strict_start: Optional[bool] = typer.Option(None, "--strict-start/--lenient-start", help="Reject unknown start vertices with 404."),
) -> None:
    """Run the JSON HTTP service."""

    serve_api(_service_config(ctx, host, port, strict_start))


@app.command("ui")
def ui_command(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", help="Host interface for the Dash server."),
    port: int = typer.Option(8050, help="Port for the Dash server."),
    debug: bool = typer.Option(False, help="Enable Dash debug mode."),
) -> None:
    """Launch the interactive Dash explorer."""

    config = _service_config(ctx)
    config.apply_logging()
    app_instance = create_app(config)
    app_instance.run(host=host, port=port, debug=debug)


def run() -> None:
    """Entry point used by ``python -m graph_traversal.cli``."""

    app()


if __name__ == "__main__":
    run()
