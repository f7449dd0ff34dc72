"""Command-line interface for Backspace Detective."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from backspace_detective.adapter import analyze_editing_pattern
from backspace_detective.batch import analyze_per_file
from backspace_detective.config import LOG_LEVELS, LoggingConfig, LogLevel, load_config
from backspace_detective.errors import DecodeError

console = Console()
_log_console = Console(stderr=True)


def _configure_logging(level: LogLevel) -> None:
    """Route log records through rich on stderr.

    stdout carries only analysis output so ``--json-output`` stays parseable.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_log_console, show_path=False)],
    )


def _percentage(ratio: float) -> str:
    return f"{ratio * 100:.1f}%"


def _patterns(response: dict[str, Any]) -> str:
    return ", ".join(response["metrics"]["correction_patterns"]) or "-"


@click.group()
@click.option("--config", "-c", default=None, help="Path to backspace_detective.yaml config file")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.pass_context
def main(ctx: click.Context, config: str | None, log_level: str | None) -> None:
    """Backspace Detective: tell AI-written edits from human ones by backspace usage."""
    cfg = load_config(config)
    if log_level is not None:
        cfg = cfg.model_copy(update={"logging": LoggingConfig(level=log_level.lower())})
    ctx.obj = {"config_path": config, "config": cfg}
    _configure_logging(cfg.logging.level)


@main.command()
@click.argument("stats_file", type=click.File("r"), default="-")
@click.option("--per-file", is_flag=True, help="Input maps file paths to stats objects")
@click.option("--json-output", is_flag=True, help="Output the raw JSON response")
def analyze(stats_file: Any, per_file: bool, json_output: bool) -> None:
    """Analyze editing stats read from STATS_FILE (default: stdin)."""
    payload = stats_file.read()

    if per_file:
        _analyze_files(payload, json_output)
        return

    response_text = analyze_editing_pattern(payload)
    response = json.loads(response_text)

    if json_output:
        click.echo(response_text)
    elif response.get("is_error"):
        console.print(f"[bold red]Error:[/bold red] {response['error']}")
    else:
        table = Table(title=f"Prediction: {response['prediction']}")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Confidence", f"{response['confidence']:.2f}")
        table.add_row("Backspace", _percentage(response["backspace_ratio"]))
        table.add_row("Typing speed", f"{response['typing_speed']:.1f} cpm")
        table.add_row("Corrections", _percentage(response["metrics"]["correction_frequency"]))
        table.add_row("Efficiency", f"{response['metrics']['character_efficiency']:.3f}")
        table.add_row("Patterns", _patterns(response))
        console.print(table)

    if response.get("is_error"):
        sys.exit(1)


def _analyze_files(payload: str, json_output: bool) -> None:
    """Analyze a ``{path: stats}`` payload and print one row per file."""
    try:
        results = analyze_per_file(payload)
    except DecodeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(results, indent=2))
    else:
        table = Table(title="Per-file Analysis")
        table.add_column("File", style="cyan")
        table.add_column("Prediction", style="yellow")
        table.add_column("Confidence", justify="right")
        table.add_column("Backspace", justify="right")
        table.add_column("Speed (cpm)", justify="right")
        table.add_column("Patterns")
        for path, response in results.items():
            if response.get("is_error"):
                table.add_row(path, "[red]error[/red]", "-", "-", "-", response["error"])
                continue
            table.add_row(
                path,
                response["prediction"],
                f"{response['confidence']:.2f}",
                _percentage(response["backspace_ratio"]),
                f"{response['typing_speed']:.1f}",
                _patterns(response),
            )
        console.print(table)

    if any(response.get("is_error") for response in results.values()):
        sys.exit(1)


@main.command()
@click.option("--host", default=None, help="Override server host")
@click.option("--port", "-p", default=None, type=int, help="Override server port")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the HTTP analysis service."""
    import uvicorn

    from backspace_detective.server import create_app

    cfg = ctx.obj["config"]
    server_host = host or cfg.server.host
    server_port = port or cfg.server.port

    console.print(
        f"[bold green]Starting Backspace Detective on {server_host}:{server_port}[/bold green]"
    )

    app = create_app(ctx.obj["config_path"])
    uvicorn.run(app, host=server_host, port=server_port, log_level=cfg.logging.level)


@main.command(name="mcp")
@click.pass_context
def mcp_server(ctx: click.Context) -> None:
    """Start the MCP tool server on stdio."""
    import asyncio

    from backspace_detective.mcp_server import run_mcp_server

    cfg = ctx.obj["config"]
    asyncio.run(run_mcp_server(cfg))


if __name__ == "__main__":
    main()
