"""
tokenforge CLI.

Commands:
- handlers: List registered token type handlers in detection order
- detect: Detect the token type of a path/value definition
- detect-figma: Detect the token type of a native Figma variable
- convert: Detect, parse and render a value as CSS or SCSS
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from tokenforge._version import get_version
from tokenforge.config import RegistryConfig, find_config, load_config
from tokenforge.errors import TokenForgeError
from tokenforge.logging import setup_logging
from tokenforge.registry import (
    CssConversionOptions,
    FigmaDetectionContext,
    ScssConversionOptions,
    TokenTypeRegistry,
    VariableDefsContext,
    create_default_registry,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="tokenforge: detect, parse and render design tokens",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    """Per-invocation state shared with subcommands."""

    config: RegistryConfig
    registry: TokenTypeRegistry


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tokenforge {get_version()}")
        raise typer.Exit()


def _state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        raise typer.Exit(code=2)
    return state


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to tokenforge.toml (default: nearest one above the current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """Load configuration and build the token type registry."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    path = config_path or find_config()
    try:
        config = load_config(path) if path else RegistryConfig()
        registry = create_default_registry(config)
    except TokenForgeError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2)

    if path:
        logger.debug("Loaded configuration from %s", path)

    ctx.obj = CliState(config=config, registry=registry)


@app.command(name="handlers")
def handlers_command(ctx: typer.Context) -> None:
    """List registered handlers in detection order."""
    registry = _state(ctx).registry

    table = Table(title="Token Type Handlers")
    table.add_column("Type", style="cyan")
    table.add_column("Name")
    table.add_column("Priority", justify="right")
    table.add_column("Detects")
    table.add_column("Parses")
    table.add_column("SCSS")
    table.add_column("Namespace")

    for handler in registry.get_all_handlers():
        detects = [
            label
            for label, fn in (("figma", handler.detect_figma), ("text", handler.detect_variable_defs))
            if fn is not None
        ]
        parses = [
            label
            for label, fn in (("figma", handler.parse_figma_value), ("text", handler.parse_variable_defs_value))
            if fn is not None
        ]
        table.add_row(
            handler.type,
            handler.name,
            str(handler.priority),
            ", ".join(detects) or "-",
            ", ".join(parses) or "-",
            "yes" if handler.to_scss is not None else "css",
            handler.default_namespace or "-",
        )

    console.print(table)


@app.command(name="detect")
def detect_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Variable path, e.g. Color/Primary/500"),
    value: str = typer.Argument(..., help="Raw string value"),
) -> None:
    """Detect the token type of a path/value definition."""
    registry = _state(ctx).registry
    try:
        token_type = registry.detect_from_variable_defs(VariableDefsContext(path=path, value=value))
    except TokenForgeError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    typer.echo(token_type)


@app.command(name="detect-figma")
def detect_figma_command(
    ctx: typer.Context,
    resolved_type: str = typer.Argument(..., help="Figma resolved type (COLOR, FLOAT, STRING, BOOLEAN)"),
    scope: list[str] | None = typer.Option(None, "--scope", "-s", help="Variable scope (repeatable)"),
    name: str | None = typer.Option(None, "--name", "-n", help="Variable name"),
) -> None:
    """Detect the token type of a native Figma variable."""
    registry = _state(ctx).registry
    context = FigmaDetectionContext(resolved_type=resolved_type.upper(), scopes=scope or [], name=name)
    try:
        token_type = registry.detect_from_figma(context)
    except TokenForgeError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    typer.echo(token_type)


@app.command(name="convert")
def convert_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Raw string value"),
    path: str = typer.Option("", "--path", "-p", help="Variable path used for detection and namespace hints"),
    token_type: str | None = typer.Option(None, "--type", "-t", help="Skip detection and use this token type"),
    scss: bool = typer.Option(False, "--scss", help="Render SCSS instead of CSS"),
    color_format: str | None = typer.Option(
        None,
        "--color-format",
        "-f",
        help="Color format: hex, rgb, oklch (CSS) or hex, rgb, hsl (SCSS)",
    ),
    show_namespace: bool = typer.Option(False, "--namespace", help="Also print the Tailwind namespace"),
) -> None:
    """Detect, parse and render a value."""
    state = _state(ctx)
    registry = state.registry
    output = state.config.output

    try:
        if scss:
            options: CssConversionOptions | ScssConversionOptions = ScssConversionOptions(
                color_format=color_format or output.scss_color_format, prefix=output.prefix
            )
        else:
            options = CssConversionOptions(color_format=color_format or output.css_color_format, prefix=output.prefix)
    except ValidationError:
        err_console.print(f"[red]Error:[/red] Unsupported color format '{color_format}'")
        raise typer.Exit(code=2)

    try:
        resolved = token_type or registry.detect_from_variable_defs(VariableDefsContext(path=path, value=value))
        parsed = registry.parse_variable_defs_value(resolved, value)
        if parsed is None:
            err_console.print(f"[yellow]Cannot parse {value!r} as {resolved}[/yellow]")
            raise typer.Exit(code=1)

        if isinstance(options, ScssConversionOptions):
            rendered = registry.to_scss(resolved, parsed, options)
        else:
            rendered = registry.to_css(resolved, parsed, options)
        segments = [segment for segment in re.split(r"[/.]", path) if segment]
        namespace = registry.get_namespace(resolved, segments)
    except TokenForgeError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2)

    typer.echo(rendered)
    if show_namespace:
        typer.echo(f"namespace: {namespace or 'none'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
