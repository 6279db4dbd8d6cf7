"""
Main CLI application for compact-semver.

This module provides the main Typer application and global options.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from compact_semver.version import __version__

app = typer.Typer(
    name="csemver",
    help="compact-semver - pack semantic versions into 32/64-bit integers",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
error_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]csemver[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with detailed logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress all output except errors.",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            "-l",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
            envvar="CSEMVER_LOG_LEVEL",
        ),
    ] = None,
    log_format: Annotated[
        Optional[str],
        typer.Option(
            "--log-format",
            help="Log output format (json, console).",
            envvar="CSEMVER_LOG_FORMAT",
        ),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, JSON or TOML).",
            envvar="CSEMVER_CONFIG_FILE",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold blue]csemver[/bold blue] - compact semantic versions

    Packs major/minor/patch into a single 32- or 64-bit integer with an
    embedded format tag, and unpacks it back.

    [dim]Use --help on any command for more information.[/dim]
    """
    ctx.ensure_object(dict)

    if verbose and quiet:
        error_console.print(
            "[red]Error:[/red] Cannot use --verbose and --quiet together."
        )
        raise typer.Exit(code=1)

    effective_log_level = log_level
    if verbose and not log_level:
        effective_log_level = "DEBUG"
    elif quiet and not log_level:
        effective_log_level = "ERROR"

    from compact_semver.config.manager import ConfigManager
    from compact_semver.logging import get_logger, setup_logging

    manager = ConfigManager()
    try:
        manager.load(config_file)
    except Exception as e:
        error_console.print(f"[red]Error loading configuration:[/red] {e}")
        raise typer.Exit(code=1) from e

    # Flags take precedence over configuration, field by field
    effective_log_level = effective_log_level or str(manager.get("logging.level", "INFO"))
    log_format = log_format or str(manager.get("logging.format", "console"))
    setup_logging(
        level=effective_log_level,
        format_type=log_format,
        output=str(manager.get("logging.output", "stderr")),
    )

    get_logger(__name__).info(
        "configuration_loaded",
        config_file=str(manager.config_file) if manager.config_file else None,
    )

    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["log_level"] = effective_log_level
    ctx.obj["log_format"] = log_format
    ctx.obj["config_file"] = config_file
    ctx.obj["config"] = manager


from compact_semver.cli import codec as codec_cmd  # noqa: E402
from compact_semver.cli import config as config_cmd  # noqa: E402

app.command("encode")(codec_cmd.encode_command)
app.command("decode")(codec_cmd.decode_command)
app.command("layout")(codec_cmd.layout_command)
app.add_typer(config_cmd.app, name="config", help="Manage csemver configuration.")


if __name__ == "__main__":
    app()
