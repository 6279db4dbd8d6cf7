"""
Codec commands for the csemver CLI.

This module provides the encode, decode and layout commands. Components
are taken as three separate integers; no version strings are parsed.
"""

import json
from typing import Annotated, Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from compact_semver.codec import (
    SemverCodecError,
    VersionRecord,
    decode,
    encode,
    get_layout,
    reinterpret,
)
from compact_semver.config.manager import ConfigManager
from compact_semver.config.models import CodecConfig, OutputFormat
from compact_semver.logging import get_logger, log_execution_context

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)

WidthOption = Annotated[
    Optional[int],
    typer.Option(
        "--width",
        "-w",
        help="Packed integer width in bits (32 or 64). Defaults to codec.width.",
    ),
]
SignedOption = Annotated[
    Optional[bool],
    typer.Option(
        "--signed/--unsigned",
        help="Signed or unsigned integer representation. Defaults to codec.signed.",
    ),
]
FormatOption = Annotated[
    Optional[OutputFormat],
    typer.Option(
        "--format",
        "-f",
        help="Output format (table, json, yaml). Defaults to output.format.",
        case_sensitive=False,
    ),
]


def _settings(ctx: typer.Context) -> tuple[CodecConfig, OutputFormat]:
    """Resolve codec and output settings from the loaded configuration."""
    manager: Optional[ConfigManager] = (ctx.obj or {}).get("config")
    if manager is None:
        manager = ConfigManager()
        manager.load()

    try:
        model = manager.to_model()
    except ValidationError as e:
        error_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    return model.codec, model.output.format


def _render(data: dict[str, Any], output_format: OutputFormat, title: str) -> None:
    """Print a flat result mapping in the requested format."""
    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(data, indent=2))
    elif output_format == OutputFormat.YAML:
        typer.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    else:
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Field", style="dim")
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(key, str(value))
        console.print(table)


def _describe(value: int, width: int, signed: bool) -> dict[str, Any]:
    """Describe the bytes behind a packed integer."""
    unsigned = reinterpret(value, width, signed=True) if signed else value
    data = unsigned.to_bytes(width // 8, "little")
    return {
        "value": value,
        "hex": f"0x{unsigned:0{width // 4}x}",
        "bytes": " ".join(f"{b:02x}" for b in data),
    }


def _parse_integer(raw: str) -> int:
    try:
        return int(raw, 0)
    except ValueError:
        raise typer.BadParameter(f"Not an integer: {raw}", param_hint="VALUE") from None


def _fail(error: SemverCodecError) -> NoReturn:
    error_console.print(f"[red]Error:[/red] {escape(error.message)}")
    for tip in error.troubleshooting_tips:
        error_console.print(f"  [dim]•[/dim] {tip}")
    raise typer.Exit(code=1) from error


def encode_command(
    ctx: typer.Context,
    major: Annotated[int, typer.Argument(help="Major version.", min=0)],
    minor: Annotated[int, typer.Argument(help="Minor version.", min=0)],
    patch: Annotated[int, typer.Argument(help="Patch version.", min=0)],
    width: WidthOption = None,
    signed: SignedOption = None,
    strict: Annotated[
        Optional[bool],
        typer.Option(
            "--strict/--lenient",
            help="Reject components equal to 2**field_width. Defaults to codec.strict_overflow.",
        ),
    ] = None,
    output_format: FormatOption = None,
) -> None:
    """
    Encode MAJOR MINOR PATCH into a packed integer.

    [bold]Examples:[/bold]

        [dim]# 32-bit signed (default)[/dim]
        $ csemver encode 1 0 20

        [dim]# 64-bit unsigned as JSON[/dim]
        $ csemver encode 1 1 5 --width 64 --unsigned --format json
    """
    codec_config, default_format = _settings(ctx)
    width = width if width is not None else codec_config.width
    signed = signed if signed is not None else codec_config.signed
    strict = strict if strict is not None else codec_config.strict_overflow
    output_format = output_format or default_format

    record = VersionRecord.new(major, minor, patch)
    params = {"version": str(record), "width": width, "signed": signed, "strict": strict}

    try:
        with log_execution_context("csemver encode", params):
            value = encode(record, width=width, signed=signed, strict=strict)
    except SemverCodecError as e:
        _fail(e)

    data: dict[str, Any] = {"version": str(record), "width": width, "signed": signed}
    data.update(_describe(value, width, signed))
    _render(data, output_format, title="Encoded Version")


def decode_command(
    ctx: typer.Context,
    value: Annotated[
        str,
        typer.Argument(
            help="Packed integer (decimal, or 0x-prefixed hex). Use -- before negative values.",
        ),
    ],
    width: WidthOption = None,
    signed: SignedOption = None,
    output_format: FormatOption = None,
) -> None:
    """
    Decode a packed integer into its version components.

    [bold]Examples:[/bold]

        [dim]# 32-bit signed (default)[/dim]
        $ csemver decode 83886081

        [dim]# 64-bit unsigned, hex input[/dim]
        $ csemver decode 0x500010001 --width 64 --unsigned
    """
    codec_config, default_format = _settings(ctx)
    width = width if width is not None else codec_config.width
    signed = signed if signed is not None else codec_config.signed
    output_format = output_format or default_format

    number = _parse_integer(value)
    params = {"value": number, "width": width, "signed": signed}

    try:
        with log_execution_context("csemver decode", params):
            record = decode(number, width=width, signed=signed)
    except SemverCodecError as e:
        _fail(e)

    data: dict[str, Any] = {
        "version": str(record),
        "major": record.major,
        "minor": record.minor,
        "patch": record.patch,
        "format_tag": record.format_tag.name,
    }
    data.update(_describe(number, width, signed))
    _render(data, output_format, title="Decoded Version")


def layout_command(
    ctx: typer.Context,
    width: WidthOption = None,
    output_format: FormatOption = None,
) -> None:
    """
    Show the bit layout used for a packed integer width.

    [bold]Examples:[/bold]

        $ csemver layout --width 64
    """
    codec_config, default_format = _settings(ctx)
    width = width if width is not None else codec_config.width
    output_format = output_format or default_format

    try:
        layout = get_layout(width)
    except SemverCodecError as e:
        _fail(e)

    fields = [
        {
            "field": name,
            "offset": f"{bit_range.start}-{bit_range.stop}",
            "bits": bit_range.width,
            "max_value": bit_range.capacity,
        }
        for name, bit_range in layout.ranges().items()
    ]
    if layout.unused_bits:
        fields.append(
            {
                "field": "(unused)",
                "offset": f"{layout.used_bits}-{layout.total_bits}",
                "bits": layout.unused_bits,
                "max_value": 0,
            }
        )

    logger.debug("layout_shown", width=width, unused_bits=layout.unused_bits)

    if output_format == OutputFormat.TABLE:
        table = Table(title=f"{width}-bit Layout", show_header=True, header_style="bold cyan")
        table.add_column("Field", style="bold")
        table.add_column("Offset")
        table.add_column("Bits", justify="right")
        table.add_column("Max Value", justify="right")
        for row in fields:
            table.add_row(row["field"], row["offset"], str(row["bits"]), str(row["max_value"]))
        console.print(table)
    else:
        _render({"width": width, "fields": fields}, output_format, title="Layout")
