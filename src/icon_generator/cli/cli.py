#!/usr/bin/env python3
"""
icon_generator.cli.cli

Typer-based CLI for generating ICO, ICNS and favicon files.

Examples
--------
Generate every format from an SVG:

    icon-gen generate logo.svg ./icons

Generate only an ICO from pre-rendered PNGs:

    icon-gen generate ./pngs ./icons --type png --mode ico --ico-sizes 16,32,48
"""

from __future__ import annotations

import logging
import traceback
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from icon_generator.errors import IconGeneratorError

app = typer.Typer(
    name="icon-gen",
    help="Generate ICO, ICNS and favicon files from an SVG or PNG images.",
    no_args_is_help=True,
)

MODE_HELP = "Output mode (repeatable). Defaults to every mode."
SIZES_HELP = "Comma-separated {fmt} sizes overriding the defaults, e.g. 16,32,48."


class Mode(str, Enum):
    """Supported output modes."""

    ico = "ico"
    icns = "icns"
    favicon = "favicon"


class SourceType(str, Enum):
    """Kind of input passed to ``generate``."""

    svg = "svg"
    png = "png"


# -----------------------------
# Utilities
# -----------------------------
def _print_generation_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly generation error.

    Parameters
    ----------
    exc : Exception
        Exception raised during generation.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_sizes(raw: str | None, option_name: str) -> list[int] | None:
    """Parse a comma-separated size list."""
    if raw is None:
        return None
    sizes: list[int] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            sizes.append(int(item))
        except ValueError as exc:
            raise typer.BadParameter(
                f"Invalid size '{item}' for {option_name}. Use integers like 16,32,48."
            ) from exc
    return sizes or None


def _resolve_source_type(input_path: Path, source_type: SourceType | None) -> SourceType:
    """Infer the input kind when ``--type`` is omitted."""
    if source_type is not None:
        return source_type
    return SourceType.png if input_path.is_dir() else SourceType.svg


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    report: bool = typer.Option(
        False,
        "--report",
        envvar="ICON_GEN_REPORT",
        help="Log progress while generating.",
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    report : bool, default=False
        Whether to log generation progress to stderr.
    """
    logging.basicConfig(
        level=logging.INFO if report else logging.WARNING,
        format="%(message)s",
    )
    ctx.obj = {"debug": debug, "report": report}


# -----------------------------
# Commands
# -----------------------------
@app.command("generate")
def generate_cmd(
    ctx: typer.Context,
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        help="SVG file, or directory of <size>.png files.",
    ),
    output_path: Path = typer.Argument(..., help="Directory receiving the icon files."),
    source_type: SourceType | None = typer.Option(
        None,
        "--type",
        "-t",
        case_sensitive=False,
        help="Input kind. Inferred from INPUT_PATH when omitted.",
    ),
    modes: list[Mode] | None = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help=MODE_HELP
    ),
    ico_name: str = typer.Option("app", "--ico-name", help="ICO file name without extension."),
    icns_name: str = typer.Option("app", "--icns-name", help="ICNS file name without extension."),
    ico_sizes: str | None = typer.Option(None, "--ico-sizes", help=SIZES_HELP.format(fmt="ICO")),
    icns_sizes: str | None = typer.Option(
        None, "--icns-sizes", help=SIZES_HELP.format(fmt="ICNS")
    ),
) -> None:
    """Generate icon files from an SVG or a PNG directory.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_path : Path
        SVG source file or directory of ``<size>.png`` files.
    output_path : Path
        Destination directory.
    modes : list[Mode] | None
        Output modes; every mode when omitted.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    sizes: dict[str, list[int]] = {}
    parsed_ico = _parse_sizes(ico_sizes, "--ico-sizes")
    if parsed_ico:
        sizes["ico"] = parsed_ico
    parsed_icns = _parse_sizes(icns_sizes, "--icns-sizes")
    if parsed_icns:
        sizes["icns"] = parsed_icns

    kind = _resolve_source_type(input_path, source_type)

    try:
        from icon_generator import api as api_module

        kwargs: dict[str, Any] = {
            "ico_name": ico_name,
            "icns_name": icns_name,
        }
        if modes:
            kwargs["modes"] = [mode.value for mode in modes]
        if sizes:
            kwargs["sizes"] = sizes

        if kind is SourceType.png:
            out = api_module.generate_from_png(input_path, output_path, **kwargs)
        else:
            out = api_module.generate_from_svg(input_path, output_path, **kwargs)
        for path in out:
            typer.secho(f"✓ Saved: {path}", fg=typer.colors.GREEN)
    except IconGeneratorError as exc:
        raise typer.Exit(code=_print_generation_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_generation_error(exc, debug))


@app.command("sizes")
def sizes_cmd(
    modes: list[Mode] | None = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help=MODE_HELP
    ),
) -> None:
    """Print the PNG sizes a PNG directory must provide for the given modes."""
    from icon_generator.application.sizes import required_image_sizes

    selected = [mode.value for mode in modes or []]
    for size in required_image_sizes(selected):
        typer.echo(f"{size}.png")


if __name__ == "__main__":
    app()
