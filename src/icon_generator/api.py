"""Public file-based generation API (runs the async use-cases)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from icon_generator.application.options import GenerationOptions, OutputNames
from icon_generator.application.use_cases import generate_from_png as _from_png
from icon_generator.application.use_cases import generate_from_svg as _from_svg
from icon_generator.errors import ConfigurationError
from icon_generator.schemas import GenerationConfig
from icon_generator.types import PathLike, SizeOverrides


def build_generation_options(
    *,
    modes: Iterable[str] | None = None,
    ico_name: str = "app",
    icns_name: str = "app",
    sizes: SizeOverrides | None = None,
) -> GenerationOptions:
    """Build typed generation options from raw API/CLI params.

    Raises
    ------
    ConfigurationError
        If the parameters fail validation.
    """
    payload: dict[str, object] = {
        "ico_name": ico_name,
        "icns_name": icns_name,
        "sizes": {key: list(value) for key, value in (sizes or {}).items()},
    }
    if modes is not None:
        payload["modes"] = list(modes)
    try:
        config = GenerationConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid generation parameters: {exc}") from exc

    return GenerationOptions(
        modes=tuple(config.modes),
        names=OutputNames(ico=config.ico_name, icns=config.icns_name),
        sizes=config.sizes,
    )


def generate_from_svg(
    src: PathLike,
    dest: PathLike,
    *,
    modes: Iterable[str] | None = None,
    ico_name: str = "app",
    icns_name: str = "app",
    sizes: SizeOverrides | None = None,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Render an SVG and write the requested icon files into ``dest``."""
    options = build_generation_options(
        modes=modes, ico_name=ico_name, icns_name=icns_name, sizes=sizes
    )
    result = asyncio.run(
        _from_svg(
            svg_path=Path(src),
            dest_dir=Path(dest),
            options=options,
            logger=logger,
        )
    )
    return result.paths


def generate_from_png(
    src: PathLike,
    dest: PathLike,
    *,
    modes: Iterable[str] | None = None,
    ico_name: str = "app",
    icns_name: str = "app",
    sizes: SizeOverrides | None = None,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Write the requested icon files from a directory of ``<size>.png`` files."""
    options = build_generation_options(
        modes=modes, ico_name=ico_name, icns_name=icns_name, sizes=sizes
    )
    result = asyncio.run(
        _from_png(
            png_dir=Path(src),
            dest_dir=Path(dest),
            options=options,
            logger=logger,
        )
    )
    return result.paths
