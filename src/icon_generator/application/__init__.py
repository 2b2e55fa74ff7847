"""Application-layer use-cases and option objects."""

from __future__ import annotations

import logging
from pathlib import Path

from icon_generator.application.options import (
    GenerationOptions,
    ImageInfo,
    OutputNames,
)
from icon_generator.application.results import GenerationResult


async def generate_from_svg(
    *,
    svg_path: Path,
    dest_dir: Path,
    options: GenerationOptions,
    logger: logging.Logger | None = None,
) -> GenerationResult:
    """Generate icons from an SVG via lazy use-case import."""
    from icon_generator.application.use_cases import generate_from_svg as _impl

    return await _impl(
        svg_path=svg_path,
        dest_dir=dest_dir,
        options=options,
        logger=logger,
    )


async def generate_from_png(
    *,
    png_dir: Path,
    dest_dir: Path,
    options: GenerationOptions,
    logger: logging.Logger | None = None,
) -> GenerationResult:
    """Generate icons from a PNG directory via lazy use-case import."""
    from icon_generator.application.use_cases import generate_from_png as _impl

    return await _impl(
        png_dir=png_dir,
        dest_dir=dest_dir,
        options=options,
        logger=logger,
    )


__all__ = [
    "GenerationOptions",
    "GenerationResult",
    "ImageInfo",
    "OutputNames",
    "generate_from_svg",
    "generate_from_png",
]
