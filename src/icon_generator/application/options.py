"""Typed option objects shared across generation use-cases."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from icon_generator.types import SizeOverrides


@dataclass(frozen=True)
class ImageInfo:
    """One rendered square raster image."""

    path: Path
    size: int


@dataclass(frozen=True)
class OutputNames:
    """Base file names (without extension) of the ICO and ICNS outputs."""

    ico: str = "app"
    icns: str = "app"


@dataclass(frozen=True)
class GenerationOptions:
    """Options for one generation run.

    ``modes`` keeps the caller's declaration order; output paths are
    reported in that order. ``sizes`` maps a mode key to an explicit size
    list overriding that mode's defaults.
    """

    modes: Sequence[str] = ("ico", "icns", "favicon")
    names: OutputNames = OutputNames()
    sizes: SizeOverrides = field(default_factory=dict)
