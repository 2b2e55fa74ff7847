"""Application ports for clean architecture boundaries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from icon_generator.application.options import ImageInfo


class Rasterizer(Protocol):
    """Render a vector image into square PNG files."""

    async def rasterize(
        self,
        svg_path: Path,
        work_dir: Path,
        sizes: Sequence[int],
        logger: logging.Logger,
    ) -> list[ImageInfo]:
        """Write ``<size>.png`` files into ``work_dir`` and describe them."""


class IconEncoder(Protocol):
    """Bundle images into a single icon container file."""

    async def encode(
        self,
        images: Sequence[ImageInfo],
        output_path: Path,
        logger: logging.Logger,
    ) -> Path:
        """Write the container and return its path."""


class FaviconEncoder(Protocol):
    """Write a favicon bundle into a directory."""

    async def encode(
        self,
        images: Sequence[ImageInfo],
        output_dir: Path,
        logger: logging.Logger,
    ) -> list[Path]:
        """Write the bundle files and return their paths in order."""
