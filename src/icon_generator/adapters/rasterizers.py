"""SVG rasterizers implementing the ``Rasterizer`` port."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from icon_generator.application.options import ImageInfo
from icon_generator.errors import RasterizeError


class CairoSvgRasterizer:
    """Render an SVG into ``<size>.png`` files with cairosvg."""

    async def rasterize(
        self,
        svg_path: Path,
        work_dir: Path,
        sizes: Sequence[int],
        logger: logging.Logger,
    ) -> list[ImageInfo]:
        """Render ``svg_path`` once per size into ``work_dir``.

        Parameters
        ----------
        svg_path : Path
            Source SVG file.
        work_dir : Path
            Directory receiving the rendered PNG files.
        sizes : Sequence[int]
            Square pixel dimensions to render.
        logger : logging.Logger
            Progress sink.

        Returns
        -------
        list[ImageInfo]
            Rendered images in ascending size order.

        Raises
        ------
        RasterizeError
            If the source is missing or cairosvg fails.
        """
        if not svg_path.is_file():
            raise RasterizeError(f'"{svg_path}" does not exist.')
        return await asyncio.to_thread(
            self._render_all, svg_path, work_dir, sorted(set(sizes)), logger
        )

    def _render_all(
        self,
        svg_path: Path,
        work_dir: Path,
        sizes: list[int],
        logger: logging.Logger,
    ) -> list[ImageInfo]:
        try:
            import cairosvg
        except Exception as exc:
            raise RasterizeError("cairosvg is required to rasterize SVG files.") from exc

        images: list[ImageInfo] = []
        for size in sizes:
            png_path = work_dir / f"{size}.png"
            try:
                cairosvg.svg2png(
                    url=str(svg_path),
                    write_to=str(png_path),
                    output_width=size,
                    output_height=size,
                )
            except Exception as exc:
                raise RasterizeError(
                    f"Failed to rasterize {svg_path.name} at {size}px: {exc}"
                ) from exc
            logger.info("  Create: %s", png_path)
            images.append(ImageInfo(path=png_path, size=size))
        return images
