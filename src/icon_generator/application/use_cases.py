"""Application use-cases orchestrating icon generation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from icon_generator.adapters.encoders import (
    FaviconBundleEncoder,
    PillowIcnsEncoder,
    PillowIcoEncoder,
)
from icon_generator.adapters.rasterizers import CairoSvgRasterizer
from icon_generator.application.options import GenerationOptions, ImageInfo
from icon_generator.application.planning import EncoderSet, PlannedTask, plan_tasks
from icon_generator.application.ports import Rasterizer
from icon_generator.application.results import GenerationResult
from icon_generator.application.sizes import flatten_values, required_image_sizes
from icon_generator.errors import EmptyInputError, MissingImageError
from icon_generator.infrastructure.workdir import create_work_dir, work_directory
from icon_generator.types import TaskResult

module_logger = logging.getLogger(__name__)


def default_encoders() -> EncoderSet:
    """Return the Pillow-backed encoders."""
    return EncoderSet(
        ico=PillowIcoEncoder(),
        icns=PillowIcnsEncoder(),
        favicon=FaviconBundleEncoder(),
    )


async def generate_from_svg(
    *,
    svg_path: Path,
    dest_dir: Path,
    options: GenerationOptions,
    logger: logging.Logger | None = None,
    rasterizer: Rasterizer | None = None,
    encoders: EncoderSet | None = None,
    work_dir_factory: Callable[[], Path] = create_work_dir,
) -> GenerationResult:
    """Use-case: render an SVG in a scratch directory, then generate icons.

    The scratch directory is removed whether rendering or encoding fails.
    """
    log = logger or module_logger
    src = Path(svg_path).resolve()
    dest = Path(dest_dir).resolve()
    log.info("Icon generator from SVG:")
    log.info("  src: %s", src)
    log.info("  dir: %s", dest)

    rasterizer = rasterizer or CairoSvgRasterizer()
    with work_directory(work_dir_factory) as work_dir:
        images = await rasterizer.rasterize(
            src, work_dir, required_image_sizes(options.modes, options), log
        )
        paths = await generate(
            images=images,
            dest_dir=dest,
            options=options,
            logger=log,
            encoders=encoders,
        )
    return GenerationResult(paths=paths, destination=dest, source_path=src)


async def generate_from_png(
    *,
    png_dir: Path,
    dest_dir: Path,
    options: GenerationOptions,
    logger: logging.Logger | None = None,
    encoders: EncoderSet | None = None,
) -> GenerationResult:
    """Use-case: generate icons from a directory of ``<size>.png`` files.

    Every size required by the requested modes must be present; the first
    missing file aborts the run before any encoder starts.
    """
    log = logger or module_logger
    src = Path(png_dir).resolve()
    dest = Path(dest_dir).resolve()
    log.info("Icon generator from PNG:")
    log.info("  src: %s", src)
    log.info("  dir: %s", dest)

    images = collect_png_images(src, required_image_sizes(options.modes, options))
    paths = await generate(
        images=images,
        dest_dir=dest,
        options=options,
        logger=log,
        encoders=encoders,
    )
    return GenerationResult(paths=paths, destination=dest, source_path=src)


def collect_png_images(png_dir: Path, sizes: Sequence[int]) -> list[ImageInfo]:
    """Describe ``<size>.png`` files in ``png_dir``.

    Raises
    ------
    MissingImageError
        For the first expected file that is not a regular file.
    """
    images: list[ImageInfo] = []
    for size in sizes:
        path = png_dir / f"{size}.png"
        if not path.is_file():
            raise MissingImageError(path.name)
        images.append(ImageInfo(path=path, size=int(path.stem)))
    return images


async def generate(
    *,
    images: Sequence[ImageInfo] | None,
    dest_dir: Path,
    options: GenerationOptions,
    logger: logging.Logger | None = None,
    encoders: EncoderSet | None = None,
) -> list[Path]:
    """Use-case: run every requested encoder concurrently and collect outputs.

    Returns
    -------
    list[Path]
        Output paths in mode declaration order, list-valued encoder
        results expanded in place.

    Raises
    ------
    EmptyInputError
        If ``images`` is empty or ``None``.
    """
    if not images:
        raise EmptyInputError("Targets is empty.")

    log = logger or module_logger
    dest = Path(dest_dir).resolve()
    dest.mkdir(parents=True, exist_ok=True)

    tasks = plan_tasks(images, dest, options, encoders or default_encoders(), log)
    for task in tasks:
        log.info("Scheduling %s -> %s", task.label, task.output)
    results = await run_all(tasks)
    return flatten_values(results)


async def run_all(tasks: Sequence[PlannedTask]) -> list[TaskResult]:
    """Run ``tasks`` concurrently and wait for every one of them to settle.

    Results keep the order of ``tasks``. When any task fails, the first
    failure to settle is raised after the others have finished; siblings
    are never cancelled because of a failure. If the caller itself is
    cancelled, the pending tasks are cancelled and awaited before the
    cancellation propagates.
    """
    running = [asyncio.ensure_future(task.run()) for task in tasks]
    first_error: BaseException | None = None
    try:
        for next_done in asyncio.as_completed(running):
            try:
                await next_done
            except Exception as exc:
                if first_error is None:
                    first_error = exc
    finally:
        pending = [future for future in running if not future.done()]
        for future in pending:
            future.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
    if first_error is not None:
        raise first_error
    return [future.result() for future in running]
