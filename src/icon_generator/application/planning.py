"""Mode dispatch: translate requested modes into encoder invocations."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from icon_generator.application.options import GenerationOptions, ImageInfo
from icon_generator.application.ports import FaviconEncoder, IconEncoder
from icon_generator.application.sizes import (
    FAVICON_ICO_IMAGE_SIZES,
    FAVICON_IMAGE_SIZES,
    ICNS_IMAGE_SIZES,
    ICO_IMAGE_SIZES,
    filter_images,
    get_sizes,
)
from icon_generator.types import TaskResult

FAVICON_ICO_NAME = "favicon.ico"


@dataclass(frozen=True)
class EncoderSet:
    """Encoders used for one generation run."""

    ico: IconEncoder
    icns: IconEncoder
    favicon: FaviconEncoder


@dataclass(frozen=True)
class PlannedTask:
    """A single encoder invocation waiting to be scheduled."""

    label: str
    output: Path
    run: Callable[[], Awaitable[TaskResult]]


type ModePlanner = Callable[
    [Sequence[ImageInfo], Path, GenerationOptions, EncoderSet, logging.Logger],
    list[PlannedTask],
]


def plan_ico(
    images: Sequence[ImageInfo],
    dest_dir: Path,
    options: GenerationOptions,
    encoders: EncoderSet,
    logger: logging.Logger,
) -> list[PlannedTask]:
    """Plan the ``<names.ico>.ico`` output."""
    path = dest_dir / f"{options.names.ico}.ico"
    subset = filter_images(images, get_sizes(ICO_IMAGE_SIZES, options, "ico"))
    return [PlannedTask("ico", path, lambda: encoders.ico.encode(subset, path, logger))]


def plan_icns(
    images: Sequence[ImageInfo],
    dest_dir: Path,
    options: GenerationOptions,
    encoders: EncoderSet,
    logger: logging.Logger,
) -> list[PlannedTask]:
    """Plan the ``<names.icns>.icns`` output."""
    path = dest_dir / f"{options.names.icns}.icns"
    subset = filter_images(images, get_sizes(ICNS_IMAGE_SIZES, options, "icns"))
    return [
        PlannedTask("icns", path, lambda: encoders.icns.encode(subset, path, logger))
    ]


def plan_favicon(
    images: Sequence[ImageInfo],
    dest_dir: Path,
    options: GenerationOptions,
    encoders: EncoderSet,
    logger: logging.Logger,
) -> list[PlannedTask]:
    """Plan ``favicon.ico`` followed by the favicon PNG bundle."""
    del options
    ico_path = dest_dir / FAVICON_ICO_NAME
    ico_subset = filter_images(images, FAVICON_ICO_IMAGE_SIZES)
    bundle_subset = filter_images(images, FAVICON_IMAGE_SIZES)
    return [
        PlannedTask(
            "favicon-ico",
            ico_path,
            lambda: encoders.ico.encode(ico_subset, ico_path, logger),
        ),
        PlannedTask(
            "favicon",
            dest_dir,
            lambda: encoders.favicon.encode(bundle_subset, dest_dir, logger),
        ),
    ]


MODE_PLANNERS: dict[str, ModePlanner] = {
    "ico": plan_ico,
    "icns": plan_icns,
    "favicon": plan_favicon,
}


def plan_tasks(
    images: Sequence[ImageInfo],
    dest_dir: Path,
    options: GenerationOptions,
    encoders: EncoderSet,
    logger: logging.Logger,
) -> list[PlannedTask]:
    """Plan every encoder invocation in mode declaration order.

    Unknown modes are skipped without error.
    """
    tasks: list[PlannedTask] = []
    for mode in options.modes:
        planner = MODE_PLANNERS.get(mode)
        if planner is None:
            logger.debug("Skipping unsupported mode %r", mode)
            continue
        tasks.extend(planner(images, dest_dir, options, encoders, logger))
    return tasks
