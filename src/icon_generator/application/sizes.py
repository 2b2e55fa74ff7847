"""Required size sets and image selection helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from icon_generator.application.options import GenerationOptions, ImageInfo
from icon_generator.types import ModeKey, SizeList, TaskResult

ICO_IMAGE_SIZES: tuple[int, ...] = (16, 24, 32, 48, 64, 128, 256)
ICNS_IMAGE_SIZES: tuple[int, ...] = (16, 32, 64, 128, 256, 512, 1024)
FAVICON_ICO_IMAGE_SIZES: tuple[int, ...] = (16, 24, 32, 48, 64)
FAVICON_IMAGE_SIZES: tuple[int, ...] = (32, 57, 72, 96, 120, 128, 144, 152, 195, 228)

SUPPORTED_MODES: tuple[ModeKey, ...] = ("ico", "icns", "favicon")


def get_sizes(
    default_sizes: SizeList,
    options: GenerationOptions | None,
    key: str,
) -> SizeList:
    """Return the caller override for ``key`` when set, else ``default_sizes``.

    Override values are returned as given; they are not range-checked.
    """
    if options is not None and options.sizes:
        override = options.sizes.get(key)
        if override:
            return override
    return default_sizes


def filter_images(
    images: Iterable[ImageInfo],
    sizes: Sequence[int],
) -> list[ImageInfo]:
    """Keep images whose size is in ``sizes``, sorted ascending by size.

    Duplicate sizes are kept; an empty result is not an error.
    """
    matched = [image for image in images if image.size in sizes]
    return sorted(matched, key=lambda image: image.size)


def flatten_values(values: Iterable[TaskResult]) -> list[Path]:
    """Flatten task results into one list.

    Falsy results are dropped and list results are expanded in place, so
    ``["A", ["B", "C"], None, "D"]`` becomes ``["A", "B", "C", "D"]``.
    """
    paths: list[Path] = []
    for value in values:
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            paths.extend(value)
        else:
            paths.append(value)
    return paths


def mode_sizes(mode: str, options: GenerationOptions | None) -> tuple[int, ...]:
    """Return every raster size ``mode`` consumes; unknown modes need none."""
    if mode == "ico":
        return tuple(get_sizes(ICO_IMAGE_SIZES, options, "ico"))
    if mode == "icns":
        return tuple(get_sizes(ICNS_IMAGE_SIZES, options, "icns"))
    if mode == "favicon":
        return FAVICON_ICO_IMAGE_SIZES + FAVICON_IMAGE_SIZES
    return ()


def required_image_sizes(
    modes: Iterable[str] | None,
    options: GenerationOptions | None = None,
) -> list[int]:
    """Return the sorted union of sizes needed by ``modes``.

    With no modes, the union over every supported mode is returned.
    """
    selected = list(modes or ())
    if not selected:
        selected = list(SUPPORTED_MODES)
    required: set[int] = set()
    for mode in selected:
        required.update(mode_sizes(mode, options))
    return sorted(required)
