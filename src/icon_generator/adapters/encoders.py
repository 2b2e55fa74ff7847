"""Icon container encoders implementing the application ports."""

from __future__ import annotations

import asyncio
import io
import logging
import shutil
import struct
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from icon_generator.application.options import ImageInfo
from icon_generator.errors import EncodeError

if TYPE_CHECKING:
    from PIL import Image

FAVICON_PREFIX = "favicon-"

# PNG-payload ICNS entry types keyed by pixel size.
ICNS_TYPES: dict[int, bytes] = {
    16: b"icp4",
    32: b"icp5",
    64: b"icp6",
    128: b"ic07",
    256: b"ic08",
    512: b"ic09",
    1024: b"ic10",
}


def _open_frames(images: Sequence[ImageInfo]) -> list["Image.Image"]:
    """Load images as RGBA frames, largest first."""
    from PIL import Image

    frames = []
    for image in sorted(images, key=lambda item: item.size, reverse=True):
        with Image.open(image.path) as raw:
            frames.append(raw.convert("RGBA"))
    return frames


def _save_ico(images: Sequence[ImageInfo], output_path: Path) -> Path:
    """Write a multi-image ICO with Pillow.

    The largest frame is the base image; smaller frames are appended so
    every embedded size comes from its own raster rather than a resample.
    """
    if not images:
        raise EncodeError(f"No images to write into {output_path.name}.")
    try:
        frames = _open_frames(images)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        frames[0].save(
            output_path,
            format="ICO",
            append_images=frames[1:],
            sizes=[frame.size for frame in frames],
        )
    except Exception as exc:
        raise EncodeError(f"Failed to write {output_path}: {exc}") from exc
    return output_path


def _save_icns(images: Sequence[ImageInfo], output_path: Path) -> Path:
    """Write an ICNS holding exactly one PNG entry per supplied size.

    Pillow's ICNS writer always emits its full size table and upscales
    the largest frame to fill it, so the container is assembled here.
    """
    if not images:
        raise EncodeError(f"No images to write into {output_path.name}.")
    unsupported = sorted({image.size for image in images} - ICNS_TYPES.keys())
    if unsupported:
        raise EncodeError(
            f"ICNS cannot embed sizes {unsupported}; "
            f"supported sizes are {sorted(ICNS_TYPES)}."
        )

    entries = b""
    try:
        frames = {frame.width: frame for frame in reversed(_open_frames(images))}
        for size in sorted(frames):
            frame = frames[size]
            if frame.size != (size, size):
                width, height = frame.size
                raise EncodeError(f"ICNS frame for {size}px is {width}x{height}.")
            buffer = io.BytesIO()
            frame.save(buffer, format="PNG")
            payload = buffer.getvalue()
            entries += struct.pack(">4sI", ICNS_TYPES[size], len(payload) + 8) + payload
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(struct.pack(">4sI", b"icns", len(entries) + 8) + entries)
    except EncodeError:
        raise
    except Exception as exc:
        raise EncodeError(f"Failed to write {output_path}: {exc}") from exc
    return output_path


class PillowIcoEncoder:
    """Write Windows ``.ico`` files."""

    async def encode(
        self,
        images: Sequence[ImageInfo],
        output_path: Path,
        logger: logging.Logger,
    ) -> Path:
        """Bundle ``images`` into ``output_path`` and return it."""
        logger.info("ICO:")
        out = await asyncio.to_thread(_save_ico, images, output_path)
        logger.info("  Create: %s", out)
        return out


class PillowIcnsEncoder:
    """Write macOS ``.icns`` files from PNG-encoded frames."""

    async def encode(
        self,
        images: Sequence[ImageInfo],
        output_path: Path,
        logger: logging.Logger,
    ) -> Path:
        """Bundle ``images`` into ``output_path`` and return it.

        Only the supplied sizes are embedded; sizes without an ICNS entry
        type raise ``EncodeError``.
        """
        logger.info("ICNS:")
        out = await asyncio.to_thread(_save_icns, images, output_path)
        logger.info("  Create: %s", out)
        return out


class FaviconBundleEncoder:
    """Write ``favicon-<size>.png`` files for web pages."""

    async def encode(
        self,
        images: Sequence[ImageInfo],
        output_dir: Path,
        logger: logging.Logger,
    ) -> list[Path]:
        """Copy each image into ``output_dir`` under its favicon name.

        Returns
        -------
        list[Path]
            Written files in ascending size order.
        """
        logger.info("Favicon:")
        if not images:
            raise EncodeError("No images to write into the favicon bundle.")
        paths = await asyncio.to_thread(self._copy_all, images, output_dir)
        for path in paths:
            logger.info("  Create: %s", path)
        return paths

    def _copy_all(self, images: Sequence[ImageInfo], output_dir: Path) -> list[Path]:
        output_dir.mkdir(parents=True, exist_ok=True)
        paths: list[Path] = []
        for image in sorted(images, key=lambda item: item.size):
            dest = output_dir / f"{FAVICON_PREFIX}{image.size}.png"
            try:
                shutil.copyfile(image.path, dest)
            except OSError as exc:
                raise EncodeError(f"Failed to write {dest}: {exc}") from exc
            paths.append(dest)
        return paths
