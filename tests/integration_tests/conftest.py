"""Fixtures rendering real PNG files for integration tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from icon_generator.application.options import ImageInfo


@pytest.fixture
def png_images(tmp_path: Path) -> Callable[[Iterable[int]], list[ImageInfo]]:
    """Write solid-colour ``<size>.png`` files with Pillow."""
    image_module = pytest.importorskip("PIL.Image")
    src_dir = tmp_path / "png"
    src_dir.mkdir()

    def _make(sizes: Iterable[int]) -> list[ImageInfo]:
        images = []
        for size in sizes:
            path = src_dir / f"{size}.png"
            image_module.new("RGBA", (size, size), (200, 40, 40, 255)).save(path)
            images.append(ImageInfo(path=path, size=size))
        return images

    return _make
