"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from icon_generator.application.options import ImageInfo


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_images(tmp_path: Path) -> Callable[[Iterable[int]], list[ImageInfo]]:
    """Create placeholder ``<size>.png`` files and describe them."""

    def _make(sizes: Iterable[int]) -> list[ImageInfo]:
        images = []
        for size in sizes:
            path = tmp_path / f"{size}.png"
            path.write_bytes(b"png")
            images.append(ImageInfo(path=path, size=size))
        return images

    return _make
