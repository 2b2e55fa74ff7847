"""Scratch working-directory lifecycle."""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from icon_generator.errors import WorkDirError

logger = logging.getLogger(__name__)

WORK_DIR_PREFIX = "icon-generator-"


def create_work_dir() -> Path:
    """Create a fresh, uniquely named scratch directory.

    Raises
    ------
    WorkDirError
        If the directory cannot be created.
    """
    try:
        return Path(tempfile.mkdtemp(prefix=WORK_DIR_PREFIX))
    except OSError as exc:
        raise WorkDirError(f"Failed to create the working directory: {exc}") from exc


def remove_work_dir(path: Path) -> None:
    """Force-remove ``path``; an already missing directory is fine."""
    shutil.rmtree(path, ignore_errors=True)
    logger.debug("Removed working directory %s", path)


@contextmanager
def work_directory(
    factory: Callable[[], Path] = create_work_dir,
) -> Iterator[Path]:
    """Yield a scratch directory that is removed on every exit path."""
    path = factory()
    logger.debug("Created working directory %s", path)
    try:
        yield path
    finally:
        remove_work_dir(path)
