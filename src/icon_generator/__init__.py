"""Top-level API for generating ICO, ICNS and favicon files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from icon_generator.types import PathLike, SizeOverrides

__version__ = "0.1.0"


def generate_from_svg(
    src: PathLike,
    dest: PathLike,
    *,
    modes: Iterable[str] | None = None,
    ico_name: str = "app",
    icns_name: str = "app",
    sizes: SizeOverrides | None = None,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Generate icons from an SVG file.

    Parameters
    ----------
    src : str | Path
        SVG source file.
    dest : str | Path
        Output directory, created when missing.
    modes : Iterable[str], optional
        Any of ``ico``, ``icns``, ``favicon``; all three by default.
        Unknown values are ignored.
    ico_name, icns_name : str, default="app"
        Base names of the ICO and ICNS outputs.
    sizes : Mapping[str, Sequence[int]], optional
        Per-mode size overrides, e.g. ``{"ico": [16, 32]}``.
    logger : logging.Logger, optional
        Progress sink.

    Returns
    -------
    list[Path]
        Written files in mode order.
    """
    from .api import generate_from_svg as _impl

    return _impl(
        src,
        dest,
        modes=modes,
        ico_name=ico_name,
        icns_name=icns_name,
        sizes=sizes,
        logger=logger,
    )


def generate_from_png(
    src: PathLike,
    dest: PathLike,
    *,
    modes: Iterable[str] | None = None,
    ico_name: str = "app",
    icns_name: str = "app",
    sizes: SizeOverrides | None = None,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Generate icons from a directory of ``<size>.png`` files.

    Parameters
    ----------
    src : str | Path
        Directory holding one ``<size>.png`` per required size.
    dest : str | Path
        Output directory, created when missing.

    Returns
    -------
    list[Path]
        Written files in mode order.
    """
    from .api import generate_from_png as _impl

    return _impl(
        src,
        dest,
        modes=modes,
        ico_name=ico_name,
        icns_name=icns_name,
        sizes=sizes,
        logger=logger,
    )


__all__ = [
    "generate_from_svg",
    "generate_from_png",
]
