"""Generate every icon format from an SVG, logging progress to stderr."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from icon_generator import generate_from_svg


def main() -> None:
    """Render ``logo.svg`` (or the first argument) into ``./icons``."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    src = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("logo.svg")
    paths = generate_from_svg(
        src,
        Path("icons"),
        modes=["ico", "icns", "favicon"],
        ico_name="app",
        icns_name="app",
        logger=logging.getLogger("icons"),
    )
    for path in paths:
        print(path)


if __name__ == "__main__":
    main()
