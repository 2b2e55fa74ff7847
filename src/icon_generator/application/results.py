"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationResult:
    """Structured generation outcome."""

    paths: list[Path]
    destination: Path
    source_path: Path | None = None
