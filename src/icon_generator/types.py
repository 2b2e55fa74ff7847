"""Shared type aliases for the icon generation pipeline."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Literal

type ModeKey = Literal["ico", "icns", "favicon"]
type SizeList = Sequence[int]
type SizeOverrides = Mapping[str, SizeList]
type PathLike = str | Path

# A single encoder task yields one path, an ordered list of paths, or nothing.
type TaskResult = Path | list[Path] | None
