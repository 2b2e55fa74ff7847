"""Unit tests for option building and the synchronous API."""

from __future__ import annotations

from pathlib import Path

import pytest

from icon_generator import api as api_module
from icon_generator.application.options import GenerationOptions, OutputNames
from icon_generator.application.results import GenerationResult
from icon_generator.errors import ConfigurationError


def test_build_options_defaults_to_every_mode() -> None:
    """Default to ico, icns and favicon with ``app`` names."""
    options = api_module.build_generation_options()
    assert options.modes == ("ico", "icns", "favicon")
    assert options.names == OutputNames(ico="app", icns="app")
    assert options.sizes == {}


def test_build_options_normalizes_modes() -> None:
    """Lower-case and deduplicate modes, keeping first-seen order."""
    options = api_module.build_generation_options(modes=["ICNS", "ico", "icns"])
    assert options.modes == ("icns", "ico")


def test_build_options_keeps_unknown_modes() -> None:
    """Unknown modes pass validation; the pipeline skips them later."""
    options = api_module.build_generation_options(modes=["ico", "webp"])
    assert options.modes == ("ico", "webp")


def test_build_options_passes_sizes_through() -> None:
    """Size overrides are not range-checked."""
    options = api_module.build_generation_options(sizes={"ico": (16, 0)})
    assert options.sizes == {"ico": [16, 0]}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"modes": []},
        {"modes": ["  "]},
        {"ico_name": ""},
        {"icns_name": "../evil"},
        {"ico_name": "favicon"},
        {"modes": ["ico", "favicon"], "ico_name": "Favicon"},
    ],
)
def test_build_options_rejects_invalid_input(kwargs: dict[str, object]) -> None:
    """Raise ConfigurationError for invalid parameters."""
    with pytest.raises(ConfigurationError, match="Invalid generation parameters"):
        api_module.build_generation_options(**kwargs)


def test_build_options_allows_favicon_name_without_clash() -> None:
    """Accept ico_name 'favicon' when favicon.ico is not also written."""
    options = api_module.build_generation_options(modes=["ico"], ico_name="favicon")
    assert options.names.ico == "favicon"


def test_generate_from_svg_runs_use_case(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Forward validated options to the async SVG use-case."""
    called: dict[str, object] = {}

    async def fake_from_svg(**kwargs: object) -> GenerationResult:
        called.update(kwargs)
        return GenerationResult(paths=[tmp_path / "x.ico"], destination=tmp_path)

    monkeypatch.setattr(api_module, "_from_svg", fake_from_svg)

    out = api_module.generate_from_svg(
        "icon.svg", tmp_path, modes=["ico"], ico_name="x"
    )

    assert out == [tmp_path / "x.ico"]
    assert called["svg_path"] == Path("icon.svg")
    options = called["options"]
    assert isinstance(options, GenerationOptions)
    assert options.modes == ("ico",)
    assert options.names.ico == "x"


def test_generate_from_png_runs_use_case(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Forward validated options to the async PNG use-case."""
    called: dict[str, object] = {}

    async def fake_from_png(**kwargs: object) -> GenerationResult:
        called.update(kwargs)
        return GenerationResult(paths=[], destination=tmp_path)

    monkeypatch.setattr(api_module, "_from_png", fake_from_png)

    assert api_module.generate_from_png(tmp_path, tmp_path / "out") == []
    assert called["png_dir"] == tmp_path
    assert called["dest_dir"] == tmp_path / "out"
