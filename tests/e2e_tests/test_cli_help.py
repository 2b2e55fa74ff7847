"""End-to-end smoke test for CLI help output."""

from __future__ import annotations

import subprocess

import icon_generator


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert icon_generator.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["icon-gen", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Generate ICO, ICNS and favicon" in result.stdout


def test_cli_missing_input_fails_cleanly() -> None:
    """Ensure CLI returns a user-facing validation error for a missing input."""
    result = subprocess.run(
        ["icon-gen", "generate", "/tmp/definitely-missing-icon.svg", "/tmp/icons"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "does not exist" in result.stderr.lower()
