"""Exception hierarchy for icon generation."""

from __future__ import annotations


class IconGeneratorError(Exception):
    """Base class for all icon generation failures."""

    exit_code = 1


class ConfigurationError(IconGeneratorError):
    """Caller-supplied generation configuration is invalid."""

    exit_code = 2


class EmptyInputError(IconGeneratorError):
    """No source images were supplied to the pipeline."""


class MissingImageError(IconGeneratorError):
    """An expected ``<size>.png`` file is absent from the source directory."""

    def __init__(self, filename: str) -> None:
        super().__init__(f'"{filename}" does not exist.')
        self.filename = filename


class WorkDirError(IconGeneratorError):
    """The scratch working directory could not be created."""


class RasterizeError(IconGeneratorError):
    """Rendering the vector source into PNG files failed."""


class EncodeError(IconGeneratorError):
    """Writing an icon container failed."""
