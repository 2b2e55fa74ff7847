"""Pydantic schemas for runtime validation of generation inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GenerationConfig(BaseModel):
    """Validated caller configuration for one generation run."""

    model_config = ConfigDict(extra="forbid")

    modes: list[str] = Field(default_factory=lambda: ["ico", "icns", "favicon"])
    ico_name: str = "app"
    icns_name: str = "app"
    sizes: dict[str, list[int]] = Field(default_factory=dict)

    @field_validator("modes")
    @classmethod
    def _validate_modes(cls, value: list[str]) -> list[str]:
        cleaned = [mode.strip().lower() for mode in value if mode.strip()]
        if not cleaned:
            raise ValueError("modes must contain at least one output mode.")
        return list(dict.fromkeys(cleaned))

    @field_validator("ico_name", "icns_name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("output names cannot be empty.")
        if "/" in name or "\\" in name:
            raise ValueError("output names cannot contain path separators.")
        return name

    @model_validator(mode="after")
    def _validate_no_favicon_clash(self) -> GenerationConfig:
        # The favicon mode writes <dest>/favicon.ico next to the ico output.
        if (
            "ico" in self.modes
            and "favicon" in self.modes
            and self.ico_name.lower() == "favicon"
        ):
            raise ValueError(
                "ico_name 'favicon' collides with favicon.ico when the favicon mode is requested."
            )
        return self
