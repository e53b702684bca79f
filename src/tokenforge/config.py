"""
tokenforge configuration.

Parses ``tokenforge.toml`` into typed settings:

    [registry]
    detection_fallback = "string"      # omit or set to "" to raise NoMatchError

    [registry.figma_type_fallbacks]
    COLOR = "color"
    FLOAT = "number"

    [output]
    css_color_format = "oklch"
    scss_color_format = "hsl"
    prefix = "ds"
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tokenforge.errors import ConfigError

CONFIG_FILENAME = "tokenforge.toml"

DEFAULT_FIGMA_TYPE_FALLBACKS: dict[str, str] = {
    "COLOR": "color",
    "BOOLEAN": "boolean",
    "FLOAT": "number",
    "STRING": "string",
}


class OutputConfig(BaseModel):
    """Default rendering options used by the CLI and renderers."""

    css_color_format: Literal["hex", "rgb", "oklch"] = "hex"
    scss_color_format: Literal["hex", "rgb", "hsl"] = "hex"
    prefix: str | None = None

    model_config = ConfigDict(frozen=True)


class RegistryConfig(BaseModel):
    """Registry behaviour when detection finds no handler."""

    detection_fallback: str | None = Field(
        default="string",
        description="Type tag returned when no handler claims a value; None raises NoMatchError",
    )
    figma_type_fallbacks: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_FIGMA_TYPE_FALLBACKS),
        description="Figma resolved type -> token type, consulted before detection_fallback",
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(frozen=True)

    @field_validator("detection_fallback")
    @classmethod
    def _empty_means_none(cls, value: str | None) -> str | None:
        return value or None


def load_config(toml_path: Path) -> RegistryConfig:
    """
    Load configuration from a TOML file.

    Args:
        toml_path: Path to tokenforge.toml

    Returns:
        RegistryConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not toml_path.exists():
        return RegistryConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {toml_path}: {e}") from e

    config_dict: dict[str, Any] = dict(data.get("registry", {}))
    if "output" in data:
        config_dict["output"] = data["output"]

    try:
        return RegistryConfig(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}: {e}") from e


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest tokenforge.toml at or above ``start`` (default: cwd)."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
