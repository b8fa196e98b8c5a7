"""Configuration management for scss-lint-formatter."""
import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from scss_lint_formatter.colors import ColorMode

DEFAULT_CONFIG_NAME = ".scss-lint-format.json"


class FormatterConfig(BaseModel):
    """Configuration for scss-lint-formatter with validation."""

    color: ColorMode = Field(default="auto", description="Color mode: auto, always or never")
    output: str | None = Field(default=None, description="Write the report here instead of stdout")

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str | None) -> str | None:
        """Reject blank output paths."""
        if v is not None and not v.strip():
            raise ValueError("output cannot be an empty string")
        return v


def get_default_config() -> FormatterConfig:
    """Return default configuration.

    Returns:
        FormatterConfig with default values
    """
    return FormatterConfig(color="auto", output=None)


def load_config(config_path: Path) -> FormatterConfig:
    """Load configuration from file or return defaults.

    Supports both snake_case and camelCase keys.

    Args:
        config_path: Path to .scss-lint-format.json file

    Returns:
        FormatterConfig with loaded or default values

    Raises:
        ValueError: If the file is not a JSON object or values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")

    defaults = get_default_config()

    config_data = {
        "color": data.get("color", defaults.color),
        "output": data.get("output", data.get("outputFile", defaults.output)),
    }

    return FormatterConfig(**config_data)
