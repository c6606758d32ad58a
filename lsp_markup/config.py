"""Configuration models for lsp_markup."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .errors import SettingsError

DEFAULT_SETTINGS_FILE = "lsp_markup.yaml"
FOLDING_RANGE_IDS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class RenderSettings(BaseModel):
    default_collapsed_text: str = "..."
    folding_range_ids: str = FOLDING_RANGE_IDS
    raise_on_inverted: bool = False
    log_level: str = "INFO"

    @field_validator("folding_range_ids")
    @classmethod
    def _unique_ids(cls, value: str) -> str:
        if not value:
            raise ValueError("folding_range_ids must not be empty")
        if len(set(value)) != len(value):
            raise ValueError("folding_range_ids must not repeat characters")
        return value


DEFAULT_SETTINGS = RenderSettings()


def _load_yaml_settings(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise SettingsError(f"Failed to parse {path}: {error}") from error
    if not isinstance(data, dict):
        raise SettingsError(f"{path} must contain a mapping")
    return data


def load_settings(path: str | Path | None = None, **overrides: object) -> RenderSettings:
    """Read settings from a YAML file, with keyword overrides taking precedence."""
    settings_path = Path(path) if path is not None else Path(DEFAULT_SETTINGS_FILE)
    merged: dict[str, object] = {**_load_yaml_settings(settings_path), **overrides}
    try:
        return RenderSettings(**merged)
    except ValidationError as error:
        raise SettingsError(f"Invalid settings in {settings_path}: {error}") from error


__all__ = ["DEFAULT_SETTINGS", "FOLDING_RANGE_IDS", "RenderSettings", "load_settings"]
