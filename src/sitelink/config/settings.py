"""Configuration for URL resolution.

Priority (highest to lowest):
1. Environment variables (SITELINK_SECTION__KEY, e.g. SITELINK_RESOLVER__MAX_HOPS)
2. Config file (.sitelink.toml in the config root)
3. Defaults
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitelink.config.exceptions import ConfigValidationError

CONFIG_FILE_NAME = ".sitelink.toml"

DEFAULT_UNCLICKABLE_URL = "javascript:;"
DEFAULT_MAX_HOPS = 8
DEFAULT_CHANNEL_FILE_PATH = "/channels/{@channelId}.html"
DEFAULT_CONTENT_FILE_PATH = "/contents/{@channelId}/{@contentId}.html"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class ResolverSettings(BaseModel):
    """Behaviour of the resolution engine itself."""

    unclickable_url: str = Field(
        default=DEFAULT_UNCLICKABLE_URL,
        description="URL returned for entities that must not be clickable",
    )
    max_hops: int = Field(
        default=DEFAULT_MAX_HOPS,
        ge=1,
        description="Maximum indirections (references, channel redirects) followed per call",
    )
    application_root: str = Field(default="/", description="URL the '~' notation expands to")
    physical_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding each site's published files (one folder per site_dir)",
    )


class PathRuleSettings(BaseModel):
    """Default file path templates for published pages."""

    channel_file_path: str = Field(default=DEFAULT_CHANNEL_FILE_PATH)
    content_file_path: str = Field(default=DEFAULT_CONTENT_FILE_PATH)


class PreviewSettings(BaseModel):
    api_prefix: str = Field(default="/api", description="Mount point of the preview API")


class SitelinkConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern
    SITELINK_SECTION__KEY (e.g., SITELINK_RESOLVER__UNCLICKABLE_URL).
    """

    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    paths: PathRuleSettings = Field(default_factory=PathRuleSettings)
    preview: PreviewSettings = Field(default_factory=PreviewSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="SITELINK_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, config_root: Path | None = None) -> SitelinkConfig:
        """Load configuration from ``.sitelink.toml`` and environment variables."""
        root_path = config_root if config_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILE_NAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigValidationError(config_file, [{"msg": str(exc)}]) from exc

        try:
            env_settings = cls().model_dump(exclude_unset=True)
            merged = _deep_merge(file_settings, env_settings)
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise ConfigValidationError(
                config_file if config_file.is_file() else None,
                exc.errors(include_url=False),
            ) from exc
