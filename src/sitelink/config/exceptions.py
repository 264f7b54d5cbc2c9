"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from sitelink.exceptions import SitelinkError


class ConfigError(SitelinkError):
    """Base exception for all configuration-related errors."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails to parse or validate."""

    def __init__(self, config_path: Path | None, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.config_path = config_path
        self.errors = list(errors or [])
        where = f" in {config_path}" if config_path else ""
        super().__init__(f"Configuration validation failed{where} with {len(self.errors)} error(s).")
