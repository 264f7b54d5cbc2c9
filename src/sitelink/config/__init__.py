from sitelink.config.exceptions import ConfigError, ConfigValidationError
from sitelink.config.settings import (
    PathRuleSettings,
    PreviewSettings,
    ResolverSettings,
    SitelinkConfig,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "PathRuleSettings",
    "PreviewSettings",
    "ResolverSettings",
    "SitelinkConfig",
]
