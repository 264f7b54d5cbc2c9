"""Reference implementations of the resolver collaborators."""

from sitelink.infra.memory_store import InMemorySiteStore
from sitelink.infra.path_rules import TemplatePathRules
from sitelink.infra.preview import ApiPreviewRouter

__all__ = ["ApiPreviewRouter", "InMemorySiteStore", "TemplatePathRules"]
