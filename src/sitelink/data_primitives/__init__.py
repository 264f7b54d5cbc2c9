"""Domain records and collaborator contracts for URL resolution."""

from sitelink.data_primitives.models import (
    Channel,
    Content,
    EntityKind,
    LinkType,
    Mode,
    ResolutionRequest,
    Site,
    TaxisType,
    TranslateContentType,
)

__all__ = [
    "Channel",
    "Content",
    "EntityKind",
    "LinkType",
    "Mode",
    "ResolutionRequest",
    "Site",
    "TaxisType",
    "TranslateContentType",
]
