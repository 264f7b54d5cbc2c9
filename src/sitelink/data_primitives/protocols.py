"""Contracts for the collaborators the URL resolvers consume.

Storage, path rules, templates and preview routing live outside the engine.
Every lookup returns ``None`` (or ``0`` for identifiers) when the record is
absent; the resolvers treat that as a terminal result, never as a fault.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sitelink.data_primitives.models import Channel, Content, Site, TaxisType


@runtime_checkable
class SiteLookup(Protocol):
    def get_site(self, site_id: int) -> Site | None: ...


@runtime_checkable
class ChannelLookup(Protocol):
    """Read access to the channel tree."""

    def get_channel(self, site_id: int, channel_id: int) -> Channel | None: ...
    def channel_exists(self, site_id: int, channel_id: int) -> bool: ...
    def channel_exists_globally(self, channel_id: int) -> bool: ...

    def get_owning_site_id(self, channel_id: int) -> int:
        """Return the site that owns ``channel_id``, or 0 when unknown."""
        ...

    def get_child_by_latest_add(self, channel_id: int) -> Channel | None: ...
    def get_child_by_lowest_taxis(self, channel_id: int) -> Channel | None: ...


@runtime_checkable
class ContentLookup(Protocol):
    """Read access to content tables.

    Content rows live in tables shared by many channels; a channel may
    override its site's table.
    """

    def get_content_table_name(self, site: Site, channel: Channel | int) -> str: ...
    def get_content(self, table_name: str, content_id: int) -> Content | None: ...
    def get_channel_id_of_content(self, table_name: str, content_id: int) -> int: ...
    def get_field_value(self, table_name: str, content_id: int, field: str) -> str: ...
    def get_first_content_id(self, table_name: str, channel_id: int, taxis_type: TaxisType) -> int: ...


@runtime_checkable
class TemplateLookup(Protocol):
    """Template metadata needed for index, file and special pages."""

    def index_template_id(self, site_id: int) -> int: ...

    def created_file_full_name(self, site_id: int, template_id: int) -> str:
        """Return the virtual path (``@/index.html``) a template publishes to."""
        ...

    def special_url(self, site: Site, special_id: int) -> str: ...


@runtime_checkable
class PathRules(Protocol):
    """Computes the canonical relative file path of published pages."""

    def content_file_path(self, site: Site, channel_id: int, content: Content) -> str: ...
    def channel_file_path(self, site: Site, channel_id: int) -> str: ...


@runtime_checkable
class PreviewRouter(Protocol):
    """Address generation for preview mode; bypasses published-mode resolution."""

    def site_url(self, site_id: int) -> str: ...
    def channel_url(self, site_id: int, channel_id: int) -> str: ...
    def file_url(self, site_id: int, template_id: int) -> str: ...
    def content_url(self, site_id: int, channel_id: int, content_id: int) -> str: ...
    def special_url(self, site_id: int, special_id: int) -> str: ...


@runtime_checkable
class SiteStore(SiteLookup, ChannelLookup, ContentLookup, TemplateLookup, Protocol):
    """A single backend answering every lookup the engine needs."""
