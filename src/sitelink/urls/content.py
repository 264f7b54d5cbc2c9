"""Content item URLs, including source/reference indirection.

A content item can be an alias of another item: ``reference_id`` names the
target item and ``source_id`` (when set) the channel holding it, possibly on
another site. Aliases are followed hop by hop until an item with its own
address is reached; every hop carries the site it belongs to explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sitelink.config.settings import ResolverSettings
from sitelink.data_primitives.models import Content, Mode, Site
from sitelink.data_primitives.protocols import (
    ChannelLookup,
    ContentLookup,
    PathRules,
    PreviewRouter,
    SiteLookup,
)
from sitelink.urls.hops import HopBudget
from sitelink.urls.navigation import NavigationUrlResolver
from sitelink.urls.site import SiteUrlResolver

logger = logging.getLogger(__name__)

LINK_URL_FIELD = "link_url"


@dataclass(frozen=True, slots=True)
class _Target:
    """The fields of a content item that drive resolution."""

    channel_id: int
    content_id: int
    source_id: int = 0
    reference_id: int = 0
    link_url: str = ""
    follows_reference: bool = False
    table_name: str = ""
    """Table the item was read from, when already known."""

    @classmethod
    def of(cls, content: Content, table_name: str = "") -> _Target:
        return cls(
            channel_id=content.channel_id,
            content_id=content.id,
            source_id=content.source_id,
            reference_id=content.reference_id,
            link_url=content.link_url,
            follows_reference=content.follows_reference,
            table_name=table_name,
        )


class ContentUrlResolver:
    def __init__(
        self,
        *,
        sites: SiteLookup,
        channels: ChannelLookup,
        contents: ContentLookup,
        path_rules: PathRules,
        preview: PreviewRouter,
        navigation: NavigationUrlResolver,
        site_resolver: SiteUrlResolver,
        settings: ResolverSettings | None = None,
    ) -> None:
        self.sites = sites
        self.channels = channels
        self.contents = contents
        self.path_rules = path_rules
        self.preview = preview
        self.navigation = navigation
        self.site_resolver = site_resolver
        self.settings = settings or site_resolver.settings

    @property
    def unclickable_url(self) -> str:
        return self.settings.unclickable_url

    def new_budget(self) -> HopBudget:
        return HopBudget(limit=self.settings.max_hops)

    def resolve(
        self,
        site: Site,
        content: Content | None,
        mode: Mode = Mode.PUBLISHED,
        *,
        hops: HopBudget | None = None,
    ) -> str:
        if content is None:
            return self.unclickable_url
        if mode is Mode.PREVIEW:
            return self.preview.content_url(site.id, content.channel_id, content.id)
        return self._resolve_published(site, _Target.of(content), content, hops or self.new_budget())

    def resolve_by_id(
        self,
        site: Site,
        channel_id: int,
        content_id: int,
        mode: Mode = Mode.PUBLISHED,
        *,
        hops: HopBudget | None = None,
    ) -> str:
        """Load the content item from its channel's table, then resolve it."""
        content = self._load(site, channel_id, content_id)
        return self.resolve(site, content, mode, hops=hops)

    def _load(self, site: Site, channel_id: int, content_id: int) -> Content | None:
        if content_id <= 0:
            return None
        table_name = self.contents.get_content_table_name(site, channel_id)
        return self.contents.get_content(table_name, content_id)

    def _resolve_published(self, site: Site, target: _Target, content: Content | None, hops: HopBudget) -> str:
        if target.follows_reference:
            table_name = target.table_name or self.contents.get_content_table_name(site, target.channel_id)
            next_hops = hops.step("content", table_name, target.content_id)
            if next_hops is None:
                logger.warning(
                    "Stopped following references at content %s (site %s) after %s hop(s)",
                    target.content_id,
                    site.id,
                    hops.used,
                )
                return self.unclickable_url
            if target.source_id > 0 and (
                self.channels.channel_exists(site.id, target.source_id)
                or self.channels.channel_exists_globally(target.source_id)
            ):
                return self._follow_source(target, next_hops)
            return self._follow_reference(site, target, next_hops)

        if target.link_url:
            return self.navigation.resolve(site, target.link_url, Mode.PUBLISHED)

        if content is None:
            if target.table_name:
                content = self.contents.get_content(target.table_name, target.content_id)
            else:
                content = self._load(site, target.channel_id, target.content_id)
            if content is None:
                logger.warning("Content %s not found in channel %s", target.content_id, target.channel_id)
                return self.unclickable_url
        relative_path = self.path_rules.content_file_path(site, target.channel_id, content)
        return self.site_resolver.resolve(site, relative_path, Mode.PUBLISHED)

    def _follow_source(self, target: _Target, hops: HopBudget) -> str:
        """Resolve the referenced item inside the source channel, on the channel's site."""
        target_site = self.sites.get_site(self.channels.get_owning_site_id(target.source_id))
        if target_site is None:
            logger.warning("Source channel %s has no owning site", target.source_id)
            return self.unclickable_url

        source_channel = self.channels.get_channel(target_site.id, target.source_id)
        table_name = self.contents.get_content_table_name(target_site, source_channel or target.source_id)
        referenced = self.contents.get_content(table_name, target.reference_id)
        if referenced is None or referenced.channel_id <= 0:
            logger.warning(
                "Content %s references missing content %s in %s",
                target.content_id,
                target.reference_id,
                table_name,
            )
            return self.unclickable_url

        owner_site = target_site if referenced.site_id == target_site.id else self.sites.get_site(referenced.site_id)
        if owner_site is None:
            return self.unclickable_url
        logger.debug(
            "Content %s -> content %s on site %s (hop %s)",
            target.content_id,
            referenced.id,
            owner_site.id,
            hops.used,
        )
        return self._resolve_published(owner_site, _Target.of(referenced, table_name), referenced, hops)

    def _follow_reference(self, site: Site, target: _Target, hops: HopBudget) -> str:
        """Resolve a reference that lives in the current channel's table."""
        table_name = target.table_name or self.contents.get_content_table_name(site, target.channel_id)
        channel_id = self.contents.get_channel_id_of_content(table_name, target.reference_id)
        if channel_id <= 0:
            logger.warning(
                "Content %s references missing content %s in %s",
                target.content_id,
                target.reference_id,
                table_name,
            )
            return self.unclickable_url
        link_url = self.contents.get_field_value(table_name, target.reference_id, LINK_URL_FIELD)

        if self.channels.channel_exists(site.id, channel_id):
            owner_site: Site | None = site
        else:
            owner_site = self.sites.get_site(self.channels.get_owning_site_id(channel_id))
            if owner_site is None:
                return self.unclickable_url

        resolved = _Target(
            channel_id=channel_id,
            content_id=target.reference_id,
            link_url=link_url,
            table_name=table_name,
        )
        return self._resolve_published(owner_site, resolved, None, hops)
