"""Channel URLs driven by each channel's routing policy."""

from __future__ import annotations

import logging
from typing import assert_never

from sitelink.config.settings import ResolverSettings
from sitelink.data_primitives.models import Channel, LinkType, Mode, Site
from sitelink.data_primitives.protocols import ChannelLookup, ContentLookup, PathRules, PreviewRouter
from sitelink.urls.content import ContentUrlResolver
from sitelink.urls.hops import HopBudget
from sitelink.urls.navigation import NavigationUrlResolver
from sitelink.urls.pages import PageUrlResolver
from sitelink.urls.paths import URL_SEPARATOR, add_virtual_to_path, replace_starts_with
from sitelink.urls.site import SiteUrlResolver

logger = logging.getLogger(__name__)


class ChannelUrlResolver:
    """Resolves a channel to its own page, one of its contents, a child channel, or nothing.

    The site root channel always resolves to the site's index page. Other
    channels are dispatched on :class:`LinkType`.
    """

    def __init__(
        self,
        *,
        channels: ChannelLookup,
        contents: ContentLookup,
        path_rules: PathRules,
        preview: PreviewRouter,
        navigation: NavigationUrlResolver,
        site_resolver: SiteUrlResolver,
        content_resolver: ContentUrlResolver,
        pages: PageUrlResolver,
        settings: ResolverSettings | None = None,
    ) -> None:
        self.channels = channels
        self.contents = contents
        self.path_rules = path_rules
        self.preview = preview
        self.navigation = navigation
        self.site_resolver = site_resolver
        self.content_resolver = content_resolver
        self.pages = pages
        self.settings = settings or site_resolver.settings

    @property
    def unclickable_url(self) -> str:
        return self.settings.unclickable_url

    def resolve(
        self,
        site: Site,
        channel: Channel | None,
        mode: Mode = Mode.PUBLISHED,
        *,
        hops: HopBudget | None = None,
    ) -> str:
        if channel is None:
            return self.unclickable_url
        if mode is Mode.PREVIEW:
            return self.preview.channel_url(site.id, channel.id)
        if channel.is_site_root:
            return self.pages.resolve_index_page(site, Mode.PUBLISHED)
        return self._apply_policy(site, channel, hops or HopBudget(limit=self.settings.max_hops))

    def resolve_input_url(self, site: Site, channel: Channel | None, mode: Mode = Mode.PUBLISHED) -> str:
        """Site-relative form of the channel URL (always starting with ``/``), for editing UIs."""
        channel_url = self.resolve(site, channel, mode)
        if not channel_url:
            return channel_url
        channel_url = replace_starts_with(channel_url, site.web_url, "")
        return URL_SEPARATOR + channel_url.strip(URL_SEPARATOR)

    def _apply_policy(self, site: Site, channel: Channel, hops: HopBudget) -> str:
        link_type = channel.link_type
        match link_type:
            case LinkType.NONE:
                return self._channel_page(site, channel)
            case LinkType.NO_LINK:
                return self.unclickable_url
            case LinkType.NO_LINK_IF_CONTENT_NOT_EXISTS:
                if channel.content_num == 0:
                    return self.unclickable_url
                return self._channel_page(site, channel)
            case LinkType.LINK_TO_ONLY_ONE_CONTENT:
                if channel.content_num == 1:
                    return self._first_content(site, channel, hops)
                return self._channel_page(site, channel)
            case LinkType.NO_LINK_IF_CONTENT_NOT_EXISTS_AND_LINK_TO_ONLY_ONE_CONTENT:
                if channel.content_num == 0:
                    return self.unclickable_url
                if channel.content_num == 1:
                    return self._first_content(site, channel, hops)
                return self._channel_page(site, channel)
            case LinkType.LINK_TO_FIRST_CONTENT:
                if channel.content_num >= 1:
                    return self._first_content(site, channel, hops)
                return self._channel_page(site, channel)
            case LinkType.NO_LINK_IF_CONTENT_NOT_EXISTS_AND_LINK_TO_FIRST_CONTENT:
                if channel.content_num >= 1:
                    return self._first_content(site, channel, hops)
                return self.unclickable_url
            case LinkType.NO_LINK_IF_CHANNEL_NOT_EXISTS:
                if channel.children_count == 0:
                    return self.unclickable_url
                return self._channel_page(site, channel)
            case LinkType.LINK_TO_LAST_ADD_CHANNEL:
                child = self.channels.get_child_by_latest_add(channel.id)
                if child is None:
                    return self._channel_page(site, channel)
                return self._child(site, channel, child, hops)
            case LinkType.LINK_TO_FIRST_CHANNEL:
                child = self.channels.get_child_by_lowest_taxis(channel.id)
                if child is None:
                    return self._channel_page(site, channel)
                return self._child(site, channel, child, hops)
            case LinkType.NO_LINK_IF_CHANNEL_NOT_EXISTS_AND_LINK_TO_LAST_ADD_CHANNEL:
                child = self.channels.get_child_by_latest_add(channel.id)
                if child is None:
                    return self.unclickable_url
                return self._child(site, channel, child, hops)
            case LinkType.NO_LINK_IF_CHANNEL_NOT_EXISTS_AND_LINK_TO_FIRST_CHANNEL:
                child = self.channels.get_child_by_lowest_taxis(channel.id)
                if child is None:
                    return self.unclickable_url
                return self._child(site, channel, child, hops)
            case _:
                assert_never(link_type)

    def _channel_page(self, site: Site, channel: Channel) -> str:
        """The channel's own page: literal link, literal file path, or the computed file path."""
        if channel.link_url:
            return self.navigation.resolve(site, channel.link_url, Mode.PUBLISHED)
        if channel.file_path:
            return self.navigation.resolve(site, add_virtual_to_path(channel.file_path), Mode.PUBLISHED)
        relative_path = self.path_rules.channel_file_path(site, channel.id)
        return self.site_resolver.resolve(site, relative_path, Mode.PUBLISHED)

    def _first_content(self, site: Site, channel: Channel, hops: HopBudget) -> str:
        table_name = self.contents.get_content_table_name(site, channel)
        content_id = self.contents.get_first_content_id(table_name, channel.id, channel.default_taxis_type)
        if content_id <= 0:
            logger.debug("Channel %s reports contents but none were found in %s", channel.id, table_name)
        return self.content_resolver.resolve_by_id(site, channel.id, content_id, Mode.PUBLISHED, hops=hops)

    def _child(self, site: Site, channel: Channel, child: Channel, hops: HopBudget) -> str:
        next_hops = hops.step("channel", site.id, channel.id)
        if next_hops is None:
            logger.warning("Stopped following channel redirects at channel %s (site %s)", channel.id, site.id)
            return self.unclickable_url
        return self.resolve(site, child, Mode.PUBLISHED, hops=next_hops)
