"""Entry point wiring the four resolvers to one set of collaborators."""

from __future__ import annotations

import logging
from pathlib import Path

from sitelink.config.settings import SitelinkConfig
from sitelink.data_primitives.models import Channel, Content, EntityKind, Mode, ResolutionRequest, Site
from sitelink.data_primitives.protocols import PathRules, PreviewRouter, SiteStore
from sitelink.infra.path_rules import TemplatePathRules
from sitelink.infra.preview import ApiPreviewRouter
from sitelink.urls.channel import ChannelUrlResolver
from sitelink.urls.content import ContentUrlResolver
from sitelink.urls.navigation import NavigationUrlResolver
from sitelink.urls.pages import PageUrlResolver
from sitelink.urls.site import SiteUrlResolver

logger = logging.getLogger(__name__)


class UrlResolver:
    """Resolves sites, channels and content items to URL strings.

    Stateless apart from its collaborators: safe to share between threads.

    Example::

        store = InMemorySiteStore.from_yaml(Path("sites.yml"))
        resolver = UrlResolver(store)
        resolver.channel_url(store.get_site(1), store.get_channel(1, 2))
        # '/site1/channels/2.html'

    """

    def __init__(
        self,
        store: SiteStore,
        *,
        path_rules: PathRules | None = None,
        preview: PreviewRouter | None = None,
        config: SitelinkConfig | None = None,
    ) -> None:
        self.config = config or SitelinkConfig()
        settings = self.config.resolver
        self.store = store
        self.path_rules = path_rules or TemplatePathRules(self.config.paths)
        self.preview = preview or ApiPreviewRouter(self.config.preview.api_prefix)

        self.sites = SiteUrlResolver(settings)
        self.navigation = NavigationUrlResolver(self.sites, settings, sites=store)
        self.pages = PageUrlResolver(templates=store, preview=self.preview, navigation=self.navigation)
        self.contents = ContentUrlResolver(
            sites=store,
            channels=store,
            contents=store,
            path_rules=self.path_rules,
            preview=self.preview,
            navigation=self.navigation,
            site_resolver=self.sites,
            settings=settings,
        )
        self.channels = ChannelUrlResolver(
            channels=store,
            contents=store,
            path_rules=self.path_rules,
            preview=self.preview,
            navigation=self.navigation,
            site_resolver=self.sites,
            content_resolver=self.contents,
            pages=self.pages,
            settings=settings,
        )

    @property
    def unclickable_url(self) -> str:
        return self.config.resolver.unclickable_url

    # Sites and navigation

    def site_url(self, site: Site, relative_path: str = "", mode: Mode = Mode.PUBLISHED) -> str:
        return self.sites.resolve(site, relative_path, mode)

    def site_url_by_physical_path(self, site: Site, physical_path: str | Path, mode: Mode = Mode.PUBLISHED) -> str:
        return self.sites.resolve_by_physical_path(site, physical_path, mode)

    def navigation_url(
        self,
        site: Site | None,
        path: str,
        mode: Mode = Mode.PUBLISHED,
        *,
        add_prefix: bool = False,
    ) -> str:
        return self.navigation.resolve(site, path, mode, add_prefix=add_prefix)

    def virtual_url(self, site: Site, url: str) -> str:
        return self.navigation.to_virtual_url(site, url)

    # Pages

    def index_page_url(self, site: Site, mode: Mode = Mode.PUBLISHED) -> str:
        return self.pages.resolve_index_page(site, mode)

    def file_url(self, site: Site, template_id: int, mode: Mode = Mode.PUBLISHED) -> str:
        return self.pages.resolve_file(site, template_id, mode)

    def special_url(self, site: Site, special_id: int, mode: Mode = Mode.PUBLISHED) -> str:
        return self.pages.resolve_special(site, special_id, mode)

    # Channels and contents

    def channel_url(self, site: Site, channel: Channel | None, mode: Mode = Mode.PUBLISHED) -> str:
        return self.channels.resolve(site, channel, mode)

    def input_channel_url(self, site: Site, channel: Channel | None, mode: Mode = Mode.PUBLISHED) -> str:
        return self.channels.resolve_input_url(site, channel, mode)

    def content_url(self, site: Site, content: Content | None, mode: Mode = Mode.PUBLISHED) -> str:
        return self.contents.resolve(site, content, mode)

    def content_url_by_id(self, site: Site, channel_id: int, content_id: int, mode: Mode = Mode.PUBLISHED) -> str:
        return self.contents.resolve_by_id(site, channel_id, content_id, mode)

    def resolve(self, request: ResolutionRequest) -> str:
        """Resolve a request addressed by identifiers only."""
        site = self.store.get_site(request.site_id)
        if site is None:
            logger.warning("Site %s not found", request.site_id)
            return self.unclickable_url

        if request.kind is EntityKind.CHANNEL:
            return self.channel_url(site, self.store.get_channel(site.id, request.entity_id), request.mode)

        channel_id = request.channel_id if request.channel_id is not None else 0
        return self.content_url_by_id(site, channel_id, request.entity_id, request.mode)
