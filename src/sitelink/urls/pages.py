"""Template-backed pages: the site index, single-file templates and specials."""

from __future__ import annotations

from sitelink.data_primitives.models import Mode, Site
from sitelink.data_primitives.protocols import PreviewRouter, TemplateLookup
from sitelink.urls.navigation import NavigationUrlResolver


class PageUrlResolver:
    def __init__(
        self,
        *,
        templates: TemplateLookup,
        preview: PreviewRouter,
        navigation: NavigationUrlResolver,
    ) -> None:
        self.templates = templates
        self.preview = preview
        self.navigation = navigation

    def resolve_index_page(self, site: Site, mode: Mode = Mode.PUBLISHED) -> str:
        """URL of the file the site's index template publishes to.

        Sites without an index file name fall back to their base URL.
        """
        if mode is Mode.PREVIEW:
            return self.preview.site_url(site.id)
        template_id = self.templates.index_template_id(site.id)
        file_name = self.templates.created_file_full_name(site.id, template_id)
        if not file_name:
            return self.navigation.site_resolver.resolve(site)
        return self.navigation.resolve(site, file_name, Mode.PUBLISHED)

    def resolve_file(self, site: Site, template_id: int, mode: Mode = Mode.PUBLISHED) -> str:
        if mode is Mode.PREVIEW:
            return self.preview.file_url(site.id, template_id)
        file_name = self.templates.created_file_full_name(site.id, template_id)
        return self.navigation.resolve(site, file_name, Mode.PUBLISHED)

    def resolve_special(self, site: Site, special_id: int, mode: Mode = Mode.PUBLISHED) -> str:
        if mode is Mode.PREVIEW:
            return self.preview.special_url(site.id, special_id)
        return self.navigation.resolve(site, self.templates.special_url(site, special_id), Mode.PUBLISHED)
