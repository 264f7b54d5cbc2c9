"""Expansion of virtual path notations into concrete URLs.

Two notations are recognized:

- ``@/path``: relative to the site root, resolved through :class:`SiteUrlResolver`.
- ``~/path``: relative to the application root.

Anything else (absolute URLs, plain paths) is returned unchanged.
"""

from __future__ import annotations

import logging

from sitelink.config.settings import ResolverSettings
from sitelink.data_primitives.models import Mode, Site
from sitelink.data_primitives.protocols import SiteLookup
from sitelink.urls.paths import (
    SITE_MARKER,
    URL_SEPARATOR,
    add_virtual_to_url,
    expand_application_path,
    replace_starts_with,
)
from sitelink.urls.site import SiteUrlResolver

logger = logging.getLogger(__name__)


class NavigationUrlResolver:
    def __init__(
        self,
        site_resolver: SiteUrlResolver,
        settings: ResolverSettings | None = None,
        sites: SiteLookup | None = None,
    ) -> None:
        self.site_resolver = site_resolver
        self.settings = settings or site_resolver.settings
        self.sites = sites

    def resolve(
        self,
        site: Site | None,
        path: str,
        mode: Mode = Mode.PUBLISHED,
        *,
        add_prefix: bool = False,
    ) -> str:
        """Resolve ``path`` against ``site``.

        With ``add_prefix`` a bare relative path is treated as site-relative,
        which lets authors type ``about/index.html`` instead of ``@/about/index.html``.
        """
        if add_prefix:
            path = add_virtual_to_url(path)
        if site is not None and path and path.startswith(SITE_MARKER):
            return self.site_resolver.resolve(site, path[1:], mode)
        return expand_application_path(path, self.settings.application_root)

    def resolve_by_site_id(self, site_id: int, path: str, mode: Mode = Mode.PUBLISHED) -> str:
        site = self.sites.get_site(site_id) if self.sites is not None else None
        if site is None:
            logger.debug("Site %s not found, expanding %r without a site", site_id, path)
        return self.resolve(site, path, mode)

    def to_virtual_url(self, site: Site, url: str) -> str:
        """Rewrite an absolute URL under ``site.web_url`` back to ``@/`` notation."""
        virtual = replace_starts_with(url, site.web_url, SITE_MARKER + URL_SEPARATOR)
        return replace_starts_with(virtual, SITE_MARKER + URL_SEPARATOR * 2, SITE_MARKER + URL_SEPARATOR)
