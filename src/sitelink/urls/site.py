"""Site base URLs in published and preview mode."""

from __future__ import annotations

import logging
from pathlib import Path

from sitelink.config.settings import ResolverSettings
from sitelink.data_primitives.models import Mode, Site
from sitelink.urls.paths import (
    URL_SEPARATOR,
    combine,
    expand_application_path,
    remove_invalid_path_chars,
    replace_starts_with_ignore_case,
    starts_with_ignore_case,
    strip_trailing_separator,
    to_url_separators,
)

logger = logging.getLogger(__name__)


class SiteUrlResolver:
    """Computes ``site base URL + relative path``.

    Published URLs come from ``Site.web_url``; preview URLs are served by the
    application itself under ``~/{site_dir}``.
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self.settings = settings or ResolverSettings()

    def base_url(self, site: Site | None, mode: Mode = Mode.PUBLISHED) -> str:
        if site is None:
            return URL_SEPARATOR
        if mode is Mode.PREVIEW:
            url = expand_application_path(f"~/{site.site_dir}", self.settings.application_root)
        else:
            url = site.web_url
        return strip_trailing_separator(url)

    def resolve(self, site: Site | None, relative_path: str = "", mode: Mode = Mode.PUBLISHED) -> str:
        url = self.base_url(site, mode)
        if not relative_path:
            return url

        relative_path = remove_invalid_path_chars(to_url_separators(relative_path))
        relative_path = relative_path.removeprefix(URL_SEPARATOR)
        url = combine(url, relative_path)

        if mode is Mode.PUBLISHED and site is not None and site.is_separated_assets:
            url = self._rewrite_assets(site, url)
        return url

    def _rewrite_assets(self, site: Site, url: str) -> str:
        """Move URLs under the site's assets directory onto the assets origin."""
        assets_prefix = combine(self.base_url(site), site.assets_dir)
        if not site.assets_dir or not starts_with_ignore_case(url, assets_prefix):
            return url
        rewritten = replace_starts_with_ignore_case(url, assets_prefix, site.assets_url.rstrip(URL_SEPARATOR))
        logger.debug("Rewrote asset URL %s -> %s", url, rewritten)
        return rewritten

    def resolve_by_physical_path(self, site: Site, physical_path: str | Path, mode: Mode = Mode.PUBLISHED) -> str:
        """Map a published file on disk back to its URL.

        Files outside the site's publishing directory resolve to the site base URL.
        """
        if not physical_path:
            return site.web_url or URL_SEPARATOR

        site_path = str(Path(self.settings.physical_root) / site.site_dir)
        physical = str(physical_path)
        if starts_with_ignore_case(physical, site_path):
            relative = replace_starts_with_ignore_case(physical, site_path, "")
        else:
            relative = ""
        return self.resolve(site, relative, mode)
